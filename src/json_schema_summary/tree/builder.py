"""TreeBuilder: folds scanner events into the path tree.

Each scalar event carries the full path from the document root.  The builder
walks that path down the tree, creating nodes on first sight and bumping the
frequency of every node it passes through, then files the scalar sample on
the terminal node.

Array slots are positional: seeing index 3 before indices 1 and 2 (e.g. the
earlier elements were empty containers) backfills slots 1 and 2 with
frequency 0 so that ``elements[i]`` is always the slot for index ``i``.
"""

from __future__ import annotations

from collections.abc import Callable

from json_schema_summary.scanner import ArrayIndex, ObjectKey, Path
from json_schema_summary.tree.nodes import ROOT, Node, Tree, TypeValue

__all__ = ["TreeBuilder"]


class TreeBuilder:
    """Builds a ``Tree`` from scalar-leaf events.

    Satisfies the ``EventHandler`` protocol, so it can be passed straight to
    ``Scanner.scan``.  Mutation is monotonic: nodes and frequencies only grow.

    Example::

        builder = TreeBuilder()
        builder.on_number((ObjectKey("a"),), 1.0)
        builder.count_document()
        builder.tree[builder.tree.root.children[0]].numbers  # [1.0]
    """

    def __init__(self, tree: Tree | None = None) -> None:
        self.tree = tree if tree is not None else Tree()

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def resolve(
        self,
        path: Path,
        on_resolved: Callable[[Node], None] | None = None,
    ) -> Node:
        """Walk ``path`` from the root, creating nodes as needed.

        Every node on the path (excluding the root) has its frequency
        incremented by one.  ``on_resolved`` is called with the terminal node
        before it is returned.

        Raises:
            TypeError: If a step is neither ``ObjectKey`` nor ``ArrayIndex``.
        """
        index = ROOT
        for step in path:
            if isinstance(step, ObjectKey):
                index = self._object_child(index, step.name)
            elif isinstance(step, ArrayIndex):
                index = self._array_element(index, step.index)
            else:
                raise TypeError(f"Unsupported path step: {step!r}")

        node = self.tree[index]
        if on_resolved is not None:
            on_resolved(node)
        return node

    def _object_child(self, parent_index: int, key: str) -> int:
        parent = self.tree[parent_index]
        child_index = parent.child_index.get(key)
        if child_index is not None:
            self.tree[child_index].frequency += 1
            return child_index

        child_index = self.tree.add(key, frequency=1)
        # `parent` stays valid: the arena appends, it never moves a Node
        parent.children.append(child_index)
        parent.child_index[key] = child_index
        return child_index

    def _array_element(self, parent_index: int, position: int) -> int:
        parent = self.tree[parent_index]
        if position < len(parent.elements):
            child_index = parent.elements[position]
            self.tree[child_index].frequency += 1
            return child_index

        # Backfill never-visited slots before the one being visited.
        while len(parent.elements) < position:
            gap = len(parent.elements)
            parent.elements.append(self.tree.add(str(gap), frequency=0))

        child_index = self.tree.add(str(position), frequency=1)
        parent.elements.append(child_index)
        return child_index

    # ------------------------------------------------------------------
    # Document and scalar events
    # ------------------------------------------------------------------

    def count_document(self) -> None:
        """Record one fully scanned top-level object at the root."""
        self.tree.root.frequency += 1

    def add(self, path: Path, sample: TypeValue) -> None:
        """Resolve ``path`` and file ``sample`` on the terminal node."""
        self.resolve(path).add_sample(sample)

    def on_number(self, path: Path, value: float) -> None:
        self.add(path, TypeValue.number(value))

    def on_string(self, path: Path, value: str) -> None:
        self.add(path, TypeValue.string(value))

    def on_bool(self, path: Path, value: bool) -> None:
        self.add(path, TypeValue.boolean(value))

    def on_null(self, path: Path) -> None:
        self.add(path, TypeValue.null())
