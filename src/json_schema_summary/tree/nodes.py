"""Tree data types: TypeValue samples, Node records and the Tree arena.

Every distinct path seen in the input owns exactly one ``Node``.  Nodes live
in a flat ``Tree`` arena and refer to each other by integer index, so the
parent/child relation is a plain list of ints and nothing is shared by
reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["ROOT", "Node", "Tree", "TypeValue", "ValueKind"]

ROOT = 0


class ValueKind(StrEnum):
    """The four JSON scalar kinds a leaf sample can take.

    StrEnum values are the lowercased member names:
    - NUMBER -> "number"
    - STRING -> "string"
    - BOOL   -> "bool"
    - NULL   -> "null"
    """

    NUMBER = auto()
    STRING = auto()
    BOOL = auto()
    NULL = auto()


@dataclass(frozen=True, slots=True)
class TypeValue:
    """One scalar sample, tagged with its kind.

    Equality only holds within a kind: ``TypeValue.boolean(True)`` never
    equals ``TypeValue.number(1.0)`` even though ``True == 1.0`` in Python.
    """

    # Field order matters: generated __eq__ compares `kind` before `value`.
    kind: ValueKind
    value: float | str | bool | None = None

    @classmethod
    def number(cls, value: float) -> TypeValue:
        return cls(ValueKind.NUMBER, float(value))

    @classmethod
    def string(cls, value: str) -> TypeValue:
        return cls(ValueKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> TypeValue:
        return cls(ValueKind.BOOL, bool(value))

    @classmethod
    def null(cls) -> TypeValue:
        return cls(ValueKind.NULL)


@dataclass(slots=True)
class Node:
    """A vertex of the path tree.

    Attributes:
        key:        Object key or stringified array index of the last path
                    step; empty for the root.
        frequency:  Number of times this exact path was visited.  Array slots
                    created only to fill a gap keep frequency 0.
        children:   Arena indices of object members, in first-seen order.
        elements:   Arena indices of array slots; position == array index.
        numbers, strings, bools, null_count:
                    Raw scalar samples collected at this path.  Emptied by
                    ``release_samples`` once the node has been summarized.
    """

    key: str = ""
    frequency: int = 0
    children: list[int] = field(default_factory=list)
    elements: list[int] = field(default_factory=list)
    numbers: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)
    bools: list[bool] = field(default_factory=list)
    null_count: int = 0
    # key -> arena index, mirrors `children` for O(1) lookup
    child_index: dict[str, int] = field(default_factory=dict, repr=False)

    def add_sample(self, sample: TypeValue) -> None:
        """Append ``sample`` to the buffer matching its kind."""
        if sample.kind is ValueKind.NUMBER:
            self.numbers.append(sample.value)  # type: ignore[arg-type]
        elif sample.kind is ValueKind.STRING:
            self.strings.append(sample.value)  # type: ignore[arg-type]
        elif sample.kind is ValueKind.BOOL:
            self.bools.append(sample.value)  # type: ignore[arg-type]
        else:
            self.null_count += 1

    def release_samples(self) -> None:
        """Drop the raw sample buffers (the digest replaces them)."""
        self.numbers = []
        self.strings = []
        self.bools = []
        self.null_count = 0


class Tree:
    """Arena of ``Node`` records; index ``ROOT`` (0) is the document root.

    Nodes are only ever appended, never removed, so an index stays valid for
    the lifetime of the tree.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node()]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    @property
    def root(self) -> Node:
        return self._nodes[ROOT]

    def add(self, key: str, frequency: int) -> int:
        """Append a new node and return its index."""
        self._nodes.append(Node(key=key, frequency=frequency))
        return len(self._nodes) - 1
