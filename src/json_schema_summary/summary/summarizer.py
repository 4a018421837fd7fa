"""Summarizer: collapses the path tree into an immutable ``Summary``.

The walk is post-order: a node's object members and array slots are fully
digested before the node's own scalar buffers are, and each node's raw
buffers are released as soon as its digest exists.  Peak memory is therefore
the raw samples plus the digests produced so far, never both for the whole
tree.
"""

from __future__ import annotations

import logging

from json_schema_summary.config import SummaryConfig
from json_schema_summary.protocols import Reporter
from json_schema_summary.reporter import NullReporter
from json_schema_summary.summary.digest import (
    ArraySummary,
    BoolSummary,
    Digest,
    KeyFrequency,
    NullSummary,
    ObjectSummary,
    Summary,
    SummaryNode,
)
from json_schema_summary.summary.numbers import summarize_numbers
from json_schema_summary.summary.strings import summarize_strings
from json_schema_summary.tree.nodes import ROOT, Node, Tree

__all__ = ["Summarizer", "summarize_bools", "summarize_object"]

logger = logging.getLogger(__name__)


def summarize_object(tree: Tree, node: Node) -> ObjectSummary:
    """Member keys of ``node`` with their visit counts, first-seen order.

    Frequencies are accumulated per key, so a key that somehow owns several
    child nodes reports their sum.
    """
    totals: dict[str, int] = {}
    for index in node.children:
        child = tree[index]
        totals[child.key] = totals.get(child.key, 0) + child.frequency
    return ObjectSummary(
        keys=tuple(KeyFrequency(key=k, frequency=n) for k, n in totals.items())
    )


def summarize_bools(samples: list[bool]) -> BoolSummary:
    true_count = sum(1 for value in samples if value)
    return BoolSummary(
        frequency=len(samples),
        true_count=true_count,
        false_count=len(samples) - true_count,
    )


class Summarizer:
    """Turns a ``Tree`` into a ``Summary`` in one post-order walk.

    Args:
        config:   Bucket and top-K sizes.  Defaults to ``SummaryConfig()``.
        reporter: Receives ``nodes_summarized`` after each node.  Defaults to
                  a no-op reporter.

    Example::

        summary = Summarizer(SummaryConfig(top_count=3)).summarize(builder.tree)
    """

    def __init__(
        self,
        config: SummaryConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config if config is not None else SummaryConfig()
        self._reporter: Reporter = reporter if reporter is not None else NullReporter()

    def summarize(self, tree: Tree) -> Summary:
        """Digest every node of ``tree``; the tree's sample buffers are emptied.

        The walk uses an explicit stack, so nesting depth is not limited by
        the interpreter's recursion limit.
        """
        total = len(tree)
        logger.debug("summarizing %d nodes", total)

        # Pre-order listing: every node precedes its descendants, so the
        # reversed list visits children and elements before their parent.
        order: list[int] = []
        stack = [ROOT]
        while stack:
            index = stack.pop()
            order.append(index)
            node = tree[index]
            stack.extend(node.children)
            stack.extend(node.elements)

        built: dict[int, SummaryNode] = {}
        for done, index in enumerate(reversed(order), start=1):
            built[index] = self._summarize_node(tree, index, built)
            self._reporter.nodes_summarized(done, total)

        return Summary(root=built[ROOT])

    def _summarize_node(
        self, tree: Tree, index: int, built: dict[int, SummaryNode]
    ) -> SummaryNode:
        node = tree[index]
        children = tuple(built.pop(i) for i in node.children)
        elements = tuple(built.pop(i) for i in node.elements)

        digest = self._digest(tree, node)
        node.release_samples()

        return SummaryNode(
            frequency=node.frequency,
            key=node.key,
            children=children,
            elements=elements,
            digest=None if digest.is_empty() else digest,
        )

    def _digest(self, tree: Tree, node: Node) -> Digest:
        config = self._config
        return Digest(
            object=summarize_object(tree, node) if node.children else None,
            array=ArraySummary(count=len(node.elements)) if node.elements else None,
            number=(
                summarize_numbers(node.numbers, config.bucket_count)
                if node.numbers
                else None
            ),
            string=(
                summarize_strings(node.strings, config.top_count)
                if node.strings
                else None
            ),
            boolean=summarize_bools(node.bools) if node.bools else None,
            null=NullSummary(frequency=node.null_count) if node.null_count else None,
        )
