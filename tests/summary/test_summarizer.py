"""Tests for Summarizer: post-order digest of a built tree.

Covers object/array/scalar digests on the right nodes, coexisting shapes,
nesting deeper than the recursion limit, zero-frequency array slots, buffer release, progress notifications, and
config propagation.
"""

from __future__ import annotations

import pytest

from json_schema_summary.config import SummaryConfig
from json_schema_summary.scanner import ArrayIndex, ObjectKey
from json_schema_summary.summary.digest import (
    ArraySummary,
    BoolSummary,
    KeyFrequency,
    NullSummary,
    ObjectSummary,
)
from json_schema_summary.summary.summarizer import (
    Summarizer,
    summarize_bools,
    summarize_object,
)
from json_schema_summary.tree.builder import TreeBuilder
from json_schema_summary.tree.nodes import Tree

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingReporter:
    def __init__(self) -> None:
        self.reads: list[tuple[int, int, int | None]] = []
        self.progress: list[tuple[int, int]] = []

    def object_read(self, start: int, end: int, total: int | None) -> None:
        self.reads.append((start, end, total))

    def nodes_summarized(self, done: int, total: int) -> None:
        self.progress.append((done, total))


@pytest.fixture
def builder() -> TreeBuilder:
    b = TreeBuilder()
    # {"a": 1, "arr": [10, 20]} then {"a": null, "flag": true}
    b.on_number((ObjectKey("a"),), 1.0)
    b.on_number((ObjectKey("arr"), ArrayIndex(0)), 10.0)
    b.on_number((ObjectKey("arr"), ArrayIndex(1)), 20.0)
    b.count_document()
    b.on_null((ObjectKey("a"),))
    b.on_bool((ObjectKey("flag"),), True)
    b.count_document()
    return b


# ---------------------------------------------------------------------------
# Digest placement
# ---------------------------------------------------------------------------


class TestSummarizer:
    def test_root(self, builder: TreeBuilder) -> None:
        root = Summarizer().summarize(builder.tree).root
        assert root.frequency == 2
        assert root.key == ""
        assert root.digest is not None
        assert root.digest.object == ObjectSummary(
            keys=(
                KeyFrequency("a", 2),
                KeyFrequency("arr", 2),
                KeyFrequency("flag", 1),
            )
        )
        assert root.digest.number is None

    def test_mixed_scalar_kinds(self, builder: TreeBuilder) -> None:
        a = Summarizer().summarize(builder.tree).root.child("a")
        assert a is not None and a.digest is not None
        assert a.digest.number is not None
        assert a.digest.number.frequency == 1
        assert a.digest.null == NullSummary(frequency=1)
        assert a.digest.string is None
        assert a.children == ()

    def test_array(self, builder: TreeBuilder) -> None:
        arr = Summarizer().summarize(builder.tree).root.child("arr")
        assert arr is not None and arr.digest is not None
        assert arr.digest.array == ArraySummary(count=2)
        assert arr.digest.object is None
        assert [e.key for e in arr.elements] == ["0", "1"]
        first = arr.elements[0].digest
        assert first is not None and first.number is not None
        assert first.number.maximum == 10.0

    def test_bool(self, builder: TreeBuilder) -> None:
        flag = Summarizer().summarize(builder.tree).root.child("flag")
        assert flag is not None and flag.digest is not None
        assert flag.digest.boolean == BoolSummary(1, 1, 0)

    def test_unvisited_slot_has_no_digest(self) -> None:
        b = TreeBuilder()
        b.on_number((ObjectKey("arr"), ArrayIndex(1)), 5.0)
        arr = Summarizer().summarize(b.tree).root.child("arr")
        assert arr is not None
        assert arr.elements[0].frequency == 0
        assert arr.elements[0].digest is None
        assert arr.elements[1].frequency == 1

    def test_empty_tree(self) -> None:
        root = Summarizer().summarize(Tree()).root
        assert root.frequency == 0
        assert root.digest is None

    def test_config_reaches_leaf_digests(self) -> None:
        b = TreeBuilder()
        for value in ["x", "y", "y"]:
            b.on_string((ObjectKey("s"),), value)
        for value in [1.0, 2.0, 3.0]:
            b.on_number((ObjectKey("n"),), value)
        config = SummaryConfig(bucket_count=0, top_count=1)
        root = Summarizer(config).summarize(b.tree).root
        s, n = root.child("s"), root.child("n")
        assert s is not None and s.digest is not None and s.digest.string is not None
        assert [t.value for t in s.digest.string.top] == ["y"]
        assert n is not None and n.digest is not None and n.digest.number is not None
        assert n.digest.number.distribution == ()

    def test_nesting_deeper_than_recursion_limit(self) -> None:
        depth = 2000
        b = TreeBuilder()
        b.on_number(tuple(ObjectKey("a") for _ in range(depth)), 1.0)
        b.count_document()
        node = Summarizer().summarize(b.tree).root
        for _ in range(depth):
            child = node.child("a")
            assert child is not None
            assert child.frequency == 1
            node = child
        assert node.children == ()
        assert node.digest is not None and node.digest.number is not None
        assert node.digest.number.maximum == 1.0

    def test_sibling_order_kept(self) -> None:
        b = TreeBuilder()
        for key in ["z", "a", "m"]:
            b.on_null((ObjectKey(key),))
        b.on_null((ObjectKey("arr"), ArrayIndex(2)))
        root = Summarizer().summarize(b.tree).root
        assert [c.key for c in root.children] == ["z", "a", "m", "arr"]
        arr = root.child("arr")
        assert arr is not None
        assert [e.key for e in arr.elements] == ["0", "1", "2"]


class TestResources:
    def test_buffers_released(self, builder: TreeBuilder) -> None:
        Summarizer().summarize(builder.tree)
        for index in range(len(builder.tree)):
            node = builder.tree[index]
            assert node.numbers == []
            assert node.strings == []
            assert node.bools == []
            assert node.null_count == 0

    def test_structure_kept_after_release(self, builder: TreeBuilder) -> None:
        Summarizer().summarize(builder.tree)
        assert builder.tree.root.frequency == 2
        assert len(builder.tree.root.children) == 3

    def test_progress_reported_once_per_node(self, builder: TreeBuilder) -> None:
        reporter = RecordingReporter()
        Summarizer(reporter=reporter).summarize(builder.tree)
        total = len(builder.tree)
        assert reporter.progress == [(i, total) for i in range(1, total + 1)]

    def test_reporter_does_not_change_result(self) -> None:
        def build() -> Tree:
            b = TreeBuilder()
            b.on_string((ObjectKey("s"),), "v")
            b.on_number((ObjectKey("n"), ArrayIndex(2)), 1.5)
            b.count_document()
            return b.tree

        plain = Summarizer().summarize(build())
        observed = Summarizer(reporter=RecordingReporter()).summarize(build())
        assert plain == observed


class TestHelpers:
    def test_summarize_object_accumulates_duplicate_keys(self) -> None:
        tree = Tree()
        for frequency in (2, 3):
            tree.root.children.append(tree.add("dup", frequency=frequency))
        tree.root.children.append(tree.add("other", frequency=1))
        assert summarize_object(tree, tree.root) == ObjectSummary(
            keys=(KeyFrequency("dup", 5), KeyFrequency("other", 1))
        )

    def test_summarize_bools(self) -> None:
        assert summarize_bools([True, True, False, True]) == BoolSummary(4, 3, 1)
