"""Digest dataclasses: the compact, immutable output of a summarization run.

A ``Summary`` is a tree of ``SummaryNode`` mirroring the path tree.  Each node
may carry a ``Digest`` with at most one summary per shape (object, array,
number, string, bool, null).  Several shapes coexist when a path held
different kinds of values across documents.

Every type serializes with ``to_dict()`` to plain JSON-ready data and back
with ``from_dict()``.  Serialization omits empty collections and absent
summaries rather than writing nulls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "ArraySummary",
    "BoolSummary",
    "BucketRange",
    "Digest",
    "KeyFrequency",
    "NullSummary",
    "NumberSummary",
    "ObjectSummary",
    "StringSample",
    "StringSummary",
    "Summary",
    "SummaryNode",
]


@dataclass(frozen=True, slots=True)
class KeyFrequency:
    """An object member name and how often it was seen."""

    key: str
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyFrequency:
        return cls(key=data["key"], frequency=data["frequency"])


@dataclass(frozen=True, slots=True)
class ObjectSummary:
    """Member keys of an object path, in first-seen order."""

    keys: tuple[KeyFrequency, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"keys": [k.to_dict() for k in self.keys]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ObjectSummary:
        return cls(keys=tuple(KeyFrequency.from_dict(k) for k in data["keys"]))


@dataclass(frozen=True, slots=True)
class ArraySummary:
    """Number of element slots (highest index seen + 1)."""

    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArraySummary:
        return cls(count=data["count"])


@dataclass(frozen=True, slots=True)
class BucketRange:
    """A histogram bucket over a contiguous run of distinct values.

    Attributes:
        start:     Smallest distinct value in the bucket (inclusive).
        end:       Largest distinct value in the bucket (inclusive).
        frequency: Number of samples whose value falls in the bucket.
    """

    start: float
    end: float
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.start, "to": self.end, "frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BucketRange:
        return cls(
            start=float(data["from"]),
            end=float(data["to"]),
            frequency=data["frequency"],
        )


@dataclass(frozen=True, slots=True)
class NumberSummary:
    """Statistics over the numeric samples of one path.

    Attributes:
        frequency:    Number of samples.
        unique:       Number of distinct values.
        all_integers: True when every sample has no fractional part.
        minimum:      Smallest sample.
        maximum:      Largest sample.
        distribution: Buckets ordered by ``start``; empty when bucketing is
                      disabled.
    """

    frequency: int
    unique: int
    all_integers: bool
    minimum: float
    maximum: float
    distribution: tuple[BucketRange, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "frequency": self.frequency,
            "unique": self.unique,
            "all_integers": self.all_integers,
            "min": self.minimum,
            "max": self.maximum,
        }
        if self.distribution:
            out["distribution"] = [b.to_dict() for b in self.distribution]
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NumberSummary:
        return cls(
            frequency=data["frequency"],
            unique=data["unique"],
            all_integers=data["all_integers"],
            minimum=float(data["min"]),
            maximum=float(data["max"]),
            distribution=tuple(
                BucketRange.from_dict(b) for b in data.get("distribution", ())
            ),
        )


@dataclass(frozen=True, slots=True)
class StringSample:
    """A retained string value and its exact occurrence count."""

    value: str
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StringSample:
        return cls(value=data["value"], frequency=data["frequency"])


@dataclass(frozen=True, slots=True)
class StringSummary:
    """Statistics over the string samples of one path.

    Lengths are UTF-8 byte lengths.  ``top`` holds at most ``top_count``
    samples, highest ranked first.
    """

    frequency: int
    unique: int
    min_length: int
    max_length: int
    top: tuple[StringSample, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "frequency": self.frequency,
            "unique": self.unique,
            "min_length": self.min_length,
            "max_length": self.max_length,
        }
        if self.top:
            out["top"] = [s.to_dict() for s in self.top]
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StringSummary:
        return cls(
            frequency=data["frequency"],
            unique=data["unique"],
            min_length=data["min_length"],
            max_length=data["max_length"],
            top=tuple(StringSample.from_dict(s) for s in data.get("top", ())),
        )


@dataclass(frozen=True, slots=True)
class BoolSummary:
    frequency: int
    true_count: int
    false_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "frequency": self.frequency,
            "true": self.true_count,
            "false": self.false_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoolSummary:
        return cls(
            frequency=data["frequency"],
            true_count=data["true"],
            false_count=data["false"],
        )


@dataclass(frozen=True, slots=True)
class NullSummary:
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {"frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NullSummary:
        return cls(frequency=data["frequency"])


@dataclass(frozen=True, slots=True)
class Digest:
    """All summaries produced for one path; unused shapes are None."""

    object: ObjectSummary | None = None
    array: ArraySummary | None = None
    number: NumberSummary | None = None
    string: StringSummary | None = None
    boolean: BoolSummary | None = None
    null: NullSummary | None = None

    def is_empty(self) -> bool:
        return all(
            part is None
            for part in (
                self.object,
                self.array,
                self.number,
                self.string,
                self.boolean,
                self.null,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.object is not None:
            out["object"] = self.object.to_dict()
        if self.array is not None:
            out["array"] = self.array.to_dict()
        if self.number is not None:
            out["number"] = self.number.to_dict()
        if self.string is not None:
            out["string"] = self.string.to_dict()
        if self.boolean is not None:
            out["bool"] = self.boolean.to_dict()
        if self.null is not None:
            out["null"] = self.null.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Digest:
        def part(name: str, kind: Any) -> Any:
            return kind.from_dict(data[name]) if name in data else None

        return cls(
            object=part("object", ObjectSummary),
            array=part("array", ArraySummary),
            number=part("number", NumberSummary),
            string=part("string", StringSummary),
            boolean=part("bool", BoolSummary),
            null=part("null", NullSummary),
        )


@dataclass(frozen=True, slots=True)
class SummaryNode:
    """Output counterpart of one path-tree node.

    Attributes:
        frequency: Visit count of the path (always written, may be 0 for
                   array slots that were never visited directly).
        key:       Object key or array index; empty for the root.
        children:  Object members, first-seen order.
        elements:  Array slots, by index.
        digest:    Statistics for this path, or None when there are none.
    """

    frequency: int
    key: str = ""
    children: tuple[SummaryNode, ...] = ()
    elements: tuple[SummaryNode, ...] = ()
    digest: Digest | None = None

    def child(self, key: str) -> SummaryNode | None:
        """Return the object member named ``key``, if any."""
        for node in self.children:
            if node.key == key:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.key:
            out["key"] = self.key
        out["frequency"] = self.frequency
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        if self.elements:
            out["elements"] = [e.to_dict() for e in self.elements]
        if self.digest is not None:
            out["digest"] = self.digest.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SummaryNode:
        digest = data.get("digest")
        return cls(
            frequency=data["frequency"],
            key=data.get("key", ""),
            children=tuple(cls.from_dict(c) for c in data.get("children", ())),
            elements=tuple(cls.from_dict(e) for e in data.get("elements", ())),
            digest=Digest.from_dict(digest) if digest is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Summary:
    """Result of a summarization run.  ``root.frequency`` is the document count."""

    root: SummaryNode

    def to_dict(self) -> dict[str, Any]:
        return {"root": self.root.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Summary:
        return cls(root=SummaryNode.from_dict(data["root"]))
