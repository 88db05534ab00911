from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union

from .normalize import is_blank


@dataclass(frozen=True)
class Line:
    index: int               # 0-based position in its sequence
    text: str                # raw line, without the trailing newline

    @property
    def blank(self) -> bool:
        return is_blank(self.text)


@dataclass(frozen=True)
class LineRef:
    """A real line of Sequence A or Sequence B, by index."""
    index: int


@dataclass(frozen=True)
class Placeholder:
    """Synthetic B key for an A line that has no B counterpart."""
    ordinal: int


@dataclass(frozen=True)
class Absent:
    """A side of a record that has no A counterpart."""


ABSENT = Absent()

BKey = Union[LineRef, Placeholder]
ASide = Union[LineRef, Absent]


class MatchMethod(str, Enum):
    SIMILARITY = "similarity"
    EDIT_DISTANCE = "edit_distance"
    RECONCILED = "reconciled"


@dataclass(frozen=True)
class MatchRecord:
    key: BKey
    a_side: ASide
    score: Optional[float]   # Dice coefficient, edit distance, or None when reconciled
    method: MatchMethod

    @property
    def a_index(self) -> Optional[int]:
        return self.a_side.index if isinstance(self.a_side, LineRef) else None

    @property
    def b_index(self) -> Optional[int]:
        return self.key.index if isinstance(self.key, LineRef) else None


@dataclass(frozen=True)
class Assignment:
    """
    Ordered, immutable collection of match records.
    Order is claim order; each stage returns a new Assignment.
    """
    records: Tuple[MatchRecord, ...] = ()

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def extended(self, more: Iterable[MatchRecord]) -> "Assignment":
        return Assignment(self.records + tuple(more))

    def claimed_b(self) -> set[int]:
        return {r.b_index for r in self.records if r.b_index is not None}


class RemainingPool:
    """
    Ordered pool of indices still available for matching.
    Entries can only be removed; iteration order is insertion order.
    """

    def __init__(self, indices: Iterable[int]) -> None:
        self._items = dict.fromkeys(indices)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._items)

    def take(self, index: int) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
