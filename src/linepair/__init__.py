"""Public API: pair the lines of two text sequences by similarity."""
from __future__ import annotations
from typing import Iterable, List, Tuple

from .engine import Engine
from .loader import InputFormatError, load_sequences, parse_sequences
from .matcher import match_lines, primary_match, reconcile, residual_match
from .models import (
    ABSENT, Absent, Assignment, Line, LineRef, MatchMethod, MatchRecord, Placeholder,
)
from .writer import render_assignment


def to_lines(texts: Iterable[str]) -> List[Line]:
    return [Line(index=i, text=t) for i, t in enumerate(texts)]


def pair_lines(first: Iterable[str], second: Iterable[str]) -> Tuple[Assignment, List[Line], List[Line]]:
    """Match two plain string sequences; returns (assignment, A lines, B lines)."""
    a, b = to_lines(first), to_lines(second)
    return match_lines(a, b), a, b


def render(first: Iterable[str], second: Iterable[str]) -> str:
    """Match and render in one call."""
    assignment, a, b = pair_lines(first, second)
    return render_assignment(assignment, a, b)


__all__ = [
    "ABSENT", "Absent", "Assignment", "Engine", "InputFormatError", "Line", "LineRef",
    "MatchMethod", "MatchRecord", "Placeholder", "load_sequences", "match_lines",
    "pair_lines", "parse_sequences", "primary_match", "reconcile", "render",
    "render_assignment", "residual_match", "to_lines",
]
