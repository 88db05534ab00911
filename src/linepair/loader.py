from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from .config import ENCODING
from .models import Line

log = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """The input does not follow the count-prefixed two-block layout."""

    def __init__(self, message: str, line_no: int) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


def _read_count(it: Iterator[Tuple[int, str]], what: str, expected_at: int) -> int:
    try:
        line_no, raw = next(it)
    except StopIteration:
        raise InputFormatError(f"missing line count for {what}", expected_at) from None
    text = raw.strip()
    try:
        n = int(text)
    except ValueError:
        raise InputFormatError(f"line count for {what} is not an integer: {text!r}", line_no) from None
    if n < 0:
        raise InputFormatError(f"line count for {what} is negative: {n}", line_no)
    return n


def _read_block(it: Iterator[Tuple[int, str]], n: int, what: str, count_line: int) -> List[Line]:
    out: List[Line] = []
    for i in range(n):
        try:
            _, raw = next(it)
        except StopIteration:
            raise InputFormatError(
                f"{what} declares {n} lines but only {i} are available", count_line
            ) from None
        out.append(Line(index=i, text=raw.rstrip("\r\n")))
    return out


def parse_sequences(lines: Iterable[str]) -> Tuple[List[Line], List[Line]]:
    """
    Parse the two count-prefixed blocks:

        <n>
        n lines of Sequence A
        <m>
        m lines of Sequence B

    Anything after the second block is ignored.
    """
    it = enumerate(lines, start=1)

    n = _read_count(it, "sequence A", 1)
    first = _read_block(it, n, "sequence A", 1)

    count_line = n + 2
    m = _read_count(it, "sequence B", count_line)
    second = _read_block(it, m, "sequence B", count_line)

    log.info("Parsed sequences: A=%d lines, B=%d lines", len(first), len(second))
    return first, second


def load_sequences(path: str | Path, encoding: str = ENCODING) -> Tuple[List[Line], List[Line]]:
    """Read both sequences from a file. OSError propagates unchanged."""
    log.info("Reading input from %s", path)
    with open(path, "r", encoding=encoding) as f:
        return parse_sequences(f)
