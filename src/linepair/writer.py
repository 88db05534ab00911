from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from . import config as CFG
from .models import Assignment, Line, MatchRecord

log = logging.getLogger(__name__)


def render_record(record: MatchRecord, a: Sequence[Line], b: Sequence[Line]) -> str:
    """
    One output line: the A text (or the B text when there is no A side),
    then the B text, or the missing mark when either side is absent.
    """
    i, j = record.a_index, record.b_index
    s1 = a[i].text if i is not None else None
    s2 = b[j].text if j is not None else None
    head = s1 if s1 is not None else s2
    tail = s2 if s1 is not None and s2 is not None else CFG.MISSING_MARK
    return f"{head}{CFG.SEPARATOR}{tail}\n"


def render_assignment(assignment: Assignment, a: Sequence[Line], b: Sequence[Line]) -> str:
    return "".join(render_record(r, a, b) for r in assignment)


def write_output(text: str, path: str | Path, *, echo: bool = True,
                 stream: Optional[TextIO] = None, encoding: str = CFG.ENCODING) -> Path:
    """Mirror text to the console, then persist it. Returns the written path."""
    if echo:
        print(text, file=stream or sys.stdout)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding=encoding)
    log.info("Wrote %d lines to %s", text.count("\n"), out)
    return out
