# linepair/engine.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from . import config as CFG
from .loader import load_sequences
from .matcher import match_lines
from .models import Assignment, Line
from .writer import render_assignment, write_output

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer for one pairing run:
      - load(path):    read Sequence A and Sequence B (loader)
      - match():       primary -> residual -> reconcile (matcher)
      - render():      assignment -> "A-text: B-text-or-?" lines (writer)
      - write(path):   echo to console and persist (writer)
      - run(...):      all of the above with the conventional storage paths
      - shutdown():    drop per-run state

    Nothing is shared between runs; build a new Engine or call shutdown()
    before loading another input.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.first: Optional[List[Line]] = None
        self.second: Optional[List[Line]] = None
        self.assignment: Optional[Assignment] = None
        self._text: Optional[str] = None

    # /* ~~~ Read both sequences from the count-prefixed input file ~~~ */
    def load(self, input_path: str | Path) -> None:
        self.first, self.second = load_sequences(input_path)
        self.assignment = None
        self._text = None
        log.info("Engine load() complete: A=%d, B=%d", len(self.first), len(self.second))

    # ------------- pairing -------------

    def match(self) -> Assignment:
        if self.first is None or self.second is None:
            raise RuntimeError("Engine not loaded. Call load() first.")
        self.assignment = match_lines(self.first, self.second)
        return self.assignment

    def render(self) -> str:
        if self.assignment is None:
            raise RuntimeError("Nothing to render. Call match() first.")
        self._text = render_assignment(self.assignment, self.first, self.second)  # type: ignore[arg-type]
        return self._text

    # /* ~~~ Echo to console and persist the rendered pairs ~~~ */
    def write(self, output_path: str | Path, *, echo: bool = True) -> Path:
        text = self._text if self._text is not None else self.render()
        return write_output(text, output_path, echo=echo)

    def run(self, input_path: str | Path | None = None,
            output_path: str | Path | None = None, *, echo: bool = True) -> str:
        src = input_path if input_path is not None else CFG.input_path()
        dst = output_path if output_path is not None else CFG.output_path()
        self.load(src)
        self.match()
        text = self.render()
        self.write(dst, echo=echo)
        return text

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.first = None
        self.second = None
        self.assignment = None
        self._text = None
        log.info("Engine shutdown complete")
