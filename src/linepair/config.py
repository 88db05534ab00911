from __future__ import annotations
from pathlib import Path

# conventional locations, relative to the working directory
STORAGE_DIR: str = "storage"
INPUT_NAME: str = "input.txt"
OUTPUT_NAME: str = "output.txt"

ENCODING: str = "utf-8"

# shingle size for the Dice coefficient (bigrams)
GRAM: int = 2

# /* ~~~ rendering ~~~ */
SEPARATOR: str = ": "
MISSING_MARK: str = "?"

# baseline for the residual pass; larger than any real edit distance
DISTANCE_CEILING: float = float("inf")

# set LINEPAIR_VERBOSE=1 to enable INFO logging from the CLI
VERBOSE_ENV: str = "LINEPAIR_VERBOSE"


def input_path(cwd: str | Path | None = None) -> Path:
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / STORAGE_DIR / INPUT_NAME


def output_path(cwd: str | Path | None = None) -> Path:
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / STORAGE_DIR / OUTPUT_NAME
