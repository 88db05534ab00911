from __future__ import annotations
import argparse
import logging
import os

from . import Engine
from . import config as CFG
from .loader import InputFormatError

log = logging.getLogger("linepair")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="linepair",
        description=(f"Pair the lines of two sequences read from "
                     f"{CFG.STORAGE_DIR}/{CFG.INPUT_NAME}; results go to "
                     f"{CFG.STORAGE_DIR}/{CFG.OUTPUT_NAME}"),
    )
    p.parse_args(argv)

    if os.environ.get(CFG.VERBOSE_ENV) == "1":
        logging.basicConfig(level=logging.INFO)
        log.setLevel(logging.INFO)

    eng = Engine()
    try:
        eng.run(CFG.input_path(), CFG.output_path())
        return 0
    except InputFormatError as e:
        log.error("Malformed input: %s", e)
        return 1
    except OSError as e:
        log.error("I/O error: %s", e)
        return 1
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
