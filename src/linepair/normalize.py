from __future__ import annotations
import re

_SPACES = re.compile(r"\s+")


def is_blank(text: str) -> bool:
    """Empty and whitespace-only lines are treated as absent."""
    return not text.strip()


def collapse_spaces(text: str) -> str:
    """Replace every whitespace run with a single space."""
    return _SPACES.sub(" ", text)


def kgrams(s: str, k: int) -> set[str]:
    """Return distinct k-grams of s."""
    if k <= 0 or len(s) < k:
        return set()
    return {s[i:i+k] for i in range(len(s) - k + 1)}


def shingle_profile(text: str, k: int) -> set[str]:
    """Distinct k-grams of text after whitespace runs are collapsed."""
    return kgrams(collapse_spaces(text), k)
