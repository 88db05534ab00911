from __future__ import annotations
from rapidfuzz.distance import Levenshtein

from .config import GRAM
from .normalize import shingle_profile


def dice_similarity(a: str, b: str, k: int = GRAM) -> float:
    """
    Sorensen-Dice coefficient over the distinct k-grams of a and b:
        2 * |A & B| / (|A| + |B|)
    Symmetric, in [0, 1], linear in the two lengths.
    Identical strings score 1.0 even when too short to have a k-gram.
    """
    if a == b:
        return 1.0
    pa = shingle_profile(a, k)
    pb = shingle_profile(b, k)
    total = len(pa) + len(pb)
    if total == 0:
        return 0.0
    return 2.0 * len(pa & pb) / total


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance: unit-cost insert, delete and substitute."""
    return Levenshtein.distance(a, b)
