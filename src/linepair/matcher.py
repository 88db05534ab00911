from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from . import config as CFG
from .models import (
    ABSENT, Assignment, Line, LineRef, MatchMethod, MatchRecord, Placeholder, RemainingPool,
)
from .scoring import dice_similarity, edit_distance

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaryResult:
    assignment: Assignment
    leftover_a: Tuple[int, ...]


@dataclass(frozen=True)
class ResidualResult:
    assignment: Assignment
    leftover_a: Tuple[int, ...]
    leftover_b: Tuple[int, ...]


def _best_by_similarity(a: Line, b: Sequence[Line]) -> Optional[Tuple[int, float]]:
    """Highest-scoring non-blank b for a; ties keep the earliest, zero never counts."""
    probe = a.text.strip()
    best_j = -1
    best = 0.0
    for cand in b:
        if cand.blank:
            continue
        s = dice_similarity(probe, cand.text.strip())
        if s > best:
            best, best_j = s, cand.index
    if best_j < 0:
        return None
    return best_j, best


# /* ~~~ stage 1: greedy Dice pairing, A -> B ~~~ */
def primary_match(a: Sequence[Line], b: Sequence[Line]) -> PrimaryResult:
    """
    Pair every non-blank A line with its most similar B line.

    When a B line is already claimed, the claim with the higher score keeps it;
    on a tie the newer A line wins. The loser goes to leftover_a for the
    residual pass. A replaced claim keeps its slot in the output order.
    """
    claims: Dict[int, MatchRecord] = {}
    leftover: List[int] = []

    for line in a:
        if line.blank:
            continue
        best = _best_by_similarity(line, b)
        if best is None:
            leftover.append(line.index)
            continue

        j, score = best
        held = claims.get(j)
        if held is None:
            claims[j] = MatchRecord(LineRef(j), LineRef(line.index), score, MatchMethod.SIMILARITY)
        elif score >= held.score:
            log.debug("B%d: A%d (%.3f) evicts A%d (%.3f)", j, line.index, score, held.a_index, held.score)
            leftover.append(held.a_index)
            claims[j] = MatchRecord(LineRef(j), LineRef(line.index), score, MatchMethod.SIMILARITY)
        else:
            leftover.append(line.index)

    log.info("Primary pass: %d pairs, %d A lines left over", len(claims), len(leftover))
    return PrimaryResult(Assignment(tuple(claims.values())), tuple(leftover))


# /* ~~~ stage 2: edit distance over what stage 1 left behind ~~~ */
def residual_match(primary: PrimaryResult, a: Sequence[Line], b: Sequence[Line]) -> ResidualResult:
    """
    Pair leftover A lines with unclaimed B lines by smallest edit distance.
    A B line is consumed as soon as it is claimed; ties keep the earliest.
    Stops once the B pool is empty.
    """
    claimed = primary.assignment.claimed_b()
    pool = RemainingPool(line.index for line in b if not line.blank and line.index not in claimed)

    new: List[MatchRecord] = []
    consumed = 0
    for i in primary.leftover_a:
        if not pool:
            break
        text = a[i].text
        best_j = -1
        best = CFG.DISTANCE_CEILING
        for j in pool.snapshot():
            d = edit_distance(text, b[j].text)
            if d < best:
                best, best_j = d, j
        new.append(MatchRecord(LineRef(best_j), LineRef(i), best, MatchMethod.EDIT_DISTANCE))
        pool.take(best_j)
        consumed += 1

    log.info("Residual pass: %d pairs, %d A / %d B left over",
             len(new), len(primary.leftover_a) - consumed, len(pool))
    return ResidualResult(
        primary.assignment.extended(new),
        primary.leftover_a[consumed:],
        pool.snapshot(),
    )


# /* ~~~ stage 3: make sure every line shows up exactly once ~~~ */
def reconcile(residual: ResidualResult, a: Sequence[Line], b: Sequence[Line]) -> Assignment:
    """
    Complete the assignment.

    Surplus A lines get a Placeholder key; surplus B lines get an absent A side.
    Blank lines, which never take part in matching, are appended last in index
    order (A first, then B).
    """
    extra: List[MatchRecord] = []
    ordinal = 0

    def orphan_a(i: int) -> None:
        nonlocal ordinal
        extra.append(MatchRecord(Placeholder(ordinal), LineRef(i), None, MatchMethod.RECONCILED))
        ordinal += 1

    def orphan_b(j: int) -> None:
        extra.append(MatchRecord(LineRef(j), ABSENT, None, MatchMethod.RECONCILED))

    left_a, left_b = residual.leftover_a, residual.leftover_b
    diff = len(left_a) - len(left_b)
    if diff > 0:
        for i in left_a[len(left_a) - diff:]:
            orphan_a(i)
    elif diff < 0:
        for j in left_b:
            orphan_b(j)

    for line in a:
        if line.blank:
            orphan_a(line.index)
    for line in b:
        if line.blank:
            orphan_b(line.index)

    log.info("Reconciled %d lines without a counterpart", len(extra))
    return residual.assignment.extended(extra)


def match_lines(a: Sequence[Line], b: Sequence[Line]) -> Assignment:
    """Run all three stages and return the final assignment."""
    primary = primary_match(a, b)
    residual = residual_match(primary, a, b)
    return reconcile(residual, a, b)
