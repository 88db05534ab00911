from linepair import to_lines
from linepair.matcher import primary_match
from linepair.models import LineRef, MatchMethod


def _pairs(result):
    return [(r.b_index, r.a_index) for r in result.assignment]


def test_tie_on_claimed_line_favors_newer_claimant():
    res = primary_match(to_lines(["ab", "ab"]), to_lines(["ab"]))
    assert _pairs(res) == [(0, 1)]
    assert res.leftover_a == (0,)


def test_weaker_claimant_goes_to_leftovers():
    res = primary_match(to_lines(["abcd", "abxy"]), to_lines(["abcd"]))
    assert _pairs(res) == [(0, 0)]
    assert res.leftover_a == (1,)


def test_eviction_keeps_slot_position():
    res = primary_match(to_lines(["cat", "dog", "cat"]), to_lines(["dog", "cat"]))
    # B1 was claimed first, so it stays first after A2 takes it over
    assert _pairs(res) == [(1, 2), (0, 1)]
    assert res.leftover_a == (0,)


def test_evictor_score_never_below_evicted():
    a = to_lines(["abcx", "abcd"])
    b = to_lines(["abcd"])
    first = primary_match(a[:1], b).assignment.records[0].score
    res = primary_match(a, b)
    rec = res.assignment.records[0]
    assert rec.a_side == LineRef(1)
    assert rec.score >= first
    assert res.leftover_a == (0,)


def test_ties_between_candidates_keep_earliest_b():
    res = primary_match(to_lines(["ab"]), to_lines(["ab", "ab"]))
    assert _pairs(res) == [(0, 0)]


def test_zero_similarity_is_not_a_candidate():
    res = primary_match(to_lines(["abc"]), to_lines(["xyz"]))
    assert len(res.assignment) == 0
    assert res.leftover_a == (0,)


def test_blank_lines_are_skipped_on_both_sides():
    res = primary_match(to_lines(["   ", "x y"]), to_lines(["", "x y"]))
    assert _pairs(res) == [(1, 1)]
    assert res.leftover_a == ()
    assert res.assignment.records[0].method is MatchMethod.SIMILARITY


def test_empty_inputs():
    res = primary_match([], [])
    assert len(res.assignment) == 0 and res.leftover_a == ()
