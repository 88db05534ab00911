from collections import Counter

import pytest
from linepair import pair_lines, render
from linepair.models import MatchMethod

CASES = [
    (["hello world"], ["hello world"]),
    (["cat", "dog"], ["dog", "cat"]),
    (["abc"], []),
    ([], ["xyz"]),
    (["hello", "world"], ["halo"]),
    (["alpha", "beta", "gamma", "delta"], ["gamma ray", "alphabet"]),
    (["one"], ["uno", "eins", "un", "ichi"]),
    (["", "  ", "text"], ["text", "", "other text", "\t"]),
    (["same", "same", "same"], ["same", "same"]),
]


@pytest.mark.e2e
@pytest.mark.parametrize("first,second", CASES)
def test_every_line_appears_exactly_once(first, second):
    assignment, a, b = pair_lines(first, second)
    a_seen = Counter(r.a_index for r in assignment if r.a_index is not None)
    b_seen = Counter(r.b_index for r in assignment if r.b_index is not None)
    assert sorted(a_seen) == list(range(len(a)))
    assert sorted(b_seen) == list(range(len(b)))
    assert all(n == 1 for n in a_seen.values())
    assert all(n == 1 for n in b_seen.values())
    assert len(set(r.key for r in assignment)) == len(assignment)


@pytest.mark.e2e
@pytest.mark.parametrize("first,second", CASES)
def test_runs_are_deterministic(first, second):
    assert render(first, second) == render(first, second)
    assert pair_lines(first, second)[0] == pair_lines(first, second)[0]


@pytest.mark.e2e
@pytest.mark.parametrize("first,second", CASES)
def test_blank_lines_are_never_scored(first, second):
    assignment, a, b = pair_lines(first, second)
    for r in assignment:
        if r.method is MatchMethod.RECONCILED:
            assert r.score is None
            continue
        assert not a[r.a_index].blank
        assert not b[r.b_index].blank
