from linepair import to_lines
from linepair.matcher import ResidualResult, reconcile
from linepair.models import ABSENT, Assignment, LineRef, MatchMethod, Placeholder


def test_surplus_a_gets_distinct_placeholders():
    a = to_lines(["a0", "a1", "a2", "a3", "a4", "a5"])
    out = reconcile(ResidualResult(Assignment(), (3, 5), ()), a, [])
    assert [r.key for r in out] == [Placeholder(0), Placeholder(1)]
    assert [r.a_side for r in out] == [LineRef(3), LineRef(5)]
    assert all(r.score is None and r.method is MatchMethod.RECONCILED for r in out)


def test_surplus_b_gets_absent_a_side():
    b = to_lines(["b0", "b1", "b2"])
    out = reconcile(ResidualResult(Assignment(), (), (1, 2)), [], b)
    assert [(r.key, r.a_side) for r in out] == [(LineRef(1), ABSENT), (LineRef(2), ABSENT)]


def test_balanced_leftovers_add_nothing():
    out = reconcile(ResidualResult(Assignment(), (), ()), to_lines(["x"]), to_lines(["y"]))
    assert len(out) == 0


def test_blank_lines_are_appended_after_surplus():
    a = to_lines(["", "keep"])
    b = to_lines(["  "])
    out = reconcile(ResidualResult(Assignment(), (1,), ()), a, b)
    assert [(r.key, r.a_side) for r in out] == [
        (Placeholder(0), LineRef(1)),
        (Placeholder(1), LineRef(0)),
        (LineRef(0), ABSENT),
    ]
