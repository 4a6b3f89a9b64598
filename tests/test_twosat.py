import pytest

from algokit.twosat import TwoSat


def _holds(solution, literal):
    value = solution[literal // 2]
    return value if literal % 2 == 0 else not value


def test_or_clauses_are_satisfied():
    clauses = [(0, 2), (1, 4), (3, 5), (2, 5), (1, 3)]
    sat = TwoSat(3)
    for a, b in clauses:
        sat.add_or(a, b)
    solution = sat.solve()
    assert solution is not None and len(solution) == 3
    assert all(_holds(solution, a) or _holds(solution, b) for a, b in clauses)


def test_contradiction_is_unsatisfiable():
    sat = TwoSat(2)
    sat.force_true(0)
    sat.force_true(1)
    assert sat.solve() is None


def test_or_with_itself_and_negation_is_unsatisfiable():
    sat = TwoSat(1)
    sat.add_or(0, 0)
    sat.add_or(1, 1)
    assert sat.solve() is None


def test_xor_makes_values_differ():
    sat = TwoSat(2)
    sat.add_xor(0, 2)
    solution = sat.solve()
    assert solution[0] != solution[1]


def test_xor_with_forced_variable():
    sat = TwoSat(2)
    sat.add_xor(0, 2)
    sat.force_true(0)
    solution = sat.solve()
    assert solution[0] is True
    assert solution[1] is False


def test_force_negative_literal():
    sat = TwoSat(1)
    sat.force_true(1)
    assert sat.solve() == [False]


def test_implication_chain_propagates():
    sat = TwoSat(3)
    sat.add_implication(0, 2)
    sat.add_implication(2, 4)
    sat.force_true(0)
    assert sat.solve() == [True, True, True]


def test_invalid_literal_raises():
    sat = TwoSat(2)
    with pytest.raises(ValueError):
        sat.add_or(0, 4)