import math

import pytest

from algokit.search import integer_peak, integer_ternary, ternary_max, ternary_search


def _parabola(x):
    return -((x - 7) ** 2)


def test_ternary_max_of_parabola():
    assert ternary_max(lambda x: -((x - 2.0) ** 2), 0.0, 5.0) == pytest.approx(0.0, abs=1e-9)


def test_ternary_max_of_sine():
    assert ternary_max(math.sin, 0.0, math.pi) == pytest.approx(1.0)


@pytest.mark.parametrize("search", [integer_peak, integer_ternary])
def test_integer_peak_inside(search):
    assert search(_parabola, 0, 20) == _parabola(7)


@pytest.mark.parametrize("search", [integer_peak, integer_ternary])
def test_integer_peak_at_right_end(search):
    assert search(lambda x: x, 3, 10) == 10


@pytest.mark.parametrize("search", [integer_peak, integer_ternary])
def test_integer_peak_at_left_end(search):
    assert search(lambda x: -x, 3, 10) == -3


@pytest.mark.parametrize("search", [integer_peak, integer_ternary])
def test_integer_peak_single_point(search):
    assert search(_parabola, 4, 4) == _parabola(4)


def test_ternary_search_finds_every_element():
    values = [1, 3, 5, 7, 9, 11, 13, 15]
    for index, value in enumerate(values):
        assert ternary_search(values, value) == index


@pytest.mark.parametrize("missing", [0, 4, 14, 16])
def test_ternary_search_missing(missing):
    assert ternary_search([1, 3, 5, 7, 9, 11, 13, 15], missing) == -1


def test_ternary_search_empty():
    assert ternary_search([], 5) == -1