import random

import pytest

from algokit.matrix import (
    add,
    expand,
    matrix_power,
    naive_multiply,
    strassen,
    submatrix,
    subtract,
    zero_matrix,
)

MATRIX1 = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
]
MATRIX2 = [
    [13, 14, 15, 13, 14, 15],
    [16, 17, 18, 16, 17, 18],
    [19, 20, 21, 19, 20, 21],
    [22, 23, 24, 22, 23, 24],
]


def test_zero_matrix_shape_and_values():
    mat = zero_matrix(3, 5)
    assert len(mat) == 3
    assert all(row == [0] * 5 for row in mat)


def test_zero_matrix_rows_are_independent():
    mat = zero_matrix(2, 2)
    mat[0][0] = 7
    assert mat[1][0] == 0


def test_submatrix_extracts_block():
    assert submatrix(MATRIX1, 1, 3, 1, 3) == [[6, 7], [10, 11]]


def test_expand_pads_to_power_of_two_square():
    padded = expand(MATRIX1)
    assert len(padded) == 8
    assert all(len(row) == 8 for row in padded)
    assert submatrix(padded, 0, 6, 0, 4) == MATRIX1
    assert all(value == 0 for row in padded[6:] for value in row)


def test_add_and_subtract_round_trip():
    a = [[1, 2], [3, 4]]
    b = [[10, -3], [0, 8]]
    assert subtract(add(a, b), b) == a


def test_add_rejects_shape_mismatch():
    with pytest.raises(ValueError):
        add([[1, 2]], [[1], [2]])


def test_naive_multiply_identity():
    a = [[1, 2], [3, 4]]
    identity = [[1, 0], [0, 1]]
    assert naive_multiply(a, identity) == a
    assert naive_multiply(identity, a) == a


def test_naive_multiply_rejects_inner_mismatch():
    with pytest.raises(ValueError):
        naive_multiply([[1, 2, 3]], [[1, 2, 3]])


def test_strassen_matches_naive_on_source_example():
    m1 = expand(MATRIX1)
    m2 = expand(MATRIX2)
    expected = submatrix(naive_multiply(m1, m2), 0, len(MATRIX1), 0, len(MATRIX2[0]))
    got = submatrix(strassen(m1, m2), 0, len(MATRIX1), 0, len(MATRIX2[0]))
    assert got == expected
    assert expected == naive_multiply(MATRIX1, MATRIX2)


@pytest.mark.parametrize("side", [1, 2, 4, 8, 16])
def test_strassen_matches_naive_random(side):
    rng = random.Random(side)
    a = [[rng.randint(-9, 9) for _ in range(side)] for _ in range(side)]
    b = [[rng.randint(-9, 9) for _ in range(side)] for _ in range(side)]
    assert strassen(a, b) == naive_multiply(a, b)


def test_matrix_power_fibonacci():
    assert matrix_power([[1, 1], [1, 0]], 10) == [[89, 55], [55, 34]]


def test_matrix_power_matches_repeated_multiplication():
    mat = [[2, -1, 0], [1, 3, 1], [0, 1, 1]]
    expected = mat
    for _ in range(6):
        expected = naive_multiply(expected, mat)
    assert matrix_power(mat, 7) == expected


def test_matrix_power_one_returns_copy():
    mat = [[1, 2], [3, 4]]
    result = matrix_power(mat, 1)
    assert result == mat
    result[0][0] = 99
    assert mat[0][0] == 1


def test_matrix_power_rejects_bad_input():
    with pytest.raises(ValueError):
        matrix_power([[1, 2, 3]], 2)
    with pytest.raises(ValueError):
        matrix_power([[1]], 0)