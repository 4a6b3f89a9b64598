import pytest

from algokit.ternary import dxor3, xor3

PAIRS = [(0, 0), (1, 2), (5, 4), (26, 13), (1000, 7), (123456, 654321)]


def test_pinned_value():
    assert xor3(1, 2) == 0


@pytest.mark.parametrize("a", [0, 1, 8, 80, 12345])
def test_zero_is_identity(a):
    assert xor3(a, 0) == a
    assert dxor3(a, 0) == a


@pytest.mark.parametrize("a,b", PAIRS)
def test_commutative(a, b):
    assert xor3(a, b) == xor3(b, a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_subtraction_undoes_addition(a, b):
    assert dxor3(xor3(a, b), b) == a
    assert xor3(dxor3(a, b), b) == a


@pytest.mark.parametrize("a", [1, 2, 5, 100, 98765])
def test_three_copies_cancel(a):
    assert xor3(xor3(a, a), a) == 0


@pytest.mark.parametrize("a,b", PAIRS)
def test_modulus_reduces_result(a, b):
    mod = 1616161
    assert xor3(a, b, mod) == xor3(a, b) % mod
    assert dxor3(a, b, 97) == dxor3(a, b) % 97


def test_self_difference_is_zero():
    assert dxor3(4242, 4242) == 0


def test_negative_rejected():
    with pytest.raises(ValueError):
        xor3(-1, 2)