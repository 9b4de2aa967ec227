import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicalgo.matrices import ChainOrder, matrix_add, matrix_chain_order, strassen


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _sequential_cost(dims):
    return sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))


square4 = st.lists(
    st.lists(st.integers(-20, 20), min_size=4, max_size=4), min_size=4, max_size=4
)


def test_chain_order_classic_example():
    result = matrix_chain_order([30, 35, 15, 5, 10, 20, 25])
    assert result == ChainOrder(15125, "((A(BC))((DE)F))")


def test_chain_order_single_matrix():
    assert matrix_chain_order([4, 7]) == ChainOrder(0, "A")


def test_chain_order_two_matrices():
    dims = [2, 3, 4]
    result = matrix_chain_order(dims)
    assert result.cost == dims[0] * dims[1] * dims[2]
    assert result.parenthesization == "(AB)"


def test_chain_order_needs_two_dimensions():
    with pytest.raises(ValueError):
        matrix_chain_order([5])


@given(st.lists(st.integers(1, 30), min_size=2, max_size=9))
def test_chain_order_invariants(dims):
    result = matrix_chain_order(dims)
    letters = [c for c in result.parenthesization if c.isalpha()]
    assert letters == [chr(ord("A") + k) for k in range(len(dims) - 1)]
    assert result.parenthesization.count("(") == result.parenthesization.count(")")
    assert result.parenthesization.count("(") == max(len(dims) - 2, 0)
    assert 0 <= result.cost <= _sequential_cost(dims)


def test_matrix_add_and_subtract_round_trip():
    a = [[1, 2], [3, 4]]
    b = [[5, -6], [7, 8]]
    assert matrix_add(matrix_add(a, b), b, -1) == a
    assert matrix_add(a, a, -1) == [[0, 0], [0, 0]]


def test_matrix_add_rejects_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_add([[1, 2]], [[1, 2], [3, 4]])


def test_strassen_example():
    assert strassen([[7, 8], [2, 9]], [[14, 5], [5, 18]]) == [[138, 179], [73, 172]]


@given(square4)
def test_strassen_identity(a):
    assert strassen(a, _identity(4)) == a
    assert strassen(_identity(4), a) == a


@given(square4)
def test_strassen_scaling(a):
    two = [[2 if i == j else 0 for j in range(4)] for i in range(4)]
    assert strassen(a, two) == matrix_add(a, a)


@given(square4, square4, square4)
def test_strassen_distributes_over_addition(a, b, c):
    assert strassen(a, matrix_add(b, c)) == matrix_add(strassen(a, b), strassen(a, c))


def test_strassen_rejects_non_power_of_two():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    with pytest.raises(ValueError):
        strassen(m, m)


def test_strassen_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        strassen([[1, 2], [3, 4]], [[1]])