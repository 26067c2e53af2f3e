import pytest

from zcalc.matrix import Dimensions, Matrix


def test_complex_addition():
    m0 = Matrix(3, 3)
    m0[1, 2] = 1 + 1j
    m1 = Matrix(3, 3)
    m1[1, 2] = 1 + 1j

    result = m0 + m1

    expected = Matrix(3, 3)
    for i in range(3):
        for j in range(3):
            expected[i, j] = 0j
    expected[1, 2] = 2 + 2j
    assert result == expected

    expected[0, 0] = 1 + 0j
    assert result != expected


def test_matrix_vector_multiplication():
    m0 = Matrix(2, 3)
    m0[0] = [1.0, 2.0, 3.0]
    m0[1] = [4.0, 5.0, 6.0]
    m1 = Matrix(3, 1)
    m1[0, 0] = 1.0
    m1[1, 0] = 2.0
    m1[2, 0] = 3.0

    expected = Matrix(2, 1)
    expected[0, 0] = 14.0
    expected[1, 0] = 32.0
    assert m0 * m1 == expected


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(0, 3)
    with pytest.raises(ValueError):
        Matrix(3, 0)


def test_valid_dimensions():
    matrix = Matrix(2, 3)
    assert matrix.num_rows == 2
    assert matrix.num_cols == 3
    assert matrix.dimensions == Dimensions(2, 3)


def test_element_access():
    matrix = Matrix(2, 2)
    matrix[0, 0] = 42
    matrix[1, 1] = 24
    assert matrix[0, 0] == 42
    assert matrix[1][1] == 24


def test_results_do_not_alias_operands():
    m0 = Matrix(2, 2)
    m0[0, 0] = 1
    m0[1, 1] = 2
    m1 = m0 + Matrix(2, 2)
    m1[0, 0] = 99
    assert m0[0, 0] == 1
    assert m1[1, 1] == 2


def test_equality_and_inequality():
    m0 = Matrix(2, 2)
    m1 = Matrix(2, 2)
    assert m0 == m1
    m0[0, 0] = 1
    assert m0 != m1


def test_different_shapes_are_unequal():
    assert Matrix(2, 2) != Matrix(3, 3)


def test_addition():
    m0 = Matrix(2, 2)
    m1 = Matrix(2, 2)
    m0[0, 0] = 1
    m1[0, 0] = 2
    assert (m0 + m1)[0, 0] == 3


def test_addition_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(3, 3)


def test_subtraction():
    m0 = Matrix(2, 2)
    m1 = Matrix(2, 2)
    m0[0, 0] = 5
    m1[0, 0] = 3
    assert (m0 - m1)[0, 0] == 2


def test_subtraction_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(2, 2) - Matrix(2, 3)


def test_scalar_multiplication():
    matrix = Matrix(2, 2)
    matrix[0, 0] = 2
    assert (matrix * 3)[0, 0] == 6
    assert (3 * matrix)[0, 0] == 6


def test_scalar_division():
    matrix = Matrix(2, 2)
    matrix[0, 0] = 6.0
    assert (matrix / 3.0)[0, 0] == 2.0


def test_scalar_divided_by_matrix():
    matrix = Matrix(1, 2)
    matrix[0] = [2.0, 4.0]
    result = 8.0 / matrix
    assert result[0] == [4.0, 2.0]


def test_matrix_multiplication():
    m0 = Matrix(2, 3)
    m0[0] = [1, 2, 3]
    m0[1] = [4, 5, 6]
    m1 = Matrix(3, 2)
    m1[0] = [7, 8]
    m1[1] = [9, 10]
    m1[2] = [11, 12]

    result = m0 * m1
    assert result[0, 0] == 58
    assert result[0, 1] == 64
    assert result[1, 0] == 139
    assert result[1, 1] == 154


def test_matrix_multiplication_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(2, 2) * Matrix(3, 3)


def test_row_assignment_checks_length():
    matrix = Matrix(2, 2)
    matrix[0] = [1, 2]
    with pytest.raises(ValueError):
        matrix[0] = [1, 2, 3]
    assert matrix[0] == [1, 2]
    assert matrix.num_cols == 2


def test_str():
    matrix = Matrix(1, 2)
    matrix[0] = [1.5, -2.0]
    assert str(matrix) == "dimensions : 1x2\n[ 1.5 -2 ]\n"