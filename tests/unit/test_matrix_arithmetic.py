"""
Тесты арифметики Matrix

Проверяемые инварианты:
1. Корректность matrix-matrix умножения (C = A × B)
2. Предусловие A.cols == B.rows → DimensionMismatchError
3. Операнды не мутируются
4. Scalar умножение поэлементно
5. Ассоциативность (A×B)×C == A×(B×C) для целых
6. Наивный порядок суммирования для float
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from matrixkit import DimensionMismatchError, Matrix
from matrixkit.core.math.random_source import StdRandomSource


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def left_3x3():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def right_3x3():
    return Matrix.from_rows([[9, 8, 7], [6, 5, 4], [3, 2, 1]])


# =============================================================================
# ТЕСТЫ: matrix-matrix
# =============================================================================


class TestMultiply:
    """Тесты multiply / * / @"""

    def test_product_3x3(self, left_3x3, right_3x3) -> None:
        expected = Matrix.from_rows([[30, 24, 18], [84, 69, 54], [138, 114, 90]])

        assert left_3x3.multiply(right_3x3) == expected
        assert left_3x3 * right_3x3 == expected
        assert left_3x3 @ right_3x3 == expected

    def test_rectangular_product_shape(self) -> None:
        """(2x3) × (3x4) → 2x4"""
        left = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        right = Matrix.from_rows([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]])

        product = left * right

        assert product.shape.as_tuple() == (2, 4)
        assert product.to_rows() == [[1, 2, 3, 6], [4, 5, 6, 15]]

    def test_row_times_column(self) -> None:
        """(1x3) × (3x1) → 1x1 скалярное произведение"""
        row = Matrix.from_rows([[1, 2, 3]])
        column = Matrix.from_rows([[4], [5], [6]])

        assert (row * column).to_rows() == [[32]]
        assert (column * row).shape.as_tuple() == (3, 3)

    def test_compatibility_uses_left_cols_and_right_rows(self) -> None:
        """2x3 × 3x2 допустимо, хотя left.rows != right.cols не проверяется"""
        left = Matrix.filled(2, 3, 1)
        right = Matrix.filled(3, 5, 2)

        assert (left * right) == Matrix.filled(2, 5, 6)

    def test_dimension_mismatch(self) -> None:
        left = Matrix.filled(2, 3, 1)
        right = Matrix.filled(2, 3, 1)

        with pytest.raises(DimensionMismatchError) as exc_info:
            left * right

        assert exc_info.value.left == left.shape
        assert exc_info.value.right == right.shape

    def test_square_with_wrong_partner(self) -> None:
        """rows==cols совпадение не заменяет cols==rows"""
        left = Matrix.filled(3, 2, 1)
        right = Matrix.filled(3, 3, 1)

        with pytest.raises(DimensionMismatchError):
            left.multiply(right)

    def test_operands_not_mutated(self, left_3x3, right_3x3) -> None:
        left_before, right_before = left_3x3.data, right_3x3.data

        left_3x3 * right_3x3

        assert left_3x3.data == left_before
        assert right_3x3.data == right_before

    def test_identity(self, left_3x3) -> None:
        identity = Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

        assert identity * left_3x3 == left_3x3
        assert left_3x3 * identity == left_3x3

    def test_multiply_requires_matrix(self, left_3x3) -> None:
        with pytest.raises(TypeError):
            left_3x3.multiply([[1, 2, 3]])
        with pytest.raises(TypeError):
            left_3x3 @ 2

    def test_float_naive_summation_order(self) -> None:
        """Накопление слева направо от 0.0 через +="""
        left = Matrix.from_rows([[0.1, 0.2, 0.3]])
        right = Matrix.from_rows([[1.0], [1.0], [1.0]])

        expected = 0.0
        for value in (0.1, 0.2, 0.3):
            expected += value * 1.0

        assert (left * right).get(0, 0) == expected

    def test_fraction_elements(self) -> None:
        left = Matrix.from_rows([[Fraction(1, 2), Fraction(1, 3)]])
        right = Matrix.from_rows([[Fraction(2)], [Fraction(3)]])

        assert (left * right).get(0, 0) == Fraction(2)

    def test_decimal_elements(self) -> None:
        left = Matrix.from_rows([[Decimal("0.1"), Decimal("0.2")]])
        right = Matrix.from_rows([[Decimal("1")], [Decimal("1")]])

        result = (left * right).get(0, 0)
        assert result == Decimal("0.3")
        assert isinstance(result, Decimal)

    @pytest.mark.parametrize(
        "m, n, p, q",
        [(1, 1, 1, 1), (2, 3, 4, 5), (5, 4, 3, 2), (3, 3, 3, 3), (1, 6, 1, 6)],
    )
    def test_associativity(self, m: int, n: int, p: int, q: int) -> None:
        """(A×B)×C == A×(B×C) для целых"""
        source = StdRandomSource(seed=m * 1000 + n * 100 + p * 10 + q)
        a = Matrix.random(m, n, -10, 10, source=source)
        b = Matrix.random(n, p, -10, 10, source=source)
        c = Matrix.random(p, q, -10, 10, source=source)

        assert (a * b) * c == a * (b * c)


# =============================================================================
# ТЕСТЫ: matrix-scalar
# =============================================================================


class TestScale:
    """Тесты scale / * scalar"""

    def test_scale_by_two(self, left_3x3) -> None:
        expected = Matrix.from_rows([[2, 4, 6], [8, 10, 12], [14, 16, 18]])

        assert left_3x3.scale(2) == expected
        assert left_3x3 * 2 == expected
        assert 2 * left_3x3 == expected

    def test_scale_keeps_shape(self) -> None:
        matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert (matrix * 3).shape == matrix.shape

    def test_scale_by_float(self) -> None:
        matrix = Matrix.from_rows([[1, 2]])
        assert (matrix * 0.5).to_rows() == [[0.5, 1.0]]

    def test_scale_does_not_mutate(self, left_3x3) -> None:
        before = left_3x3.data
        left_3x3 * 10
        assert left_3x3.data == before

    def test_scale_requires_number(self, left_3x3) -> None:
        with pytest.raises(TypeError):
            left_3x3.scale("2")
        with pytest.raises(TypeError):
            left_3x3 * object()
        with pytest.raises(TypeError):
            object() * left_3x3
