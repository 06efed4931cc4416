"""
Shape — Форма матрицы (rows, cols)

Immutable Pydantic модель, описывающая размеры плотной матрицы и
row-major адресацию её элементов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows > 0 и cols > 0 (нулевые формы не допускаются)
2. Элемент (r, c) хранится по flat-индексу r * cols + c
3. Индексы проверяются строго: 0 <= r < rows, 0 <= c < cols
   (отрицательные индексы Python НЕ поддерживаются)
"""

from pydantic import BaseModel, Field

from matrixkit.core.errors import IndexOutOfRangeError


class Shape(BaseModel):
    """
    Форма матрицы.

    Immutable модель (frozen=True): изменение формы требует создания
    новой матрицы.
    """

    rows: int = Field(..., gt=0, strict=True, description="Количество строк")
    cols: int = Field(..., gt=0, strict=True, description="Количество столбцов")

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        """Количество элементов: rows * cols."""
        return self.rows * self.cols

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def transposed(self) -> "Shape":
        """Форма с переставленными rows/cols."""
        return Shape(rows=self.cols, cols=self.rows)

    def has_row(self, row: int) -> bool:
        return _is_index(row) and 0 <= row < self.rows

    def has_col(self, col: int) -> bool:
        return _is_index(col) and 0 <= col < self.cols

    def contains(self, row: int, col: int) -> bool:
        """True если (row, col) внутри формы."""
        return self.has_row(row) and self.has_col(col)

    def check_row(self, row: int) -> None:
        """
        Проверка индекса строки.

        Raises:
            IndexOutOfRangeError: если row вне [0, rows)
        """
        if not self.has_row(row):
            raise IndexOutOfRangeError(row, None, self)

    def check_col(self, col: int) -> None:
        """
        Проверка индекса столбца.

        Raises:
            IndexOutOfRangeError: если col вне [0, cols)
        """
        if not self.has_col(col):
            raise IndexOutOfRangeError(None, col, self)

    def flat_index(self, row: int, col: int) -> int:
        """
        Row-major flat-индекс элемента (row, col).

        Args:
            row: Индекс строки, 0 <= row < rows
            col: Индекс столбца, 0 <= col < cols

        Returns:
            row * cols + col

        Raises:
            IndexOutOfRangeError: если (row, col) вне формы

        Examples:
            >>> Shape(rows=2, cols=3).flat_index(1, 2)
            5
        """
        if not self.contains(row, col):
            raise IndexOutOfRangeError(row, col, self)
        return row * self.cols + col


def _is_index(value: object) -> bool:
    # bool является подклассом int, но индексом не считается
    return isinstance(value, int) and not isinstance(value, bool)
