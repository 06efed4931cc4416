"""
Matrix Errors — таксономия ошибок matrixkit

Все ошибки локальны и детерминированы: поднимаются синхронно в момент
обнаружения нарушенного предусловия, до любой мутации данных.

Иерархия:
- MatrixError                  базовый класс
- ShapeError                   невалидная форма (ragged rows, нулевые размеры)
- DimensionMismatchError       несовместимые формы при умножении
- IndexOutOfRangeError         индекс за пределами объявленной формы
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matrixkit.core.domain.shape import Shape


class MatrixError(Exception):
    """Базовая ошибка matrixkit."""

    pass


class ShapeError(MatrixError, ValueError):
    """
    Невалидная форма матрицы.

    Возникает при:
    1. Построении из пустой коллекции строк
    2. Построении из непрямоугольных (ragged) строк
    3. Нулевых/отрицательных размерах
    4. Несовпадении длины данных и rows * cols
    """

    pass


class DimensionMismatchError(MatrixError, ValueError):
    """
    Несовместимые формы при matrix-matrix умножении.

    Условие совместимости: left.cols == right.rows.
    """

    def __init__(self, left: "Shape", right: "Shape"):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot multiply {left.rows}x{left.cols} by {right.rows}x{right.cols}: "
            f"left.cols={left.cols} != right.rows={right.rows}"
        )


class IndexOutOfRangeError(MatrixError, IndexError):
    """Индекс (row, col) за пределами формы матрицы."""

    def __init__(self, row: int | None, col: int | None, shape: "Shape"):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Index (row={row}, col={col}) out of range for "
            f"{shape.rows}x{shape.cols} matrix"
        )
