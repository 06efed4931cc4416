"""
Matrix — плотная generic матрица с row-major хранением

Модуль реализует единственный value type matrixkit:
- Хранение: плоский список длины rows * cols, элемент (r, c) по индексу r * cols + c
- Конструкторы: from_rows (вложенные строки), filled (однородное заполнение),
  random (равномерные целые в [min, max))
- Доступ: get / get_row / get_column / set (единственный мутатор)
- Арифметика: multiply (matrix-matrix), scale (matrix-scalar)
- Равенство: форма И данные
- Рендеринг: ленивый построчный (см. formatting)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(data) == rows * cols после завершения любой операции
2. rows > 0 и cols > 0 для любой матрицы (нулевые формы отклоняются
   всеми конструкторами с ShapeError)
3. Порядок хранения: строка 0 целиком, затем строка 1, и т.д.
4. Операторы не мутируют операнды: результат — новая матрица
5. Ошибка поднимается до любой наблюдаемой мутации

УМНОЖЕНИЕ:
    C[i, j] = Σ_k A[i, k] * B[k, j],  k ∈ [0, A.cols)
    Предусловие: A.cols == B.rows, форма результата A.rows × B.cols.
    Аккумулятор стартует с аддитивной единицы типа элемента и
    накапливается через += в порядке k (наивная сумма, без pairwise/Kahan).
    Для float результат может отличаться в последних битах от
    других порядков суммирования.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

from pydantic import ValidationError

from matrixkit.core.domain.shape import Shape
from matrixkit.core.errors import DimensionMismatchError, ShapeError
from matrixkit.core.math.formatting import FormatConfig, iter_lines, render
from matrixkit.core.math.numeric import (
    additive_identity,
    duplicate,
    is_scalar,
    validate_dimension,
    validate_half_open_range,
    validate_int_bound,
)
from matrixkit.core.math.random_source import RandomSource, StdRandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_shape(rows: Any, cols: Any) -> Shape:
    """
    Построение Shape с трансляцией ошибок валидации в ShapeError.

    Raises:
        ShapeError: если rows/cols не положительные int
    """
    validate_dimension(rows, "rows")
    validate_dimension(cols, "cols")
    try:
        return Shape(rows=rows, cols=cols)
    except ValidationError as e:
        raise ShapeError(f"Invalid shape {rows}x{cols}: {e}") from e


class Matrix(Generic[T]):
    """
    Плотная матрица над generic типом элемента T.

    Матрица владеет своим списком данных эксклюзивно: конструкторы копируют
    входные данные, извлечение строк/столбцов возвращает независимые копии.
    """

    # Матрица мутабельна через set(), поэтому не hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, shape: Shape, data: Iterable[T]):
        """
        Инициализация из формы и плоских row-major данных.

        Args:
            shape: Форма матрицы
            data: Элементы в row-major порядке (копируются)

        Raises:
            ShapeError: если len(data) != shape.size
        """
        if not isinstance(shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(shape).__name__}")

        values = list(data)
        if len(values) != shape.size:
            raise ShapeError(
                f"Data length {len(values)} does not match shape "
                f"{shape.rows}x{shape.cols} (expected {shape.size})"
            )

        self._shape = shape
        self._data: list[T] = values

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> "Matrix[T]":
        """
        Построение из вложенных строк.

        Args:
            rows: Непустая прямоугольная коллекция строк

        Returns:
            Матрица len(rows) × len(rows[0])

        Raises:
            ShapeError: если rows пустая, первая строка пустая или строки
                разной длины (ragged)

        Examples:
            >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).shape.as_tuple()
            (2, 3)
        """
        materialized = [list(row) for row in rows]
        if not materialized:
            raise ShapeError("Cannot build a matrix from an empty row collection")

        cols = len(materialized[0])
        if cols == 0:
            raise ShapeError("Cannot build a matrix from empty rows")

        for index, row in enumerate(materialized):
            if len(row) != cols:
                raise ShapeError(
                    f"Ragged rows: row {index} has length {len(row)}, "
                    f"expected {cols} (length of row 0)"
                )

        shape = make_shape(len(materialized), cols)
        return cls(shape, [cell for row in materialized for cell in row])

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Matrix[T]":
        """
        Матрица rows × cols, все элементы — копии value.

        Raises:
            ShapeError: если rows/cols не положительные int
        """
        shape = make_shape(rows, cols)
        return cls(shape, [duplicate(value) for _ in range(shape.size)])

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        min_value: int,
        max_value: int,
        source: RandomSource | None = None,
    ) -> "Matrix[int]":
        """
        Матрица независимых равномерных целых из [min_value, max_value).

        Источник вызывается ровно rows * cols раз; все параметры
        проверяются до первого вызова.

        Args:
            rows: Количество строк (> 0)
            cols: Количество столбцов (> 0)
            min_value: Нижняя граница (включительно)
            max_value: Верхняя граница (исключительно)
            source: Источник случайных чисел (default: StdRandomSource())

        Raises:
            ShapeError: если rows/cols не положительные int
            TypeError: если границы не int
            ValueError: если min_value >= max_value
        """
        shape = make_shape(rows, cols)
        validate_int_bound(min_value, "min_value")
        validate_int_bound(max_value, "max_value")
        validate_half_open_range(min_value, max_value)

        source = source or StdRandomSource()
        logger.debug(
            "Generating random %dx%d matrix in [%d, %d)",
            shape.rows,
            shape.cols,
            min_value,
            max_value,
        )

        data = [source.next_in_range(min_value, max_value) for _ in range(shape.size)]
        return cls(shape, data)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def cols(self) -> int:
        return self._shape.cols

    @property
    def size(self) -> int:
        return self._shape.size

    @property
    def data(self) -> tuple[T, ...]:
        """Снапшот плоских данных в row-major порядке."""
        return tuple(self._data)

    # =========================================================================
    # ДОСТУП К ЭЛЕМЕНТАМ
    # =========================================================================

    def get(self, row: int, col: int) -> T:
        """
        Элемент (row, col).

        Raises:
            IndexOutOfRangeError: если row >= rows или col >= cols
        """
        return self._data[self._shape.flat_index(row, col)]

    def get_row(self, row: int) -> list[T]:
        """
        Копия строки row.

        Raises:
            IndexOutOfRangeError: если row >= rows
        """
        self._shape.check_row(row)
        start = row * self.cols
        return [duplicate(value) for value in self._data[start : start + self.cols]]

    def get_column(self, col: int) -> list[T]:
        """
        Копия столбца col (обход всех строк, O(rows)).

        Raises:
            IndexOutOfRangeError: если col >= cols
        """
        self._shape.check_col(col)
        return [duplicate(self._data[row * self.cols + col]) for row in range(self.rows)]

    def set(self, row: int, col: int, value: T) -> None:
        """
        Замена элемента (row, col). Единственный мутатор матрицы.

        Raises:
            IndexOutOfRangeError: если row >= rows или col >= cols
        """
        self._data[self._shape.flat_index(row, col)] = value

    def to_rows(self) -> list[list[T]]:
        """Вложенные строки (обратная операция к from_rows)."""
        return [self.get_row(row) for row in range(self.rows)]

    def copy(self) -> "Matrix[T]":
        return Matrix(self._shape, [duplicate(value) for value in self._data])

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = _unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        row, col = _unpack_key(key)
        self.set(row, col, value)

    def __iter__(self) -> Iterator[list[T]]:
        for row in range(self.rows):
            yield self.get_row(row)

    def __len__(self) -> int:
        return self.rows

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def multiply(self, rhs: "Matrix[T]") -> "Matrix[T]":
        """
        Matrix-matrix умножение self × rhs.

        Наивный тройной цикл, O(rows × rhs.cols × cols). Операнды не
        мутируются.

        Args:
            rhs: Правый операнд, rhs.rows == self.cols

        Returns:
            Новая матрица self.rows × rhs.cols

        Raises:
            TypeError: если rhs не Matrix
            DimensionMismatchError: если self.cols != rhs.rows
        """
        if not isinstance(rhs, Matrix):
            raise TypeError(f"rhs must be a Matrix, got {type(rhs).__name__}")

        if self.cols != rhs.rows:
            raise DimensionMismatchError(self._shape, rhs.shape)

        logger.debug(
            "Multiplying %dx%d by %dx%d", self.rows, self.cols, rhs.rows, rhs.cols
        )

        left, right = self._data, rhs._data
        inner, out_cols = self.cols, rhs.cols
        zero = additive_identity(left[0])

        output: list[T] = []
        for i in range(self.rows):
            row_start = i * inner
            for j in range(out_cols):
                total = duplicate(zero)
                for k in range(inner):
                    total += left[row_start + k] * right[k * out_cols + j]
                output.append(total)

        return Matrix(make_shape(self.rows, out_cols), output)

    def scale(self, scalar: Any) -> "Matrix[T]":
        """
        Matrix-scalar умножение: каждый элемент × scalar.

        Raises:
            TypeError: если scalar не numbers.Number
        """
        if not is_scalar(scalar):
            raise TypeError(f"scalar must be a number, got {type(scalar).__name__}")

        return Matrix(self._shape, [value * scalar for value in self._data])

    def __mul__(self, other: Any) -> "Matrix[T]":
        if isinstance(other, Matrix):
            return self.multiply(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Matrix[T]":
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> "Matrix[T]":
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    # =========================================================================
    # РАВЕНСТВО И РЕНДЕРИНГ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Форма участвует в сравнении: 2x3 != 3x2 даже при равных данных
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    def lines(self, config: FormatConfig | None = None) -> Iterator[str]:
        """Ленивый построчный рендеринг (см. formatting.iter_lines)."""
        return iter_lines(self, config)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self._data!r})"


def _unpack_key(key: Any) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix index must be a (row, col) tuple, got {key!r}")
    return key[0], key[1]
