"""
Matrix Formatting — ленивый построчный рендеринг

Отладочное текстовое представление матрицы:
- каждая строка матрицы — отдельная строка текста
- каждая ячейка завершается разделителем
- итоговая строка с количеством строк и столбцов

Пример для [[1, 2], [3, 4]] с конфигурацией по умолчанию:

    1, 2, 
    3, 4, 
    Rows: 2, Columns: 2

Формат не является контрактом совместимости.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Iterator

if TYPE_CHECKING:
    from matrixkit.core.math.matrix import Matrix


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_CELL_SEPARATOR: Final[str] = ", "
DEFAULT_ROW_TERMINATOR: Final[str] = "\n"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация текстового рендеринга."""

    cell_separator: str = DEFAULT_CELL_SEPARATOR
    row_terminator: str = DEFAULT_ROW_TERMINATOR
    show_summary: bool = True


# =============================================================================
# RENDERING
# =============================================================================


def summary_line(matrix: "Matrix") -> str:
    return f"Rows: {matrix.rows}, Columns: {matrix.cols}"


def iter_lines(matrix: "Matrix", config: FormatConfig | None = None) -> Iterator[str]:
    """
    Ленивый генератор строк рендеринга в row-major порядке.

    Args:
        matrix: Матрица для рендеринга
        config: Конфигурация (опционально, используется default)

    Yields:
        Строка текста на каждую строку матрицы, затем summary
        (если config.show_summary)
    """
    config = config or FormatConfig()

    for row in range(matrix.rows):
        yield "".join(
            f"{matrix.get(row, col)}{config.cell_separator}"
            for col in range(matrix.cols)
        )

    if config.show_summary:
        yield summary_line(matrix)


def render(matrix: "Matrix", config: FormatConfig | None = None) -> str:
    """Полный текст рендеринга (строки iter_lines через row_terminator)."""
    config = config or FormatConfig()
    return config.row_terminator.join(iter_lines(matrix, config))
