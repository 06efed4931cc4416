"""
Core math modules для matrixkit

Плотная generic матрица, контракт числовых элементов и источник
случайных чисел.
"""

# Numeric capabilities
from matrixkit.core.math.numeric import (
    Scalar,
    additive_identity,
    duplicate,
    is_scalar,
    supports_arithmetic,
    validate_dimension,
    validate_half_open_range,
    validate_int_bound,
)

# Random source
from matrixkit.core.math.random_source import RandomSource, StdRandomSource

# Formatting
from matrixkit.core.math.formatting import (
    DEFAULT_CELL_SEPARATOR,
    DEFAULT_ROW_TERMINATOR,
    FormatConfig,
    iter_lines,
    render,
    summary_line,
)

# Matrix
from matrixkit.core.math.matrix import Matrix, make_shape

__all__ = [
    # Numeric — Types
    "Scalar",
    # Numeric — Functions
    "additive_identity",
    "duplicate",
    "is_scalar",
    "supports_arithmetic",
    # Numeric — Validation
    "validate_dimension",
    "validate_half_open_range",
    "validate_int_bound",
    # Random source
    "RandomSource",
    "StdRandomSource",
    # Formatting — Constants
    "DEFAULT_CELL_SEPARATOR",
    "DEFAULT_ROW_TERMINATOR",
    # Formatting — Config
    "FormatConfig",
    # Formatting — Functions
    "iter_lines",
    "render",
    "summary_line",
    # Matrix
    "Matrix",
    "make_shape",
]
