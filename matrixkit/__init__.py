"""
matrixkit — minimal dense matrix value type.

Row-major storage over a generic numeric element type with construction,
element access, equality, matrix/scalar multiplication, random integer
generation and a debug text rendering.
"""

from matrixkit.core.domain import Shape
from matrixkit.core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MatrixError,
    ShapeError,
)
from matrixkit.core.math import (
    FormatConfig,
    Matrix,
    RandomSource,
    StdRandomSource,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Matrix",
    "Shape",
    "FormatConfig",
    "RandomSource",
    "StdRandomSource",
    # Exceptions
    "MatrixError",
    "ShapeError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]
