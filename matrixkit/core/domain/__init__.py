"""
Domain value objects.

Contains Shape — the (rows, cols) pair with row-major addressing.
"""

from matrixkit.core.domain.shape import Shape

__all__ = [
    "Shape",
]
