"""
Linear algebra mixin and its backend-specific matrix product kernels.
"""

from ._array_matmul import *
from ._base import ArrayMixinLinalg

__all__ = [
    ArrayMixinLinalg.__name__,
]
