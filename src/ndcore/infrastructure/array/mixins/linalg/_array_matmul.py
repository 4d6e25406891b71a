"""
Backend-specific implementations of the matrix product kernel.
"""

import numpy as np

from ..._array_builder import array_control_path_manager, backend_not_supported
from .....domain._backend import Backend
from .....domain._array import IArray
from ....ops.matmul_cpu import matmul_numpy, matmul_python

from ._base import ArrayMixinLinalg as AML


@array_control_path_manager(AML, AML._matmul_kernel, Backend("numpy"), backend_not_supported)
def array_matmul_numpy(
    self: IArray, a: np.ndarray, b: np.ndarray, m: int, k: int, n: int
) -> np.ndarray:
    return matmul_numpy(a, b, m, k, n)


@array_control_path_manager(AML, AML._matmul_kernel, Backend("python"), backend_not_supported)
def array_matmul_python(
    self: IArray, a: np.ndarray, b: np.ndarray, m: int, k: int, n: int
) -> np.ndarray:
    return matmul_python(a, b, m, k, n)
