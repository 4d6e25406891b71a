"""
Backend-specific implementations of the unary elementwise and clip kernels.
"""

from typing import Optional

import numpy as np

from ..._array_builder import array_control_path_manager, backend_not_supported
from .....domain._backend import Backend
from .....domain._array import IArray
from ....ops import elementwise_cpu, elementwise_python

from ._base import ArrayMixinElementwise as AME


@array_control_path_manager(AME, AME._unary_kernel, Backend("numpy"), backend_not_supported)
def array_unary_numpy(self: IArray, op: str, a: np.ndarray) -> np.ndarray:
    return elementwise_cpu.apply_unary(op, a)


@array_control_path_manager(AME, AME._unary_kernel, Backend("python"), backend_not_supported)
def array_unary_python(self: IArray, op: str, a: np.ndarray) -> np.ndarray:
    return elementwise_python.apply_unary(op, a)


@array_control_path_manager(AME, AME._clip_kernel, Backend("numpy"), backend_not_supported)
def array_clip_numpy(
    self: IArray, a: np.ndarray, lo: Optional[float], hi: Optional[float]
) -> np.ndarray:
    return elementwise_cpu.apply_clip(a, lo, hi)


@array_control_path_manager(AME, AME._clip_kernel, Backend("python"), backend_not_supported)
def array_clip_python(
    self: IArray, a: np.ndarray, lo: Optional[float], hi: Optional[float]
) -> np.ndarray:
    return elementwise_python.apply_clip(a, lo, hi)
