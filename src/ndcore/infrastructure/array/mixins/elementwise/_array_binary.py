"""
Backend-specific implementations of the binary elementwise kernel.

Registers :meth:`ArrayMixinElementwise._binary_kernel` for:

- ``Backend("numpy")``: vectorized NumPy ufuncs
- ``Backend("python")``: scalar :mod:`math` reference loop

Both paths receive operands already broadcast to a common shape, so they
only ever see two flat buffers of equal length.
"""

import numpy as np

from ..._array_builder import array_control_path_manager, backend_not_supported
from .....domain._backend import Backend
from .....domain._array import IArray
from ....ops import elementwise_cpu, elementwise_python

from ._base import ArrayMixinElementwise as AME


@array_control_path_manager(AME, AME._binary_kernel, Backend("numpy"), backend_not_supported)
def array_binary_numpy(self: IArray, op: str, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """NumPy control path for binary elementwise kernels."""
    return elementwise_cpu.apply_binary(op, a, b)


@array_control_path_manager(AME, AME._binary_kernel, Backend("python"), backend_not_supported)
def array_binary_python(self: IArray, op: str, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Pure-Python control path for binary elementwise kernels."""
    return elementwise_python.apply_binary(op, a, b)
