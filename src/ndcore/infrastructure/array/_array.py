"""
Concrete N-dimensional float64 array.

:class:`NDArray` pairs an owned, read-only, flat float64 NumPy buffer with a
shape tuple and a backend descriptor. Its behavior is assembled from
mixins:

- ``ArrayMixinElementwise``: arithmetic, comparison, unary math, operators
- ``ArrayMixinLinalg``: ``dot``, ``outer``, ``diagonal``, ``trace``
- ``ArrayReductionsMixin``: reductions, scans, sorting
- ``ArrayShapeAndIndexingMixin``: element access and structural operations

Invariants
----------
- ``buffer.size == numel(shape)``, checked at every construction point.
- No two arrays share a buffer; buffers are never written after
  construction.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from ...domain._backend import Backend
from ...domain._errors import (
    BackendMismatchError,
    InvalidArgumentError,
    InvalidElementError,
    SizeMismatchError,
)
from ...domain._operand import is_scalar
from ...domain._shape import ShapeLike, normalize_shape, numel
from .._settings import check_allocation, default_backend
from ._conversion import flat_to_nested, nested_to_flat, to_float
from ._reductions import ArrayReductionsMixin
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from .mixins.elementwise import ArrayMixinElementwise
from .mixins.linalg import ArrayMixinLinalg

logger = logging.getLogger(__name__)


class NDArray(
    ArrayMixinElementwise,
    ArrayMixinLinalg,
    ArrayReductionsMixin,
    ArrayShapeAndIndexingMixin,
):
    """
    Shape-aware float64 array over a contiguous row-major buffer.

    Parameters
    ----------
    data : Any
        Either a (nested) sequence / NumPy array / scalar whose structure
        defines the shape, or, when ``shape`` is given, a flat sequence of
        exactly ``numel(shape)`` numbers.
    shape : Optional[ShapeLike]
        Explicit shape for flat ``data``.
    backend : Optional[str or Backend]
        Kernel backend. Defaults to ``NDCORE_BACKEND`` (``"numpy"``).

    Raises
    ------
    SizeMismatchError
        If ``shape`` is given and ``data`` has a different element count.
    ShapeMismatchError, InvalidElementError, InvalidShapeError
        If ``data`` is not a well-formed numeric structure.

    Notes
    -----
    Arrays are immutable. Operations always allocate a new array; ``set``
    returns a modified copy.
    """

    __array_ufunc__ = None

    def __init__(
        self,
        data: Any,
        shape: Optional[ShapeLike] = None,
        *,
        backend: Optional[Union[str, Backend]] = None,
    ) -> None:
        flat, inferred = nested_to_flat(data)
        target = inferred if shape is None else normalize_shape(shape)
        self.__initialize(flat, target, Backend(backend) if backend is not None else default_backend())

    def __initialize(self, data: np.ndarray, shape: ShapeLike, backend: Backend) -> None:
        shape = normalize_shape(shape)
        buf = np.asarray(data, dtype=np.float64).reshape(-1)
        n = numel(shape)
        if buf.size != n:
            raise SizeMismatchError("NDArray", n, buf.size, shape)
        check_allocation(n)
        if not buf.flags.owndata or not buf.flags.c_contiguous:
            buf = np.array(buf, dtype=np.float64, copy=True)
        buf.flags.writeable = False
        self._data = buf
        self._shape = shape
        self._backend = backend

    @classmethod
    def _from_flat(
        cls, data: np.ndarray, shape: ShapeLike, backend: Optional[Backend] = None
    ) -> "NDArray":
        """
        Wrap a freshly computed flat buffer without re-parsing it.

        The size invariant is still enforced. Bypasses ``__init__``.
        """
        obj = cls.__new__(cls)
        obj.__initialize(data, shape, backend if backend is not None else default_backend())
        return obj

    # ------------------------------------------------------------------
    # metadata
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple:
        """Tuple of per-axis sizes."""
        return self._shape

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def backend(self) -> Backend:
        """Backend selecting this array's kernels."""
        return self._backend

    @property
    def dtype(self) -> np.dtype:
        """Always ``float64``."""
        return self._data.dtype

    def __len__(self) -> int:
        return self._shape[0]

    # ------------------------------------------------------------------
    # conversion
    # ------------------------------------------------------------------

    def tolist(self) -> List[Any]:
        """Nested Python lists of floats matching :attr:`shape`."""
        return flat_to_nested(self._data, self._shape)

    def to_numpy(self) -> np.ndarray:
        """Return a writable NumPy copy with this array's shape."""
        return np.array(self._data, dtype=np.float64, copy=True).reshape(self._shape)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype)

    def copy(self) -> "NDArray":
        """Independent copy with the same shape and backend."""
        return self._from_flat(np.array(self._data, copy=True), self._shape, self._backend)

    def to_backend(self, backend: Union[str, Backend]) -> "NDArray":
        """Copy of this array bound to another backend."""
        target = Backend(backend)
        logger.debug("moving array %s from %s to %s", self._shape, self._backend, target)
        return self._from_flat(np.array(self._data, copy=True), self._shape, target)

    # ------------------------------------------------------------------
    # operand helpers
    # ------------------------------------------------------------------

    def _lift(self, other: Any) -> "NDArray":
        """
        Resolve an operand to an array on this array's backend.

        Scalars and host sequences are ingested once; arrays must already
        share the backend.

        Raises
        ------
        BackendMismatchError
            If ``other`` is an array bound to a different backend.
        """
        if isinstance(other, NDArray):
            if other._backend != self._backend:
                raise BackendMismatchError(str(self._backend), str(other._backend))
            return other
        data, shape = nested_to_flat(other)
        return self._from_flat(data, shape, self._backend)

    @staticmethod
    def _scalar_value(value: Any) -> float:
        if isinstance(value, NDArray) and value.size == 1:
            return float(value._data[0])
        if not is_scalar(value):
            raise InvalidElementError(value)
        return to_float(value)

    # ------------------------------------------------------------------
    # dunder helpers
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        if self.size != 1:
            raise InvalidArgumentError(
                "__bool__", "array", self._shape, "truth value of a multi-element array is ambiguous"
            )
        return bool(self._data[0] != 0.0)

    def __repr__(self) -> str:
        body = np.array2string(self._data.reshape(self._shape), separator=", ")
        return f"NDArray({body}, shape={self._shape}, backend='{self._backend}')"

    def __str__(self) -> str:
        return np.array2string(self._data.reshape(self._shape), separator=", ")
