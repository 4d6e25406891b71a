"""ndcore public API."""

from .domain._backend import Backend, BackendType
from .domain._broadcast import broadcast_shape, broadcast_shapes
from .domain._errors import (
    AllocationLimitError,
    AxisOutOfBoundsError,
    BackendMismatchError,
    BackendNotSupportedError,
    BroadcastError,
    ErrorKind,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidElementError,
    InvalidPermutationError,
    InvalidShapeError,
    NDCoreError,
    NotDivisibleError,
    ShapeMismatchError,
    SizeMismatchError,
    UnsupportedOperandsError,
)
from .domain._operand import OperandKind, classify_operand
from .domain._shape import (
    flat_index,
    normalize_axis,
    normalize_shape,
    numel,
    strides,
    unflatten,
)
from .infrastructure._settings import Settings, get_settings, reload_settings
from .infrastructure.array import NDArray
from .infrastructure.ops.random_cpu import seed
from .infrastructure._creation import (
    arange,
    array,
    asarray,
    copy,
    eye,
    from_nested,
    full,
    full_like,
    identity,
    linspace,
    ones,
    ones_like,
    rand,
    randn,
    to_nested,
    zeros,
    zeros_like,
)
from .infrastructure._functional import *
from .infrastructure._functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = [
    "NDArray",
    "Backend",
    "BackendType",
    "Settings",
    "get_settings",
    "reload_settings",
    "seed",
    # shape model
    "normalize_shape",
    "normalize_axis",
    "numel",
    "strides",
    "flat_index",
    "unflatten",
    "broadcast_shape",
    "broadcast_shapes",
    "OperandKind",
    "classify_operand",
    # construction
    "array",
    "asarray",
    "from_nested",
    "to_nested",
    "zeros",
    "ones",
    "full",
    "zeros_like",
    "ones_like",
    "full_like",
    "arange",
    "linspace",
    "rand",
    "randn",
    "eye",
    "identity",
    "copy",
    # errors
    "ErrorKind",
    "NDCoreError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "SizeMismatchError",
    "BroadcastError",
    "AxisOutOfBoundsError",
    "IndexOutOfBoundsError",
    "InvalidPermutationError",
    "NotDivisibleError",
    "UnsupportedOperandsError",
    "InvalidArgumentError",
    "InvalidElementError",
    "BackendMismatchError",
    "BackendNotSupportedError",
    "AllocationLimitError",
] + list(_functional_all)
