"""
Error taxonomy for ndcore.

Every failure raised by the engine is an instance of :class:`NDCoreError`
and carries an :class:`ErrorKind` so a host binding layer can translate the
failure into its own reporting mechanism without string matching.

Each concrete error additionally derives from the closest builtin exception
(``ValueError``, ``IndexError``, ``TypeError``, ``RuntimeError`` or
``MemoryError``), so ordinary Python error handling keeps working.

Floating-point domain issues inside elementwise math (division by zero,
logarithm of a negative number, overflow) are *not* errors: they propagate
as ``NaN`` / ``inf`` following IEEE-754.
"""

from enum import Enum
from typing import Any, Optional, Sequence, Tuple


class ErrorKind(str, Enum):
    """Stable identifiers for every failure category raised by the engine."""

    INVALID_SHAPE = "InvalidShape"
    SHAPE_MISMATCH = "ShapeMismatch"
    SIZE_MISMATCH = "SizeMismatch"
    BROADCAST = "BroadcastError"
    AXIS_OUT_OF_BOUNDS = "AxisOutOfBounds"
    INDEX_OUT_OF_BOUNDS = "IndexOutOfBounds"
    INVALID_PERMUTATION = "InvalidPermutation"
    NOT_DIVISIBLE = "NotDivisible"
    UNSUPPORTED_OPERANDS = "UnsupportedOperands"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_ELEMENT = "InvalidElement"
    BACKEND_MISMATCH = "BackendMismatch"
    BACKEND_NOT_SUPPORTED = "BackendNotSupported"
    ALLOCATION_LIMIT = "AllocationLimit"


def _fmt_shape(shape: Any) -> str:
    try:
        return "(" + ", ".join(str(int(d)) for d in shape) + ("," if len(shape) == 1 else "") + ")"
    except (TypeError, ValueError):
        return repr(shape)


class NDCoreError(Exception):
    """
    Base class of every ndcore error.

    Attributes
    ----------
    kind : ErrorKind
        Category of the failure.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidShapeError(NDCoreError, ValueError):
    """
    Raised when a shape is empty or contains a non-positive or non-integral
    dimension.

    Attributes
    ----------
    shape : Any
        The rejected shape, as supplied by the caller.
    reason : str
        Short description of what is wrong with it.
    """

    kind = ErrorKind.INVALID_SHAPE

    def __init__(self, shape: Any, reason: str) -> None:
        super().__init__(f"Invalid shape {shape!r}: {reason}.")
        self.shape = shape
        self.reason = reason


class ShapeMismatchError(NDCoreError, ValueError):
    """
    Raised when operand shapes are structurally incompatible for an
    operation that does not broadcast (concatenate, stack, dot, nested
    sequence parsing).

    Attributes
    ----------
    op : str
        Operation name.
    shapes : tuple
        The shapes involved, in operand order.
    """

    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(self, op: str, shapes: Sequence[Any], detail: str = "") -> None:
        rendered = ", ".join(_fmt_shape(s) for s in shapes)
        msg = f"{op}: incompatible shapes {rendered}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg + ".")
        self.op = op
        self.shapes = tuple(tuple(s) if isinstance(s, (list, tuple)) else s for s in shapes)
        self.detail = detail


class SizeMismatchError(NDCoreError, ValueError):
    """
    Raised when a total element count does not match the requested shape.

    Attributes
    ----------
    expected : int
        Number of elements required by the target shape.
    actual : int
        Number of elements actually available.
    """

    kind = ErrorKind.SIZE_MISMATCH

    def __init__(self, op: str, expected: int, actual: int, shape: Any = None) -> None:
        target = f" for shape {_fmt_shape(shape)}" if shape is not None else ""
        super().__init__(
            f"{op}: size mismatch{target}, expected {expected} elements but got {actual}."
        )
        self.op = op
        self.expected = expected
        self.actual = actual
        self.shape = shape


class BroadcastError(NDCoreError, ValueError):
    """
    Raised when two shapes cannot be broadcast together.

    Attributes
    ----------
    shape_a, shape_b : tuple of int
        The two incompatible shapes.
    """

    kind = ErrorKind.BROADCAST

    def __init__(self, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]) -> None:
        super().__init__(
            f"Shapes {_fmt_shape(shape_a)} and {_fmt_shape(shape_b)} cannot be broadcast together."
        )
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class AxisOutOfBoundsError(NDCoreError, IndexError):
    """
    Raised when an axis argument lies outside its valid range.

    Attributes
    ----------
    op : str
        Operation name.
    axis : int
        The rejected axis.
    rank : int
        Rank of the operand. Valid axes are ``[0, rank)`` (``[0, rank]`` for
        operations that insert an axis).
    """

    kind = ErrorKind.AXIS_OUT_OF_BOUNDS

    def __init__(self, op: str, axis: Any, rank: int, inclusive: bool = False) -> None:
        upper = f"{rank}]" if inclusive else f"{rank})"
        super().__init__(
            f"{op}: axis {axis!r} is out of bounds for rank {rank} (valid range [0, {upper})."
        )
        self.op = op
        self.axis = axis
        self.rank = rank


class IndexOutOfBoundsError(NDCoreError, IndexError):
    """
    Raised when an element index (or flat offset) is out of range.

    Attributes
    ----------
    axis : Optional[int]
        Offending axis, or ``None`` for a flat offset / rank mismatch.
    index : Any
        The rejected index value.
    extent : Optional[int]
        Size of the addressed axis (or total size for a flat offset).
    """

    kind = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(
        self,
        index: Any,
        extent: Optional[int] = None,
        axis: Optional[int] = None,
        detail: str = "",
    ) -> None:
        if detail:
            msg = detail
        elif axis is None:
            msg = f"Flat offset {index!r} is out of bounds for size {extent}"
        else:
            msg = f"Index {index!r} is out of bounds for axis {axis} with size {extent}"
        super().__init__(msg + ".")
        self.index = index
        self.extent = extent
        self.axis = axis


class InvalidPermutationError(NDCoreError, ValueError):
    """Raised when a transpose permutation is not a bijection over ``[0, rank)``."""

    kind = ErrorKind.INVALID_PERMUTATION

    def __init__(self, perm: Any, rank: int) -> None:
        super().__init__(
            f"transpose: {perm!r} is not a permutation of the axes of a rank-{rank} array."
        )
        self.perm = perm
        self.rank = rank


class NotDivisibleError(NDCoreError, ValueError):
    """
    Raised when an equal-sections split does not evenly divide the axis.

    Attributes
    ----------
    length : int
        Length of the axis being split.
    sections : int
        Requested number of sections.
    """

    kind = ErrorKind.NOT_DIVISIBLE

    def __init__(self, length: int, sections: int, axis: int) -> None:
        super().__init__(
            f"split: axis {axis} of length {length} cannot be divided into {sections} equal sections."
        )
        self.length = length
        self.sections = sections
        self.axis = axis


class UnsupportedOperandsError(NDCoreError, ValueError):
    """Raised when an operation is called with an unsupported rank combination."""

    kind = ErrorKind.UNSUPPORTED_OPERANDS

    def __init__(self, op: str, ranks: Sequence[int]) -> None:
        rendered = " and ".join(f"{r}-D" for r in ranks)
        super().__init__(f"{op}: unsupported operand dimensions ({rendered}).")
        self.op = op
        self.ranks = tuple(ranks)


class InvalidArgumentError(NDCoreError, ValueError):
    """
    Raised when a parameter lies outside its documented domain (e.g. an
    ``arange`` step of zero).

    Attributes
    ----------
    op : str
        Operation name.
    argument : str
        Name of the offending parameter.
    value : Any
        The rejected value.
    """

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, op: str, argument: str, value: Any, reason: str) -> None:
        super().__init__(f"{op}: invalid {argument}={value!r}, {reason}.")
        self.op = op
        self.argument = argument
        self.value = value
        self.reason = reason


class InvalidElementError(NDCoreError, TypeError):
    """
    Raised when a leaf of a host sequence is not a real number, or is an
    integer too large to represent as float64.
    """

    kind = ErrorKind.INVALID_ELEMENT

    def __init__(self, element: Any, path: Sequence[int] = (), reason: str = "") -> None:
        where = f" at position {list(path)}" if path else ""
        if reason:
            message = f"Element of type {type(element).__name__}{where} {reason}."
        else:
            message = f"Non-numeric element {element!r} of type {type(element).__name__}{where}."
        super().__init__(message)
        self.element = element
        self.path = tuple(path)
        self.reason = reason


class BackendMismatchError(NDCoreError, RuntimeError):
    """
    Raised when an operation combines arrays bound to different backends.

    Attributes
    ----------
    backend_a, backend_b : str
        Backend identifiers of the two operands.
    """

    kind = ErrorKind.BACKEND_MISMATCH

    def __init__(self, backend_a: str, backend_b: str) -> None:
        super().__init__(f"Backend mismatch: '{backend_a}' vs '{backend_b}'.")
        self.backend_a = backend_a
        self.backend_b = backend_b


class BackendNotSupportedError(NDCoreError, RuntimeError):
    """
    Raised when an operation has no registered implementation for the
    array's backend.
    """

    kind = ErrorKind.BACKEND_NOT_SUPPORTED

    def __init__(self, op: str, backend: str) -> None:
        super().__init__(f"{op} is not implemented for backend '{backend}'.")
        self.op = op
        self.backend = backend


class AllocationLimitError(NDCoreError, MemoryError):
    """
    Raised when an allocation would exceed the configured element cap
    (``NDCORE_MAX_ELEMENTS``).
    """

    kind = ErrorKind.ALLOCATION_LIMIT

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            f"Allocation of {requested} elements exceeds the configured limit of {limit}."
        )
        self.requested = requested
        self.limit = limit
