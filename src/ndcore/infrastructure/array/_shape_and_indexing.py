"""
Shape, indexing and structural methods for :class:`NDArray`.

Every method returns a new array with its own buffer; nothing here aliases
or mutates the input. New arrays are built through ``self._from_flat`` (or
``cls`` in the class-level constructors) so this module never imports
the concrete class.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from ...domain._array import IArray
from ...domain._broadcast import broadcast_shape
from ...domain._errors import (
    AxisOutOfBoundsError,
    BroadcastError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidPermutationError,
    InvalidShapeError,
    NotDivisibleError,
    ShapeMismatchError,
    SizeMismatchError,
)
from ...domain._shape import (
    ShapeLike,
    flat_index,
    normalize_axis,
    normalize_insert_axis,
    normalize_shape,
    numel,
)
from .._settings import check_allocation
from ..ops.broadcast_cpu import broadcast_to_flat
from ..ops.concat_cpu import (
    concat_flat,
    delete_flat,
    insert_flat,
    pad_flat,
    repeat_flat,
    split_flat,
    tile_flat,
)
from ..ops.indexing_cpu import axis_gather_index, scatter_along_axis
from ..ops.scan_cpu import flip_slices, roll_slices
from ..ops.search_cpu import nonzero_coords
from ..ops.transpose_cpu import permute_flat


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class ArrayShapeAndIndexingMixin:
    """
    Structural operations for the concrete array.

    Notes
    -----
    The host class must provide ``shape``, ``ndim``, ``size``, ``backend``,
    ``_data``, ``_from_flat`` and ``_lift``.
    """

    # ------------------------------------------------------------------
    # element access
    # ------------------------------------------------------------------

    def get(self: IArray, *indices: int) -> float:
        """
        Read one element.

        Parameters
        ----------
        *indices : int
            One 0-based index per axis, either spread (``a.get(1, 2)``) or as
            a single sequence (``a.get((1, 2))``).

        Raises
        ------
        IndexOutOfBoundsError
            If the index count differs from ``ndim`` or an index is outside
            its axis.
        """
        idx = _unpack_indices(indices)
        return float(self._data[flat_index(self.shape, idx)])

    def set(self: IArray, indices: Union[int, Sequence[int]], value: float) -> IArray:
        """
        Return a copy with one element replaced.

        The receiver is left unchanged; rebind the result to emulate
        in-place assignment.

        Parameters
        ----------
        indices : int or Sequence[int]
            Multi-index of the element (an int for 1-D arrays).
        value : float
            New value.
        """
        idx = (indices,) if _is_int(indices) else tuple(indices)
        offset = flat_index(self.shape, idx)
        data = np.array(self._data, dtype=np.float64, copy=True)
        data[offset] = self._scalar_value(value)
        return self._from_flat(data, self.shape, self.backend)

    def item(self: IArray) -> float:
        """Return the only element of a size-1 array as a Python float."""
        if self.size != 1:
            raise SizeMismatchError("item", 1, self.size, self.shape)
        return float(self._data[0])

    # ------------------------------------------------------------------
    # reshaping
    # ------------------------------------------------------------------

    def reshape(self: IArray, *shape: Any) -> IArray:
        """
        Return the same elements under a new shape.

        The row-major order of the buffer is unchanged. At most one
        dimension may be ``-1``; it is inferred from the remaining ones.

        Raises
        ------
        InvalidShapeError
            For an empty shape, a non-integer or a non-positive dimension
            (other than a single ``-1``).
        SizeMismatchError
            If the element counts differ.
        """
        dims = _unpack_indices(shape)
        dims = self._infer_dim(dims)
        new_shape = normalize_shape(dims)
        if numel(new_shape) != self.size:
            raise SizeMismatchError("reshape", numel(new_shape), self.size, new_shape)
        return self._from_flat(np.array(self._data, copy=True), new_shape, self.backend)

    def _infer_dim(self: IArray, dims: tuple) -> tuple:
        holes = [k for k, d in enumerate(dims) if _is_int(d) and d == -1]
        if not holes:
            return dims
        if len(holes) > 1:
            raise InvalidShapeError(dims, "only one dimension can be -1")
        known = 1
        for k, d in enumerate(dims):
            if k != holes[0]:
                if not _is_int(d) or d < 1:
                    raise InvalidShapeError(dims, f"dimension {d!r} is not positive")
                known *= int(d)
        if self.size % known != 0:
            raise SizeMismatchError("reshape", known, self.size, dims)
        return tuple(self.size // known if k == holes[0] else d for k, d in enumerate(dims))

    def flatten(self: IArray) -> IArray:
        """Equivalent to ``reshape(size)``."""
        return self.reshape(self.size)

    def squeeze(self: IArray, axis: Optional[int] = None) -> IArray:
        """
        Remove size-1 axes.

        Without ``axis`` every size-1 axis is removed; if that would remove
        all of them the result has shape ``(1,)``. With ``axis`` only that
        axis is removed and it must have size 1.
        """
        if axis is None:
            new_shape = tuple(d for d in self.shape if d != 1) or (1,)
        else:
            ax = normalize_axis(axis, self.ndim, "squeeze")
            if self.shape[ax] != 1:
                raise InvalidArgumentError(
                    "squeeze", "axis", axis, f"axis has size {self.shape[ax]}, not 1"
                )
            new_shape = tuple(d for k, d in enumerate(self.shape) if k != ax) or (1,)
        return self._from_flat(np.array(self._data, copy=True), new_shape, self.backend)

    def expand_dims(self: IArray, axis: int) -> IArray:
        """
        Insert a size-1 axis at position ``axis``.

        A negative ``axis`` counts from ``ndim + 1``, so ``-1`` appends.

        Raises
        ------
        AxisOutOfBoundsError
            If the position is outside ``[0, ndim]`` after normalization.
        """
        pos = normalize_insert_axis(axis, self.ndim, "expand_dims")
        new_shape = self.shape[:pos] + (1,) + self.shape[pos:]
        return self._from_flat(np.array(self._data, copy=True), new_shape, self.backend)

    def transpose(self: IArray, perm: Optional[Sequence[int]] = None) -> IArray:
        """
        Permute the axes.

        Parameters
        ----------
        perm : Optional[Sequence[int]]
            Output axis ``i`` is input axis ``perm[i]``. Defaults to reversing
            all axes.

        Raises
        ------
        InvalidPermutationError
            If ``perm`` is not a permutation of ``[0, ndim)``.
        """
        if perm is None:
            order = tuple(range(self.ndim - 1, -1, -1))
        else:
            try:
                order = tuple(perm)
            except TypeError:
                raise InvalidPermutationError(perm, self.ndim)
            if not all(_is_int(p) for p in order) or sorted(order) != list(range(self.ndim)):
                raise InvalidPermutationError(perm, self.ndim)
        data, out_shape = permute_flat(self._data, self.shape, order)
        return self._from_flat(data, out_shape, self.backend)

    @property
    def T(self: IArray) -> IArray:
        """Shorthand for :meth:`transpose` with reversed axes."""
        return self.transpose()

    def broadcast_to(self: IArray, shape: ShapeLike) -> IArray:
        """
        Materialize a copy of this array expanded to ``shape``.

        Raises
        ------
        BroadcastError
            If this array's shape does not broadcast to exactly ``shape``.
        """
        target = normalize_shape(shape)
        if len(target) < self.ndim or broadcast_shape(self.shape, target) != target:
            raise BroadcastError(self.shape, target)
        return self._from_flat(broadcast_to_flat(self._data, self.shape, target), target, self.backend)

    # ------------------------------------------------------------------
    # along-axis rearrangement
    # ------------------------------------------------------------------

    def flip(self: IArray, axis: Optional[int] = None) -> IArray:
        """
        Reverse element order along ``axis``.

        Without ``axis`` every axis is reversed, which is the same as
        reversing the flat buffer.
        """
        if axis is None:
            return self._from_flat(self._data[::-1].copy(), self.shape, self.backend)
        ax = normalize_axis(axis, self.ndim, "flip")
        slices = self._data[axis_gather_index(self.shape, ax)]
        return self._from_flat(
            scatter_along_axis(flip_slices(slices), self.shape, ax), self.shape, self.backend
        )

    def roll(self: IArray, shift: int, axis: Optional[int] = None) -> IArray:
        """
        Rotate elements by ``shift`` positions along ``axis``.

        Without ``axis`` the flat buffer is rotated and the shape kept.
        """
        if not _is_int(shift):
            raise InvalidArgumentError("roll", "shift", shift, "must be an integer")
        if axis is None:
            return self._from_flat(np.roll(self._data, int(shift)), self.shape, self.backend)
        ax = normalize_axis(axis, self.ndim, "roll")
        slices = self._data[axis_gather_index(self.shape, ax)]
        return self._from_flat(
            scatter_along_axis(roll_slices(slices, shift), self.shape, ax), self.shape, self.backend
        )

    def tile(self: IArray, reps: Union[int, Sequence[int]]) -> IArray:
        """
        Repeat the whole array ``reps`` times per axis.

        ``reps`` and the shape are left-padded with 1s to a common rank.
        """
        reps_t = normalize_shape(reps)
        data, out_shape = tile_flat(self._data, self.shape, reps_t)
        return self._from_flat(data, out_shape, self.backend)

    def repeat(self: IArray, repeats: int, axis: Optional[int] = None) -> IArray:
        """
        Repeat every element ``repeats`` times.

        Without ``axis`` the input is flattened first.
        """
        if not _is_int(repeats) or repeats < 1:
            raise InvalidArgumentError("repeat", "repeats", repeats, "must be a positive integer")
        if axis is None:
            data, out_shape = repeat_flat(self._data, (self.size,), int(repeats), 0)
        else:
            ax = normalize_axis(axis, self.ndim, "repeat")
            data, out_shape = repeat_flat(self._data, self.shape, int(repeats), ax)
        return self._from_flat(data, out_shape, self.backend)

    # ------------------------------------------------------------------
    # padding, insertion and deletion
    # ------------------------------------------------------------------

    def pad(
        self: IArray,
        pad_width: Union[int, Sequence[Any]],
        mode: str = "constant",
        constant_value: float = 0.0,
    ) -> IArray:
        """
        Grow every axis by adding elements before and after it.

        Parameters
        ----------
        pad_width : int, (before, after) or sequence of (before, after)
            One width for every side of every axis, one pair for every
            axis, or one pair per axis. Widths are non-negative integers.
        mode : {"constant", "edge", "wrap", "reflect"}
            ``constant`` fills with ``constant_value``; ``edge`` repeats the
            border element; ``wrap`` continues the axis periodically;
            ``reflect`` mirrors about the border without repeating it.
        constant_value : float
            Fill for ``mode="constant"``.

        Raises
        ------
        InvalidArgumentError
            For an unknown mode or a malformed or negative width.
        """
        if mode not in _PAD_MODES:
            raise InvalidArgumentError("pad", "mode", mode, f"must be one of {_PAD_MODES}")
        widths = _pad_widths(pad_width, self.ndim)
        fill = self._scalar_value(constant_value)
        check_allocation(numel(tuple(d + b + a for d, (b, a) in zip(self.shape, widths))))
        data, out_shape = pad_flat(self._data, self.shape, widths, mode, fill)
        return self._from_flat(data, out_shape, self.backend)

    def insert(
        self: IArray,
        index: Union[int, Sequence[int]],
        values: Any,
        axis: Optional[int] = None,
    ) -> IArray:
        """
        Insert constant slices before the given positions along ``axis``.

        Without ``axis`` the array is flattened first.

        Parameters
        ----------
        index : int or Sequence[int]
            Positions in ``[-L, L]`` of the input axis (``L`` appends;
            negatives count from ``L``). Repeats insert several slices.
        values : float or sequence of float
            A scalar fills every inserted slice; otherwise one value per
            position, in the order the positions are given.

        Raises
        ------
        IndexOutOfBoundsError
            If a position is outside ``[-L, L]``.
        SizeMismatchError
            If ``values`` is a sequence whose length differs from the
            number of positions.
        """
        src, shape, ax = self._axis_view("insert", axis)
        length = shape[ax]
        positions = _positions("insert", index, length, ax, allow_end=True)
        fills = self._lift(values)._data
        if fills.size == 1:
            fills = np.full(len(positions), fills[0])
        elif fills.size != len(positions):
            raise SizeMismatchError("insert", len(positions), int(fills.size))
        order = sorted(range(len(positions)), key=lambda k: positions[k])
        data, out_shape = insert_flat(
            src, shape, ax, [positions[k] for k in order], [float(fills[k]) for k in order]
        )
        return self._from_flat(data, out_shape, self.backend)

    def delete(self: IArray, index: Union[int, Sequence[int]], axis: Optional[int] = None) -> IArray:
        """
        Remove the slices at the given positions along ``axis``.

        Without ``axis`` the array is flattened first. Positions may be
        negative (counted from the end) and repeated.

        Raises
        ------
        IndexOutOfBoundsError
            If a position is outside ``[-L, L)``.
        InvalidShapeError
            If every slice of the axis would be removed.
        """
        src, shape, ax = self._axis_view("delete", axis)
        positions = sorted(set(_positions("delete", index, shape[ax], ax)))
        if len(positions) == shape[ax]:
            raise InvalidShapeError(
                tuple(0 if k == ax else d for k, d in enumerate(shape)),
                f"delete would remove every slice along axis {ax}",
            )
        data, out_shape = delete_flat(src, shape, ax, positions)
        return self._from_flat(data, out_shape, self.backend)

    def _axis_view(self: IArray, op: str, axis: Optional[int]) -> tuple:
        if axis is None:
            return self._data, (self.size,), 0
        return self._data, self.shape, normalize_axis(axis, self.ndim, op)

    # ------------------------------------------------------------------
    # searching
    # ------------------------------------------------------------------

    def argwhere(self: IArray) -> IArray:
        """
        Multi-indices of the nonzero elements, one row each.

        NaN counts as nonzero.

        Returns
        -------
        NDArray
            Shape ``(hits, ndim)`` in row-major order of the hits.

        Raises
        ------
        InvalidShapeError
            If no element is nonzero, since the result would be empty.
        """
        coords = self._nonzero_coords("argwhere")
        return self._from_flat(coords.astype(np.float64).reshape(-1), coords.shape, self.backend)

    def nonzero(self: IArray) -> tuple:
        """
        Indices of the nonzero elements, as one ``(hits,)`` array per axis.

        Raises
        ------
        InvalidShapeError
            If no element is nonzero.
        """
        coords = self._nonzero_coords("nonzero")
        return tuple(
            self._from_flat(coords[:, k].astype(np.float64), (coords.shape[0],), self.backend)
            for k in range(self.ndim)
        )

    def _nonzero_coords(self: IArray, op: str) -> np.ndarray:
        coords = nonzero_coords(self._data, self.shape)
        if coords.shape[0] == 0:
            raise InvalidShapeError((0, self.ndim), f"{op}: no element is nonzero")
        return coords

    # ------------------------------------------------------------------
    # composition
    # ------------------------------------------------------------------

    @classmethod
    def _anchored(cls, items: List[Any]) -> List[IArray]:
        # host values adopt the backend of the first array among the items
        anchor = next((v for v in items if isinstance(v, cls)), None)
        if anchor is None:
            return [cls(v) for v in items]
        return [anchor._lift(v) for v in items]

    @classmethod
    def concatenate(cls, arrays: Sequence[Any], axis: int = 0) -> IArray:
        """
        Join arrays along an existing axis.

        Parameters
        ----------
        arrays : Sequence
            Non-empty sequence of arrays sharing rank and backend. Host
            values (scalars, nested sequences) are accepted anywhere in the
            sequence and adopt the backend of the first array present.
        axis : int
            Axis to join along, in ``[0, ndim)``.

        Returns
        -------
        NDArray
            Array whose ``axis`` dimension is the sum of the inputs'.

        Raises
        ------
        InvalidArgumentError
            If ``arrays`` is empty.
        AxisOutOfBoundsError
            If ``axis`` is invalid for the shared rank.
        ShapeMismatchError
            If ranks differ or any non-concatenation axis disagrees.
        BackendMismatchError
            If the arrays use different backends.
        """
        arrays = list(arrays)
        if not arrays:
            raise InvalidArgumentError("concatenate", "arrays", arrays, "at least one array is required")
        arrays = cls._anchored(arrays)
        first = arrays[0]
        rank = first.ndim
        ax = normalize_axis(axis, rank, "concatenate")
        shapes = [a.shape for a in arrays]
        for s in shapes[1:]:
            if len(s) != rank:
                raise ShapeMismatchError("concatenate", shapes, "all inputs must have the same rank")
            for k in range(rank):
                if k != ax and s[k] != shapes[0][k]:
                    raise ShapeMismatchError(
                        "concatenate", shapes, f"dimension {k} differs outside the concatenation axis"
                    )
        out_shape = tuple(
            sum(s[ax] for s in shapes) if k == ax else d for k, d in enumerate(shapes[0])
        )
        data = concat_flat([a._data for a in arrays], shapes, ax)
        return first._from_flat(data, out_shape, first.backend)

    @classmethod
    def stack(cls, arrays: Sequence[Any], axis: int = 0) -> IArray:
        """
        Join identically shaped arrays along a new axis.

        The result has a new axis of size ``len(arrays)`` at position
        ``axis`` (valid range ``[0, ndim]``).

        Raises
        ------
        ShapeMismatchError
            If the shapes are not all identical.
        """
        arrays = list(arrays)
        if not arrays:
            raise InvalidArgumentError("stack", "arrays", arrays, "at least one array is required")
        arrays = cls._anchored(arrays)
        first = arrays[0]
        shapes = [a.shape for a in arrays]
        if any(s != shapes[0] for s in shapes[1:]):
            raise ShapeMismatchError("stack", shapes, "all inputs must have the same shape")
        if not _is_int(axis) or not 0 <= axis <= first.ndim:
            raise AxisOutOfBoundsError("stack", axis, first.ndim, inclusive=True)
        pos = int(axis)
        expanded = [a.expand_dims(pos) for a in arrays]
        return cls.concatenate(expanded, pos)

    def split(
        self: IArray, sections_or_indices: Union[int, Sequence[int]], axis: int = 0
    ) -> List[IArray]:
        """
        Split into consecutive pieces along ``axis``.

        Parameters
        ----------
        sections_or_indices : int or Sequence[int]
            Either the number of equal sections, or strictly increasing cut
            points in ``(0, shape[axis])``; the last piece runs to the end.
        axis : int
            Axis to split, in ``[0, ndim)``.

        Returns
        -------
        list of NDArray
            Pieces whose concatenation along ``axis`` reproduces the input.

        Raises
        ------
        NotDivisibleError
            If the axis length is not a multiple of the section count.
        InvalidArgumentError
            For a non-positive section count or invalid cut points.
        """
        ax = normalize_axis(axis, self.ndim, "split")
        length = self.shape[ax]

        if _is_int(sections_or_indices):
            sections = int(sections_or_indices)
            if sections < 1:
                raise InvalidArgumentError("split", "sections", sections, "must be at least 1")
            if length % sections != 0:
                raise NotDivisibleError(length, sections, ax)
            step = length // sections
            bounds = [(i * step, (i + 1) * step) for i in range(sections)]
        else:
            cuts = list(sections_or_indices)
            prev = 0
            for c in cuts:
                if not _is_int(c) or not prev < c < length:
                    raise InvalidArgumentError(
                        "split",
                        "indices",
                        cuts,
                        f"cut points must be strictly increasing integers in (0, {length})",
                    )
                prev = int(c)
            edges = [0] + [int(c) for c in cuts] + [length]
            bounds = list(zip(edges[:-1], edges[1:]))

        pieces = split_flat(self._data, self.shape, ax, bounds)
        out = []
        for (start, stop), data in zip(bounds, pieces):
            shape = tuple(stop - start if k == ax else d for k, d in enumerate(self.shape))
            out.append(self._from_flat(data, shape, self.backend))
        return out


def _unpack_indices(values: tuple) -> tuple:
    if len(values) == 1 and not _is_int(values[0]):
        try:
            return tuple(values[0])
        except TypeError:
            return values
    return values


_PAD_MODES = ("constant", "edge", "wrap", "reflect")


def _pad_widths(pad_width: Any, rank: int) -> List[tuple]:
    if _is_int(pad_width):
        pairs = [(pad_width, pad_width)] * rank
    else:
        try:
            items = list(pad_width)
        except TypeError:
            raise InvalidArgumentError("pad", "pad_width", pad_width, "must be an int or pairs of ints")
        if len(items) == 2 and all(_is_int(v) for v in items):
            pairs = [tuple(items)] * rank
        elif len(items) == rank:
            pairs = []
            for item in items:
                pair = tuple(item) if isinstance(item, (list, tuple)) else ()
                if len(pair) != 2:
                    raise InvalidArgumentError(
                        "pad", "pad_width", pad_width, "every axis needs a (before, after) pair"
                    )
                pairs.append(pair)
        else:
            raise InvalidArgumentError(
                "pad", "pad_width", pad_width, f"expected one pair or {rank} pairs"
            )
    if not all(_is_int(v) and v >= 0 for pair in pairs for v in pair):
        raise InvalidArgumentError("pad", "pad_width", pad_width, "widths must be non-negative integers")
    return [(int(b), int(a)) for b, a in pairs]


def _positions(
    op: str, index: Any, length: int, axis: int, allow_end: bool = False
) -> List[int]:
    try:
        items = [index] if _is_int(index) else list(index)
    except TypeError:
        raise InvalidArgumentError(op, "index", index, "must be an int or a sequence of ints")
    if not items:
        raise InvalidArgumentError(op, "index", index, "at least one position is required")
    upper = length + 1 if allow_end else length
    out = []
    for i in items:
        if not _is_int(i) or not -length <= i < upper:
            raise IndexOutOfBoundsError(i, length, axis)
        out.append(int(i) + length if i < 0 else int(i))
    return out
