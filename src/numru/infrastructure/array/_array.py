"""
Concrete Array implementation (NumPy flat-buffer backend).

This module provides `Array`, the concrete type satisfying the domain-level
`IArray` protocol. An Array owns:

- a flat, contiguous, row-major NumPy buffer of a numeric dtype, and
- exactly one `Shape`,

and guarantees ``len(data()) == shape().size()`` for its whole lifetime.
Construction is the only validated entry point; no other path produces an
Array whose buffer and shape disagree.

Design notes
------------
- The buffer is copied on construction and exposed read-only, so callers
  can neither alias nor mutate it. Whole-buffer replacement (fills) swaps
  in a new read-only buffer.
- Element ``(d, r, c)`` of a ``[depth, rows, cols]`` array lives at
  ``d*rows*cols + r*cols + c``.
- Reductions are provided by `ArrayMixinReduction`; the kernel that runs is
  selected from the array's `backend`.
"""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import Any, Iterable, Optional, Union

import numpy as np

from ..._config import get_config
from ...domain._array import IArray, Number
from ...domain._dimension import IDimension
from ...domain._errors import (
    DataTypeMismatchError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)
from ...domain.backend._backend import Backend
from .._shape import Shape
from .mixins.memory import ArrayMixinMemory
from .mixins.memory._base import full_buffer
from .mixins.reduction import ArrayMixinReduction

logger = logging.getLogger(__name__)

ShapeLike = Union[Shape, IDimension, Iterable[int]]
BackendLike = Union[Backend, str]

_NUMERIC_KINDS = "iuf"


def _as_buffer(data: Any) -> np.ndarray:
    """
    Copy `data` into a fresh, contiguous, read-only 1-D numeric buffer.

    Raises
    ------
    DataTypeMismatchError
        If `data` is not a 1-D sequence of real numbers.
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise DataTypeMismatchError(
                f"expected a flat 1-D buffer, got a {data.ndim}-D array"
            )
        if data.dtype.kind not in _NUMERIC_KINDS:
            raise DataTypeMismatchError(f"unsupported element dtype {data.dtype}")
        buffer = np.array(data, copy=True, order="C")
    else:
        if isinstance(data, (str, bytes)):
            raise DataTypeMismatchError(f"expected a sequence of numbers, got {data!r}")
        try:
            items = list(data)
        except TypeError:
            raise DataTypeMismatchError(
                f"expected a sequence of numbers, got {type(data).__name__}"
            ) from None
        for i, item in enumerate(items):
            if isinstance(item, (bool, np.bool_)) or not isinstance(item, Real):
                raise DataTypeMismatchError(
                    f"element {i} is not a real number: {item!r}"
                )
        try:
            buffer = np.array(items) if items else np.array([], dtype=np.float64)
        except OverflowError as e:
            raise DataTypeMismatchError(str(e)) from e
        if buffer.dtype.kind not in _NUMERIC_KINDS:
            raise DataTypeMismatchError(f"unsupported element dtype {buffer.dtype}")

    buffer.flags.writeable = False
    return buffer


class Array(ArrayMixinReduction, ArrayMixinMemory, IArray):
    """
    Multi-dimensional numeric array over a flat row-major buffer.

    Parameters
    ----------
    data : Sequence[int | float] | np.ndarray
        Flat element buffer in row-major order. It is copied; the caller's
        object is never referenced afterwards.
    shape : Shape | IDimension | Iterable[int]
        Array shape. Dimensions are wrapped in a `Shape`; plain extent
        sequences become dynamic-rank shapes.
    backend : Backend | str, optional
        Execution backend for kernels. Defaults to the configured default
        backend (see `numru.get_config()`).

    Raises
    ------
    DimensionMismatchError
        If ``len(data) != shape.size()``.
    DataTypeMismatchError
        If `data` is not a flat sequence of real numbers.
    ValueError
        If `backend` is unknown.
    """

    def __init__(
        self,
        data: Any,
        shape: ShapeLike,
        *,
        backend: Optional[BackendLike] = None,
    ) -> None:
        shape = Shape.coerce(shape)
        buffer = _as_buffer(data)
        if buffer.shape[0] != shape.size():
            raise DimensionMismatchError(expected=shape.size(), actual=buffer.shape[0])

        self._data = buffer
        self._shape = shape
        self._backend = (
            get_config().backend() if backend is None else Backend.coerce(backend)
        )

    # ---------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------
    def data(self) -> np.ndarray:
        """
        Return the flat element buffer.

        Returns
        -------
        np.ndarray
            Read-only 1-D view in row-major order. No copy is made.
        """
        return self._data

    def shape(self) -> Shape:
        """
        Return the array shape.
        """
        return self._shape

    @property
    def backend(self) -> Backend:
        """
        Return the execution backend used for this array's kernels.
        """
        return self._backend

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def dtype_name(self) -> str:
        """
        Return the element type tag, e.g. ``"int64"`` or ``"float64"``.
        """
        return self._data.dtype.name

    def ndim(self) -> int:
        return self._shape.ndim()

    def numel(self) -> int:
        """
        Return the number of elements.
        """
        return int(self._data.shape[0])

    def with_backend(self, backend: BackendLike) -> "Array":
        """
        Return a copy of this array that runs its kernels on `backend`.
        """
        return type(self)(self._data, self._shape, backend=backend)

    def get(self, *index: int) -> Number:
        """
        Return the element at a multi-index.

        Parameters
        ----------
        *index : int
            One non-negative coordinate per axis.

        Returns
        -------
        int | float
            The element as a Python scalar.

        Raises
        ------
        IndexOutOfBoundsError
            If the number of coordinates differs from the rank, or any
            coordinate is outside its axis.
        """
        dims = self._shape.dims()
        if len(index) != len(dims):
            raise IndexOutOfBoundsError(index, dims)
        offset = 0
        for coord, extent, stride in zip(index, dims, self._shape.strides()):
            if isinstance(coord, bool) or not isinstance(coord, Integral):
                raise IndexOutOfBoundsError(index, dims)
            if not 0 <= coord < extent:
                raise IndexOutOfBoundsError(index, dims)
            offset += int(coord) * stride
        return self._data[offset].item()

    def to_nested(self) -> list:
        """
        Return the elements as nested Python lists following the shape.
        """
        dims = self._shape.dims()
        if not dims:
            return []
        return self._data.reshape(dims).tolist()

    def visualize(self):
        """
        Start building a text rendering of this array.

        Returns
        -------
        VisualizeBuilder
            Builder configured with the default precision.
        """
        from .._visualization import VisualizeBuilder

        return VisualizeBuilder(self)

    # ---------------------------------------------------------------------
    # Factories
    # ---------------------------------------------------------------------
    @classmethod
    def full(
        cls,
        shape: ShapeLike,
        value: Number,
        *,
        dtype: Optional[Any] = None,
        backend: Optional[BackendLike] = None,
    ) -> "Array":
        """
        Create an array of `shape` with every element set to `value`.

        Parameters
        ----------
        shape : Shape | IDimension | Iterable[int]
            Shape of the output array.
        value : int | float
            Fill value.
        dtype : numpy dtype, optional
            Element dtype. Inferred from `value` when omitted (int64 for
            integers, float64 for floats).
        backend : Backend | str, optional
            Execution backend.

        Raises
        ------
        DataTypeMismatchError
            If `value` is not a real number or does not fit `dtype`.
        """
        shape = Shape.coerce(shape)
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
            raise DataTypeMismatchError(f"fill value must be a real number, got {value!r}")
        if dtype is None:
            dtype = np.int64 if isinstance(value, Integral) else np.float64
        dtype = np.dtype(dtype)
        if dtype.kind not in _NUMERIC_KINDS:
            raise DataTypeMismatchError(f"unsupported element dtype {dtype}")
        return cls(full_buffer(shape.size(), value, dtype), shape, backend=backend)

    @classmethod
    def zeros(
        cls,
        shape: ShapeLike,
        *,
        dtype: Any = np.float64,
        backend: Optional[BackendLike] = None,
    ) -> "Array":
        """
        Create a zero-filled array of `shape` (float64 unless `dtype` says
        otherwise).
        """
        return cls.full(shape, 0, dtype=dtype, backend=backend)

    @classmethod
    def ones(
        cls,
        shape: ShapeLike,
        *,
        dtype: Any = np.float64,
        backend: Optional[BackendLike] = None,
    ) -> "Array":
        """
        Create a one-filled array of `shape` (float64 unless `dtype` says
        otherwise).
        """
        return cls.full(shape, 1, dtype=dtype, backend=backend)

    # ---------------------------------------------------------------------
    # Internals / dunders
    # ---------------------------------------------------------------------
    def _replace_buffer(self, buffer: np.ndarray) -> None:
        if buffer.shape != (self._shape.size(),):
            raise DimensionMismatchError(
                expected=self._shape.size(), actual=int(buffer.size)
            )
        buffer.flags.writeable = False
        logger.debug("replacing buffer of %r", self)
        self._data = buffer

    def __len__(self) -> int:
        dims = self._shape.dims()
        return dims[0] if dims else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._shape.dims() == other._shape.dims() and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Array(shape={self._shape.dims()}, dtype={self.dtype_name()}, "
            f"backend={self._backend})"
        )
