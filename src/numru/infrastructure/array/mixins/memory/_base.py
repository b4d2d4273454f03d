"""
Memory mixin: whole-buffer replacement for arrays.

Arrays are only ever mutated by swapping in a freshly allocated buffer, never
by writing into the current one. A reduction that already holds the old
buffer keeps reading consistent data, so fills never interleave with an
in-flight reduction on the same array.
"""

from __future__ import annotations

from abc import ABC
from numbers import Integral, Real

import numpy as np

from .....domain._array import IArray, Number
from .....domain._errors import DataTypeMismatchError


def check_fill_value(value: Number, dtype: np.dtype) -> None:
    """
    Check that `value` can be stored in a buffer of `dtype` without loss.

    Raises
    ------
    DataTypeMismatchError
        If `value` is not a real number, or `dtype` is an integer dtype and
        `value` is fractional or outside the dtype's range.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise DataTypeMismatchError(f"fill value must be a real number, got {value!r}")
    dtype = np.dtype(dtype)
    if dtype.kind not in "iu":
        return
    if not isinstance(value, Integral) and not float(value).is_integer():
        raise DataTypeMismatchError(
            f"cannot fill {dtype} buffer with fractional value {value!r}"
        )
    info = np.iinfo(dtype)
    if not info.min <= int(value) <= info.max:
        raise DataTypeMismatchError(
            f"fill value {value!r} is outside the range of {dtype} "
            f"[{info.min}, {info.max}]"
        )


def full_buffer(numel: int, value: Number, dtype: np.dtype) -> np.ndarray:
    """
    Allocate a 1-D buffer of `numel` elements set to `value`.

    Raises
    ------
    DataTypeMismatchError
        If `value` cannot be stored in `dtype` (see `check_fill_value`).
    """
    check_fill_value(value, dtype)
    try:
        return np.full(numel, value, dtype=dtype)
    except OverflowError as e:
        raise DataTypeMismatchError(str(e)) from e


class ArrayMixinMemory(ABC):
    """
    Mixin providing fill operations for the concrete Array.

    Notes
    -----
    Methods assume the host class provides `numel()`, `dtype` and a
    `_replace_buffer(new_buffer)` hook.
    """

    def fill(self: IArray, value: Number) -> None:
        """
        Replace every element with `value`.

        The dtype of the array is preserved.

        Parameters
        ----------
        value : int | float
            Scalar to write into every element.

        Raises
        ------
        DataTypeMismatchError
            If `value` cannot be represented in the array's dtype.
        """
        self._replace_buffer(full_buffer(self.numel(), value, self.dtype))

    def fill_zeros(self: IArray) -> None:
        """Replace every element with zero."""
        self._replace_buffer(np.zeros(self.numel(), dtype=self.dtype))

    def fill_ones(self: IArray) -> None:
        """Replace every element with one."""
        self._replace_buffer(np.ones(self.numel(), dtype=self.dtype))
