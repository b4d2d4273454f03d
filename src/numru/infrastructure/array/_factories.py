"""
Array construction helpers.

- `DimensionType`: selects a fixed-rank dimension class for `arr`.
- `arr`: build an Array from nested Python lists (or a NumPy array),
  inferring the shape from the nesting.

These helpers only produce a ``(buffer, shape)`` pair and hand it to the
validated `Array` constructor.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Sequence, Type, Union

import numpy as np

from ...domain._errors import DataTypeMismatchError, DimensionMismatchError
from ...domain.backend._backend import Backend
from .._shape import Shape
from ..dimension._ix import Ix, Ix1, Ix2, Ix3
from ..dimension._ix_dyn import IxDyn
from ._array import Array


class DimensionType(Enum):
    """
    Fixed rank requested for `arr`.

    Attributes
    ----------
    D1, D2, D3 : DimensionType
        Rank 1, 2 and 3; the resulting shape uses `Ix1`, `Ix2` or `Ix3`.
    """

    D1 = 1
    D2 = 2
    D3 = 3

    @property
    def ndim(self) -> int:
        return self.value

    @property
    def dimension_class(self) -> Type[Ix]:
        return {1: Ix1, 2: Ix2, 3: Ix3}[self.value]


def _is_nested(node: Any) -> bool:
    return isinstance(node, (list, tuple))


def _infer_dims(values: Sequence[Any]) -> list[int]:
    # Extents are read along the first element at each level and checked
    # against every other branch while flattening.
    dims = []
    node: Any = values
    while _is_nested(node):
        dims.append(len(node))
        if not node:
            break
        node = node[0]
    return dims


def _flatten(node: Any, dims: list[int], level: int, out: list) -> None:
    if level == len(dims):
        if _is_nested(node):
            raise DimensionMismatchError(expected=1, actual=len(node))
        out.append(node)
        return
    if not _is_nested(node):
        raise DimensionMismatchError(expected=dims[level], actual=1)
    if len(node) != dims[level]:
        raise DimensionMismatchError(expected=dims[level], actual=len(node))
    for child in node:
        _flatten(child, dims, level + 1, out)


def arr(
    values: Union[Sequence[Any], np.ndarray],
    dim_type: Optional[DimensionType] = None,
    *,
    backend: Optional[Union[Backend, str]] = None,
) -> Array:
    """
    Build an Array from nested lists.

    Parameters
    ----------
    values : nested list/tuple of numbers, or np.ndarray
        ``[1, 2, 3]`` gives a rank-1 array, ``[[1, 2], [3, 4]]`` rank 2,
        ``[[[...]]]`` rank 3, and so on. An empty list gives an empty
        rank-1 array.
    dim_type : DimensionType, optional
        Pin the rank. The shape then uses the matching fixed-rank class
        (`Ix1`/`Ix2`/`Ix3`); otherwise it uses `IxDyn`.
    backend : Backend | str, optional
        Execution backend for the new array.

    Returns
    -------
    Array

    Raises
    ------
    DimensionMismatchError
        If the nesting is ragged.
    ValueError
        If the nesting depth differs from `dim_type`.
    DataTypeMismatchError
        If `values` is not a list/tuple/array, or holds non-numeric leaves.
    """
    if isinstance(values, np.ndarray):
        if values.ndim == 0:
            raise DataTypeMismatchError("arr() needs at least one dimension")
        dims = list(values.shape)
        flat: Any = values.reshape(-1)
    elif _is_nested(values):
        dims = _infer_dims(values)
        flat = []
        _flatten(values, dims, 0, flat)
    else:
        raise DataTypeMismatchError(
            f"arr() expects a list, tuple or numpy array, got {type(values).__name__}"
        )

    if dim_type is None:
        dim = IxDyn(dims)
    else:
        dim = DimensionType(dim_type).dimension_class(*dims)
    return Array(flat, Shape(dim), backend=backend)
