"""
Array interface definitions.

This module defines the domain-level interface for array-like objects using
structural typing. The reduction engine, builders and visualization code
type against `IArray` rather than the concrete NumPy-backed `Array`, so that
any object exposing a flat row-major buffer plus a shape can participate.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ._dimension import IDimension
from .backend._backend import Backend

Number = Union[int, float]


@runtime_checkable
class IShape(Protocol):
    """
    Shape interface: a pure delegate around one dimension value.
    """

    def raw_dim(self) -> IDimension: ...
    def ndim(self) -> int: ...
    def size(self) -> int: ...
    def dims(self) -> tuple[int, ...]: ...
    def strides(self) -> tuple[int, ...]: ...


@runtime_checkable
class IArray(Protocol):
    """
    Array interface.

    An `IArray` owns a flat, contiguous, row-major buffer whose length always
    equals ``shape().size()``.
    """

    @property
    def backend(self) -> Backend:
        """
        Return the execution backend used by kernels operating on this array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Return the element dtype of the buffer.
        """
        ...

    def data(self) -> Any:
        """
        Return a read-only view of the flat element buffer.
        """
        ...

    def shape(self) -> IShape:
        """
        Return the array shape.
        """
        ...
