"""
Execution backend abstraction.

This module defines lightweight descriptors for the execution strategy used
by array kernels:

- `BackendType`: an enumeration of supported backends
- `Backend`: a concrete backend descriptor that validates and normalizes
  user-facing backend strings such as "numpy" or "python"

Every array carries a `Backend`. Kernels are registered per backend through
control-path dispatch, and the array's backend selects the kernel at call
time. All backends compute identical results; they differ only in how the
work is carried out.
"""

from enum import Enum
from typing import Union


class BackendType(Enum):
    """
    Enumeration of supported execution backends.

    Attributes
    ----------
    NUMPY : BackendType
        Vectorized kernels built on NumPy gathers and ufunc reductions.
    PYTHON : BackendType
        Reference kernels walking the flat buffer with plain index arithmetic.
    """

    NUMPY = "numpy"
    PYTHON = "python"


class Backend:
    """
    Concrete execution backend descriptor.

    Parameters
    ----------
    backend : str
        Backend identifier string. Must be one of the `BackendType` values
        ("numpy" or "python"). Matching is case-insensitive and ignores
        surrounding whitespace.

    Raises
    ------
    ValueError
        If the backend string is not recognized.
    """

    __slots__ = ("type",)

    def __init__(self, backend: str):
        key = backend.strip().lower() if isinstance(backend, str) else backend
        try:
            self.type = BackendType(key)
        except ValueError:
            expected = ", ".join(repr(t.value) for t in BackendType)
            raise ValueError(
                f"Invalid backend {backend!r}. Expected one of {expected}"
            ) from None

    @classmethod
    def coerce(cls, backend: Union["Backend", str]) -> "Backend":
        """
        Return `backend` as a `Backend`, parsing it when given as a string.
        """
        if isinstance(backend, Backend):
            return backend
        return cls(backend)

    def is_numpy(self) -> bool:
        return self.type is BackendType.NUMPY

    def is_python(self) -> bool:
        return self.type is BackendType.PYTHON

    def __str__(self) -> str:
        return self.type.value

    def __repr__(self) -> str:
        return f"Backend('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Backend):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(("Backend", self.type))
