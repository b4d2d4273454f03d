from ._backend import Backend, BackendType

__all__ = [
    Backend.__name__,
    BackendType.__name__,
]
