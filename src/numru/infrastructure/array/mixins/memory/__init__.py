from ._base import ArrayMixinMemory

__all__ = [
    ArrayMixinMemory.__name__,
]
