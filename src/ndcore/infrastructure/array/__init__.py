from ._array import NDArray

__all__ = [NDArray.__name__]
