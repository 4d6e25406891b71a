"""
Structural protocol for ndcore arrays.

The domain layer depends only on this protocol, never on the concrete
``NDArray`` class living in the infrastructure layer.
"""

from typing import Any, List, Protocol, Tuple, runtime_checkable

import numpy as np

from ._backend import Backend


@runtime_checkable
class IArray(Protocol):
    """
    Minimal interface shared by every ndcore array.

    Notes
    -----
    The protocol is runtime-checkable so operand classification can
    recognize arrays without importing the concrete class.
    """

    @property
    def shape(self) -> Tuple[int, ...]: ...

    @property
    def ndim(self) -> int: ...

    @property
    def size(self) -> int: ...

    @property
    def backend(self) -> Backend: ...

    def tolist(self) -> List[Any]: ...

    def to_numpy(self) -> np.ndarray: ...
