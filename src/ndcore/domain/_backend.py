"""
Compute backend descriptors.

An ndcore array is bound to a *backend* that selects which kernel
implementation evaluates its elementwise math and linear algebra:

- ``"numpy"``: vectorized NumPy ufuncs (default)
- ``"python"``: pure-Python reference loops over the :mod:`math` module

Both backends compute the same values; the python backend exists as an
independent reference and for environments where deterministic scalar
semantics are preferred over speed.
"""

from enum import Enum
from typing import Union


class BackendType(Enum):
    """
    Enumeration of available kernel backends.

    Attributes
    ----------
    NUMPY : BackendType
        Vectorized NumPy kernels.
    PYTHON : BackendType
        Scalar reference kernels written against :mod:`math`.
    """

    NUMPY = "numpy"
    PYTHON = "python"


class Backend:
    """
    Normalized backend descriptor.

    Parameters
    ----------
    backend : str or Backend or BackendType
        ``"numpy"`` or ``"python"`` (case-insensitive), an existing
        descriptor, or an enum member.

    Raises
    ------
    ValueError
        If the identifier does not name a known backend.

    Notes
    -----
    Instances are hashable and compare by type, so they can key the
    control-path registry.
    """

    __slots__ = ("type",)

    def __init__(self, backend: Union[str, "Backend", BackendType] = "numpy"):
        if isinstance(backend, Backend):
            self.type = backend.type
        elif isinstance(backend, BackendType):
            self.type = backend
        elif isinstance(backend, str):
            try:
                self.type = BackendType(backend.strip().lower())
            except ValueError:
                raise ValueError(
                    f"Invalid backend '{backend}'. Expected one of "
                    f"{[b.value for b in BackendType]}"
                )
        else:
            raise ValueError(f"Invalid backend {backend!r}")

    def __str__(self) -> str:
        return self.type.value

    def __repr__(self) -> str:
        return f"Backend('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Backend):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def is_numpy(self) -> bool:
        """Return True for the NumPy backend."""
        return self.type is BackendType.NUMPY

    def is_python(self) -> bool:
        """Return True for the pure-Python backend."""
        return self.type is BackendType.PYTHON
