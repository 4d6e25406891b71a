"""
Array control-path manager for backend-specific dispatch.

Specializes :func:`~ndcore.domain.utils._control_path.create_path_builder`
with the state attribute ``"backend"``: a registered method dispatches on
the runtime value of ``self.backend``.

Typical usage
-------------
    @array_control_path_manager(Mixin, Mixin.op, Backend("numpy"), backend_not_supported)
    def op_numpy(self, ...): ...
"""

from typing import Any, Callable

from ...domain.utils._control_path import create_path_builder
from ...domain._errors import BackendNotSupportedError


def backend_not_supported(method: Callable, backend: Any) -> None:
    """Trap used for every registration: no kernel for ``backend``."""
    raise BackendNotSupportedError(method.__name__, str(backend))


# Control-path manager that dispatches array methods based on `self.backend`
array_control_path_manager = create_path_builder("backend")
