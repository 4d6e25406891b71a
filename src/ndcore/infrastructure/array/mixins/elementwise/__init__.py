"""
Elementwise mixin and its backend-specific kernels.

The implementation modules are imported for their side effect of
registering control paths with the array control-path manager; only the
base mixin is public.
"""

from ._array_binary import *
from ._array_unary import *
from ._base import ArrayMixinElementwise

__all__ = [
    ArrayMixinElementwise.__name__,
]
