"""
Vectorized elementwise kernels (NumPy backend).

Binary kernels take two equally sized flat float64 buffers; unary kernels
take one. All kernels run under ``np.errstate(all="ignore")`` so domain
errors surface as NaN/inf without warnings.

Semantics shared with the python backend
----------------------------------------
- ``div``, ``mod`` and ``fmod`` yield NaN wherever the divisor is zero.
- ``mod`` is floor-mod: ``a - floor(a / b) * b`` (sign follows the divisor).
- ``fmod`` is truncated mod (sign follows the dividend).
- Comparisons and predicates return 1.0 / 0.0.
- ``sign`` returns exactly -1.0, 0.0 or 1.0, and NaN for NaN.
- ``round`` rounds half to even.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import numpy as np

BinaryKernel = Callable[[np.ndarray, np.ndarray], np.ndarray]
UnaryKernel = Callable[[np.ndarray], np.ndarray]


def _div(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.where(b == 0.0, np.nan, a / b)


def _mod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.where(b == 0.0, np.nan, a - np.floor(a / b) * b)


def _fmod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.where(b == 0.0, np.nan, np.fmod(a, b))


def _as_float(fn: Callable[..., np.ndarray]) -> Callable[..., np.ndarray]:
    def wrapped(*args: np.ndarray) -> np.ndarray:
        return fn(*args).astype(np.float64)

    wrapped.__name__ = getattr(fn, "__name__", "kernel")
    return wrapped


BINARY_KERNELS: Dict[str, BinaryKernel] = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "div": _div,
    "pow": np.power,
    "mod": _mod,
    "fmod": _fmod,
    "arctan2": np.arctan2,
    "maximum": np.maximum,
    "minimum": np.minimum,
    "equal": _as_float(np.equal),
    "not_equal": _as_float(np.not_equal),
    "greater": _as_float(np.greater),
    "greater_equal": _as_float(np.greater_equal),
    "less": _as_float(np.less),
    "less_equal": _as_float(np.less_equal),
}


def _sign(x: np.ndarray) -> np.ndarray:
    # adding 0.0 folds -0.0 into 0.0
    return np.sign(x) + 0.0


UNARY_KERNELS: Dict[str, UnaryKernel] = {
    "neg": np.negative,
    "abs": np.abs,
    "sqrt": np.sqrt,
    "exp": np.exp,
    "expm1": np.expm1,
    "log": np.log,
    "log2": np.log2,
    "log10": np.log10,
    "log1p": np.log1p,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "arcsin": np.arcsin,
    "arccos": np.arccos,
    "arctan": np.arctan,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "arcsinh": np.arcsinh,
    "arccosh": np.arccosh,
    "arctanh": np.arctanh,
    "floor": np.floor,
    "ceil": np.ceil,
    "round": np.rint,
    "sign": _sign,
    "isnan": _as_float(np.isnan),
    "isinf": _as_float(np.isinf),
    "isfinite": _as_float(np.isfinite),
}


def apply_binary(op: str, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Evaluate binary kernel ``op`` on two equally sized flat buffers."""
    with np.errstate(all="ignore"):
        return np.asarray(BINARY_KERNELS[op](a, b), dtype=np.float64)


def apply_unary(op: str, a: np.ndarray) -> np.ndarray:
    """Evaluate unary kernel ``op`` on a flat buffer."""
    with np.errstate(all="ignore"):
        return np.asarray(UNARY_KERNELS[op](a), dtype=np.float64)


def apply_clip(a: np.ndarray, lo: Optional[float], hi: Optional[float]) -> np.ndarray:
    """``min(max(a, lo), hi)`` with NaN propagation; ``None`` bounds are open."""
    out = np.asarray(a, dtype=np.float64)
    if lo is not None:
        out = np.maximum(out, lo)
    if hi is not None:
        out = np.minimum(out, hi)
    return np.array(out, dtype=np.float64, copy=True)
