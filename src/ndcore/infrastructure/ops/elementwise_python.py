"""
Scalar reference kernels (python backend).

Each kernel maps Python floats to a Python float using the :mod:`math`
module. Where :mod:`math` raises (domain errors, overflow) the kernel
returns the IEEE-754 result NumPy would produce instead, so both backends
agree element for element.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional

import numpy as np

_NAN = math.nan
_INF = math.inf

ScalarBinary = Callable[[float, float], float]
ScalarUnary = Callable[[float], float]


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def _floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def _ceil(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.ceil(x))


def _add(a: float, b: float) -> float:
    return a + b


def _sub(a: float, b: float) -> float:
    return a - b


def _mul(a: float, b: float) -> float:
    return a * b


def _div(a: float, b: float) -> float:
    if b == 0.0:
        return _NAN
    return a / b


def _pow(a: float, b: float) -> float:
    if a == 0.0 and b < 0.0:
        return math.copysign(_INF, a) if _is_odd_integer(b) else _INF
    try:
        return math.pow(a, b)
    except ValueError:
        # negative base with a non-integer exponent
        return _NAN
    except OverflowError:
        return -_INF if a < 0.0 and _is_odd_integer(b) else _INF


def _mod(a: float, b: float) -> float:
    if b == 0.0:
        return _NAN
    return a - _floor(a / b) * b


def _fmod(a: float, b: float) -> float:
    if b == 0.0 or math.isnan(a) or math.isnan(b) or math.isinf(a):
        return _NAN
    return math.fmod(a, b)


def _maximum(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return _NAN
    return a if a >= b else b


def _minimum(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return _NAN
    return a if a <= b else b


def _flag(value: bool) -> float:
    return 1.0 if value else 0.0


BINARY_KERNELS: Dict[str, ScalarBinary] = {
    "add": _add,
    "sub": _sub,
    "mul": _mul,
    "div": _div,
    "pow": _pow,
    "mod": _mod,
    "fmod": _fmod,
    "arctan2": math.atan2,
    "maximum": _maximum,
    "minimum": _minimum,
    "equal": lambda a, b: _flag(a == b),
    "not_equal": lambda a, b: _flag(a != b),
    "greater": lambda a, b: _flag(a > b),
    "greater_equal": lambda a, b: _flag(a >= b),
    "less": lambda a, b: _flag(a < b),
    "less_equal": lambda a, b: _flag(a <= b),
}


def _guard(fn: ScalarUnary, overflow: Optional[ScalarUnary] = None) -> ScalarUnary:
    """
    Wrap a :mod:`math` function so domain errors give NaN and overflow gives
    ``overflow(x)`` (``+inf`` by default).
    """

    def kernel(x: float) -> float:
        if math.isnan(x):
            return _NAN
        try:
            return fn(x)
        except ValueError:
            return _NAN
        except OverflowError:
            return overflow(x) if overflow is not None else _INF

    kernel.__name__ = getattr(fn, "__name__", "kernel")
    return kernel


def _log_family(fn: ScalarUnary) -> ScalarUnary:
    def kernel(x: float) -> float:
        if math.isnan(x) or x < 0.0:
            return _NAN
        if x == 0.0:
            return -_INF
        if math.isinf(x):
            return _INF
        return fn(x)

    kernel.__name__ = getattr(fn, "__name__", "kernel")
    return kernel


def _log1p(x: float) -> float:
    if math.isnan(x) or x < -1.0:
        return _NAN
    if x == -1.0:
        return -_INF
    if math.isinf(x):
        return _INF
    return math.log1p(x)


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return _NAN
    return math.sqrt(x)


def _arctanh(x: float) -> float:
    if x == 1.0 or x == -1.0:
        return math.copysign(_INF, x)
    return _guard(math.atanh)(x)


def _round(x: float) -> float:
    if not math.isfinite(x):
        return x
    # round() is half-to-even; copysign keeps the sign of zero results
    return math.copysign(float(round(x)), x)


def _sign(x: float) -> float:
    if math.isnan(x):
        return _NAN
    if x > 0.0:
        return 1.0
    if x < 0.0:
        return -1.0
    return 0.0


UNARY_KERNELS: Dict[str, ScalarUnary] = {
    "neg": lambda x: -x,
    "abs": abs,
    "sqrt": _sqrt,
    "exp": _guard(math.exp),
    "expm1": _guard(math.expm1),
    "log": _log_family(math.log),
    "log2": _log_family(math.log2),
    "log10": _log_family(math.log10),
    "log1p": _log1p,
    "sin": _guard(math.sin),
    "cos": _guard(math.cos),
    "tan": _guard(math.tan),
    "arcsin": _guard(math.asin),
    "arccos": _guard(math.acos),
    "arctan": math.atan,
    "sinh": _guard(math.sinh, overflow=lambda x: math.copysign(_INF, x)),
    "cosh": _guard(math.cosh),
    "tanh": math.tanh,
    "arcsinh": math.asinh,
    "arccosh": _guard(math.acosh),
    "arctanh": _arctanh,
    "floor": _floor,
    "ceil": _ceil,
    "round": _round,
    "sign": _sign,
    "isnan": lambda x: _flag(math.isnan(x)),
    "isinf": lambda x: _flag(math.isinf(x)),
    "isfinite": lambda x: _flag(math.isfinite(x)),
}


def _collect(values: List[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def apply_binary(op: str, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Evaluate scalar kernel ``op`` pairwise over two flat buffers."""
    fn = BINARY_KERNELS[op]
    return _collect([fn(x, y) for x, y in zip(a.tolist(), b.tolist())])


def apply_unary(op: str, a: np.ndarray) -> np.ndarray:
    """Evaluate scalar kernel ``op`` over a flat buffer."""
    fn = UNARY_KERNELS[op]
    return _collect([fn(x) for x in a.tolist()])


def apply_clip(a: np.ndarray, lo: Optional[float], hi: Optional[float]) -> np.ndarray:
    out = []
    for x in a.tolist():
        if not math.isnan(x):
            if lo is not None and x < lo:
                x = lo
            if hi is not None and x > hi:
                x = hi
        out.append(float(x))
    return _collect(out)
