"""
CPU random sampling.

This module owns the single module-level NumPy ``Generator`` used by the
``rand``/``randn`` constructors. It is seeded from ``NDCORE_SEED`` on first
use and can be reseeded explicitly with :func:`seed`.

Normal samples are produced with the Box-Muller transform over paired
uniform draws:

    r = sqrt(-2 ln u1),  z0 = r cos(2 pi u2),  z1 = r sin(2 pi u2)

with ``u1`` drawn from ``(0, 1]`` so the logarithm is
always finite. An odd trailing element uses ``z0`` of one extra pair.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .._settings import get_settings

logger = logging.getLogger(__name__)

_generator: Optional[np.random.Generator] = None


def _rng() -> np.random.Generator:
    global _generator
    if _generator is None:
        s = get_settings().seed
        logger.debug("initializing random generator (seed=%r)", s)
        _generator = np.random.default_rng(s)
    return _generator


def seed(value: Optional[int] = None) -> None:
    """
    Reseed the module random generator.

    Parameters
    ----------
    value : Optional[int]
        Seed value. ``None`` draws fresh OS entropy.
    """
    global _generator
    logger.debug("reseeding random generator (seed=%r)", value)
    _generator = np.random.default_rng(value)


def uniform(n: int) -> np.ndarray:
    """``n`` i.i.d. samples from ``U[0, 1)``."""
    return _rng().random(n, dtype=np.float64)


def _open_unit(n: int) -> np.ndarray:
    u = _rng().random(n, dtype=np.float64)
    # random() samples [0, 1); reflect to (0, 1]
    return 1.0 - u


def normal(n: int) -> np.ndarray:
    """``n`` i.i.d. standard normal samples via Box-Muller."""
    pairs = (n + 1) // 2
    u1 = _open_unit(pairs)
    u2 = _rng().random(pairs, dtype=np.float64)
    r = np.sqrt(-2.0 * np.log(u1))
    theta = 2.0 * np.pi * u2
    out = np.empty(2 * pairs, dtype=np.float64)
    out[0::2] = r * np.cos(theta)
    out[1::2] = r * np.sin(theta)
    return out[:n]
