"""
Environment-driven runtime settings.

Settings are read from environment variables once and cached. Invalid
values never abort import: they emit a ``RuntimeWarning`` and fall back to
the default, mirroring how optional acceleration paths degrade.

Environment variables
---------------------
NDCORE_BACKEND
    Default backend for newly constructed arrays: ``"numpy"`` (default) or
    ``"python"``.
NDCORE_SEED
    Integer seed for the module-level random generator. Unset means a
    nondeterministic seed.
NDCORE_MAX_ELEMENTS
    Upper bound on the number of elements of any single allocation.
    Unset or ``0`` means unlimited.
"""

from __future__ import annotations

import logging
import os
import warnings
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..domain._backend import Backend
from ..domain._errors import AllocationLimitError

logger = logging.getLogger(__name__)

_DEFAULT_BACKEND = "numpy"


@dataclass(frozen=True)
class Settings:
    """
    Resolved runtime settings.

    Attributes
    ----------
    backend : Backend
        Backend assigned to arrays created without an explicit backend.
    seed : Optional[int]
        Seed for the module random generator, or ``None``.
    max_elements : Optional[int]
        Allocation cap in elements, or ``None`` for unlimited.
    """

    backend: Backend
    seed: Optional[int]
    max_elements: Optional[int]


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        warnings.warn(
            f"Ignoring {name}={raw!r}: expected an integer.",
            RuntimeWarning,
            stacklevel=3,
        )
        return None


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """
    Resolve and cache settings from the environment.

    Returns
    -------
    Settings
        The cached settings object. Call :func:`reload_settings` after
        changing the environment.
    """
    raw_backend = os.environ.get("NDCORE_BACKEND", _DEFAULT_BACKEND)
    try:
        backend = Backend(raw_backend)
    except ValueError:
        warnings.warn(
            f"Unknown NDCORE_BACKEND={raw_backend!r}; "
            f"falling back to the '{_DEFAULT_BACKEND}' backend.",
            RuntimeWarning,
            stacklevel=2,
        )
        backend = Backend(_DEFAULT_BACKEND)

    seed = _parse_int("NDCORE_SEED", os.environ.get("NDCORE_SEED"))

    max_elements = _parse_int("NDCORE_MAX_ELEMENTS", os.environ.get("NDCORE_MAX_ELEMENTS"))
    if max_elements is not None and max_elements < 0:
        warnings.warn(
            f"Ignoring negative NDCORE_MAX_ELEMENTS={max_elements}.",
            RuntimeWarning,
            stacklevel=2,
        )
        max_elements = None
    if max_elements == 0:
        max_elements = None

    settings = Settings(backend=backend, seed=seed, max_elements=max_elements)
    logger.debug("ndcore settings resolved: %s", settings)
    return settings


def reload_settings() -> Settings:
    """Drop the cached settings and re-read the environment."""
    get_settings.cache_clear()
    return get_settings()


def default_backend() -> Backend:
    """Backend used when a constructor is not given one explicitly."""
    return get_settings().backend


def check_allocation(n: int) -> None:
    """
    Enforce the optional allocation cap.

    Raises
    ------
    AllocationLimitError
        If ``n`` exceeds ``NDCORE_MAX_ELEMENTS``.
    """
    limit = get_settings().max_elements
    if limit is not None and n > limit:
        raise AllocationLimitError(n, limit)
