"""Graphics and geometry value types.

Public types are loaded on first access, so ``import lug`` stays cheap and
``lug.V2`` imports ``lug.math.vec2`` only when used. Sibling packages can add
their own types with :func:`register`.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from .errors import IndexOutOfRange, InvalidArgument, LugError

logger = logging.getLogger(__name__)

_AUTOLOAD: dict[str, str] = {
    "V2": "lug.math.vec2",
}


def register(name: str, module_path: str) -> None:
    """Expose ``name`` as ``lug.<name>``, imported from ``module_path`` on first use."""
    current = _AUTOLOAD.get(name)
    if current is not None and current != module_path:
        raise InvalidArgument(f"lug.{name} is already registered from {current}, not {module_path}.")
    _AUTOLOAD[name] = module_path


def registered() -> dict[str, str]:
    return dict(_AUTOLOAD)


def __getattr__(name: str) -> Any:
    module_path = _AUTOLOAD.get(name)
    if module_path is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    logger.debug("Autoloading lug.%s from %s", name, module_path)
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(_AUTOLOAD))


__all__ = [
    "IndexOutOfRange",
    "InvalidArgument",
    "LugError",
    "register",
    "registered",
    *_AUTOLOAD,
]
