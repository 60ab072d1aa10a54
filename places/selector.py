"""Pick the resolver for an OS name, and the process-wide default ``Places``."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .environment import OS_NAME, EnvironmentProvider, SystemEnvironment
from .resolver import Places
from .variants import RESOLVERS, Variant

logger = logging.getLogger(__name__)

_XDG_PREFIXES = ("Linux", "FreeBSD", "SunOS")
_WINDOWS_XP_NAMES = frozenset({"Windows XP", "Windows 2000", "Windows NT"})

_default: Optional[Places] = None
_default_lock = threading.Lock()


def variant_for(os_name: Optional[str]) -> Optional[Variant]:
    """Variant for *os_name*, or None when the name is not recognised."""
    if not os_name:
        return None
    if os_name.startswith(_XDG_PREFIXES):
        return Variant.XDG
    if os_name in _WINDOWS_XP_NAMES:
        return Variant.WINDOWS_XP
    if os_name.startswith("Windows"):
        return Variant.WINDOWS_VISTA
    if os_name == "Mac OS X":
        return Variant.MACOS
    return None


def select_variant(os_name: Optional[str], env: EnvironmentProvider) -> Places:
    """Build ``Places`` for *os_name*. Unknown names fall back to XDG with a warning."""
    variant = variant_for(os_name)
    if variant is None:
        logger.warning("Unknown OS: %r, using XDG base directories", os_name)
        variant = Variant.XDG
    logger.debug("OS %r resolved to %s", os_name, variant.value)
    return Places(RESOLVERS[variant](env))


def for_environment(env: EnvironmentProvider) -> Places:
    return select_variant(env.get_system_property(OS_NAME), env)


def get() -> Places:
    """The default ``Places`` for this process, built once from the real environment."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = for_environment(SystemEnvironment())
    return _default


def reset() -> None:
    """Forget the default so the next ``get()`` re-reads the environment."""
    global _default
    with _default_lock:
        _default = None
