"""Per-OS base directory resolvers.

Each resolver reads an environment provider once and returns an immutable
``BaseDirectories``. See
https://specifications.freedesktop.org/basedir-spec/basedir-spec-latest.html
for the XDG rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .environment import EnvironmentProvider, getenv, path_separator, temp_dir, user_home

WINDOWS_PROGRAM_FILES = "C:\\Program Files"


class Category(Enum):
    CONFIG = "CONFIG"
    DATA = "DATA"
    CACHE = "CACHE"
    RUNTIME = "RUNTIME"


class Variant(Enum):
    XDG = "xdg"
    WINDOWS_XP = "windows-xp"
    WINDOWS_VISTA = "windows-vista"
    MACOS = "macos"


# Default XDG_<CATEGORY>_DIRS search paths
XDG_DEFAULT_DIRS = {
    Category.CONFIG: "/etc/xdg",
    Category.DATA: "/usr/local/share/:/usr/share/",
}


@dataclass(frozen=True)
class BaseDirectories:
    """Resolved base directories for one OS variant.

    ``config_bases`` and ``data_bases`` are ordered most preferred first and
    never empty. ``runtime_base`` is None where the OS has no convention.
    """

    variant: Variant
    config_bases: tuple[Path, ...]
    data_bases: tuple[Path, ...]
    cache_base: Optional[Path]
    runtime_base: Optional[Path]

    def __post_init__(self) -> None:
        if not self.config_bases or not self.data_bases:
            raise ValueError(f"{self.variant.value}: config and data bases must not be empty")


def _xdg_search_path(env: EnvironmentProvider, category: Category) -> tuple[Path, ...]:
    """XDG_<CATEGORY>_HOME first, then XDG_<CATEGORY>_DIRS, de-duplicated.

    The default search path stands in for an unset XDG_<CATEGORY>_DIRS only
    when XDG_<CATEGORY>_HOME is set. With neither variable set the result is
    the single per-user fallback ``<home>/.<category>``.
    """
    name = category.value
    ret: list[Path] = []
    home = getenv(env, f"XDG_{name}_HOME")
    if home:
        ret.append(Path(home))
    dirs = getenv(env, f"XDG_{name}_DIRS")
    if dirs is None and home:
        dirs = XDG_DEFAULT_DIRS[category].replace(":", path_separator(env))
    if dirs:
        for entry in dirs.split(path_separator(env)):
            if not entry:
                continue
            p = Path(entry)
            if p not in ret:
                ret.append(p)
    if not ret:
        ret.append(user_home(env) / f".{name.lower()}")
    return tuple(ret)


def xdg(env: EnvironmentProvider) -> BaseDirectories:
    home = user_home(env)
    cache = getenv(env, "XDG_CACHE_HOME")
    runtime = getenv(env, "XDG_RUNTIME_DIR")
    return BaseDirectories(
        variant=Variant.XDG,
        config_bases=_xdg_search_path(env, Category.CONFIG),
        data_bases=_xdg_search_path(env, Category.DATA),
        cache_base=Path(cache) if cache else home / ".cache",
        runtime_base=Path(runtime) if runtime else temp_dir(env),
    )


def _windows(variant: Variant, env: EnvironmentProvider, dirs: tuple[Path, ...]) -> BaseDirectories:
    # TEMP has no fallback; an unset TEMP leaves cache and runtime absent.
    temp = getenv(env, "TEMP")
    cache = Path(temp) if temp else None
    return BaseDirectories(
        variant=variant,
        config_bases=dirs,
        data_bases=dirs,
        cache_base=cache,
        runtime_base=cache,
    )


def windows_xp(env: EnvironmentProvider) -> BaseDirectories:
    home = user_home(env)
    return _windows(
        Variant.WINDOWS_XP,
        env,
        (
            Path(getenv(env, "APPDATA") or home / "AppData"),
            Path(getenv(env, "PROGRAMFILES") or WINDOWS_PROGRAM_FILES),
        ),
    )


def windows_vista(env: EnvironmentProvider) -> BaseDirectories:
    home = user_home(env)
    return _windows(
        Variant.WINDOWS_VISTA,
        env,
        (
            Path(getenv(env, "APPDATA") or home / "AppData" / "Roaming"),
            Path(getenv(env, "LOCALAPPDATA") or home / "AppData"),
            Path(getenv(env, "PROGRAMDATA") or WINDOWS_PROGRAM_FILES),
        ),
    )


def macos(env: EnvironmentProvider) -> BaseDirectories:
    library = user_home(env) / "Library"
    return BaseDirectories(
        variant=Variant.MACOS,
        config_bases=(library / "Preferences",),
        data_bases=(library,),
        cache_base=library / "Caches",
        runtime_base=None,
    )


RESOLVERS = {
    Variant.XDG: xdg,
    Variant.WINDOWS_XP: windows_xp,
    Variant.WINDOWS_VISTA: windows_vista,
    Variant.MACOS: macos,
}
