"""Environment providers: where resolvers read env vars and system properties.

Resolvers never touch ``os.environ`` directly. They receive a provider with two
lookups, ``get_env_var`` and ``get_system_property``, so tests can seed a plain
dict and production code reads the real process.

System properties understood by the resolvers:

- ``os.name``: Java-style OS name ("Linux", "Mac OS X", "Windows 10", ...)
- ``user.home``: the user's home directory
- ``tmpdir``: the temporary directory
- ``path.separator``: separator for path lists such as ``XDG_DATA_DIRS``
"""

from __future__ import annotations

import os
import platform
import tempfile
from pathlib import Path
from typing import Mapping, Optional, Protocol

from dotenv import dotenv_values

OS_NAME = "os.name"
USER_HOME = "user.home"
TEMP_DIR = "tmpdir"
PATH_SEPARATOR = "path.separator"

# platform.release() values for the pre-Vista releases
_LEGACY_WINDOWS = {"XP": "Windows XP", "2000": "Windows 2000", "NT": "Windows NT"}


class EnvironmentProvider(Protocol):
    def get_env_var(self, name: str) -> Optional[str]:
        ...

    def get_system_property(self, name: str) -> Optional[str]:
        ...


def _os_name() -> str:
    """Map platform.system() onto the names the OS selector understands."""
    system = platform.system()
    if system == "Darwin":
        return "Mac OS X"
    if system == "Windows":
        release = platform.release()
        if release in _LEGACY_WINDOWS:
            return _LEGACY_WINDOWS[release]
        return f"Windows {release}".rstrip()
    return system


class SystemEnvironment:
    """Reads the real process environment."""

    def get_env_var(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def get_system_property(self, name: str) -> Optional[str]:
        if name == OS_NAME:
            return _os_name()
        if name == USER_HOME:
            return str(Path.home())
        if name == TEMP_DIR:
            return tempfile.gettempdir()
        if name == PATH_SEPARATOR:
            return os.pathsep
        return None


class MappingEnvironment:
    """In-memory provider. One mapping for env vars, one for properties.

    When ``properties`` is omitted, ``env`` serves both lookups, so a single
    dict like ``{"os.name": "Linux", "user.home": "/home/u"}`` is enough.
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        properties: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._env = dict(env or {})
        self._properties = dict(properties) if properties is not None else self._env

    def get_env_var(self, name: str) -> Optional[str]:
        return self._env.get(name)

    def get_system_property(self, name: str) -> Optional[str]:
        return self._properties.get(name)


class DotenvEnvironment:
    """Overlay the variables of a ``.env`` file on another provider.

    Values from the file win. A key present in the file with no value reads as
    empty, which resolvers treat the same as unset. System properties always
    come from ``base``.
    """

    def __init__(self, path: str | Path, base: Optional[EnvironmentProvider] = None) -> None:
        p = Path(path)
        if not p.is_file():
            raise ValueError(f"Env file not found: {p}")
        self.path = p
        self._base = base if base is not None else SystemEnvironment()
        self._values = {k: ("" if v is None else v) for k, v in dotenv_values(p).items()}

    def get_env_var(self, name: str) -> Optional[str]:
        if name in self._values:
            return self._values[name]
        return self._base.get_env_var(name)

    def get_system_property(self, name: str) -> Optional[str]:
        return self._base.get_system_property(name)


def user_home(env: EnvironmentProvider) -> Path:
    return Path(env.get_system_property(USER_HOME) or Path.home())


def temp_dir(env: EnvironmentProvider) -> Path:
    return Path(env.get_system_property(TEMP_DIR) or tempfile.gettempdir())


def path_separator(env: EnvironmentProvider) -> str:
    return env.get_system_property(PATH_SEPARATOR) or os.pathsep


def getenv(env: EnvironmentProvider, name: str) -> Optional[str]:
    """Env var value, or None when unset or empty."""
    value = env.get_env_var(name)
    return value if value else None
