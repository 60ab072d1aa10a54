"""The ``Places`` facade: OS-independent access to application directories."""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any, Callable, Optional

from .fs import ensure_directory
from .variants import BaseDirectories, Variant


def _check_app_name(app_name: str) -> str:
    if not app_name or not app_name.strip():
        raise ValueError(f"Invalid application name: {app_name!r}")
    for pure in (PurePosixPath(app_name), PureWindowsPath(app_name)):
        if pure.is_absolute() or pure.anchor or ".." in pure.parts:
            raise ValueError(f"Invalid application name: {app_name!r}")
    return app_name


class Places:
    """Config, data, cache and runtime directories for one OS variant.

    Read operations return candidate paths without touching the disk. Write and
    dir operations create the application directory before returning it.
    """

    def __init__(
        self,
        bases: BaseDirectories,
        ensure_dir: Callable[[Path], Path] = ensure_directory,
    ) -> None:
        self._bases = bases
        self._ensure_dir = ensure_dir

    def __repr__(self) -> str:
        return f"Places({self._bases.variant.value})"

    @property
    def variant(self) -> Variant:
        return self._bases.variant

    @property
    def bases(self) -> BaseDirectories:
        return self._bases

    def get_config_bases(self) -> list[Path]:
        """Config base directories, most relevant first. The first one is writable."""
        return list(self._bases.config_bases)

    def get_data_bases(self) -> list[Path]:
        return list(self._bases.data_bases)

    def get_cache_base(self) -> Optional[Path]:
        return self._bases.cache_base

    def get_runtime_base(self) -> Optional[Path]:
        return self._bases.runtime_base

    def get_config_read(self, app_name: str) -> list[Path]:
        """Every config base joined with *app_name*, in base order."""
        return [base / _check_app_name(app_name) for base in self._bases.config_bases]

    def get_config_write(self, app_name: str) -> Path:
        return self._create(self._bases.config_bases[0], app_name)

    def get_data_read(self, app_name: str) -> list[Path]:
        return [base / _check_app_name(app_name) for base in self._bases.data_bases]

    def get_data_write(self, app_name: str) -> Path:
        return self._create(self._bases.data_bases[0], app_name)

    def get_cache_dir(self, app_name: str) -> Optional[Path]:
        """Cache directory for *app_name*; None only if the OS reports no cache base."""
        if self._bases.cache_base is None:
            _check_app_name(app_name)
            return None
        return self._create(self._bases.cache_base, app_name)

    def get_runtime_dir(self, app_name: str, strict: bool = False) -> Optional[Path]:
        """Runtime directory for *app_name*.

        Where the OS has no runtime directory, ``strict`` returns None and the
        lenient mode falls back to the cache base.
        """
        base = self._bases.runtime_base
        if base is None:
            if strict:
                _check_app_name(app_name)
                return None
            base = self._bases.cache_base
        if base is None:
            _check_app_name(app_name)
            return None
        return self._create(base, app_name)

    def describe(self, app_name: Optional[str] = None, strict: bool = False) -> dict[str, Any]:
        """JSON-friendly summary of the bases. Nothing is created.

        ``strict`` applies the same runtime rule as ``get_runtime_dir``.
        """

        def opt(p: Optional[Path]) -> Optional[str]:
            return None if p is None else str(p)

        out: dict[str, Any] = {
            "variant": self.variant.value,
            "config_bases": [str(p) for p in self._bases.config_bases],
            "data_bases": [str(p) for p in self._bases.data_bases],
            "cache_base": opt(self._bases.cache_base),
            "runtime_base": opt(self._bases.runtime_base),
        }
        if app_name is not None:
            name = _check_app_name(app_name)
            cache = self._bases.cache_base
            runtime = self._bases.runtime_base
            if runtime is None and not strict:
                runtime = cache
            out["app"] = {
                "name": name,
                "config_read": [str(p) for p in self.get_config_read(name)],
                "config_write": str(self._bases.config_bases[0] / name),
                "data_read": [str(p) for p in self.get_data_read(name)],
                "data_write": str(self._bases.data_bases[0] / name),
                "cache_dir": opt(cache / name if cache else None),
                "runtime_dir": opt(runtime / name if runtime else None),
            }
        return out

    def _create(self, base: Path, app_name: str) -> Path:
        return self._ensure_dir(base / _check_app_name(app_name))
