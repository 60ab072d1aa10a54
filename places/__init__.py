"""OS-appropriate config, data, cache and runtime directories (XDG, Windows, macOS)."""

from ._version import __version__
from .environment import DotenvEnvironment, EnvironmentProvider, MappingEnvironment, SystemEnvironment
from .fs import ensure_directory
from .resolver import Places
from .selector import for_environment, get, reset, select_variant, variant_for
from .variants import BaseDirectories, Category, Variant

__all__ = [
    "BaseDirectories",
    "Category",
    "DotenvEnvironment",
    "EnvironmentProvider",
    "MappingEnvironment",
    "Places",
    "SystemEnvironment",
    "Variant",
    "ensure_directory",
    "for_environment",
    "get",
    "reset",
    "select_variant",
    "variant_for",
]
