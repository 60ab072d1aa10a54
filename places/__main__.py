"""CLI for places: print the base and application directories for this OS."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .environment import OS_NAME, DotenvEnvironment, EnvironmentProvider, SystemEnvironment
from .resolver import Places
from .selector import select_variant

KINDS = ("all", "config", "data", "cache", "runtime")


class _OsOverride:
    """Provider wrapper that reports a fixed ``os.name``."""

    def __init__(self, base: EnvironmentProvider, os_name: str) -> None:
        self._base = base
        self._os_name = os_name

    def get_env_var(self, name: str) -> str | None:
        return self._base.get_env_var(name)

    def get_system_property(self, name: str) -> str | None:
        if name == OS_NAME:
            return self._os_name
        return self._base.get_system_property(name)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _build_places(args: argparse.Namespace) -> Places:
    env: EnvironmentProvider = SystemEnvironment()
    if args.env_file is not None:
        env = DotenvEnvironment(args.env_file, base=env)
    if args.os:
        env = _OsOverride(env, args.os)
    return select_variant(env.get_system_property(OS_NAME), env)


def _create_dirs(places: Places, kind: str, app: str, strict: bool) -> dict[str, str | None]:
    """Create the write, cache and runtime dirs for *kind*; return them by key."""
    made: dict[str, str | None] = {}
    if kind in ("all", "config"):
        made["config_write"] = str(places.get_config_write(app))
    if kind in ("all", "data"):
        made["data_write"] = str(places.get_data_write(app))
    if kind in ("all", "cache"):
        cache = places.get_cache_dir(app)
        made["cache_dir"] = None if cache is None else str(cache)
    if kind in ("all", "runtime"):
        runtime = places.get_runtime_dir(app, strict=strict)
        made["runtime_dir"] = None if runtime is None else str(runtime)
    return made


def _lines(places: Places, kind: str, app: str | None, create: bool, strict: bool) -> list[str]:
    info = places.describe(app, strict=strict)
    made = _create_dirs(places, kind, app, strict) if create and app is not None else {}
    out: list[str] = []
    if kind in ("all", "config"):
        if app is None:
            out += [f"config\t{p}" for p in info["config_bases"]]
        else:
            out += [f"config\t{p}" for p in info["app"]["config_read"]]
            if "config_write" in made:
                out.append(f"config-write\t{made['config_write']}")
    if kind in ("all", "data"):
        if app is None:
            out += [f"data\t{p}" for p in info["data_bases"]]
        else:
            out += [f"data\t{p}" for p in info["app"]["data_read"]]
            if "data_write" in made:
                out.append(f"data-write\t{made['data_write']}")
    if kind in ("all", "cache"):
        cache = info["cache_base"] if app is None else info["app"]["cache_dir"]
        out.append(f"cache\t{cache or '-'}")
    if kind in ("all", "runtime"):
        if app is None:
            runtime = info["runtime_base"]
            if runtime is None and not strict:
                runtime = info["cache_base"]
        else:
            runtime = info["app"]["runtime_dir"]
        out.append(f"runtime\t{runtime or '-'}")
    return out


def _json_summary(places: Places, kind: str, app: str | None, create: bool, strict: bool) -> dict:
    info = places.describe(app, strict=strict)
    if create and app is not None:
        info["app"]["created"] = _create_dirs(places, kind, app, strict)
    if kind == "all":
        return info
    keep = {"variant", f"{kind}_bases", f"{kind}_base"}
    out = {k: v for k, v in info.items() if k in keep}
    if "app" in info:
        out["app"] = {k: v for k, v in info["app"].items() if k in ("name", "created") or k.startswith(kind)}
    return out


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        prog="places",
        description="Show OS-appropriate config, data, cache and runtime directories.",
    )
    ap.add_argument("kind", nargs="?", choices=KINDS, default="all", help="Which directories to show (default: all)")
    ap.add_argument("--app", type=str, default=None, help="Application name appended to each base")
    ap.add_argument("--os", type=str, default=None, help='Resolve as if running on this OS (e.g. "Mac OS X")')
    ap.add_argument("--env-file", type=Path, default=None, help="Overlay variables from a .env file")
    ap.add_argument("--create", action="store_true", help="Create the write, cache and runtime dirs (needs --app)")
    ap.add_argument("--strict", action="store_true", help="No cache fallback when the OS has no runtime dir")
    ap.add_argument("--json", action="store_true", help="Print a JSON summary instead of lines")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    ap.add_argument("--version", "-V", action="version", version=__import__("places._version", fromlist=["__version__"]).__version__)
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)
    _setup_logging(args.verbose)

    if args.create and args.app is None:
        print("Error: --create requires --app", file=sys.stderr)
        sys.exit(1)

    try:
        places = _build_places(args)
        if args.json:
            print(json.dumps(_json_summary(places, args.kind, args.app, args.create, args.strict), indent=2))
            return
        for line in _lines(places, args.kind, args.app, args.create, args.strict):
            print(line)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
