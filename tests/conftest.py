"""Shared fixtures: in-memory environments rooted in a temp dir."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from places import selector
from places.environment import MappingEnvironment


@pytest.fixture
def home(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def make_env(tmp_path: Path, home: Path) -> Callable[..., MappingEnvironment]:
    """Build a MappingEnvironment for *os_name*.

    ``$h`` and ``$r`` in values expand to the fake home and the temp root.
    ``user.home`` and ``tmpdir`` always point inside the temp root.
    """

    def make(os_name: str | None = "Linux", **values: str) -> MappingEnvironment:
        env = {"user.home": str(home), "tmpdir": str(tmp_path / "tmp"), "path.separator": ":"}
        if os_name is not None:
            env["os.name"] = os_name
        for k, v in values.items():
            env[k] = v.replace("$h", str(home)).replace("$r", str(tmp_path))
        return MappingEnvironment(env)

    return make


@pytest.fixture(autouse=True)
def _fresh_default():
    """Each test starts without a cached default Places."""
    selector.reset()
    yield
    selector.reset()
