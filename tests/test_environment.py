"""Environment providers."""

import os
import platform
from pathlib import Path

import pytest

from places.environment import (
    DotenvEnvironment,
    MappingEnvironment,
    SystemEnvironment,
    getenv,
    path_separator,
    user_home,
)
from places.selector import for_environment
from places.variants import Variant, windows_xp


class TestSystemEnvironment:
    def test_reads_process_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PLACES_TEST_VAR", "value")
        monkeypatch.delenv("PLACES_TEST_MISSING", raising=False)
        env = SystemEnvironment()
        assert env.get_env_var("PLACES_TEST_VAR") == "value"
        assert env.get_env_var("PLACES_TEST_MISSING") is None

    def test_properties(self) -> None:
        env = SystemEnvironment()
        assert env.get_system_property("user.home") == str(Path.home())
        assert env.get_system_property("path.separator") == os.pathsep
        assert env.get_system_property("tmpdir")
        assert env.get_system_property("no.such.property") is None

    @pytest.mark.parametrize(
        "system, release, expected",
        [
            ("Linux", "6.1.0", "Linux"),
            ("Darwin", "23.0.0", "Mac OS X"),
            ("Windows", "XP", "Windows XP"),
            ("Windows", "10", "Windows 10"),
            ("FreeBSD", "14.0", "FreeBSD"),
        ],
    )
    def test_os_name(self, monkeypatch, system: str, release: str, expected: str) -> None:
        monkeypatch.setattr(platform, "system", lambda: system)
        monkeypatch.setattr(platform, "release", lambda: release)
        assert SystemEnvironment().get_system_property("os.name") == expected


class TestMappingEnvironment:
    def test_single_mapping_serves_both(self) -> None:
        env = MappingEnvironment({"os.name": "Linux", "HOME": "/h"})
        assert env.get_system_property("os.name") == "Linux"
        assert env.get_env_var("HOME") == "/h"

    def test_separate_properties(self) -> None:
        env = MappingEnvironment({"APPDATA": "/a"}, {"os.name": "Windows 7"})
        assert env.get_env_var("os.name") is None
        assert env.get_system_property("APPDATA") is None
        assert env.get_system_property("os.name") == "Windows 7"

    def test_copies_input(self) -> None:
        data = {"A": "1"}
        env = MappingEnvironment(data)
        data["A"] = "2"
        assert env.get_env_var("A") == "1"


class TestDotenvEnvironment:
    def test_file_values_win(self, tmp_path: Path, make_env) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("XDG_CONFIG_HOME=/from-file\nAPPDATA=\n", encoding="utf-8")
        base = make_env(XDG_CONFIG_HOME="/from-base", XDG_CACHE_HOME="/cache")
        env = DotenvEnvironment(env_file, base=base)
        assert env.get_env_var("XDG_CONFIG_HOME") == "/from-file"
        assert env.get_env_var("XDG_CACHE_HOME") == "/cache"
        assert env.get_env_var("APPDATA") == ""
        assert env.get_system_property("os.name") == "Linux"

    def test_drives_resolution(self, tmp_path: Path, make_env) -> None:
        env_file = tmp_path / "places.env"
        env_file.write_text('XDG_CONFIG_HOME="/etc-home"\nXDG_CONFIG_DIRS=/a:/b\n', encoding="utf-8")
        places = for_environment(DotenvEnvironment(env_file, base=make_env()))
        assert places.variant is Variant.XDG
        assert places.get_config_bases() == [Path("/etc-home"), Path("/a"), Path("/b")]

    def test_blank_value_gets_default(self, tmp_path: Path, make_env, home: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APPDATA=\nPROGRAMFILES=/pf\n", encoding="utf-8")
        base = make_env("Windows XP", APPDATA="/from-base")
        bases = windows_xp(DotenvEnvironment(env_file, base=base))
        assert bases.config_bases == (home / "AppData", Path("/pf"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Env file not found"):
            DotenvEnvironment(tmp_path / "missing.env")


def test_helpers_fall_back() -> None:
    env = MappingEnvironment({"EMPTY": ""})
    assert getenv(env, "EMPTY") is None
    assert getenv(env, "UNSET") is None
    assert user_home(env) == Path.home()
    assert path_separator(env) == os.pathsep
