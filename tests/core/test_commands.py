# Copyright 2026. Tests for binexport.core.commands.

import os
import sys

import pytest

from binexport.core.commands import TOOL_PREFIX, list_commands, validate_command
from binexport.core.errors import NotFoundError

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")


def _install(directory, name, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(mode)
    return path


@pytest.fixture
def bindir(tmp_path):
    _install(tmp_path, "binexport")
    return tmp_path


class TestValidateCommand:
    def test_prefix(self):
        assert TOOL_PREFIX == "binexport-"

    def test_found(self, bindir):
        exe = _install(bindir, "binexport-foo")
        assert validate_command("foo", str(bindir / "binexport")) == str(exe)

    def test_directory_as_self_path(self, bindir):
        exe = _install(bindir, "binexport-foo")
        assert validate_command("foo", str(bindir)) == str(exe)

    def test_missing(self, bindir):
        with pytest.raises(NotFoundError, match="'foo' is not a binexport command"):
            validate_command("foo", str(bindir / "binexport"))

    def test_message_suggests_help(self, bindir):
        with pytest.raises(NotFoundError, match="See 'binexport --help'"):
            validate_command("foo", str(bindir / "binexport"))

    def test_not_executable(self, bindir):
        _install(bindir, "binexport-foo", mode=0o644)
        with pytest.raises(NotFoundError):
            validate_command("foo", str(bindir / "binexport"))

    def test_directory_is_not_a_command(self, bindir):
        (bindir / "binexport-foo").mkdir()
        with pytest.raises(NotFoundError):
            validate_command("foo", str(bindir / "binexport"))

    def test_unprefixed_sibling_is_not_a_command(self, bindir):
        _install(bindir, "foo")
        with pytest.raises(NotFoundError):
            validate_command("foo", str(bindir / "binexport"))

    def test_empty_name(self, bindir):
        _install(bindir, "binexport-")
        with pytest.raises(NotFoundError):
            validate_command("", str(bindir / "binexport"))

    def test_custom_prefix(self, bindir):
        exe = _install(bindir, "tool-foo")
        assert validate_command("foo", str(bindir / "binexport"), prefix="tool-") == str(exe)

    def test_only_own_directory_is_searched(self, bindir, tmp_path_factory):
        other = tmp_path_factory.mktemp("other")
        _install(other, "binexport-foo")
        with pytest.raises(NotFoundError):
            validate_command("foo", str(bindir / "binexport"))


class TestListCommands:
    def test_lists_sorted_names(self, bindir):
        _install(bindir, "binexport-zeta")
        _install(bindir, "binexport-alpha")
        assert list_commands(str(bindir / "binexport")) == ["alpha", "zeta"]

    def test_skips_non_commands(self, bindir):
        _install(bindir, "binexport-ok")
        _install(bindir, "binexport-noexec", mode=0o644)
        _install(bindir, "other-tool")
        (bindir / "binexport-dir").mkdir()
        assert list_commands(str(bindir / "binexport")) == ["ok"]

    def test_missing_directory(self, tmp_path):
        assert list_commands(os.path.join(str(tmp_path), "gone", "binexport")) == []
