from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from npm_semver.cli import INC_MISUSE_MESSAGE, main, parse_args
from npm_semver.options import DEBUG_ENV_VAR, INCLUDE_PRERELEASE_ENV_VAR, LOOSE_ENV_VAR

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (LOOSE_ENV_VAR, INCLUDE_PRERELEASE_ENV_VAR, DEBUG_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestIncrement:
    """The -i/--inc flag."""

    def test_major(self, capsys):
        assert run(capsys, "-i", "major", "1.0.0") == (0, "2.0.0\n", "")

    def test_default_level_is_patch(self, capsys):
        assert run(capsys, "-i", "1.2.3") == (0, "1.2.4\n", "")

    def test_long_spelling(self, capsys):
        assert run(capsys, "--increment", "minor", "1.2.3") == (0, "1.3.0\n", "")

    def test_preid(self, capsys):
        assert run(capsys, "-i", "prerelease", "--preid", "beta", "1.2.3") == (0, "1.2.4-beta.0\n", "")

    def test_cleans_before_incrementing(self, capsys):
        assert run(capsys, "-i", "major", " v1.0.0 ") == (0, "2.0.0\n", "")

    def test_multiple_versions_is_misuse(self, capsys):
        """Should refuse to increment more than one version."""
        assert run(capsys, "-i", "major", "1.0.0", "1.0.1") == (1, "", INC_MISUSE_MESSAGE + "\n")

    def test_with_range_is_misuse(self, capsys):
        assert run(capsys, "-i", "major", "1.0.0", "-r", "1.x") == (1, "", INC_MISUSE_MESSAGE + "\n")


class TestFiltering:
    def test_no_versions(self, capsys):
        assert run(capsys) == (1, "", "")

    def test_sorted_ascending(self, capsys):
        code, out, _ = run(capsys, "2.0.0", "1.0.0", "1.5.0")
        assert code == 0
        assert out == "1.0.0\n1.5.0\n2.0.0\n"

    @pytest.mark.parametrize("flag", ["-rv", "--rv", "--reverse"])
    def test_reverse(self, capsys, flag):
        code, out, _ = run(capsys, flag, "1.0.0", "2.0.0", "1.5.0")
        assert code == 0
        assert out == "2.0.0\n1.5.0\n1.0.0\n"

    def test_range(self, capsys):
        code, out, _ = run(capsys, "1.2.3", "1.0.0", "3.0.0", "-r", "^1.0.0")
        assert code == 0
        assert out == "1.0.0\n1.2.3\n"

    def test_every_range_must_match(self, capsys):
        code, out, _ = run(capsys, "1.2.3", "1.5.0", "-r", "^1.0.0", "--range", "<1.4.0")
        assert code == 0
        assert out == "1.2.3\n"

    def test_no_match(self, capsys):
        assert run(capsys, "1.0.0", "-r", ">=2") == (1, "", "")

    def test_invalid_versions_are_dropped(self, capsys):
        assert run(capsys, "foo", "1.2.3") == (0, "1.2.3\n", "")
        assert run(capsys, "foo") == (1, "", "")

    def test_loose(self, capsys):
        assert run(capsys, "=1.2.3") == (1, "", "")
        assert run(capsys, "-l", "=1.2.3") == (0, "1.2.3\n", "")

    def test_loose_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv(LOOSE_ENV_VAR, "yes")
        assert run(capsys, "=1.2.3") == (0, "1.2.3\n", "")

    def test_include_prerelease(self, capsys):
        assert run(capsys, "1.2.0-beta", "-r", "^1.0.0") == (1, "", "")
        assert run(capsys, "-p", "1.2.0-beta", "-r", "^1.0.0") == (0, "1.2.0-beta\n", "")

    def test_coerce(self, capsys):
        assert run(capsys, "-c", "v2", "version 1.4") == (0, "1.4.0\n2.0.0\n", "")


def test_parse_args_moves_version_out_of_increment():
    args = parse_args(["-i", "1.2.3"])
    assert args.increment == "patch"
    assert args.versions == ["1.2.3"]


def test_debug_flag_from_environment(monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    assert parse_args(["1.2.3"]).debug is True


def test_empty_preid_is_ignored(capsys):
    assert run(capsys, "-i", "prerelease", "--preid", "", "1.2.3") == (0, "1.2.4-0\n", "")


def test_debug_handler_installed_once(capsys):
    """Should not stack stderr handlers across repeated debug runs."""
    logger = logging.getLogger("npm_semver")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    try:
        assert run(capsys, "--debug", "1.2.3")[0] == 0
        assert run(capsys, "--debug", "1.2.3")[0] == 0
        assert len(logger.handlers) == 1
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)


def test_module_entry_point():
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "npm_semver", "-i", "major", "1.0.0"],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout == "2.0.0\n"
