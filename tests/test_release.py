import io
import subprocess
from unittest import mock

import pytest

from gdrivekit.release import (
    calculate_new_version,
    get_current_version,
    get_version_from_code,
    main,
    parse_int,
    update_version_in_code,
)


class FakeGit:
    def __init__(self, status="", describe=None):
        self.status = status
        self.describe = describe
        self.commands = []

    def __call__(self, cmd, **kwargs):
        self.commands.append(cmd)
        sub = cmd[1]
        if sub == "status":
            return subprocess.CompletedProcess(cmd, 0, stdout=self.status, stderr="")
        if sub == "describe":
            if self.describe is None:
                raise subprocess.CalledProcessError(128, cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout=self.describe, stderr="")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.mark.parametrize("text, expected", [("12", 12), ("3-beta", 3), ("beta", 0), ("", 0)])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_patch_bump():
    assert calculate_new_version("1.2.3", "patch") == "1.2.4"


def test_major_bump_resets_lower_parts():
    assert calculate_new_version("1.2.3", "major") == "2.0.0"


def test_malformed_version_starts_from_zero():
    assert calculate_new_version("abc", "patch") == "0.0.1"


def test_minor_bump_keeps_major():
    major, minor, patch = calculate_new_version("7.4.9", "minor").split(".")
    assert major == "7"
    assert int(minor) > 4
    assert patch == "0"


def test_manual_version_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4.5.6\n"))
    assert calculate_new_version("1.0.0", "") == "4.5.6"
    assert "Enter new version manually" in capsys.readouterr().out


def test_version_file_round_trip(tmp_path):
    path = tmp_path / "version.py"
    update_version_in_code("9.8.7", path)
    assert get_version_from_code(path) == "9.8.7"


def test_version_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_version_from_code(tmp_path / "missing.py")


def test_version_file_without_version(tmp_path):
    path = tmp_path / "version.py"
    path.write_text("nothing here\n")
    with pytest.raises(ValueError):
        get_version_from_code(path)


def test_current_version_from_git_tag(tmp_path):
    with mock.patch("subprocess.run", FakeGit(describe="v2.3.4\n")):
        assert get_current_version(tmp_path / "version.py") == "2.3.4"


def test_current_version_falls_back_to_file(tmp_path):
    path = tmp_path / "version.py"
    update_version_in_code("1.1.1", path)
    with mock.patch("subprocess.run", FakeGit()):
        assert get_current_version(path) == "1.1.1"


def test_current_version_default(tmp_path):
    with mock.patch("subprocess.run", FakeGit()):
        assert get_current_version(tmp_path / "missing.py") == "0.0.0"


def test_main_rejects_invalid_type(capsys):
    assert main(["--type", "huge"]) == 1
    assert "Invalid release type" in capsys.readouterr().out


def test_main_requires_clean_tree(capsys):
    with mock.patch("subprocess.run", FakeGit(status=" M file.py\n")):
        assert main(["--type", "patch"]) == 1
    assert "not clean" in capsys.readouterr().out


def test_main_cancelled(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    with mock.patch("subprocess.run", FakeGit(describe="v1.0.0\n")):
        assert main(["--type", "patch"]) == 0
    assert "Release cancelled." in capsys.readouterr().out
    assert not (tmp_path / "version.py").exists()


def test_main_dry_run(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    git = FakeGit(describe="v1.0.0\n")
    with mock.patch("subprocess.run", git):
        assert main(["--type", "patch", "--dry-run"]) == 0
    assert get_version_from_code(tmp_path / "version.py") == calculate_new_version(
        "1.0.0", "patch"
    )
    assert all(cmd[1] not in ("commit", "tag") for cmd in git.commands)


def test_main_commits_and_tags(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("yes\n"))
    git = FakeGit(describe="v1.0.0\n")
    with mock.patch("subprocess.run", git):
        assert main(["--type", "minor"]) == 0
    new_version = calculate_new_version("1.0.0", "minor")
    subcommands = [cmd[1] for cmd in git.commands]
    assert subcommands[-2:] == ["commit", "tag"]
    assert f"v{new_version}" in git.commands[-1]