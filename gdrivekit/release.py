"""Release helper: bump the version, commit it and tag it in git."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from pathlib import Path

DEFAULT_VERSION_FILE = Path("version.py")

_LEADING_DIGITS = re.compile(r"^\d+")
_VERSION_ASSIGNMENT = re.compile(r"""(?:__version__|Version|VERSION)\s*=\s*["']([^"']+)["']""")
_RELEASE_TYPES = ("major", "minor", "patch")


def parse_int(s: str) -> int:
    """Return the number at the start of s, ignoring suffixes such as '-beta'."""
    match = _LEADING_DIGITS.match(s)
    return int(match.group()) if match else 0


def calculate_new_version(current: str, release_type: str) -> str:
    """Bump current by release_type, or ask for a version when none is given."""
    if not release_type:
        print("Enter new version manually: ", end="", flush=True)
        return sys.stdin.readline().strip()

    parts = current.split(".")
    if len(parts) != 3:
        parts = ["0", "0", "0"]
    major, minor, patch = (parse_int(part) for part in parts)

    if release_type == "major":
        major, minor, patch = major + 1, 0, 0
    elif release_type == "minor":
        minor, patch = minor + 1, 0
    elif release_type == "patch":
        patch += 1
    return f"{major}.{minor}.{patch}"


def get_version_from_code(path: str | os.PathLike[str] = DEFAULT_VERSION_FILE) -> str:
    """Read the version string assigned in the version file."""
    text = Path(path).read_text(encoding="utf-8")
    match = _VERSION_ASSIGNMENT.search(text)
    if match is None:
        raise ValueError(f"version not found in {Path(path).name}")
    return match.group(1)


def _git(*args: str) -> str:
    result = subprocess.run(
        ["git", *args], capture_output=True, text=True, check=True
    )
    return result.stdout


def get_current_version(path: str | os.PathLike[str] = DEFAULT_VERSION_FILE) -> str:
    """Return the latest git tag, else the version file's value, else '0.0.0'."""
    try:
        return _git("describe", "--tags", "--abbrev=0").strip().removeprefix("v")
    except (OSError, subprocess.CalledProcessError):
        pass
    try:
        return get_version_from_code(path)
    except (OSError, ValueError):
        return "0.0.0"


def update_version_in_code(
    version: str, path: str | os.PathLike[str] = DEFAULT_VERSION_FILE
) -> None:
    """Write the version file with the given version."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        f'"""Current version of the package."""\n\n__version__ = "{version}"\n',
        encoding="utf-8",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare a tagged release.")
    parser.add_argument("--type", default="", help="Release type: major, minor, patch")
    parser.add_argument(
        "--dry-run", action="store_true", help="Dry run (don't actually tag)"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    release_type: str = args.type

    if release_type and release_type not in _RELEASE_TYPES:
        print("Invalid release type. Must be 'major', 'minor', or 'patch'")
        return 1

    try:
        status = _git("status", "--porcelain")
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"Failed to check git status: {exc}")
        return 1
    if status:
        print("Working directory is not clean. Commit all changes before releasing.")
        return 1

    current = get_current_version()
    print(f"Current version: {current}")

    new_version = calculate_new_version(current, release_type)
    print(f"New version will be: {new_version}")

    print(f"Create release {new_version}? (y/n): ", end="", flush=True)
    response = sys.stdin.readline().strip().lower()
    if response not in ("y", "yes"):
        print("Release cancelled.")
        return 0

    try:
        update_version_in_code(new_version)
    except OSError as exc:
        print(f"Failed to update version in code: {exc}")
        return 1

    if not args.dry_run:
        try:
            _git("commit", "-a", "-m", f"Bump version to {new_version}")
        except (OSError, subprocess.CalledProcessError) as exc:
            print(f"Failed to commit version change: {exc}")
            return 1
        try:
            _git("tag", "-a", f"v{new_version}", "-m", f"Release {new_version}")
        except (OSError, subprocess.CalledProcessError) as exc:
            print(f"Failed to create tag: {exc}")
            return 1

    print("Release prepared successfully!")
    if args.dry_run:
        print("Dry run - no changes were committed or tagged.")
    else:
        print("Now run 'git push && git push --tags' to publish the release.")
    return 0


if __name__ == "__main__":
    sys.exit(main())