"""Helpers for cleaning and splitting remote Drive paths."""

from __future__ import annotations

import posixpath

from .errors import InvalidCharactersError

_INVALID_CHARACTERS = frozenset("*?|<>:")


def parse_drive_path(p: str) -> str:
    """Clean a user-visible path, dropping leading and trailing slashes.

    Raises InvalidCharactersError if the path holds characters Drive rejects.
    """
    cleaned = posixpath.normpath(p) if p else "."
    cleaned = cleaned.strip("/")
    if cleaned == ".":
        cleaned = ""
    if _INVALID_CHARACTERS.intersection(cleaned):
        raise InvalidCharactersError()
    return cleaned


def split_path(p: str) -> tuple[str, str]:
    """Split a remote path into its directory and leaf."""
    directory, sep, leaf = p.strip("/").rpartition("/")
    return (directory, leaf) if sep else ("", leaf)


def is_root_directory(p: str) -> bool:
    """Return True if the path names the root directory."""
    return p in ("", "/", ".")


def get_relative_path(root: str, p: str) -> str:
    """Return the path relative to root, or '' when it is root itself."""
    if p.startswith(root):
        p = p[len(root):]
    return p.removeprefix("/")


def join_path(directory: str, leaf: str) -> str:
    """Join a directory and a leaf into one path."""
    return f"{directory}/{leaf}" if directory else leaf