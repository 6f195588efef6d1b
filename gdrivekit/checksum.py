"""File checksum calculation and verification."""

from __future__ import annotations

import hashlib
import os
from enum import Enum

from .errors import DriveError

_CHUNK_SIZE = 64 * 1024


class ChecksumType(str, Enum):
    """Supported checksum algorithms."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    def __str__(self) -> str:
        return self.value


class ChecksumMismatchError(DriveError):
    default_message = "checksum mismatch"


class NoChecksumError(DriveError):
    default_message = "no checksum available"


_HASHERS = {
    ChecksumType.MD5: hashlib.md5,
    ChecksumType.SHA1: hashlib.sha1,
    ChecksumType.SHA256: hashlib.sha256,
}


def _resolve_type(checksum_type: ChecksumType | str) -> ChecksumType:
    try:
        return ChecksumType(checksum_type)
    except ValueError:
        raise ValueError(f"unsupported checksum type: {checksum_type}") from None


def calculate_file_checksum(
    file_path: str | os.PathLike[str], checksum_type: ChecksumType | str
) -> str:
    """Return the hex digest of a file using the given algorithm."""
    with open(file_path, "rb") as handle:
        digest = _HASHERS[_resolve_type(checksum_type)]()
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def verify_file_checksum(
    file_path: str | os.PathLike[str],
    checksum_type: ChecksumType | str,
    expected_sum: str,
) -> None:
    """Raise ChecksumMismatchError unless the file's checksum equals expected_sum."""
    if not expected_sum:
        raise NoChecksumError()
    kind = _resolve_type(checksum_type) if checksum_type in ChecksumType._value2member_map_ else checksum_type
    calculated = calculate_file_checksum(file_path, kind)
    if calculated != expected_sum:
        raise ChecksumMismatchError(
            f"checksum mismatch: expected {expected_sum} but got {calculated} "
            f"(type: {ChecksumType(kind).value})"
        )