"""AES-CTR file encryption keyed by a password."""

from __future__ import annotations

import hashlib
import os
import secrets
import sys

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import DriveError
from .progress import ProgressReader, default_progress_printer, finish_progress

_BLOCK_SIZE = 16
_CHUNK_SIZE = 64 * 1024


class EncryptionError(DriveError):
    default_message = "encryption failed"


class DecryptionError(DriveError):
    default_message = "decryption failed"


class InvalidCiphertextError(DriveError):
    default_message = "invalid ciphertext"


def derive_key(password: str) -> bytes:
    """Derive a 32-byte key from a password with SHA-256."""
    return hashlib.sha256(password.encode("utf-8")).digest()


def _want_progress(show_progress: bool | None) -> bool:
    if show_progress is None:
        return sys.stdout.isatty()
    return show_progress


def encrypt_file(
    source_path: str | os.PathLike[str],
    dest_path: str | os.PathLike[str],
    password: str,
    show_progress: bool | None = None,
) -> None:
    """Encrypt source_path into dest_path, prefixing the output with a random IV.

    When show_progress is None, progress is shown if stdout is a terminal.
    """
    with open(source_path, "rb") as source, open(dest_path, "wb") as dest:
        size = os.fstat(source.fileno()).st_size
        iv = secrets.token_bytes(_BLOCK_SIZE)
        try:
            encryptor = Cipher(algorithms.AES(derive_key(password)), modes.CTR(iv)).encryptor()
        except ValueError as exc:
            raise EncryptionError(f"encryption failed: {exc}") from exc
        dest.write(iv)

        use_progress = _want_progress(show_progress) and size > 0
        reader = source
        if use_progress:
            reader = ProgressReader(
                source, size, default_progress_printer(f"Encrypting {source_path}")
            )
        try:
            for chunk in iter(lambda: reader.read(_CHUNK_SIZE), b""):
                dest.write(encryptor.update(chunk))
            dest.write(encryptor.finalize())
        except OSError as exc:
            raise EncryptionError(f"encryption failed: {exc}") from exc
        if use_progress:
            finish_progress()


def decrypt_file(
    source_path: str | os.PathLike[str],
    dest_path: str | os.PathLike[str],
    password: str,
    show_progress: bool | None = None,
) -> None:
    """Decrypt a file written by encrypt_file into dest_path.

    When show_progress is None, progress is shown if stdout is a terminal.
    """
    with open(source_path, "rb") as source:
        size = os.fstat(source.fileno()).st_size
        with open(dest_path, "wb") as dest:
            iv = source.read(_BLOCK_SIZE)
            if len(iv) < _BLOCK_SIZE:
                raise InvalidCiphertextError(
                    f"invalid ciphertext: expected {_BLOCK_SIZE}-byte IV, got {len(iv)} bytes"
                )
            try:
                decryptor = Cipher(algorithms.AES(derive_key(password)), modes.CTR(iv)).decryptor()
            except ValueError as exc:
                raise DecryptionError(f"decryption failed: {exc}") from exc

            use_progress = _want_progress(show_progress) and size > _BLOCK_SIZE
            reader = source
            if use_progress:
                reader = ProgressReader(
                    source,
                    size - _BLOCK_SIZE,
                    default_progress_printer(f"Decrypting {source_path}"),
                )
            try:
                for chunk in iter(lambda: reader.read(_CHUNK_SIZE), b""):
                    dest.write(decryptor.update(chunk))
                dest.write(decryptor.finalize())
            except OSError as exc:
                raise DecryptionError(f"decryption failed: {exc}") from exc
            if use_progress:
                finish_progress()


def is_encrypted(filename: str) -> bool:
    """Guess from the extension whether a file is encrypted."""
    lowered = filename.lower()
    return lowered.endswith((".enc", ".encrypted"))


def generate_encryption_key() -> str:
    """Return a random 32-byte key as a hex string."""
    return secrets.token_hex(32)