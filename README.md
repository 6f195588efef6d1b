# gdrivekit

Building blocks for a cloud drive client:

- `gdrivekit.paths`: normalise and split remote paths (`parse_drive_path`,
  `split_path`, `is_root_directory`, `get_relative_path`, `join_path`).
- `gdrivekit.checksum`: compute and verify MD5, SHA-1 and SHA-256 file
  checksums (`calculate_file_checksum`, `verify_file_checksum`, `ChecksumType`,
  `ChecksumMismatchError`, `NoChecksumError`).
- `gdrivekit.encryption`: AES-CTR file encryption keyed from a password
  (`encrypt_file`, `decrypt_file`, `derive_key`, `is_encrypted`,
  `generate_encryption_key`).
- `gdrivekit.progress`: a reader wrapper that reports transfer progress
  (`ProgressReader`, `default_progress_printer`, `finish_progress`).
- `gdrivekit.errors`: the package's error classes (all derived from
  `DriveError`), API error classification, retry decisions and `Retry-After`
  parsing (`ApiError`, `should_retry`, `translate_error`, `process_error`,
  `parse_rate_limit`).
- `gdrivekit.log`: a levelled logger (`Logger`, `LogLevel`, `parse_log_level`).
- `gdrivekit.release`: the `gdrivekit-release` command that bumps, commits and
  tags a version in a git working tree.

## Installation

```
pip install gdrivekit
```

## Examples

Paths:

```python
from gdrivekit.paths import parse_drive_path, split_path, join_path

parse_drive_path("//docs//reports/../notes.txt")   # "docs/notes.txt"
parse_drive_path("/docs/*")                         # raises InvalidCharactersError
split_path("/docs/notes.txt")                       # ("docs", "notes.txt")
join_path("docs", "notes.txt")                      # "docs/notes.txt"
```

Checksums:

```python
from gdrivekit.checksum import ChecksumType, calculate_file_checksum, verify_file_checksum

digest = calculate_file_checksum("notes.txt", ChecksumType.SHA256)
verify_file_checksum("notes.txt", ChecksumType.SHA256, digest)
```

`verify_file_checksum` raises `ChecksumMismatchError` when the digests differ
and `NoChecksumError` when the expected checksum is empty. An unknown checksum
type raises `ValueError`.

Encryption:

```python
from gdrivekit.encryption import encrypt_file, decrypt_file

password = "password"
encrypt_file("notes.txt", "notes.txt.enc", password, False)
decrypt_file("notes.txt.enc", "notes-copy.txt", password, False)
```

The encrypted file starts with a random 16-byte IV followed by the AES-256-CTR
ciphertext; the key is the SHA-256 digest of the password. There is no
authentication tag, so a wrong password yields garbage rather than an error. A
file shorter than the IV raises `InvalidCiphertextError`. When `show_progress`
is left as `None`, a progress line is printed only if standard output is a
terminal.

Progress:

```python
import io
from gdrivekit.progress import ProgressReader, default_progress_printer, finish_progress

data = io.BytesIO(b"x" * 100_000)
reader = ProgressReader(data, 100_000, default_progress_printer("Copying"))
while reader.read(8192):
    pass
finish_progress()
```

The callback receives `(bytes_read, total, percentage, speed)` on the first
read that returns data and then at most every quarter of a second.

Error handling:

```python
from gdrivekit.errors import ApiError, should_retry, parse_rate_limit

retry, err = should_retry(ApiError(503, "Service Unavailable"))  # (True, err)
parse_rate_limit({"Retry-After": "30"})                           # 30.0
```

Logging:

```python
import sys
from gdrivekit.log import Logger, LogLevel, parse_log_level

log = Logger(parse_log_level("debug"), sys.stdout)
log.info("uploaded %s", "notes.txt")
log.trace("not shown at DEBUG level")
```

## Release helper

`gdrivekit-release` prepares a release tag in a git working tree. It checks the
tree is clean, reads the current version from the latest git tag (or, failing
that, from `__version__` in `version.py` in the current directory, else
`0.0.0`), bumps it, asks for confirmation, writes `version.py` with the new
version, commits all changes and creates an annotated `v<version>` tag.

```
gdrivekit-release --type minor
gdrivekit-release --type patch --dry-run
```

Without `--type` it asks for the new version. With `--dry-run` it still writes
`version.py` but does not commit or tag. Push with
`git push && git push --tags` afterwards.

## What this package does not do

gdrivekit does not talk to a drive service: it has no API client, no sign-in
or token storage, and no commands to list, upload, download or delete remote
files. It provides the path, checksum, encryption, progress, error and logging
pieces such a client is built from.