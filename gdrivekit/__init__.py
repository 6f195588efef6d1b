"""Building blocks for a cloud drive client: paths, checksums, encryption, progress, errors, logging and a release helper."""

__version__ = "0.1.0"

__all__ = ["checksum", "encryption", "errors", "log", "paths", "progress", "release"]