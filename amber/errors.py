"""Exception types raised by the cache core."""

from __future__ import annotations

from pathlib import Path


class AmberError(Exception):
    """Base class for every error the core raises."""


class NoRepositoryError(AmberError):
    """No usable cache root above the starting directory."""

    def __init__(self, marker: str, path: Path | None = None, message: str | None = None) -> None:
        self.marker = marker
        self.path = path
        super().__init__(message or "no repository")


class RootNotFoundError(NoRepositoryError):
    """Reached the filesystem root without finding the marker directory."""


class RootConflictError(NoRepositoryError):
    """The marker name exists but is not a directory."""

    def __init__(self, marker: str, path: Path) -> None:
        super().__init__(marker, path, f"no repository: {path} is not a directory")


class UnsupportedAlgorithmError(AmberError, ValueError):
    """A cipher or digest identifier is not recognized."""

    kind = "algorithm"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown {self.kind}: {name}")


class UnknownEncryptionError(UnsupportedAlgorithmError):
    kind = "encryption algorithm"


class UnknownDecryptionError(UnsupportedAlgorithmError):
    kind = "decryption algorithm"


class UnknownHashError(UnsupportedAlgorithmError):
    kind = "hash"


class MalformedHeaderError(AmberError, ValueError):
    """A header line does not split into exactly one key and one value."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"invalid line format: {line}")


class InvalidKeyError(AmberError, ValueError):
    """Key length does not match the cipher's key size."""


class InvalidIVError(AmberError, ValueError):
    """IV is shorter than one cipher block."""


class DecryptionError(AmberError, ValueError):
    """Ciphertext does not decrypt to a validly padded payload."""


class InvalidSizeError(AmberError, ValueError):
    """A payload size is not a non-negative integer."""

    def __init__(self, size: object) -> None:
        self.size = size
        super().__init__(f"invalid payload size: {size!r}")


class DigestMismatchError(AmberError, ValueError):
    """Recovered plaintext does not hash to the expected content id."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"digest mismatch: expected {expected}, got {actual}")
