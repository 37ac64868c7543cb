"""Trust and integrity core of the amber artifact cache."""

from __future__ import annotations

from amber.artifact import Sealed, seal, unseal, verify
from amber.ciphers import decrypt, encrypt
from amber.digests import hex_digest, iv_for_size, select_iv
from amber.errors import (
    AmberError,
    MalformedHeaderError,
    NoRepositoryError,
    RootConflictError,
    RootNotFoundError,
    UnknownDecryptionError,
    UnknownEncryptionError,
    UnknownHashError,
)
from amber.header import format_header, parse_header, split_artifact
from amber.schemas import Metadata
from amber.store import cache_root, locate_root
from amber.urilist import parse_uri_list

__all__ = [
    "AmberError",
    "MalformedHeaderError",
    "Metadata",
    "NoRepositoryError",
    "RootConflictError",
    "RootNotFoundError",
    "Sealed",
    "UnknownDecryptionError",
    "UnknownEncryptionError",
    "UnknownHashError",
    "cache_root",
    "decrypt",
    "encrypt",
    "format_header",
    "hex_digest",
    "iv_for_size",
    "locate_root",
    "parse_header",
    "parse_uri_list",
    "seal",
    "select_iv",
    "split_artifact",
    "unseal",
    "verify",
]
