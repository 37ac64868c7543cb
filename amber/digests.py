"""Deterministic IV derivation.

The IV is cut from the digest of the payload's byte length written as
decimal ASCII, so a reader that knows how many bytes to expect can rebuild
it without storing the IV. The leading slice of the digest's *hex text* is
used as ASCII bytes, not the raw digest bytes.
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable

from amber import ciphers
from amber.errors import InvalidSizeError, UnknownEncryptionError, UnknownHashError

_DIGESTS: dict[str, Callable[..., Any]] = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha224": hashlib.sha224,
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
}


def hex_digest(digest_name: str, payload: bytes) -> str:
    """Return the hex digest of ``payload``."""

    factory = _DIGESTS.get(digest_name)
    if factory is None:
        raise UnknownHashError(digest_name)
    return factory(payload).hexdigest()


def iv_size(cipher_name: str) -> int:
    spec = ciphers.lookup(cipher_name)
    if spec is None or spec.passthrough:
        raise UnknownEncryptionError(cipher_name)
    return spec.iv_size


def iv_for_size(cipher_name: str, digest_name: str, size: int) -> bytes:
    """Derive the IV for a payload of ``size`` bytes.

    The cipher is resolved before the digest, so an unknown cipher is
    reported even when the digest name is also bad.
    """

    length = iv_size(cipher_name)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidSizeError(size)
    return hex_digest(digest_name, str(size).encode("ascii"))[:length].encode("ascii")


def select_iv(cipher_name: str, digest_name: str, plaintext: bytes) -> bytes:
    """Derive the IV for encrypting ``plaintext`` with ``cipher_name``."""

    return iv_for_size(cipher_name, digest_name, len(plaintext))
