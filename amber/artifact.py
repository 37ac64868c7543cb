"""Seal payloads into stored artifacts and recover them again.

A stored artifact is a header block followed by the (possibly encrypted)
body. The IV is derived from the plaintext's byte length with the digest
named in the header, so readers only need to know how many bytes to expect.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from amber import ciphers, digests
from amber.errors import DecryptionError, DigestMismatchError, UnknownDecryptionError
from amber.header import format_header, parse_header, split_artifact
from amber.schemas import Metadata
from amber.settings import Settings, get_settings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Sealed:
    """A sealed artifact ready to be written under the cache root.

    ``digest`` is the hex digest of the plaintext under ``metadata.hash_name``
    and ``size`` its length in bytes; both are needed to read it back.
    """

    digest: str
    size: int
    metadata: Metadata
    blob: bytes


def _iv_for(metadata: Metadata, size: int) -> bytes:
    if metadata.encryption_name == ciphers.PASSTHROUGH:
        return b""
    return digests.iv_for_size(metadata.encryption_name, metadata.hash_name, size)


def seal(
    plaintext: bytes,
    *,
    key: str | bytes | None = None,
    hash_name: str | None = None,
    encryption_name: str | None = None,
    settings: Settings | None = None,
) -> Sealed:
    """Encrypt ``plaintext`` and prefix the header describing how."""

    cfg = settings or get_settings()
    metadata = Metadata(
        hash_name=hash_name or cfg.hash_name,
        encryption_name=encryption_name or cfg.encryption_name,
    )
    digest = digests.hex_digest(metadata.hash_name, plaintext)
    iv = _iv_for(metadata, len(plaintext))
    body = ciphers.encrypt(plaintext, metadata.encryption_name, cfg.key if key is None else key, iv)
    LOGGER.debug(
        "Sealed %s bytes as %s (hash=%s, encryption=%s)",
        len(plaintext),
        digest,
        metadata.hash_name,
        metadata.encryption_name,
    )
    return Sealed(digest=digest, size=len(plaintext), metadata=metadata, blob=format_header(metadata) + body)


def unseal(
    blob: bytes,
    size: int,
    *,
    key: str | bytes | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Recover the ``size``-byte plaintext of a stored artifact.

    Algorithms named in the header win; settings only fill in the ones the
    header leaves out.
    """

    cfg = settings or get_settings()
    head, body = split_artifact(blob)
    metadata = parse_header(head).with_defaults(
        hash_name=cfg.hash_name,
        encryption_name=cfg.encryption_name,
    )
    if ciphers.lookup(metadata.encryption_name) is None:
        raise UnknownDecryptionError(metadata.encryption_name)
    iv = _iv_for(metadata, size)
    LOGGER.debug(
        "Unsealing %s bytes (hash=%s, encryption=%s)",
        size,
        metadata.hash_name,
        metadata.encryption_name,
    )
    plaintext = ciphers.decrypt(body, metadata.encryption_name, cfg.key if key is None else key, iv)
    if len(plaintext) != size:
        raise DecryptionError(f"expected {size} bytes, recovered {len(plaintext)}")
    return plaintext


def verify(plaintext: bytes, digest: str, hash_name: str) -> None:
    """Check recovered ``plaintext`` against its hex digest."""

    actual = digests.hex_digest(hash_name, plaintext)
    if not hmac.compare_digest(actual, digest):
        raise DigestMismatchError(digest, actual)
