"""Name-selected ciphers for artifact payloads.

Identifiers are matched exactly. ``-`` stores payloads as-is; the AES
identifiers encrypt in CBC mode with PKCS7 padding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from amber.errors import (
    DecryptionError,
    InvalidIVError,
    InvalidKeyError,
    UnknownDecryptionError,
    UnknownEncryptionError,
)

PASSTHROUGH = "-"
AES_BLOCK_SIZE = algorithms.AES.block_size // 8


class BlockMode(str, Enum):
    """Chaining modes a cipher spec can name."""

    NONE = "none"
    CBC = "cbc"


@dataclass(frozen=True, slots=True)
class CipherSpec:
    """Key size class and chaining mode behind a cipher identifier."""

    name: str
    key_size: int
    iv_size: int
    mode: BlockMode

    @property
    def passthrough(self) -> bool:
        return self.mode is BlockMode.NONE


_REGISTRY: dict[str, CipherSpec] = {
    PASSTHROUGH: CipherSpec(PASSTHROUGH, key_size=0, iv_size=0, mode=BlockMode.NONE),
    "aes128": CipherSpec("aes128", key_size=16, iv_size=16, mode=BlockMode.CBC),
    "aes192": CipherSpec("aes192", key_size=24, iv_size=24, mode=BlockMode.CBC),
    "aes256": CipherSpec("aes256", key_size=32, iv_size=32, mode=BlockMode.CBC),
}


def lookup(cipher_name: str) -> CipherSpec | None:
    """Return the spec registered under ``cipher_name``, or None."""

    return _REGISTRY.get(cipher_name)


def encrypt(plaintext: bytes, cipher_name: str, key: str | bytes, iv: bytes) -> bytes:
    """Encrypt ``plaintext`` with the named cipher."""

    spec = lookup(cipher_name)
    if spec is None:
        raise UnknownEncryptionError(cipher_name)
    if spec.passthrough:
        return bytes(plaintext)
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = _cipher(spec, key, iv).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt(ciphertext: bytes, cipher_name: str, key: str | bytes, iv: bytes) -> bytes:
    """Decrypt ``ciphertext`` with the named cipher."""

    spec = lookup(cipher_name)
    if spec is None:
        raise UnknownDecryptionError(cipher_name)
    if spec.passthrough:
        return bytes(ciphertext)
    decryptor = _cipher(spec, key, iv).decryptor()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionError(f"{cipher_name}: ciphertext is not valid for this key and IV") from exc


def _cipher(spec: CipherSpec, key: str | bytes, iv: bytes) -> Cipher:
    key_bytes = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(key_bytes) != spec.key_size:
        raise InvalidKeyError(
            f"{spec.name} requires a {spec.key_size}-byte key, got {len(key_bytes)} bytes"
        )
    if len(iv) < AES_BLOCK_SIZE:
        raise InvalidIVError(
            f"{spec.name} requires at least {AES_BLOCK_SIZE} bytes of IV, got {len(iv)}"
        )
    # CBC chains on a single block; wider IVs contribute their leading block.
    return Cipher(algorithms.AES(key_bytes), modes.CBC(bytes(iv[:AES_BLOCK_SIZE])))
