"""Pydantic value types shared across the cache core."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Metadata(BaseModel):
    """Algorithms recorded in an artifact's header block.

    Empty strings mean the header did not name the algorithm and the caller's
    default applies.
    """

    model_config = ConfigDict(frozen=True)

    hash_name: str = Field(default="", description="Digest used to derive the IV (X-Amber-Hash)")
    encryption_name: str = Field(default="", description="Cipher used for the body (X-Amber-Encryption)")

    def with_defaults(self, *, hash_name: str, encryption_name: str) -> Metadata:
        """Return a copy where unset fields take the given defaults."""

        return self.model_copy(
            update={
                "hash_name": self.hash_name or hash_name,
                "encryption_name": self.encryption_name or encryption_name,
            }
        )
