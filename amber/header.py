"""Reader and writer for the ``X-Amber-*`` header block ahead of each artifact.

The block is ASCII ``Key: Value`` lines separated by CRLF and terminated by
an empty line or the end of input. A bare LF is not a separator.
"""

from __future__ import annotations

from amber.errors import MalformedHeaderError
from amber.schemas import Metadata

CRLF = "\r\n"
FIELD_PREFIX = "X-Amber-"
_SEPARATOR = ": "
_FIELDS = {
    f"{FIELD_PREFIX}Hash": "hash_name",
    f"{FIELD_PREFIX}Encryption": "encryption_name",
}


def parse_header(blob: bytes | str) -> Metadata:
    """Parse a header block into :class:`Metadata`.

    Stops at the first empty line; whatever follows is payload and is not
    inspected. Raises :class:`MalformedHeaderError` on the first line that does
    not split into exactly two tokens on ``": "``.
    """

    text = blob.decode("latin-1") if isinstance(blob, (bytes, bytearray)) else blob
    fields: dict[str, str] = {}
    for line in text.split(CRLF):
        if line == "":
            break
        tokens = [token.strip() for token in line.split(_SEPARATOR)]
        if len(tokens) != 2:
            raise MalformedHeaderError(line)
        key, value = tokens
        attr = _FIELDS.get(key)
        if attr is not None:
            fields[attr] = value
    return Metadata(**fields)


def format_header(metadata: Metadata) -> bytes:
    """Render ``metadata`` as a terminated header block; unset fields are omitted."""

    lines = []
    for key, attr in _FIELDS.items():
        value = getattr(metadata, attr)
        if value:
            if "\r" in value or "\n" in value or _SEPARATOR in value:
                raise MalformedHeaderError(f"{key}{_SEPARATOR}{value}")
            lines.append(f"{key}{_SEPARATOR}{value}{CRLF}")
    lines.append(CRLF)
    return "".join(lines).encode("ascii")


def split_artifact(blob: bytes) -> tuple[bytes, bytes]:
    """Split a stored artifact into its header block and body."""

    terminator = (CRLF + CRLF).encode("ascii")
    if blob.startswith(CRLF.encode("ascii")):
        return b"", blob[len(CRLF) :]
    head, found, body = blob.partition(terminator)
    if not found:
        return blob, b""
    return head, body
