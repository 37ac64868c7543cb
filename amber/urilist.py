"""Parser for CRLF-delimited source URI listings."""

from __future__ import annotations

_CRLF = "\r\n"


def _lines(blob: bytes | str) -> list[str]:
    if isinstance(blob, str):
        return blob.split(_CRLF)
    lines = []
    for raw in bytes(blob).split(_CRLF.encode("ascii")):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            # Undecodable lines cannot name a URI; leave them out.
            continue
    return lines


def parse_uri_list(blob: bytes | str) -> list[str]:
    """Return the URIs in ``blob`` in listing order.

    Blank lines and lines whose first non-whitespace character is ``#`` are
    skipped; every other line is kept verbatim.
    """

    uris: list[str] = []
    for line in _lines(blob):
        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        uris.append(line)
    return uris
