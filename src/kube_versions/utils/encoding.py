"""Helm release payload codec (base64 + gzip + JSON)."""

from __future__ import annotations

import base64
import gzip
import json

_GZIP_MAGIC = b"\x1f\x8b"


def decode_release(data: bytes | str) -> dict:
    """Decode the ``release`` key of a Helm storage Secret or ConfigMap.

    Pipeline: base64 (once or twice) -> gzip -> utf-8 -> json.
    ``V1Secret.data`` still carries the Secret's own base64 layer on top of
    Helm's, while ConfigMap values hold Helm's base64 text directly.  The
    second layer is peeled off only when the gzip header is not visible
    after the first.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    decoded = base64.b64decode(data)
    if decoded[:2] != _GZIP_MAGIC:
        decoded = base64.b64decode(decoded)
    return json.loads(gzip.decompress(decoded).decode("utf-8"))


def encode_release(payload: dict) -> str:
    """Encode a release dict the way Helm stores it (one base64 layer)."""
    compressed = gzip.compress(json.dumps(payload).encode("utf-8"))
    return base64.b64encode(compressed).decode("ascii")
