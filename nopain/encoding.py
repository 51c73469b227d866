"""Base64 and MD5 helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib


def encode_base64(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` in standard padded Base64."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(encoded: str) -> str:
    """Decode standard Base64; raise ValueError for malformed input."""
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc
    return raw.decode("utf-8", errors="surrogateescape")


def compare_base64_encoding(encoded: str, original: str) -> bool:
    """True when ``encoded`` decodes to ``original``."""
    return decode_base64(encoded) == original


def encode_md5(text: str) -> str:
    """Hex digest of the MD5 hash of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def decode_md5(encoded: str) -> str:
    """Turn hexadecimal text back into the bytes it spells, as a string.

    Bytes that are not valid UTF-8 are kept as surrogate escapes.
    Raises ValueError for malformed hexadecimal text.
    """
    try:
        raw = binascii.unhexlify(encoded)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hexadecimal data: {exc}") from exc
    return raw.decode("utf-8", errors="surrogateescape")