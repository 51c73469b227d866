"""Generation of identifiers, random tokens and timestamped codes."""

from __future__ import annotations

import secrets
import uuid
from datetime import datetime


def generate_uuid() -> str:
    """A random version 4 UUID in its canonical text form."""
    return str(uuid.uuid4())


def generate_random_token(length: int) -> str:
    """``length`` random bytes in unpadded URL-safe Base64."""
    if length < 0:
        raise ValueError("token length must not be negative")
    return secrets.token_urlsafe(length) if length else ""


def generate_code(prefix: str) -> str:
    """``prefix`` followed by the local time as ``YYYYMMDDHHMMSS``."""
    now = datetime.now()
    return (
        f"{prefix}{now.year:04d}{now.month:02d}{now.day:02d}"
        f"{now.hour:02d}{now.minute:02d}{now.second:02d}"
    )