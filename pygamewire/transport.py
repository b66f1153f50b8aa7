# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Text transport wrapping for compact payloads.

A 5-byte payload becomes 8 base64 characters with one "=" of padding. The
padding is stripped and the "gw:" prefix added, so every token is exactly
10 ASCII characters, e.g. "gw:AAESqzQ".

A transport with a binary field can send the payload bytes directly and skip
this wrapper.
"""

from __future__ import annotations

import base64

from .protocol import PAYLOAD_SIZE

COMPACT_PREFIX: str = "gw:"
LEGACY_PREFIX: str = "gamewire:"
TOKEN_LENGTH: int = len(COMPACT_PREFIX) + 7

_URLSAFE_ALTCHARS = b"-_"


def b64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(text: str) -> bytes:
    """
    Decode URL-safe base64, with or without padding.

    Raises:
        ValueError: If text is not valid base64 (binascii.Error is a ValueError).
    """
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, altchars=_URLSAFE_ALTCHARS, validate=True)


def is_compact_token(text: object) -> bool:
    """Check whether text claims to be a compact token (prefix only)."""
    return isinstance(text, str) and text.startswith(COMPACT_PREFIX)


def wrap(payload: bytes) -> str:
    """Turn payload bytes into a transport token."""
    if len(payload) != PAYLOAD_SIZE:
        raise ValueError(f"Payload must be {PAYLOAD_SIZE} bytes, got {len(payload)}")
    return COMPACT_PREFIX + b64url_encode(payload)


def unwrap(token: str) -> bytes:
    """
    Turn a transport token back into payload bytes.

    The byte count is not checked here; decode_payload() does that.

    Raises:
        ValueError: If the prefix is missing or the body is not base64url.
    """
    if not is_compact_token(token):
        raise ValueError(f"Token must start with {COMPACT_PREFIX!r}")
    return b64url_decode(token[len(COMPACT_PREFIX):])
