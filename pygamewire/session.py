# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Session id utilities.

A session id is a 24-bit integer correlating an invite with its responses.
It is shown to callers as 6 lowercase hex digits ("12ab34").

Session ids are collision-avoidance tokens, not secrets. They come from the
OS CSPRNG when one exists; without one the stdlib Mersenne Twister is used
instead, which is predictable and must not be reused for anything
security-sensitive.
"""

from __future__ import annotations

import logging
import random
import re
import secrets

from .exceptions import InvalidSessionIdError
from .protocol import SESSION_ID_MASK

logger = logging.getLogger(__name__)

SESSION_ID_BITS: int = 24
SESSION_ID_HEX_DIGITS: int = 6

_HEX_ID = re.compile(rf"[0-9a-f]{{{SESSION_ID_HEX_DIGITS}}}")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def generate_session_id() -> int:
    """
    Generate a random 24-bit session id.

    Returns:
        Integer in [0, 0xFFFFFF].
    """
    try:
        return secrets.randbits(SESSION_ID_BITS)
    except NotImplementedError:
        logger.warning("No OS randomness source; falling back to random.getrandbits for session id")
        return random.getrandbits(SESSION_ID_BITS)


def parse_session_id(text: str) -> int:
    """
    Parse a hex session id and keep its low 24 bits.

    Only bare hex digits of either case are accepted: no "0x" prefix,
    whitespace, sign or underscores. Ids longer than 6 digits are truncated.

    Raises:
        InvalidSessionIdError: If text is not a string of hex digits.
    """
    if not isinstance(text, str) or _HEX_DIGITS.fullmatch(text) is None:
        raise InvalidSessionIdError(text)
    return int(text, 16) & SESSION_ID_MASK


def normalize_session_id(value: int | str | None) -> int:
    """
    Resolve a caller-supplied session id to its 24-bit wire value.

    Args:
        value: Integer (higher bits are silently dropped), hex string,
            or None to generate a fresh id.

    Returns:
        Integer in [0, 0xFFFFFF].

    Raises:
        InvalidSessionIdError: If value is of any other type or not hex.
    """
    if value is None:
        return generate_session_id()
    if isinstance(value, bool):
        raise InvalidSessionIdError(value)
    if isinstance(value, int):
        return value & SESSION_ID_MASK
    if isinstance(value, str):
        return parse_session_id(value)
    raise InvalidSessionIdError(value)


def format_session_id(value: int) -> str:
    """Render a session id as 6 zero-padded lowercase hex digits."""
    return f"{value & SESSION_ID_MASK:0{SESSION_ID_HEX_DIGITS}x}"


def validate_session_id(text: str) -> bool:
    """
    Validate a session id as rendered by decode.

    Returns:
        True if text is exactly 6 lowercase hex digits, False otherwise.
    """
    return isinstance(text, str) and _HEX_ID.fullmatch(text) is not None
