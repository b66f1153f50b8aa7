# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Recognizers for the two JSON formats that predate compact tokens.

    raw JSON:   {"type": "game", "op": "create", "game": "tic_tac_toe", "id": "abc123"}
    prefixed:   "gamewire:" + base64(raw JSON)

Both are decode-only. Each recognizer raises FormatMismatch when the text is
structurally not in its format (the decoder then tries the next one), and
returns None when the text is in its format but is not a game message (the
decoder stops there).
"""

from __future__ import annotations

import base64
import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from .exceptions import FormatMismatch
from .models import GAME_MESSAGE_TYPE, InviteMessage
from .transport import LEGACY_PREFIX

logger = logging.getLogger(__name__)

_REQUIRED_JSON_FIELDS = ("op", "game", "id")
_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


def is_game_object(obj: Any, *, require_fields: bool = False) -> bool:
    """Check a parsed JSON value for ``type == "game"`` (and truthy fields)."""
    if not isinstance(obj, dict) or obj.get("type") != GAME_MESSAGE_TYPE:
        return False
    if require_fields:
        return all(obj.get(key) for key in _REQUIRED_JSON_FIELDS)
    return True


def _to_message(obj: dict[str, Any]) -> InviteMessage | None:
    try:
        return InviteMessage.model_validate(obj)
    except ValidationError as e:
        logger.debug("Legacy game message has unusable fields: %s", e)
        return None


def _b64decode_lenient(body: str) -> bytes:
    """Decode standard base64 as old peers wrote it: ASCII whitespace ignored, padding optional."""
    body = _ASCII_WHITESPACE.sub("", body)
    return base64.b64decode(body + "=" * (-len(body) % 4), validate=True)


def recognize_json(text: str) -> InviteMessage | None:
    """
    Recognize a raw JSON game message.

    Raises:
        FormatMismatch: If text is not JSON.
    """
    try:
        obj = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise FormatMismatch("legacy JSON", str(e)) from e

    if not is_game_object(obj, require_fields=True):
        logger.debug("JSON text is not a game message")
        return None
    return _to_message(obj)


def recognize_prefixed(text: str) -> InviteMessage | None:
    """
    Recognize a ``"gamewire:" + base64(JSON)`` game message.

    Raises:
        FormatMismatch: If text lacks the prefix.
    """
    if not text.startswith(LEGACY_PREFIX):
        raise FormatMismatch("legacy prefixed", f"missing {LEGACY_PREFIX!r}")

    try:
        raw = _b64decode_lenient(text[len(LEGACY_PREFIX):])
        obj = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.debug("Malformed %r message: %s", LEGACY_PREFIX, e)
        return None

    if not is_game_object(obj):
        logger.debug("%r payload is not a game message", LEGACY_PREFIX)
        return None
    return _to_message(obj)


def encode_legacy_prefixed(record: InviteMessage | dict[str, Any]) -> str:
    """
    Encode a record in the ``"gamewire:"`` form for peers that predate
    compact tokens.
    """
    obj = record.to_dict() if isinstance(record, InviteMessage) else dict(record)
    obj.setdefault("type", GAME_MESSAGE_TYPE)
    data = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return LEGACY_PREFIX + base64.b64encode(data).decode("ascii")
