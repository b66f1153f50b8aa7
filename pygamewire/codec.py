# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
GameWire Codec.

Encodes invite/response records into 10-character transport tokens and
decodes tokens (or either legacy JSON format) back into records.

Usage Patterns:

    # Pattern 1: Module-level functions (recommended)
    from pygamewire import encode, decode
    token = encode({"op": "create", "game": "tic_tac_toe"})
    invite = decode(token)

    # Pattern 2: Configured codec
    from pygamewire import GameWireCodec
    codec = GameWireCodec(accept_legacy_json=False)
    invite = codec.decode(text)

    # Pattern 3: Raw bytes for transports with a binary field
    payload = codec.encode_bytes({"op": "accept", "game": "tic_tac_toe", "id": "12ab34"})
    invite = codec.decode_bytes(payload)

Encoding a bad record raises; decoding never does.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional, Union

from .exceptions import FormatMismatch, UnknownOperationError
from .legacy import recognize_json, recognize_prefixed
from .models import CodecConfig, InviteMessage
from .protocol import OPERATION_CODES, Payload, ProtocolError, decode_payload, encode_payload
from .registry import game_code, game_name
from .session import format_session_id, normalize_session_id
from .transport import is_compact_token, unwrap, wrap

logger = logging.getLogger(__name__)

Recognizer = Callable[[str], Optional[InviteMessage]]
Record = Union[InviteMessage, Mapping[str, Any]]


class GameWireCodec:
    """
    Codec between invite records and GameWire transport text.

    The codec holds only its configuration, so one instance can be shared
    freely between threads.

    Example:
        >>> codec = GameWireCodec()
        >>> codec.encode({"op": "create", "game": "tic_tac_toe", "id": 0x12AB34})
        'gw:AAESqzQ'
        >>> codec.decode("gw:AAESqzQ").to_dict()
        {'type': 'game', 'op': 'create', 'game': 'tic_tac_toe', 'id': '12ab34'}
    """

    def __init__(self, config: CodecConfig | None = None, **kwargs: Any) -> None:
        """
        Initialize codec.

        Args:
            config: Optional CodecConfig object.
            **kwargs: Override config options (accept_legacy_json, etc.)
                applied to a copy; the given config is left untouched.

        Raises:
            pydantic.ValidationError: If an override is unknown or invalid.
        """
        if config is None:
            config = CodecConfig(**kwargs)
        elif kwargs:
            config = CodecConfig.model_validate({**config.model_dump(), **kwargs})

        self._config = config

    @property
    def config(self) -> CodecConfig:
        return self._config

    def _recognizers(self) -> list[Recognizer]:
        """Format recognizers in priority order."""
        recognizers: list[Recognizer] = [self._recognize_compact]
        if self._config.accept_legacy_json:
            recognizers.append(recognize_json)
        if self._config.accept_legacy_prefixed:
            recognizers.append(recognize_prefixed)
        return recognizers

    # =========================================================================
    # Encoding
    # =========================================================================

    def encode_bytes(self, record: Record) -> bytes:
        """
        Encode a record into the 5-byte compact payload.

        Args:
            record: InviteMessage or mapping with "op", "game" and
                optionally "id" (int or hex string; generated if missing).

        Returns:
            Payload bytes.

        Raises:
            UnknownOperationError: If "op" is not create, accept or decline.
            UnknownGameError: If "game" is not registered.
            InvalidSessionIdError: If "id" is not an int or hex string.
        """
        if isinstance(record, InviteMessage):
            op, game, sid = record.op, record.game, record.id
        elif isinstance(record, Mapping):
            op, game, sid = record.get("op"), record.get("game"), record.get("id")
        else:
            raise TypeError(f"Expected InviteMessage or mapping, got {type(record).__name__}")

        op_code = OPERATION_CODES.get(op) if isinstance(op, str) else None
        if op_code is None:
            raise UnknownOperationError(op)

        return encode_payload(op_code, game_code(game), normalize_session_id(sid))

    def encode(self, record: Record | str) -> str:
        """
        Encode a record into a transport token.

        A string is returned unchanged, so callers may pass through text they
        already formatted (a token or a legacy message).

        Args:
            record: InviteMessage, mapping, or preformatted string.

        Returns:
            Token of the form "gw:" + 7 base64url characters.

        Raises:
            UnknownOperationError: If "op" is not create, accept or decline.
            UnknownGameError: If "game" is not registered.
            InvalidSessionIdError: If "id" is not an int or hex string.
        """
        if isinstance(record, str):
            return record
        return wrap(self.encode_bytes(record))

    # =========================================================================
    # Decoding
    # =========================================================================

    def _to_message(self, payload: Payload) -> InviteMessage:
        operation = payload.operation
        return InviteMessage(
            op=operation.wire_name if operation is not None else None,
            game=game_name(payload.game_code, self._config.placeholder_prefix),
            id=format_session_id(payload.session_id),
            op_code=payload.op_code,
        )

    def decode_bytes(self, data: bytes) -> InviteMessage | None:
        """
        Decode a raw compact payload.

        Returns:
            The record, or None if data is truncated or from an unknown
            format version.
        """
        try:
            payload = decode_payload(data)
        except ProtocolError as e:
            logger.debug("Rejected compact payload: %s", e)
            return None

        if payload.operation is None:
            logger.debug("Compact payload uses reserved operation code %d", payload.op_code)
        return self._to_message(payload)

    def _recognize_compact(self, text: str) -> InviteMessage | None:
        if not is_compact_token(text):
            raise FormatMismatch("compact")
        try:
            data = unwrap(text)
        except ValueError as e:
            logger.debug("Malformed compact token %r: %s", text, e)
            return None
        return self.decode_bytes(data)

    def decode(self, text: Any) -> InviteMessage | None:
        """
        Decode transport text into a record.

        Forms are tried in order: compact token, raw legacy JSON, then
        "gamewire:" legacy. The first form the text belongs to decides the
        result, even if it turns out not to be a game message; e.g. a JSON
        chat message is never retried as "gamewire:".

        Args:
            text: Text received from the transport; anything else gives None.

        Returns:
            The record, or None if text is not a recognizable game message.
        """
        if not text or not isinstance(text, str):
            return None

        for recognize in self._recognizers():
            try:
                return recognize(text)
            except FormatMismatch:
                continue

        logger.debug("Text is not a game message")
        return None


_default_codec = GameWireCodec()


def default_codec() -> GameWireCodec:
    """Return the shared codec used by the module-level functions."""
    return _default_codec


def encode(record: Record | str) -> str:
    """
    Encode a record into a transport token with the default codec.

    See GameWireCodec.encode().
    """
    return _default_codec.encode(record)


def decode(text: Any) -> InviteMessage | None:
    """
    Decode transport text into a record with the default codec.

    See GameWireCodec.decode().
    """
    return _default_codec.decode(text)
