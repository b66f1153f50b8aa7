# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
PyGameWire - Compact game invite codec for low-bitrate messaging.

Encodes game invites and responses into 10-character text tokens that fit
LoRa and other store-and-forward transports:
- Fixed 5-byte payload (version, operation, game code, 24-bit session id)
- URL-safe "gw:" text tokens
- Backward-compatible decoding of legacy JSON invites
- Decoding that never raises on foreign or corrupted input

Quick Start:
    >>> from pygamewire import encode, decode
    >>>
    >>> token = encode({"op": "create", "game": "tic_tac_toe", "id": 0x12AB34})
    >>> token
    'gw:AAESqzQ'
    >>> invite = decode(token)
    >>> invite.op, invite.game, invite.id
    ('create', 'tic_tac_toe', '12ab34')

Responding to an invite:
    >>> reply = encode(invite.accept())
    >>> decode(reply).op
    'accept'

Not a game message:
    >>> decode("see you at 5") is None
    True

Reactive inbox:
    >>> from pygamewire import InviteInbox
    >>>
    >>> inbox = InviteInbox()
    >>> inbox.invites().subscribe(on_next=lambda m: print(m.game))
    >>> inbox.push("gw:AAESqzQ")
    tic_tac_toe
"""

import logging

from .codec import GameWireCodec, decode, default_codec, encode
from .exceptions import (
    EncodeError,
    FormatMismatch,
    GameWireError,
    InvalidSessionIdError,
    UnknownGameError,
    UnknownOperationError,
)
from .legacy import encode_legacy_prefixed
from .models import CodecConfig, InviteMessage
from .protocol import (
    PAYLOAD_SIZE,
    PROTOCOL_VERSION,
    Operation,
    Payload,
    ProtocolError,
    TruncatedPayloadError,
    UnsupportedVersionError,
    decode_payload,
    encode_payload,
)
from .reactive import InviteInbox, decode_invites, encode_invites, from_texts
from .registry import GAME_CODES, game_code, game_name, is_registered
from .session import (
    format_session_id,
    generate_session_id,
    normalize_session_id,
    validate_session_id,
)
from .transport import COMPACT_PREFIX, LEGACY_PREFIX, TOKEN_LENGTH

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__author__ = "Firefly Software Solutions Inc."
__license__ = "Apache-2.0"

__all__ = [
    # Codec
    "GameWireCodec",
    "default_codec",
    "encode",
    "decode",
    # Configuration
    "CodecConfig",
    # Models
    "InviteMessage",
    # Protocol
    "Operation",
    "Payload",
    "PAYLOAD_SIZE",
    "PROTOCOL_VERSION",
    "encode_payload",
    "decode_payload",
    # Transport
    "COMPACT_PREFIX",
    "LEGACY_PREFIX",
    "TOKEN_LENGTH",
    "encode_legacy_prefixed",
    # Registry
    "GAME_CODES",
    "game_code",
    "game_name",
    "is_registered",
    # Session ids
    "generate_session_id",
    "normalize_session_id",
    "format_session_id",
    "validate_session_id",
    # Reactive
    "InviteInbox",
    "decode_invites",
    "encode_invites",
    "from_texts",
    # Exceptions
    "GameWireError",
    "EncodeError",
    "UnknownOperationError",
    "UnknownGameError",
    "InvalidSessionIdError",
    "FormatMismatch",
    "ProtocolError",
    "TruncatedPayloadError",
    "UnsupportedVersionError",
]
