# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
GameWire Binary Payload.

Payload Format (5 bytes, big-endian):
    +---------------+---------------+---------------+---------------+---------------+
    | Ver   | Op    | Game          | SID[23:16]    | SID[15:8]     | SID[7:0]      |
    +---------------+---------------+---------------+---------------+---------------+

Fields:
    - Ver (high nibble of byte 0): Payload version (0)
    - Op (low nibble of byte 0): Operation code (0=create, 1=accept,
      2=decline, 3-15 reserved)
    - Game (1 byte): Game code from the registry (0 is reserved)
    - SID (3 bytes): 24-bit session id correlating an invite with its replies

No sender identity or timestamp is carried: the transport envelope already
has the sender, and the receiver stamps the local receipt time.

Example:
    ver=0, op=create, game=tic_tac_toe(1), sid=0x12AB34
    bytes: 00 01 12 AB 34
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from .exceptions import GameWireError

# Protocol constants
PROTOCOL_VERSION: int = 0
PAYLOAD_SIZE: int = 5
NIBBLE_MASK: int = 0x0F
BYTE_MASK: int = 0xFF
SESSION_ID_MASK: int = 0xFFFFFF

# Byte 0 (version << 4 | op), byte 1 (game), byte 2 (sid high), bytes 3-4 (sid low)
_PAYLOAD_STRUCT = struct.Struct(">BBBH")


class Operation(IntEnum):
    """Operation codes for GameWire invite/response messages."""

    CREATE = 0x0
    ACCEPT = 0x1
    DECLINE = 0x2

    # 0x3-0xF reserved

    @property
    def wire_name(self) -> str:
        """Name used in decoded records and legacy JSON ("create", ...)."""
        return self.name.lower()

    @classmethod
    def lookup(cls, code: int) -> Operation | None:
        """Return the operation for a wire code, or None for reserved codes."""
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: object) -> Operation | None:
        """Return the operation for a record name, or None if it has none."""
        if not isinstance(name, str):
            return None
        code = OPERATION_CODES.get(name)
        return None if code is None else cls(code)


OPERATION_CODES: Mapping[str, int] = MappingProxyType(
    {op.wire_name: op.value for op in Operation}
)
OPERATION_NAMES: Mapping[int, str] = MappingProxyType(
    {code: name for name, code in OPERATION_CODES.items()}
)


@dataclass(frozen=True)
class Payload:
    """The 5-byte compact payload."""

    version: int
    op_code: int
    game_code: int
    session_id: int

    @property
    def operation(self) -> Operation | None:
        """Named operation, or None if op_code is reserved."""
        return Operation.lookup(self.op_code)

    def to_bytes(self) -> bytes:
        """Serialize payload to bytes."""
        if not 0 <= self.version <= NIBBLE_MASK:
            raise ValueError(f"Version out of range: {self.version}")
        if not 0 <= self.op_code <= NIBBLE_MASK:
            raise ValueError(f"Operation code out of range: {self.op_code}")
        if not 0 <= self.game_code <= BYTE_MASK:
            raise ValueError(f"Game code out of range: {self.game_code}")

        sid = self.session_id & SESSION_ID_MASK
        return _PAYLOAD_STRUCT.pack(
            (self.version << 4) | self.op_code,
            self.game_code,
            sid >> 16,
            sid & 0xFFFF,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Payload:
        """
        Deserialize payload from bytes.

        Bytes past the fifth are ignored. The version is returned as read;
        use decode_payload() to also enforce it.
        """
        if len(data) < PAYLOAD_SIZE:
            raise TruncatedPayloadError(len(data))

        b0, game_code, sid_high, sid_low = _PAYLOAD_STRUCT.unpack(data[:PAYLOAD_SIZE])
        return cls(
            version=(b0 >> 4) & NIBBLE_MASK,
            op_code=b0 & NIBBLE_MASK,
            game_code=game_code,
            session_id=(sid_high << 16) | sid_low,
        )


class ProtocolError(GameWireError):
    """Base exception for payload errors."""


class TruncatedPayloadError(ProtocolError):
    """Raised when fewer than PAYLOAD_SIZE bytes are available."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Payload too short: {size} bytes, expected {PAYLOAD_SIZE}")
        self.size = size


class UnsupportedVersionError(ProtocolError):
    """Raised when the payload was written by a newer, unknown format version."""

    def __init__(self, received: int) -> None:
        super().__init__(
            f"Unsupported payload version: {received}, expected {PROTOCOL_VERSION}"
        )
        self.received = received


def encode_payload(op: Operation | int, game_code: int, session_id: int) -> bytes:
    """
    Build a version 0 payload.

    Args:
        op: Operation or raw 4-bit operation code.
        game_code: Registry code of the game.
        session_id: Session id; bits above 24 are dropped.

    Returns:
        Exactly PAYLOAD_SIZE bytes.
    """
    return Payload(
        version=PROTOCOL_VERSION,
        op_code=int(op),
        game_code=game_code,
        session_id=session_id,
    ).to_bytes()


def decode_payload(data: bytes) -> Payload:
    """
    Parse and validate a compact payload.

    Args:
        data: Raw payload bytes.

    Returns:
        Parsed Payload.

    Raises:
        TruncatedPayloadError: If data is shorter than PAYLOAD_SIZE.
        UnsupportedVersionError: If the version nibble is not PROTOCOL_VERSION.
    """
    payload = Payload.from_bytes(data)

    if payload.version != PROTOCOL_VERSION:
        raise UnsupportedVersionError(payload.version)

    return payload
