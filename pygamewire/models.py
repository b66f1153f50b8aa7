# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Pydantic models for the GameWire codec.

Provides the invite/response record handed to and returned by the codec, and
the codec configuration.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidSessionIdError
from .protocol import SESSION_ID_MASK, Operation
from .registry import PLACEHOLDER_PREFIX
from .session import parse_session_id

GAME_MESSAGE_TYPE = "game"


# ============================================================================
# Message Models
# ============================================================================


class InviteMessage(BaseModel):
    """
    A game invite or response.

    Decoded compact tokens always carry all four record fields, with ``id``
    rendered as 6 lowercase hex digits. Legacy JSON messages are kept exactly
    as the peer sent them, extra keys included; ``to_dict()`` gives back the
    original object.

    Example:
        >>> invite = decode("gw:AAESqzQ")
        >>> invite.op, invite.game, invite.id
        ('create', 'tic_tac_toe', '12ab34')
        >>> encode(invite.accept())
        'gw:AQESqzQ'
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["game"] = GAME_MESSAGE_TYPE
    # Legacy values are stored verbatim, e.g. "id": true stays True
    op: Any = None
    game: Any = None
    id: Any = None
    # Raw 4-bit code from a compact payload; None for legacy and caller-built records
    op_code: int | None = Field(default=None, exclude=True)

    @property
    def operation(self) -> Operation | None:
        """The named operation, or None for reserved or missing ones."""
        return Operation.from_name(self.op)

    @property
    def is_reserved_operation(self) -> bool:
        """True when a compact payload used an operation code with no name."""
        return self.op is None and self.op_code is not None

    @property
    def session_id(self) -> int | None:
        """Session id as an integer, or None if absent or not hex."""
        if isinstance(self.id, bool):
            return None
        if isinstance(self.id, int):
            return self.id & SESSION_ID_MASK
        if not isinstance(self.id, str):
            return None
        try:
            return parse_session_id(self.id)
        except InvalidSessionIdError:
            return None

    def respond(self, op: Operation | str) -> InviteMessage:
        """Build a response record for the same game and session."""
        name = op.wire_name if isinstance(op, Operation) else op
        return InviteMessage(op=name, game=self.game, id=self.id)

    def accept(self) -> InviteMessage:
        """Build the accept response to this invite."""
        return self.respond(Operation.ACCEPT)

    def decline(self) -> InviteMessage:
        """Build the decline response to this invite."""
        return self.respond(Operation.DECLINE)

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{type, op, game, id}`` dict, plus any legacy extras."""
        return {"type": self.type, **self.model_dump(exclude_unset=True)}


# ============================================================================
# Configuration Models
# ============================================================================


class CodecConfig(BaseModel):
    """Configuration for a GameWireCodec."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    accept_legacy_json: bool = Field(
        default=True,
        description="Decode raw JSON {type: 'game', ...} messages",
    )
    accept_legacy_prefixed: bool = Field(
        default=True,
        description="Decode 'gamewire:' + base64(JSON) messages",
    )
    placeholder_prefix: str = Field(
        default=PLACEHOLDER_PREFIX,
        description="Prefix of the identifier given to unregistered game codes",
    )

    @field_validator("placeholder_prefix")
    @classmethod
    def validate_placeholder_prefix(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Placeholder prefix must not be empty")
        return v
