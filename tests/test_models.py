# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for GameWire pydantic models."""

import pytest
from pydantic import ValidationError

from pygamewire.models import InviteMessage
from pygamewire.protocol import Operation


class TestInviteMessage:
    """Tests for InviteMessage."""

    def test_defaults(self) -> None:
        """Test a bare message is a game message with no fields."""
        message = InviteMessage()
        assert message.type == "game"
        assert message.op is None
        assert message.to_dict() == {"type": "game"}

    def test_type_is_fixed(self) -> None:
        """Test only "game" messages can be built."""
        with pytest.raises(ValidationError):
            InviteMessage(type="chat")

    def test_frozen(self) -> None:
        """Test messages are immutable."""
        message = InviteMessage(op="create", game="tic_tac_toe", id="12ab34")
        with pytest.raises(ValidationError):
            message.op = "accept"

    def test_operation(self) -> None:
        """Test the operation accessor."""
        assert InviteMessage(op="decline").operation is Operation.DECLINE
        assert InviteMessage(op="join").operation is None
        assert not InviteMessage(op="join").is_reserved_operation

    def test_session_id(self) -> None:
        """Test the integer session id accessor."""
        assert InviteMessage(id="12ab34").session_id == 0x12AB34
        assert InviteMessage(id=0x1FFFFFF).session_id == 0xFFFFFF
        assert InviteMessage(id="not hex").session_id is None
        assert InviteMessage(id="0x12ab34").session_id is None
        assert InviteMessage(id=True).session_id is None
        assert InviteMessage(id=1.5).session_id is None
        assert InviteMessage(id=["12ab34"]).session_id is None
        assert InviteMessage().session_id is None

    def test_accept_and_decline(self) -> None:
        """Test response records keep game and session."""
        invite = InviteMessage(op="create", game="tic_tac_toe", id="12ab34")

        accepted = invite.accept()
        assert accepted.to_dict() == {
            "type": "game",
            "op": "accept",
            "game": "tic_tac_toe",
            "id": "12ab34",
        }
        assert invite.decline().op == "decline"
        assert invite.respond("create").op == "create"

    def test_to_dict_keeps_extras(self) -> None:
        """Test extra fields survive validation and to_dict."""
        obj = {"type": "game", "op": "create", "game": "tic_tac_toe", "id": "abc123", "ts": 5}
        assert InviteMessage.model_validate(obj).to_dict() == obj

    def test_op_code_not_dumped(self) -> None:
        """Test the raw operation code is not part of the record."""
        message = InviteMessage(op=None, game="tic_tac_toe", id="000001", op_code=4)
        assert message.is_reserved_operation
        assert message.to_dict() == {"type": "game", "op": None, "game": "tic_tac_toe", "id": "000001"}
