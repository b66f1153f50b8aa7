# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Custom exceptions for the GameWire codec.

All exceptions inherit from GameWireError, so every codec failure can be
caught with a single except clause:

    try:
        token = encode({"op": "create", "game": "tic_tac_toe"})
    except GameWireError as e:
        print(f"GameWire error: {e}")

Only encoding raises. Decoding treats its input as untrusted transport data
and returns None for anything it does not understand.
"""

from __future__ import annotations

from typing import Any


class GameWireError(Exception):
    """
    Base exception for all GameWire errors.

    All GameWire exceptions inherit from this class, allowing you to catch
    all codec-related errors with a single except clause.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        self.hint = hint
        if hint:
            message = f"{message}\n\n  Hint: {hint}"
        super().__init__(message)


class EncodeError(GameWireError):
    """Base exception for errors raised while encoding a record."""


class UnknownOperationError(EncodeError):
    """
    Raised when a record names an operation outside the closed set.

    Only "create", "accept" and "decline" can be put on the wire. Codes
    3-15 are reserved and have no name yet.
    """

    def __init__(self, op: Any) -> None:
        self.op = op
        super().__init__(
            f"Unknown operation: {op!r}",
            hint="Use one of 'create', 'accept' or 'decline'",
        )


class UnknownGameError(EncodeError):
    """
    Raised when a record names a game that is not in the registry.

    Placeholder identifiers produced by decode (e.g. "code_200") are not
    registered and cannot be encoded back.
    """

    def __init__(self, game: Any) -> None:
        self.game = game
        super().__init__(
            f"Unknown game: {game!r}",
            hint="Register the game in pygamewire.registry.GAME_CODES with a new, never reused code",
        )


class InvalidSessionIdError(EncodeError):
    """Raised when a session id is neither an integer nor a hex string."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid session id: {value!r}",
            hint="Pass an int or a hex string such as '12ab34', or omit it to generate one",
        )


class FormatMismatch(GameWireError):
    """
    Raised by a format recognizer when the text is not in its format.

    The decoder catches it and moves on to the next recognizer. A recognizer
    that returns None instead has claimed the text and stops the search.
    """

    def __init__(self, form: str, reason: str = "") -> None:
        self.form = form
        self.reason = reason
        message = f"Not a {form} message"
        if reason:
            message += f": {reason}"
        super().__init__(message)
