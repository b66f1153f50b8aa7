# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Game registry: symbolic game identifiers <-> single-byte wire codes.

The table is append-only. A code is implicitly persisted in every payload
already in transit, so once assigned it must never change or be reused.
Code 0 is reserved.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownGameError

PLACEHOLDER_PREFIX: str = "code_"

GAME_CODES: Mapping[str, int] = MappingProxyType({
    "tic_tac_toe": 1,
    # add new games here with the next free code
})

CODES_GAME: Mapping[int, str] = MappingProxyType(
    {code: game for game, code in GAME_CODES.items()}
)

if len(CODES_GAME) != len(GAME_CODES) or not all(1 <= c <= 0xFF for c in CODES_GAME):
    raise RuntimeError("GAME_CODES must map each game to a distinct code in 1..255")


def is_registered(game: object) -> bool:
    """Check whether a game identifier has a wire code."""
    return isinstance(game, str) and game in GAME_CODES


def game_code(game: object) -> int:
    """
    Get the wire code for a game identifier.

    Raises:
        UnknownGameError: If the game is not registered.
    """
    if not is_registered(game):
        raise UnknownGameError(game)
    return GAME_CODES[game]


def game_name(code: int, placeholder_prefix: str = PLACEHOLDER_PREFIX) -> str:
    """
    Get the game identifier for a wire code.

    Unregistered codes give a placeholder such as "code_200" so a receiver
    with an older registry can still show something for a newer sender's
    invite.
    """
    name = CODES_GAME.get(code)
    if name is None:
        return f"{placeholder_prefix}{code}"
    return name
