# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Reactive Streams support for GameWire.

Provides RxPY operators that turn a stream of transport texts into invites,
and a stream of records into tokens, so a messaging layer can be wired to a
UI without hand-written filtering.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import reactivex as rx
from reactivex import Observable, Subject, operators as ops

from .codec import GameWireCodec, Record, default_codec
from .exceptions import GameWireError
from .models import InviteMessage


def decode_invites(
    codec: GameWireCodec | None = None,
) -> Callable[[Observable[str]], Observable[InviteMessage]]:
    """
    Create an operator that decodes texts and drops non-game messages.

    Example:
        >>> rx.of("hello", "gw:AAESqzQ").pipe(
        ...     decode_invites(),
        ... ).subscribe(on_next=lambda m: print(m.game))
        tic_tac_toe

    Args:
        codec: Codec to use (default: the shared default codec).

    Returns:
        Operator function for use with pipe().
    """
    codec = codec or default_codec()

    def _decode(source: Observable[str]) -> Observable[InviteMessage]:
        return source.pipe(
            ops.map(codec.decode),
            ops.filter(lambda message: message is not None),
        )

    return _decode


def encode_invites(
    codec: GameWireCodec | None = None,
) -> Callable[[Observable[Record]], Observable[str]]:
    """
    Create an operator that encodes records into transport tokens.

    An invalid record terminates the stream with its GameWireError.

    Args:
        codec: Codec to use (default: the shared default codec).

    Returns:
        Operator function for use with pipe().
    """
    codec = codec or default_codec()

    def _encode(source: Observable[Record]) -> Observable[str]:
        def subscribe(observer: Any, scheduler: Any = None) -> Any:
            def on_next(record: Record) -> None:
                try:
                    token = codec.encode(record)
                except GameWireError as e:
                    observer.on_error(e)
                    return
                observer.on_next(token)

            return source.subscribe(
                on_next=on_next,
                on_error=observer.on_error,
                on_completed=observer.on_completed,
                scheduler=scheduler,
            )

        return rx.create(subscribe)

    return _encode


class InviteInbox:
    """
    Push-based inbox for texts arriving from a transport callback.

    Example:
        >>> with InviteInbox() as inbox:
        ...     inbox.invites().subscribe(on_next=render_card)
        ...     transport.on_message(inbox.push)
    """

    def __init__(self, codec: GameWireCodec | None = None) -> None:
        self._codec = codec or default_codec()
        self._subject: Subject[str] = Subject()
        self._closed = False

    def push(self, text: str) -> None:
        """Feed one received text into the inbox."""
        if self._closed:
            return
        self._subject.on_next(text)

    def invites(self) -> Observable[InviteMessage]:
        """
        Get observable stream of invites.

        Returns:
            Observable stream of decoded InviteMessage objects.
        """
        return self._subject.pipe(decode_invites(self._codec))

    def close(self) -> None:
        """Complete the stream; later pushes are ignored."""
        if self._closed:
            return
        self._closed = True
        self._subject.on_completed()

    def __enter__(self) -> InviteInbox:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def from_texts(
    texts: Iterable[str],
    codec: GameWireCodec | None = None,
) -> Observable[InviteMessage]:
    """
    Create an Observable of the invites found in a batch of texts.

    Args:
        texts: Received texts, e.g. a store-and-forward backlog.
        codec: Codec to use (default: the shared default codec).

    Returns:
        Observable stream of decoded invites.
    """
    return rx.from_iterable(texts).pipe(decode_invites(codec))
