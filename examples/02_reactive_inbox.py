#!/usr/bin/env python3
"""
02_reactive_inbox.py - Reactive Invite Processing

This example demonstrates:
- Feeding transport texts into an InviteInbox
- Filtering and transforming invites with RxPY operators
- Answering invites with the encode_invites() operator
- Replaying a store-and-forward backlog with from_texts()

Prerequisites:
    - pygamewire installed

Run with:
    python 02_reactive_inbox.py
"""

from reactivex import operators as ops

from pygamewire import InviteInbox, encode_invites, from_texts


def inbox_example():
    """Push-based inbox example"""
    print("Invite Inbox Example")
    print("-" * 50)

    sent = []

    with InviteInbox() as inbox:
        inbox.invites().pipe(
            ops.filter(lambda m: m.op == "create"),
            ops.map(lambda m: m.accept()),
            encode_invites(),
        ).subscribe(on_next=sent.append)

        # Texts as they would arrive from the radio
        for text in ["hello there", "gw:AAESqzQ", "gw:AQESqzQ"]:
            print(f"received: {text}")
            inbox.push(text)

    print(f"replies sent: {sent}")


def backlog_example():
    """Backlog replay example"""
    print("\nBacklog Replay Example")
    print("-" * 50)

    backlog = [
        '{"type":"game","op":"create","game":"tic_tac_toe","id":"abc123"}',
        "ping",
        "gw:AgESqzQ",
    ]
    from_texts(backlog).subscribe(
        on_next=lambda m: print(f"{m.op:>8} {m.game} {m.id}"),
    )


if __name__ == "__main__":
    inbox_example()
    backlog_example()
