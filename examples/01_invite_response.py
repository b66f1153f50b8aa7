#!/usr/bin/env python3
"""
01_invite_response.py - GameWire Invite and Response Example

This is the foundational example for the GameWire codec.

What this example demonstrates:
- Encoding an invite with encode()
- Decoding received text with decode()
- Replying with invite.accept() / invite.decline()
- Ignoring texts that are not game messages

Key Concepts:
- Token: "gw:" + 7 base64url characters, 10 ASCII characters in total
- Session id: 24-bit id shared by an invite and its responses
- Sender identity comes from the transport envelope, not the token

Prerequisites:
    - pygamewire installed: pip install -e .

Expected Output:
    === Sending an invite ===
    Token: gw:AAESqzQ (10 chars)

    === Receiving it ===
    Invite: create tic_tac_toe session 12ab34
    Reply:  gw:AQESqzQ

    === Other traffic ===
    'see you at 5' is not a game message
    '{"type":"chat","text":"hi"}' is not a game message

Run with:
    python 01_invite_response.py
"""

from pygamewire import UnknownGameError, decode, encode


def main():
    print("=== Sending an invite ===")
    token = encode({"op": "create", "game": "tic_tac_toe", "id": 0x12AB34})
    print(f"Token: {token} ({len(token)} chars)")

    print("\n=== Receiving it ===")
    invite = decode(token)
    print(f"Invite: {invite.op} {invite.game} session {invite.id}")
    print(f"Reply:  {encode(invite.accept())}")

    print("\n=== Other traffic ===")
    for text in ["see you at 5", '{"type":"chat","text":"hi"}']:
        if decode(text) is None:
            print(f"{text!r} is not a game message")

    # Encoding errors are caller bugs and raise
    try:
        encode({"op": "create", "game": "chess"})
    except UnknownGameError as e:
        print(f"\n✓ Caught: {e}")


if __name__ == "__main__":
    main()
