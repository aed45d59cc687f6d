"""Text messages between paired peers: framing and a one-slot receive mailbox."""

from __future__ import annotations

import re
import threading

MAX_PAYLOAD = 200
CHANNEL = 10

_HEX = r"\s*(?:0[xX])?([0-9a-fA-F]+)"
_BSSID = re.compile(":".join([_HEX] * 6))


def decode(data: bytes) -> str:
    """Turn received bytes into text."""
    return bytes(data).decode("utf-8", errors="replace")


def encode(text: str) -> bytes:
    """Turn text into bytes for sending; ValueError if it exceeds MAX_PAYLOAD."""
    payload = text.encode("utf-8")
    if len(payload) > MAX_PAYLOAD:
        raise ValueError(f"message of {len(payload)} bytes exceeds {MAX_PAYLOAD}")
    return payload


def parse_bssid(text: str) -> bytes:
    """Parse a colon-separated hardware address into six bytes."""
    match = _BSSID.match(text)
    if match is None:
        raise ValueError(f"not a hardware address: {text!r}")
    return bytes(int(part, 16) & 0xFF for part in match.groups())


class Mailbox:
    """Holds the most recently received message until it is taken."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._message = ""

    def deliver(self, data: bytes) -> None:
        """Store received bytes, replacing any message not yet taken."""
        text = decode(data)
        with self._lock:
            self._message = text

    def available(self) -> bool:
        """True when a non-empty message is waiting."""
        with self._lock:
            return bool(self._message)

    def receive(self) -> str:
        """Take the waiting message, leaving the mailbox empty."""
        with self._lock:
            message, self._message = self._message, ""
        return message