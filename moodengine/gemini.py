"""Minimal client for asking short questions of a generative language API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Callable, Mapping

DEFAULT_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-1.5-flash:generateContent"
)
DEFAULT_MAX_TOKENS = 300
QUESTION_SUFFIX = " [tell me about this in shortest token possible with important detail info only]"
_ACCEPTED_STATUS = frozenset({200, 301})
_C_SPACE = frozenset(" \t\n\v\f\r")

Transport = Callable[[str, bytes, Mapping[str, str]], "tuple[int, str]"]


class GeminiError(Exception):
    """Raised when a question cannot be answered."""


def _urllib_transport(url: str, body: bytes, headers: Mapping[str, str]) -> tuple[int, str]:
    request = urllib.request.Request(url, data=body, headers=dict(headers), method="POST")
    try:
        with urllib.request.urlopen(request) as response:
            return response.status, response.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read().decode("utf-8", errors="replace")
    except urllib.error.URLError as exc:
        raise GeminiError(f"unable to connect: {exc.reason}") from exc


def filter_answer(text: str) -> str:
    """Replace every character that is not an ASCII letter, digit or space with blanks.

    A non-ASCII character becomes one blank per byte of its UTF-8 encoding.
    """
    pieces = []
    for char in text:
        if char.isascii() and (char.isalnum() or char in _C_SPACE):
            pieces.append(char)
        else:
            pieces.append(" " * len(char.encode("utf-8")))
    return "".join(pieces)


class GeminiClient:
    """Sends a question and returns a short, plain-text answer."""

    def __init__(
        self,
        ssid: str,
        password: str,
        token: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        endpoint: str = DEFAULT_ENDPOINT,
        transport: Transport | None = None,
    ) -> None:
        self.ssid = ssid
        self.password = password
        self.token = token
        self.max_tokens = max_tokens
        self.endpoint = endpoint
        self._transport = transport or _urllib_transport

    @property
    def url(self) -> str:
        """Request URL including the access key."""
        return f"{self.endpoint}?key={self.token}"

    def build_payload(self, question: str) -> str:
        """JSON request body asking ``question`` with the output token limit."""
        return json.dumps(
            {
                "contents": [{"parts": [{"text": question + QUESTION_SUFFIX}]}],
                "generationConfig": {"maxOutputTokens": self.max_tokens},
            }
        )

    def ask(self, question: str) -> str:
        """Ask a question and return the filtered answer text.

        Raises GeminiError when the request fails or the reply has no answer.
        """
        body = self.build_payload(question).encode("utf-8")
        status, reply = self._transport(self.url, body, {"Content-Type": "application/json"})
        if status not in _ACCEPTED_STATUS:
            raise GeminiError(f"request failed with status {status}")
        try:
            answer = json.loads(reply)["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise GeminiError("reply holds no answer") from exc
        if not isinstance(answer, str):
            raise GeminiError("reply holds no answer")
        return filter_answer(answer.strip())