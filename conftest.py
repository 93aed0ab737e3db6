"""Local pytest configuration used on multiple framework tests."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

import pytest


@dataclass
class FakeResponse:
    """Response returned by `FakeTransport`."""

    content: bytes
    status_code: int = 200


@dataclass
class FakeTransport:
    """
    Transport that records the requests it receives and answers with queued bodies.

    Queued dicts are JSON-encoded, bytes are returned verbatim and exceptions are raised.
    """

    replies: List[Any] = field(default_factory=list)
    requests: List[Dict[str, Any]] = field(default_factory=list)
    status_code: int = 200

    def reply(self, *replies: Any) -> "FakeTransport":
        """Queue replies for the next requests."""
        self.replies.extend(replies)
        return self

    def reply_result(self, result: Any) -> "FakeTransport":
        """Queue a successful response carrying `result`."""
        return self.reply({"id": 1, "jsonrpc": "2.0", "result": result})

    def post(self, url, data=None, *, headers=None, timeout=None) -> FakeResponse:
        """Record the request and return the next queued reply."""
        self.requests.append(
            {
                "url": url,
                "body": data,
                "json": json.loads(data),
                "headers": headers,
                "timeout": timeout,
            }
        )
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if not isinstance(reply, bytes):
            reply = json.dumps(reply).encode()
        return FakeResponse(content=reply, status_code=self.status_code)

    @property
    def last_request(self) -> Dict[str, Any]:
        """Return the JSON body of the last request."""
        return self.requests[-1]["json"]


@dataclass
class FakeLogger:
    """Logger that keeps the formatted lines it receives."""

    lines: List[str] = field(default_factory=list)

    def info(self, msg: object, *args: Any) -> None:
        """Store the formatted line."""
        self.lines.append(str(msg) % args if args else str(msg))


@pytest.fixture
def transport() -> FakeTransport:
    """Return a transport with no queued replies."""
    return FakeTransport()


@pytest.fixture
def fake_logger() -> FakeLogger:
    """Return a logger collecting lines in memory."""
    return FakeLogger()
