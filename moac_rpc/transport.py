"""HTTP transport used to deliver JSON-RPC requests to the node."""

from typing import Any, Dict, Protocol

import requests


class Response(Protocol):
    """The part of a `requests.Response` the client relies on."""

    status_code: int

    @property
    def content(self) -> bytes:
        """Return the full response body."""
        ...


class Transport(Protocol):
    """Anything able to POST a body to a URL, such as a `requests.Session`."""

    def post(
        self,
        url: str,
        data: Any = None,
        *,
        headers: Dict[str, str] | None = None,
        timeout: Any = None,
    ) -> Response:
        """Send a POST request and return the response."""
        ...


class RequestsTransport:
    """
    Transport that sends every request with `requests.post`.

    No connection state is kept between calls, so one instance can serve several threads.
    """

    def post(
        self,
        url: str,
        data: Any = None,
        *,
        headers: Dict[str, str] | None = None,
        timeout: Any = None,
    ) -> requests.Response:
        """Send a POST request and return the response."""
        return requests.post(url, data=data, headers=headers, timeout=timeout)


def default_transport() -> Transport:
    """Return the transport used when none is injected."""
    return RequestsTransport()
