"""Exceptions raised by the MOAC JSON-RPC client."""

from typing import Any


class MoacRPCError(Exception):
    """Base class for every error raised while performing an RPC call."""

    pass


class TransportError(MoacRPCError):
    """The request could not be delivered or the response could not be read."""

    pass


class EncodeError(MoacRPCError, ValueError):
    """Request parameters could not be serialized to the wire format."""

    pass


class DecodeError(MoacRPCError, ValueError):
    """A response body, envelope or typed field could not be parsed."""

    method: str | None
    payload: Any

    def __init__(self, message: str, *, method: str | None = None, payload: Any = None):
        """Initialize the DecodeError with the method and payload that failed to decode."""
        super().__init__(message)
        self.method = method
        self.payload = payload

    def __str__(self) -> str:
        """Return string representation of the DecodeError."""
        message = super().__str__()
        if self.method is not None:
            message = f"{self.method}: {message}"
        if self.payload is not None:
            message = f"{message} (payload={self.payload!r})"
        return message


class RpcError(MoacRPCError):
    """The node rejected the call with a JSON-RPC error object."""

    code: int
    message: str
    data: Any

    def __init__(self, code: int | str, message: str, data: Any = None, **kwargs):
        """Initialize the RpcError."""
        super().__init__(code, message)
        self.code = int(code)
        self.message = message
        self.data = data

    def __str__(self) -> str:
        """Return string representation of the RpcError."""
        return f"Error {self.code} ({self.message})"
