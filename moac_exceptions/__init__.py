"""Exceptions for failed MOAC JSON-RPC calls."""

from .exceptions import DecodeError, EncodeError, MoacRPCError, RpcError, TransportError

__all__ = [
    "DecodeError",
    "EncodeError",
    "MoacRPCError",
    "RpcError",
    "TransportError",
]
