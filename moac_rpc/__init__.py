"""JSON-RPC client for MOAC nodes."""

from .config import ClientConfig
from .rpc import BaseRPC, Chain3RPC, McRPC, MoacRPC, NetRPC
from .transport import RequestsTransport, Transport, default_transport
from .types import (
    Block,
    BlockNumberType,
    FilterParams,
    Log,
    SyncStatus,
    Transaction,
    TransactionParams,
    TransactionReceipt,
)

__all__ = [
    "BaseRPC",
    "Block",
    "BlockNumberType",
    "Chain3RPC",
    "ClientConfig",
    "FilterParams",
    "Log",
    "McRPC",
    "MoacRPC",
    "NetRPC",
    "RequestsTransport",
    "SyncStatus",
    "Transaction",
    "TransactionParams",
    "TransactionReceipt",
    "Transport",
    "default_transport",
]
