"""Types used in the RPC module for the `mc`, `net` and `chain3` namespaces' requests."""

from typing import Any, List, Literal, Self, Union

from pydantic import (
    BaseModel,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from moac_base_types import CamelModel, Quantity, Wei, int_to_hex
from moac_exceptions import DecodeError

BlockNumberType = Union[int, Literal["latest", "earliest", "pending"]]

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1


def block_tag(block: BlockNumberType | str) -> str:
    """Return the wire representation of a block number or tag."""
    if isinstance(block, int):
        return int_to_hex(block)
    return block


class RPCRequest(BaseModel):
    """JSON-RPC 2.0 request envelope."""

    id: int = REQUEST_ID
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: List[Any] = Field(default_factory=list)


class RPCErrorObject(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int
    message: str = ""
    data: Any = None

    @field_validator("message", mode="before")
    @classmethod
    def null_message(cls, message: Any) -> Any:
        """Read a `null` message as an empty one."""
        return "" if message is None else message


class RPCResponse(BaseModel):
    """
    JSON-RPC 2.0 response envelope.

    A `null` result is a valid answer, so only the absence of both members is rejected.
    """

    id: int | str | None = None
    jsonrpc: str = JSONRPC_VERSION
    result: Any = None
    error: RPCErrorObject | None = None

    @model_validator(mode="before")
    @classmethod
    def require_result_or_error(cls, data: Any) -> Any:
        """Reject envelopes carrying neither a result nor an error."""
        if isinstance(data, dict) and "result" not in data and data.get("error") is None:
            raise ValueError("response has neither a result nor an error")
        return data


class Transaction(CamelModel):
    """Transaction as returned by the node."""

    hash: str = ""
    nonce: Quantity = Quantity(0)
    block_hash: str = ""
    block_number: Quantity | None = None
    transaction_index: Quantity | None = None
    sender: str = Field("", alias="from")
    to: str | None = None
    value: Wei = Wei(0)
    gas: Quantity = Quantity(0)
    gas_price: Wei = Wei(0)
    input: str = ""


class TransactionParams(CamelModel):
    """Transaction object sent to `mc_sendTransaction`, `mc_call` and `mc_estimateGas`."""

    sender: str = Field(..., alias="from")
    to: str | None = None
    gas: Quantity | None = None
    gas_price: Wei | None = None
    value: Wei | None = None
    data: str | None = None
    nonce: Quantity | None = None


class Log(CamelModel):
    """Log entry emitted by a transaction."""

    removed: bool = False
    log_index: Quantity = Quantity(0)
    transaction_index: Quantity = Quantity(0)
    transaction_hash: str = ""
    block_number: Quantity = Quantity(0)
    block_hash: str = ""
    address: str = ""
    data: str = ""
    topics: List[str] = Field(default_factory=list)


class TransactionReceipt(CamelModel):
    """Receipt of a mined transaction."""

    transaction_hash: str = ""
    transaction_index: Quantity = Quantity(0)
    block_hash: str = ""
    block_number: Quantity = Quantity(0)
    sender: str | None = Field(None, alias="from")
    to: str | None = None
    cumulative_gas_used: Quantity = Quantity(0)
    gas_used: Quantity = Quantity(0)
    contract_address: str | None = None
    logs: List[Log] = Field(default_factory=list)
    logs_bloom: str = ""
    root: str = ""
    status: str = ""


class FilterParams(CamelModel):
    """Query description sent to `mc_newFilter` and `mc_getLogs`."""

    from_block: BlockNumberType | str | None = None
    to_block: BlockNumberType | str | None = None
    address: List[str] | None = None
    topics: List[str | List[str] | None] | None = None

    @field_serializer("from_block", "to_block")
    def serialize_block(self, block: BlockNumberType | str | None) -> str | None:
        """Send block numbers as hex quantities."""
        if block is None:
            return None
        return block_tag(block)


class Block(CamelModel):
    """
    Block as returned by `mc_getBlockByHash` and `mc_getBlockByNumber`.

    The node sends either a list of transaction hashes or a list of transaction objects.
    Both shapes decode into `transactions`; with hashes only, each transaction carries
    just its `hash`. `full_transactions` records which shape was requested.
    """

    number: Quantity = Quantity(0)
    hash: str = ""
    parent_hash: str = ""
    nonce: str = ""
    sha3_uncles: str = ""
    logs_bloom: str = ""
    transactions_root: str = ""
    state_root: str = ""
    receipts_root: str = ""
    miner: str = ""
    difficulty: Wei = Wei(0)
    total_difficulty: Wei = Wei(0)
    extra_data: str = ""
    size: Quantity = Quantity(0)
    gas_limit: Quantity = Quantity(0)
    gas_used: Quantity = Quantity(0)
    timestamp: Quantity = Quantity(0)
    uncles: List[str] = Field(default_factory=list)
    full_transactions: bool = Field(False, exclude=True)
    transactions: List[Transaction] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_transactions(cls, data: Any, info: ValidationInfo) -> Any:
        """
        Turn a list of hashes into hash-only transactions.

        The expected shape comes from the `full_transactions` validation context; without
        it, the shape is inferred from the list items.
        """
        if not isinstance(data, dict):
            return data
        full: bool | None = None
        if info.context and "full_transactions" in info.context:
            full = bool(info.context["full_transactions"])
        transactions = data.get("transactions")
        if not isinstance(transactions, list):
            return data if full is None else data | {"full_transactions": full}
        if full is None:
            full = any(not isinstance(transaction, str) for transaction in transactions)
        normalized = []
        for transaction in transactions:
            if isinstance(transaction, str):
                if full:
                    raise ValueError("expected transaction objects, got a transaction hash")
                normalized.append({"hash": transaction})
            else:
                if not full:
                    raise ValueError("expected transaction hashes, got a transaction object")
                normalized.append(transaction)
        return data | {"transactions": normalized, "full_transactions": full}

    @property
    def transaction_hashes(self) -> List[str]:
        """Return the hashes of the block transactions."""
        return [transaction.hash for transaction in self.transactions]


class SyncStatus(CamelModel):
    """
    Sync status of the node.

    The node answers `false` when it is not syncing, which decodes to a status with
    `is_syncing` unset and every block number at zero.
    """

    is_syncing: bool = False
    starting_block: Quantity = Quantity(0)
    current_block: Quantity = Quantity(0)
    highest_block: Quantity = Quantity(0)

    @classmethod
    def from_result(cls, result: Any) -> Self:
        """Decode the result of `mc_syncing`."""
        if result is False:
            return cls()
        if not isinstance(result, dict):
            raise DecodeError("expected sync status object or false", payload=result)
        return cls.model_validate(result | {"isSyncing": True})
