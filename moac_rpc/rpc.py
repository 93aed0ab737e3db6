"""JSON-RPC methods and helper functions for MOAC nodes."""

import json
import warnings
from typing import Any, Callable, ClassVar, Dict, List, Type, TypeVar

import requests
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from moac_base_types import moac1, parse_big_int, parse_int, to_hex, to_json
from moac_exceptions import DecodeError, EncodeError, RpcError, TransportError

from .config import ClientConfig
from .logging import Logger, default_logger
from .transport import Transport, default_transport
from .types import (
    Block,
    BlockNumberType,
    FilterParams,
    Log,
    RPCRequest,
    RPCResponse,
    SyncStatus,
    Transaction,
    TransactionParams,
    TransactionReceipt,
    block_tag,
)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

STRICT = ConfigDict(strict=True)
STRING = TypeAdapter(str, config=STRICT)
BOOL = TypeAdapter(bool, config=STRICT)
STRING_LIST = TypeAdapter(List[str], config=STRICT)


class BaseRPC:
    """
    Represents a base RPC class for every RPC namespace of a MOAC node.

    Every call is a single synchronous request/response exchange and the client keeps
    no per-call state, so the request id is always 1.
    """

    namespace: ClassVar[str]

    def __init__(
        self,
        url: str,
        *,
        transport: Transport | None = None,
        logger: Logger | None = None,
        debug: bool = False,
        timeout: float | None = None,
        extra_headers: Dict[str, str] | None = None,
    ):
        """Initialize BaseRPC class with the given url."""
        if extra_headers is None:
            extra_headers = {}
        self.url = url
        self.transport = transport if transport is not None else default_transport()
        self.logger = logger if logger is not None else default_logger()
        self.debug = debug
        self.timeout = timeout
        self.extra_headers = extra_headers

    def __init_subclass__(cls, namespace: str | None = None, **kwargs) -> None:
        """Set namespace of the RPC class to the lowercase of the class name."""
        super().__init_subclass__(**kwargs)
        if namespace is None:
            namespace = cls.__name__
            if namespace.endswith("RPC"):
                namespace = namespace[:-3]
        cls.namespace = namespace.lower()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: Transport | None = None,
        logger: Logger | None = None,
    ):
        """Create a client from a `ClientConfig`."""
        return cls(
            config.url,
            transport=transport,
            logger=logger,
            debug=config.debug,
            timeout=config.timeout,
            extra_headers=dict(config.extra_headers),
        )

    def invoke(self, method: str, *params: Any) -> Any:
        """
        Send a JSON-RPC request for `method` and return the undecoded result.

        Raises `EncodeError` when the params cannot be serialized, `TransportError` when
        the node cannot be reached, `DecodeError` when the response is not a valid
        envelope and `RpcError` when the node answers with an error.
        """
        try:
            request = RPCRequest(method=method, params=[to_json(param) for param in params])
            body = json.dumps(
                request.model_dump(), separators=(",", ":"), allow_nan=False
            ).encode()
        except (TypeError, ValueError) as e:
            raise EncodeError(f"{method}: cannot serialize params: {e}") from e

        headers = {"Content-Type": "application/json"} | self.extra_headers
        try:
            response = self.transport.post(
                self.url, data=body, headers=headers, timeout=self.timeout
            )
            data = response.content
        except (requests.RequestException, OSError) as e:
            raise TransportError(f"{method}: {e}") from e

        if self.debug:
            self.logger.info(
                "%s Request: %s Response: %s",
                method,
                body.decode(),
                data.decode(errors="replace"),
            )

        try:
            envelope = RPCResponse.model_validate_json(data)
        except ValidationError as e:
            raise DecodeError(
                f"invalid response (HTTP {response.status_code}): {e}",
                method=method,
                payload=data,
            ) from e

        if envelope.error is not None:
            raise RpcError(**envelope.error.model_dump())
        return envelope.result

    def raw_call(self, method: str, *params: Any) -> Any:
        """Return the undecoded result of a method call (deprecated, use `invoke`)."""
        warnings.warn(
            "raw_call is deprecated, use invoke instead", DeprecationWarning, stacklevel=2
        )
        return self.invoke(method, *params)

    def post_request(self, method: str, *params: Any) -> Any:
        """Call `method` within the namespace of this class."""
        assert self.namespace, "RPC namespace not set"
        return self.invoke(f"{self.namespace}_{method}", *params)

    def _decode(self, method: str, result: Any, decoder: Callable[[Any], Any]) -> Any:
        """Apply `decoder` to a result, reporting failures as `DecodeError`."""
        try:
            return decoder(result)
        except DecodeError as e:
            raise DecodeError(
                e.args[0], method=f"{self.namespace}_{method}", payload=result
            ) from e
        except ValidationError as e:
            raise DecodeError(
                f"unexpected result: {e}", method=f"{self.namespace}_{method}", payload=result
            ) from e

    def post_request_as(
        self, method: str, adapter: TypeAdapter[T], *params: Any, default: T | None = None
    ) -> T:
        """
        Call `method` and validate its result with `adapter`, without type coercion.

        A `null` result returns `default` when one is given.
        """
        result = self.post_request(method, *params)
        if result is None and default is not None:
            return default
        return self._decode(method, result, adapter.validate_python)

    def post_request_int(self, method: str, *params: Any) -> int:
        """Call `method` and decode its result as a native integer quantity."""
        return self._decode(method, self.post_request(method, *params), parse_int)

    def post_request_big_int(self, method: str, *params: Any) -> int:
        """Call `method` and decode its result as an arbitrary-precision quantity."""
        return self._decode(method, self.post_request(method, *params), parse_big_int)

    def post_request_model(
        self, method: str, model: Type[M], *params: Any, context: Any | None = None
    ) -> M | None:
        """Call `method` and validate its result into `model`; `null` becomes `None`."""
        result = self.post_request(method, *params)
        if result is None:
            return None
        return self._decode(
            method, result, lambda value: model.model_validate(value, context=context)
        )

    def post_request_logs(self, method: str, *params: Any) -> List[Log]:
        """Call `method` and decode its result as a list of logs."""
        result = self.post_request(method, *params)
        if result is None:
            return []
        if not isinstance(result, list):
            raise DecodeError(
                "expected a list of logs", method=f"{self.namespace}_{method}", payload=result
            )
        return self._decode(
            method, result, lambda value: [Log.model_validate(entry) for entry in value]
        )


class Chain3RPC(BaseRPC):
    """Represents a `chain3_X` RPC class for the client utility methods."""

    def client_version(self) -> str:
        """`chain3_clientVersion`: Returns the current client version."""
        return self.post_request_as("clientVersion", STRING)

    def sha3(self, data: bytes) -> str:
        """`chain3_sha3`: Returns Keccak-256 (not the standardized SHA3-256) of the given data."""
        return self.post_request_as("sha3", STRING, to_hex(data))


class NetRPC(BaseRPC):
    """Represents a `net_X` RPC class for the network status methods."""

    def version(self) -> str:
        """`net_version`: Returns the current network protocol version."""
        return self.post_request_as("version", STRING)

    def listening(self) -> bool:
        """`net_listening`: Returns true if client is actively listening for connections."""
        return self.post_request_as("listening", BOOL)

    def peer_count(self) -> int:
        """`net_peerCount`: Returns number of peers currently connected to the client."""
        return self.post_request_int("peerCount")


class McRPC(BaseRPC):
    """Represents an `mc_X` RPC class for every MOAC chain method."""

    def protocol_version(self) -> str:
        """`mc_protocolVersion`: Returns the current moac protocol version."""
        return self.post_request_as("protocolVersion", STRING)

    def syncing(self) -> SyncStatus:
        """`mc_syncing`: Returns the sync status, not syncing when the node answers `false`."""
        return self._decode("syncing", self.post_request("syncing"), SyncStatus.from_result)

    def coinbase(self) -> str:
        """`mc_coinbase`: Returns the client coinbase address."""
        return self.post_request_as("coinbase", STRING)

    def mining(self) -> bool:
        """`mc_mining`: Returns true if client is actively mining new blocks."""
        return self.post_request_as("mining", BOOL)

    def hashrate(self) -> int:
        """`mc_hashrate`: Returns the number of hashes per second the node is mining with."""
        return self.post_request_int("hashrate")

    def gas_price(self) -> int:
        """`mc_gasPrice`: Returns the current price per gas in wei."""
        return self.post_request_big_int("gasPrice")

    def accounts(self) -> List[str]:
        """`mc_accounts`: Returns a list of addresses owned by client."""
        return self.post_request_as("accounts", STRING_LIST, default=[])

    def block_number(self) -> int:
        """`mc_blockNumber`: Returns the number of most recent block."""
        return self.post_request_int("blockNumber")

    def get_balance(self, address: str, block: BlockNumberType | str = "latest") -> int:
        """`mc_getBalance`: Returns the balance of the account of given address in wei."""
        return self.post_request_big_int("getBalance", address, block_tag(block))

    def get_storage_at(
        self, address: str, position: int, block: BlockNumberType | str = "latest"
    ) -> str:
        """`mc_getStorageAt`: Returns the value from a storage position at a given address."""
        return self.post_request_as(
            "getStorageAt", STRING, address, block_tag(position), block_tag(block)
        )

    def get_transaction_count(self, address: str, block: BlockNumberType | str = "latest") -> int:
        """`mc_getTransactionCount`: Returns the number of transactions sent from an address."""
        return self.post_request_int("getTransactionCount", address, block_tag(block))

    def get_block_transaction_count_by_hash(self, block_hash: str) -> int:
        """`mc_getBlockTransactionCountByHash`: Returns the number of transactions in a block."""
        return self.post_request_int("getBlockTransactionCountByHash", block_hash)

    def get_block_transaction_count_by_number(self, block_number: BlockNumberType) -> int:
        """`mc_getBlockTransactionCountByNumber`: Returns the number of transactions in a block."""
        return self.post_request_int("getBlockTransactionCountByNumber", block_tag(block_number))

    def get_uncle_count_by_block_hash(self, block_hash: str) -> int:
        """`mc_getUncleCountByBlockHash`: Returns the number of uncles in a block."""
        return self.post_request_int("getUncleCountByBlockHash", block_hash)

    def get_uncle_count_by_block_number(self, block_number: BlockNumberType) -> int:
        """`mc_getUncleCountByBlockNumber`: Returns the number of uncles in a block."""
        return self.post_request_int("getUncleCountByBlockNumber", block_tag(block_number))

    def get_code(self, address: str, block: BlockNumberType | str = "latest") -> str:
        """`mc_getCode`: Returns code at a given address."""
        return self.post_request_as("getCode", STRING, address, block_tag(block))

    def sign(self, address: str, data: str) -> str:
        """`mc_sign`: Signs data with a given address."""
        return self.post_request_as("sign", STRING, address, data)

    def send_transaction(self, transaction: TransactionParams) -> str:
        """
        `mc_sendTransaction`: Creates new message call transaction or a contract creation,
        if the data field contains code.
        """
        return self.post_request_as("sendTransaction", STRING, transaction)

    def send_raw_transaction(self, data: str) -> str:
        """`mc_sendRawTransaction`: Sends an already signed transaction."""
        return self.post_request_as("sendRawTransaction", STRING, data)

    def call(self, transaction: TransactionParams, block: BlockNumberType | str = "latest") -> str:
        """
        `mc_call`: Executes a new message call immediately without creating a transaction on
        the block chain.
        """
        return self.post_request_as("call", STRING, transaction, block_tag(block))

    def estimate_gas(self, transaction: TransactionParams) -> int:
        """`mc_estimateGas`: Returns the gas a transaction would use, without mining it."""
        return self.post_request_int("estimateGas", transaction)

    def get_block_by_hash(self, block_hash: str, with_transactions: bool) -> Block | None:
        """`mc_getBlockByHash`: Returns information about a block by hash."""
        return self.post_request_model(
            "getBlockByHash",
            Block,
            block_hash,
            with_transactions,
            context={"full_transactions": with_transactions},
        )

    def get_block_by_number(
        self, block_number: BlockNumberType, with_transactions: bool
    ) -> Block | None:
        """`mc_getBlockByNumber`: Returns information about a block by block number."""
        return self.post_request_model(
            "getBlockByNumber",
            Block,
            block_tag(block_number),
            with_transactions,
            context={"full_transactions": with_transactions},
        )

    def get_transaction_by_hash(self, transaction_hash: str) -> Transaction | None:
        """`mc_getTransactionByHash`: Returns transaction details."""
        return self.post_request_model("getTransactionByHash", Transaction, transaction_hash)

    def get_transaction_by_block_hash_and_index(
        self, block_hash: str, transaction_index: int
    ) -> Transaction | None:
        """`mc_getTransactionByBlockHashAndIndex`: Returns a transaction by block and position."""
        return self.post_request_model(
            "getTransactionByBlockHashAndIndex",
            Transaction,
            block_hash,
            block_tag(transaction_index),
        )

    def get_transaction_by_block_number_and_index(
        self, block_number: BlockNumberType, transaction_index: int
    ) -> Transaction | None:
        """`mc_getTransactionByBlockNumberAndIndex`: Returns a transaction by block and position."""
        return self.post_request_model(
            "getTransactionByBlockNumberAndIndex",
            Transaction,
            block_tag(block_number),
            block_tag(transaction_index),
        )

    def get_transaction_receipt(self, transaction_hash: str) -> TransactionReceipt | None:
        """
        `mc_getTransactionReceipt`: Returns the receipt of a transaction by transaction hash.

        The receipt is not available for pending transactions.
        """
        return self.post_request_model(
            "getTransactionReceipt", TransactionReceipt, transaction_hash
        )

    def get_compilers(self) -> List[str]:
        """`mc_getCompilers`: Returns a list of available compilers in the client."""
        return self.post_request_as("getCompilers", STRING_LIST, default=[])

    def new_filter(self, params: FilterParams) -> str:
        """`mc_newFilter`: Creates a new filter object."""
        return self.post_request_as("newFilter", STRING, params)

    def new_block_filter(self) -> str:
        """`mc_newBlockFilter`: Creates a filter that notifies when a new block arrives."""
        return self.post_request_as("newBlockFilter", STRING)

    def new_pending_transaction_filter(self) -> str:
        """`mc_newPendingTransactionFilter`: Creates a filter for new pending transactions."""
        return self.post_request_as("newPendingTransactionFilter", STRING)

    def uninstall_filter(self, filter_id: str) -> bool:
        """`mc_uninstallFilter`: Uninstalls a filter with given id."""
        return self.post_request_as("uninstallFilter", BOOL, filter_id)

    def get_filter_changes(self, filter_id: str) -> List[Log]:
        """`mc_getFilterChanges`: Returns the logs which occurred since the last poll."""
        return self.post_request_logs("getFilterChanges", filter_id)

    def get_filter_hashes(self, filter_id: str) -> List[str]:
        """
        `mc_getFilterChanges`: Returns the block or transaction hashes which arrived since the
        last poll of a block or pending transaction filter.
        """
        return self.post_request_as("getFilterChanges", STRING_LIST, filter_id, default=[])

    def get_filter_logs(self, filter_id: str) -> List[Log]:
        """`mc_getFilterLogs`: Returns all logs matching the filter with given id."""
        return self.post_request_logs("getFilterLogs", filter_id)

    def get_logs(self, params: FilterParams) -> List[Log]:
        """`mc_getLogs`: Returns all logs matching a given filter object."""
        return self.post_request_logs("getLogs", params)


class MoacRPC(McRPC, namespace="mc"):
    """
    Client for a MOAC node.

    Exposes the `mc_X` methods directly and the `chain3_X` and `net_X` methods through
    the `chain3` and `net` attributes, which share the transport, logger and options of
    this client.
    """

    chain3: Chain3RPC
    net: NetRPC

    def __init__(self, url: str, **kwargs: Any):
        """Initialize MoacRPC and its `chain3` and `net` clients with the given url."""
        super().__init__(url, **kwargs)
        shared = {
            "transport": self.transport,
            "logger": self.logger,
            "debug": self.debug,
            "timeout": self.timeout,
            "extra_headers": self.extra_headers,
        }
        self.chain3 = Chain3RPC(url, **shared)
        self.net = NetRPC(url, **shared)

    def moac1(self) -> int:
        """Return 1 MOAC expressed in wei (10^18)."""
        return moac1()
