"""
Query a MOAC node from the command-line.

Example:
    ```console
    moacrpc --url http://127.0.0.1:8545 balance 0x7312f4b8a4457a36827f185325fd6b66a3f8bb8b
    moacrpc block latest --full
    moacrpc call mc_getBlockTransactionCountByNumber '"0x1b4"'
    ```
"""

import json
from typing import Any, Tuple

import click
from rich.console import Console

from moac_base_types import to_json
from moac_exceptions import MoacRPCError
from moac_rpc import ClientConfig, MoacRPC
from moac_rpc.logging import LogLevel, configure_logging, get_logger

DEFAULT_URL = "http://127.0.0.1:8545"
BLOCK_TAGS = ("latest", "earliest", "pending")

console = Console(soft_wrap=True)


class BlockParamType(click.ParamType):
    """A block number (decimal or `0x` hex) or one of the symbolic block tags."""

    name = "block"

    def convert(self, value: Any, param, ctx) -> int | str:
        """Convert the value to an int unless it is a block tag."""
        if isinstance(value, int) or value in BLOCK_TAGS:
            return value
        try:
            return int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is neither a block number nor one of {BLOCK_TAGS}", param, ctx)


BLOCK = BlockParamType()


def parse_param(value: str) -> Any:
    """Parse a command-line param as JSON, keeping it as a string when it is not valid JSON."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def print_result(result: Any) -> None:
    """Print a result as JSON."""
    console.print_json(data=to_json(result))


def run(ctx: click.Context, method: str, *args: Any) -> None:
    """Call a client method and print its result, reporting RPC failures as CLI errors."""
    rpc: MoacRPC = ctx.obj
    try:
        result = getattr(rpc, method)(*args)
    except MoacRPCError as e:
        raise click.ClickException(str(e)) from e
    print_result(result)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--url",
    envvar="MOAC_RPC_URL",
    default=DEFAULT_URL,
    show_default=True,
    help="JSON-RPC endpoint of the node (also read from MOAC_RPC_URL).",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log the raw request and response of every call.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for the node.",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL, or a number.",
)
@click.pass_context
def moacrpc(ctx: click.Context, url: str, debug: bool, timeout: float | None, log_level: str):
    """Query a MOAC node over JSON-RPC."""
    try:
        level = LogLevel.from_cli(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e
    if debug:
        level = min(level, LogLevel.from_cli("INFO"))
    configure_logging(level)

    config = ClientConfig(url=url, debug=debug, timeout=timeout)
    ctx.obj = MoacRPC.from_config(config, logger=get_logger("moacrpc"))


@moacrpc.command()
@click.argument("method")
@click.argument("params", nargs=-1)
@click.pass_context
def call(ctx: click.Context, method: str, params: Tuple[str, ...]):
    """Call METHOD with PARAMS and print the raw result. Params are parsed as JSON."""
    run(ctx, "invoke", method, *[parse_param(param) for param in params])


@moacrpc.command("block-number")
@click.pass_context
def block_number(ctx: click.Context):
    """Print the number of the most recent block."""
    run(ctx, "block_number")


@moacrpc.command()
@click.argument("address")
@click.option("--block", type=BLOCK, default="latest", show_default=True)
@click.pass_context
def balance(ctx: click.Context, address: str, block: int | str):
    """Print the balance of ADDRESS in wei."""
    run(ctx, "get_balance", address, block)


@moacrpc.command()
@click.pass_context
def syncing(ctx: click.Context):
    """Print the sync status of the node."""
    run(ctx, "syncing")


@moacrpc.command()
@click.argument("number", type=BLOCK)
@click.option("--full", is_flag=True, default=False, help="Include full transaction objects.")
@click.pass_context
def block(ctx: click.Context, number: int | str, full: bool):
    """Print the block NUMBER, a block number or tag."""
    run(ctx, "get_block_by_number", number, full)


@moacrpc.command()
@click.argument("transaction_hash")
@click.pass_context
def receipt(ctx: click.Context, transaction_hash: str):
    """Print the receipt of the transaction TRANSACTION_HASH."""
    run(ctx, "get_transaction_receipt", transaction_hash)


if __name__ == "__main__":
    moacrpc()
