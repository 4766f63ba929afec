"""
orderhash: Main Entry Point

Command-line access to the encoding helpers.
Results go to stdout, one per line; logs are JSON lines.
"""
import sys
import json
import argparse
from pydantic import ValidationError
from .core.config import OrderHashConfig
from .core.errors import EncodingError, InvalidSignature
from .core.logger import configure_logging, get_logger
from .core.types import OrderComponents
from .encoding import (
    byte_source_from_config,
    compact_signature,
    derive_order_hash,
    execution_gas,
)

logger = get_logger("OrderHashCLI")

def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderhash",
        description="Order hash derivation and encoding tools"
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL from the environment"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    hash_cmd = commands.add_parser("hash", help="Derive the order hash of an OrderComponents JSON file")
    hash_cmd.add_argument(
        "--order",
        required=True,
        help="Path to OrderComponents JSON (camelCase or snake_case keys)"
    )

    compact_cmd = commands.add_parser("compact", help="Convert a signature to 64-byte compact form")
    compact_cmd.add_argument("signature", help="0x-prefixed 64- or 65-byte signature")

    gas_cmd = commands.add_parser("gas", help="Execution gas excluding intrinsic cost")
    gas_cmd.add_argument("--call-data", required=True, help="0x-prefixed transaction data")
    gas_cmd.add_argument("--gas-used", required=True, help="Reported gas used")

    random_cmd = commands.add_parser("random", help="Random hex from the configured byte source")
    random_cmd.add_argument("--bytes", type=non_negative_int, default=32, help="Bytes per value")
    random_cmd.add_argument("--count", type=non_negative_int, default=1, help="Number of values")

    return parser

def load_order_components(path: str) -> OrderComponents:
    with open(path, 'r') as f:
        return OrderComponents.model_validate(json.load(f))

def run(args: argparse.Namespace, config: OrderHashConfig) -> list:
    """
    Executes one command and returns the output lines.
    """
    if args.command == "hash":
        return [derive_order_hash(load_order_components(args.order))]
    if args.command == "compact":
        return [compact_signature(args.signature)]
    if args.command == "gas":
        return [str(execution_gas(args.call_data, args.gas_used))]
    if args.command == "random":
        source = byte_source_from_config(config)
        return [source.random_hex(args.bytes) for _ in range(args.count)]
    raise ValueError(f"Unknown command: {args.command}")

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Startup failures happen before logging exists
    try:
        config = OrderHashConfig.from_env()
        configure_logging(args.log_level or config.log_level)
    except ValueError as e:
        print(f"orderhash: configuration error: {e}", file=sys.stderr)
        return 1

    logger.debug("cli_started", command=args.command, config_hash=config.config_hash())

    try:
        lines = run(args, config)
    except (EncodingError, InvalidSignature, ValidationError, json.JSONDecodeError, ValueError, OSError) as e:
        logger.error("cli_command_failed", command=args.command, error=str(e))
        return 1

    for line in lines:
        print(line)
    return 0

if __name__ == "__main__":
    sys.exit(main())
