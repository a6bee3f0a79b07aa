"""Command-line interface for read-only strategy contract queries."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .chains.cosmwasm import LcdClient
from .client import LidoStrategyClient
from .config import load_config
from .logging_setup import configure_logging
from .models import CalcDepositArgs, CalcWithdrawArgs, Delegation, is_uint128


def uint128_arg(value: str) -> str:
    """argparse type: a decimal u128 amount, returned unchanged."""
    if not is_uint128(value):
        raise argparse.ArgumentTypeError(f"not a decimal u128 amount: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="lido-strategy",
        description="Query the lidoStrategy contract",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: ./config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("config", help="Show the contract configuration")

    for name, help_text in (
        ("calc-deposit", "Ideal delegations after a deposit"),
        ("calc-withdraw", "Ideal delegations after a withdrawal"),
    ):
        calc = sub.add_parser(name, help=help_text)
        calc.add_argument(
            "amount", type=uint128_arg, help="Amount as a decimal integer string"
        )
        calc.add_argument(
            "--delegations",
            required=True,
            type=Path,
            help="JSON file with a list of {stake, valoper_address, weight}",
        )

    return parser


def load_delegations(path: Path) -> tuple[Delegation, ...]:
    """Read current delegations from a JSON array file."""
    with open(path) as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of delegations")
    delegations = tuple(Delegation.from_dict(item) for item in raw)
    for d in delegations:
        if not is_uint128(d.stake):
            raise ValueError(
                f"{path}: stake of {d.valoper_address} is not a decimal u128: {d.stake!r}"
            )
    return delegations


async def _run(args: argparse.Namespace) -> Any:
    """Execute the selected command and return a JSON-serializable result."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    client = LidoStrategyClient(LcdClient(config.chain), config.contract.address)

    if args.command == "config":
        return asdict(await client.query_config())
    if args.command == "calc-deposit":
        result = await client.query_calc_deposit(
            CalcDepositArgs(load_delegations(args.delegations), args.amount)
        )
        return [asdict(d) for d in result]
    if args.command == "calc-withdraw":
        result = await client.query_calc_withdraw(
            CalcWithdrawArgs(load_delegations(args.delegations), args.amount)
        )
        return [asdict(d) for d in result]
    raise ValueError(f"Unknown command: {args.command}")


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    output = asyncio.run(_run(args))
    print(json.dumps(output, indent=2))
