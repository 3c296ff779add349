from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

import httpx
from pydantic import BaseModel

from aiindex.client.api import AIIndexClient
from aiindex.client.errors import AIIndexError
from aiindex.client.typed import TypedAIIndexClient
from aiindex.config.settings import get_settings
from aiindex.observability.logging import LOG_LEVELS, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aiindex",
        description="Query the AI index backend and print the JSON response",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Backend base address (default: AIINDEX_BASE_URL or http://localhost:8080)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: AIINDEX_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--typed",
        action="store_true",
        help="Validate responses against the endpoint schemas",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("index", help="Current index snapshot")
    history = commands.add_parser("history", help="Recent index snapshots")
    history.add_argument("--limit", type=int, default=None, help="Number of snapshots to fetch")
    commands.add_parser("stocks", help="Latest price for every tracked stock")
    stock = commands.add_parser("stock", help="Detail for one stock")
    stock.add_argument("symbol")
    commands.add_parser("sectors", help="Per-sector weight and change summary")
    commands.add_parser("config", help="Index configuration")
    commands.add_parser("health", help="Backend liveness check")
    return parser


async def _fetch_raw(client: AIIndexClient, args: argparse.Namespace) -> Any:
    if args.command == "index":
        return await client.get_index()
    if args.command == "history":
        return await client.get_index_history(args.limit)
    if args.command == "stocks":
        return await client.get_stocks()
    if args.command == "stock":
        return await client.get_stock(args.symbol)
    if args.command == "sectors":
        return await client.get_sectors()
    if args.command == "config":
        return await client.get_config()
    return await client.health()


async def _fetch_typed(client: AIIndexClient, args: argparse.Namespace) -> Any:
    typed = TypedAIIndexClient(client)
    if args.command == "index":
        return await typed.index()
    if args.command == "history":
        return await typed.index_history(args.limit)
    if args.command == "stocks":
        return await typed.stocks()
    if args.command == "stock":
        return await typed.stock(args.symbol)
    if args.command == "sectors":
        return await typed.sectors()
    if args.command == "config":
        return await typed.config()
    return await client.health()


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


async def run(args: argparse.Namespace) -> Any:
    async with AIIndexClient(args.base_url, timeout=args.timeout) as client:
        if args.typed:
            return _to_jsonable(await _fetch_typed(client, args))
        return await _fetch_raw(client, args)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level or get_settings().log_level)
    except ValueError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(run(args))
    except (AIIndexError, ValueError, httpx.HTTPError) as exc:
        print(f"{args.command} failed: {exc}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


__all__ = ["build_parser", "main", "run"]
