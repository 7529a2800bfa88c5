"""Command-line entry point: ``python -m pylistserver``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from pylistserver.config import ListServerConfig
from pylistserver.exceptions import ListConfigError
from pylistserver.server import run
from pylistserver.state.policy import HasMorePolicy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pylistserver", description="Serve the in-memory list API.")
    parser.add_argument("--host", help="Interface to bind (default: LISTSERVER_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="TCP port (default: LISTSERVER_PORT or 3000)")
    parser.add_argument("--size", type=int, help="Number of synthetic items (default: LISTSERVER_DATA_SIZE)")
    parser.add_argument("--legacy-has-more", action="store_true", help="Report hasMore whenever a page is partial")
    parser.add_argument("--lax", action="store_true", help="Store orders and selections without validation")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> ListServerConfig:
    overrides: dict[str, Any] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.size is not None:
        overrides["data_size"] = args.size
    if args.legacy_has_more:
        overrides["has_more_policy"] = HasMorePolicy.LEGACY
    if args.lax:
        overrides["strict_validation"] = False
    return ListServerConfig.from_env(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ListConfigError as exc:
        parser.error(str(exc))
    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
