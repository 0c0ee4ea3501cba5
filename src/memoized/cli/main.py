"""Main CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys

from memoized.bench.runner import BenchError
from memoized.cli import bench, config, fib, primes
from memoized.core.config import ConfigError, resolve_config
from memoized.core.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="memoized", description="Memoized function examples and benchmarks")
    subparsers = parser.add_subparsers(dest="command")

    fib.register(subparsers)
    primes.register(subparsers)
    bench.register(subparsers)
    config.register(subparsers)

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", default=None, help="Config YAML")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=getattr(args, "verbose", False))

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        args.settings = resolve_config(config_path=args.config)
        limit = args.settings.get("recursion_limit")
        if limit is not None:
            logger.debug("Setting recursion limit to %d", limit)
            sys.setrecursionlimit(limit)
        return int(args.func(args))
    except (ConfigError, BenchError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted")
        return 130


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
