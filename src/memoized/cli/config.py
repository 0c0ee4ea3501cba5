"""Implementation of `memoized config`."""

from __future__ import annotations

import argparse

import yaml


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("config", help="Print the resolved configuration as YAML")
    parser.set_defaults(func=cmd_config)


def cmd_config(args: argparse.Namespace) -> int:
    print(yaml.safe_dump(args.settings, sort_keys=False), end="")
    return 0
