"""CLI entry-point for search-params."""

import argparse
import functools
import os
import pathlib
import sys

import dotenv

from search_params.factory import search_params_factory

_ENV_PATH = pathlib.Path.cwd() / ".env"
_TRUTHY = {"1", "true", "yes", "on"}


def _pair(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    return key, value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Add, remove, replace or read URL query-string parameters.",
    )
    parser.add_argument(
        "query", nargs="?", help="Query string, with or without a leading '?'",
    )
    parser.add_argument(
        "--add",
        type=_pair,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Append a parameter, keeping existing ones with the same key",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="KEY",
        help="Remove every parameter with this key",
    )
    parser.add_argument(
        "--set",
        type=_pair,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Add a parameter, replacing all existing ones with the same key",
    )
    parser.add_argument(
        "--get",
        action="append",
        default=[],
        metavar="KEY",
        help="Print the first value of this key instead of the query string",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every key with its first value instead of the query string",
    )
    parser.add_argument(
        "--prefix",
        action="store_true",
        help="Prefix the printed query string with '?'",
    )
    return parser.parse_args(argv)


def _read_query(args: argparse.Namespace) -> str:
    if args.query is not None:
        return args.query
    return sys.stdin.read().strip()


def _print_values(values: dict[str, str | None]) -> None:
    for key, value in values.items():
        print(key if value is None else f"{key}={value}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    dotenv.load_dotenv(_ENV_PATH)
    prefix = args.prefix or (
        os.getenv("SEARCH_PARAMS_PREFIX", "").strip().lower() in _TRUTHY
    )

    params = search_params_factory(_read_query(args))
    query = params.compose(
        functools.partial(params.remove_param_list, args.remove),
        functools.partial(params.add_param_list, args.add),
        functools.partial(params.add_or_replace_param_list, args.set),
    )

    if args.get:
        _print_values(params.get_param_list(args.get))
    elif args.all:
        _print_values(params.get_all_params())
    else:
        print(f"?{query}" if prefix else query)
