"""Command-line options and configuration file parsing."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence

FIELDS = ("output", "tag", "port", "filter", "nofilter", "rotation", "instant")

# Characters that a configuration line's pattern cannot match across.
_LINE_TERMINATORS = frozenset("\r\n\u2028\u2029")


class ArgumentError(Exception):
    """Raised when the command line or the configuration file is unusable."""


class _Parser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message)


def check_file_exists(name: str) -> bool:
    """Return True if ``name`` can be stat'ed."""
    try:
        os.stat(name)
    except (OSError, ValueError):
        return False
    return True


def _is_comment(line: str) -> bool:
    return line.startswith("#") and not _LINE_TERMINATORS.intersection(line)


def _field_value(line: str, key: str) -> str | None:
    prefix = f"{key}:"
    if not line.startswith(prefix) or _LINE_TERMINATORS.intersection(line):
        return None
    return line[len(prefix):]


def parse_config(lines: Iterable[str]) -> list[dict[str, str]]:
    """Parse configuration lines into one record per ``log`` block."""
    records: list[dict[str, str]] = []
    current: dict[str, str] = {}
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line or _is_comment(line):
            continue
        if line == "log":
            if current:
                records.append(current)
            current = dict.fromkeys(FIELDS, "")
        for key in FIELDS:
            value = _field_value(line, key)
            if value is not None:
                current[key] = value
    if current:
        records.append(current)
    return records


def read_config(path: str) -> list[dict[str, str]]:
    """Read and parse the configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return parse_config(handle)
    except OSError as exc:
        raise ArgumentError(f"Unable to open file {path}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the allowed options."""
    parser = _Parser(prog="datacomptroller", description="Allowed options", add_help=False)
    parser.add_argument("--server", action="store_true", help="invoking the server")
    parser.add_argument("--update", action="store_true", help="updating the server")
    parser.add_argument("--file", help="configuration file")
    parser.add_argument(
        "--kill", action="store_true", help="kill the server with particular configuration"
    )
    parser.add_argument(
        "--killall", action="store_true", help="killall connections from the server"
    )
    parser.add_argument("--status", action="store_true", help="status of the server")
    parser.add_argument("--help", action="store_true", help="help")
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> list[dict[str, str]]:
    """Parse the command line and return the records of its configuration file."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    try:
        options = parser.parse_args(list(argv))
    except ArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(parser.format_help())
        raise

    if options.file is not None and not check_file_exists(options.file):
        print(f"File {options.file} not found.")
        print(parser.format_help())
        raise ArgumentError(f"File {options.file} not found.")

    if options.file is not None:
        if options.server:
            print(f"going to invoke serve along with file {options.file}")
        if options.update:
            print(f"going to update serve along with file {options.file}")
        if options.kill:
            print(f"going to kill server configuration using file {options.file}")
    if options.killall:
        print("going to kill all server configurations ")
    if options.status:
        print("going to display status of server ")

    if options.file is None:
        raise ArgumentError("no configuration file given")
    return read_config(options.file)