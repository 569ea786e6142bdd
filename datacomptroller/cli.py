"""Command-line entry point that starts one logger per configuration record."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Mapping, Sequence

from datacomptroller.arguments import ArgumentError, parse_arguments
from datacomptroller.logger import Logger, Output, OutputMode
from datacomptroller.validate import ConfigurationError, validate_records

_HOST_PORT = re.compile(r"^(.*),(.*)$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_outputs(spec: str) -> list[Output]:
    """Split a space-separated output list into file and host,port outputs."""
    outputs = []
    for token in spec.split(" "):
        if not token:
            continue
        match = _HOST_PORT.match(token)
        if match:
            outputs.append(Output(OutputMode.SOCKET, match.group(1), _atoi(match.group(2))))
        else:
            outputs.append(Output(OutputMode.FILE, token, 0))
    return outputs


def build_logger(record: Mapping[str, str]) -> Logger:
    """Create an unstarted logger from one validated configuration record."""
    for key in sorted(record):
        print(f"Working on Config file - {key} - {record[key]}")
    return Logger(
        record.get("tag", ""),
        _atoi(record.get("port", "")),
        record.get("rotation", "") == "yes",
        record.get("filter", ""),
        record.get("nofilter", ""),
        parse_outputs(record.get("output", "")),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run every configured logger until interrupted."""
    try:
        records = validate_records(parse_arguments(argv))
    except (ArgumentError, ConfigurationError):
        return 1

    loggers: list[Logger] = []
    try:
        for record in records:
            logger = build_logger(record)
            logger.start()
            loggers.append(logger)
        print("all running")
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        print(f"ERROR: {error}", file=sys.stderr)
        return 1
    finally:
        for logger in loggers:
            logger.stop()