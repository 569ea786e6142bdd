"""Usage text for the command line."""

import sys
from collections.abc import Iterator

APP = "Data Comptroller 1.0"
VERSION = "1.0"
APP_NAME = "datacomptroller"

_COMMANDS = (
    "server -c <config.xml> (to invoke server)",
    "update -c <config.xml> (to update server configuration on the fly)",
    "sample (to dump sample server config file)",
    "kill -c <config.xml> (to kill particular configuration with cleanup)",
    "killall (to kill all with cleanup)",
    "status (check the status of all logging with read/write and buffer)",
    "help/h/-h (show help)",
)


def _help_lines() -> Iterator[str]:
    """Yield the lines of the usage text, each ending in a newline."""
    yield f"{APP}\n"
    for command in _COMMANDS:
        yield f"\t{APP_NAME} {command}\n"
    yield "\n"


def help_text() -> str:
    """Return the usage text."""
    return "".join(_help_lines())


def print_help() -> None:
    """Write the usage text to standard output."""
    out = sys.stdout
    for line in _help_lines():
        out.write(line)
    out.flush()