"""Validation of parsed configuration records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class ConfigurationError(Exception):
    """Raised when no valid configuration record remains."""


_REQUIRED = ("tag", "port", "output")
_FLAGS = ("rotation", "instant")


def validate_records(records: Iterable[Mapping[str, str]]) -> list[dict[str, str]]:
    """Return the valid records with yes/no flags normalised.

    A record is valid when its tag, port and output are non-empty. Invalid
    records are reported and dropped; if none remain, ConfigurationError is
    raised.
    """
    valid: list[dict[str, str]] = []
    for record in records:
        if all(record.get(key, "") for key in _REQUIRED):
            normalised = dict(record)
            for flag in _FLAGS:
                normalised[flag] = "yes" if record.get(flag, "") == "yes" else "no"
            valid.append(normalised)
        else:
            for key in sorted(record):
                print(f"Wrong Configuration - {key} - {record[key]}")
    if not valid:
        raise ConfigurationError("no valid configuration record")
    return valid