"""pytimespan - Signed durations with template-based formatting and parsing."""

from __future__ import annotations

__version__ = "0.1.0"

from pytimespan._constants import DEFAULT_FORMAT, TIME_WITH_SIGN_FORMAT
from pytimespan._errors import InvalidFormatError, TimespanError
from pytimespan._formatter import render
from pytimespan._parser import is_valid_format
from pytimespan.timespan import (
    Instant,
    Timespan,
    Units,
    create_from_format,
    parse,
    recompute,
)

__all__ = [
    "create_from_format",
    "is_valid_format",
    "parse",
    "recompute",
    "render",
    "DEFAULT_FORMAT",
    "TIME_WITH_SIGN_FORMAT",
    "Instant",
    "InvalidFormatError",
    "Timespan",
    "TimespanError",
    "Units",
]
