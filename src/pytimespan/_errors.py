"""Errors raised while decoding timespan text."""

from __future__ import annotations


class TimespanError(Exception):
    """Base exception for timespan errors.

    ``str()`` names only the offending text and template, so it can be shown
    to whoever typed the value. ``internal()`` adds what the parser saw, such
    as the compiled pattern or the overflowing hour count, for debug logs.
    ``wrapped`` keeps the arithmetic error behind an out-of-range value.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(TimespanError, ValueError):
    """Raised when a string does not match the template it is parsed with."""

    def __init__(
        self,
        value: str,
        format: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(
            ERR_MSG_INVALID_FORMAT.format(value=value, format=format),
            internal_details,
            wrapped,
        )
        self.value = value
        self.format = format


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = 'Invalid time string "{value}" for format "{format}"'
ERR_MSG_NO_PLACEHOLDER = "template contains no placeholder"
ERR_MSG_DUPLICATE_ROLE = "template repeats a placeholder"
ERR_MSG_NO_MATCH = "value does not match template"
ERR_MSG_OUT_OF_RANGE = "value out of range"
