"""Parse a string back into a signed second count using a template.

``%h`` has a variable width, so the template is compiled into an anchored
regular expression with one named group per placeholder instead of being
sliced at fixed offsets.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from pytimespan._constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, TEMPLATE_CACHE_SIZE
from pytimespan._errors import (
    ERR_MSG_DUPLICATE_ROLE,
    ERR_MSG_NO_MATCH,
    ERR_MSG_NO_PLACEHOLDER,
    ERR_MSG_OUT_OF_RANGE,
    InvalidFormatError,
)
from pytimespan._template import Role, has_placeholder, tokenize

logger = logging.getLogger(__name__)


class _MalformedTemplate(Exception):
    """Internal signal that a template cannot be compiled for parsing."""


@lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def _compile(template: str) -> re.Pattern[str]:
    tokens = tokenize(template)
    if not has_placeholder(tokens):
        raise _MalformedTemplate(ERR_MSG_NO_PLACEHOLDER)

    seen: set[Role] = set()
    parts: list[str] = []
    for tok in tokens:
        placeholder = tok.placeholder
        if placeholder is None:
            parts.append(re.escape(tok.text))
            continue
        if placeholder.role in seen:
            raise _MalformedTemplate(f"{ERR_MSG_DUPLICATE_ROLE}: {tok.text}")
        seen.add(placeholder.role)
        parts.append(f"(?P<{placeholder.role}>{placeholder.fragment})")

    pattern = re.compile("".join(parts), re.ASCII)
    logger.debug("compiled template %r to pattern %r", template, pattern.pattern)
    return pattern


def is_valid_format(template: str, value: str | None = None) -> bool:
    """Check whether ``template`` can be used for parsing.

    When ``value`` is given, it must also match the template.
    """
    try:
        pattern = _compile(template)
    except _MalformedTemplate:
        return False
    if value is None:
        return True
    return pattern.fullmatch(value) is not None


def _extract_seconds(match: re.Match[str]) -> int:
    groups = match.groupdict()
    total = (
        int(groups.get(Role.HOURS) or 0) * SECONDS_PER_HOUR
        + int(groups.get(Role.MINUTES) or 0) * SECONDS_PER_MINUTE
        + int(groups.get(Role.SECONDS) or 0)
    )
    if groups.get(Role.SIGN) == "-":
        total = -total
    return total


def parse_seconds(template: str, text: str) -> float:
    """Parse ``text`` into a signed second count according to ``template``.

    Raises:
        InvalidFormatError: If the template is malformed, ``text`` does not
            match it in full, or the hours are too large to represent.
    """
    try:
        pattern = _compile(template)
    except _MalformedTemplate as e:
        logger.debug("cannot parse %r: malformed template %r: %s", text, template, e)
        raise InvalidFormatError(
            text, template, f"malformed template {template!r}: {e}", wrapped=e
        ) from e

    match = pattern.fullmatch(text)
    if match is None:
        details = f"{ERR_MSG_NO_MATCH}: {text!r} against {pattern.pattern!r}"
        logger.debug("cannot parse %r with %r: %s", text, template, details)
        raise InvalidFormatError(text, template, details)

    # \d+ on hours is unbounded: huge runs overflow int() or float().
    try:
        return float(_extract_seconds(match))
    except (ValueError, OverflowError) as e:
        details = f"{ERR_MSG_OUT_OF_RANGE}: {e}"
        logger.debug("cannot parse %r with %r: %s", text, template, details)
        raise InvalidFormatError(text, template, details, wrapped=e) from e
