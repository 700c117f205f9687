"""Render a timespan through a template."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pytimespan._template import Role, tokenize

if TYPE_CHECKING:
    from pytimespan.timespan import Timespan


def render(template: str, timespan: Timespan) -> str:
    """Substitute every placeholder in ``template`` with a part of ``timespan``.

    Digits are zero-padded to the placeholder's width, so ``%h`` gives at
    least two digits and ``%i``/``%s`` exactly two. ``%r`` emits ``-`` for
    negative spans and nothing otherwise; ``%R`` emits ``-`` or ``+``.
    Unknown ``%`` sequences are copied as-is, so rendering never fails.
    """
    units = timespan.get_units()
    negative = timespan.is_negative()
    digits = {
        Role.HOURS: units.hours,
        Role.MINUTES: units.minutes,
        Role.SECONDS: units.seconds,
    }

    parts: list[str] = []
    for tok in tokenize(template):
        placeholder = tok.placeholder
        if placeholder is None:
            parts.append(tok.text)
        elif placeholder.role is Role.SIGN:
            parts.append("-" if negative else placeholder.positive_sign)
        else:
            parts.append(f"{digits[placeholder.role]:0{placeholder.width}d}")
    return "".join(parts)
