"""Template grammar shared by the formatter and the parser.

A template is a run of literal text and two-character placeholders. Each
placeholder kind is described once in ``PLACEHOLDERS``; rendering and
parsing are both driven from that table so they stay inverses of each other.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from functools import lru_cache

from lark import Lark, Transformer

from pytimespan._constants import TEMPLATE_CACHE_SIZE

logger = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    """Kinds of template tokens."""

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    SIGN_BARE = "sign_bare"
    SIGN_EXPLICIT = "sign_explicit"
    LITERAL = "literal"


class Role(enum.StrEnum):
    """Capture group a placeholder fills when parsing."""

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    SIGN = "sign"


@dataclass(frozen=True)
class Placeholder:
    """Static description of one placeholder kind."""

    token: str
    kind: TokenKind
    role: Role
    fragment: str
    """Regex fragment the value must match when parsing."""
    width: int | None = None
    """Minimum digits when rendering, None for sign markers."""
    positive_sign: str = ""
    """Sign marker rendered for non-negative spans."""


PLACEHOLDERS: dict[TokenKind, Placeholder] = {
    p.kind: p
    for p in (
        Placeholder("%h", TokenKind.HOURS, Role.HOURS, r"\d+", width=2),
        Placeholder("%i", TokenKind.MINUTES, Role.MINUTES, r"\d{2}", width=2),
        Placeholder("%s", TokenKind.SECONDS, Role.SECONDS, r"\d{2}", width=2),
        Placeholder("%r", TokenKind.SIGN_BARE, Role.SIGN, r"-?"),
        Placeholder("%R", TokenKind.SIGN_EXPLICIT, Role.SIGN, r"[+-]", positive_sign="+"),
    )
}


@dataclass(frozen=True)
class TemplateToken:
    """One element of a tokenized template."""

    kind: TokenKind
    text: str

    @property
    def placeholder(self) -> Placeholder | None:
        return PLACEHOLDERS.get(self.kind)


def _build_grammar() -> str:
    """Build the lark grammar with one rule and terminal per ``PLACEHOLDERS`` entry."""
    rules = [kind.value for kind in PLACEHOLDERS] + [TokenKind.LITERAL.value]
    lines = [
        "template: _item*",
        "_item: " + " | ".join(rules),
        f"{TokenKind.LITERAL.value}: TEXT | PERCENT",
    ]
    for kind, placeholder in PLACEHOLDERS.items():
        lines.append(f"{kind.value}: {kind.name}")
        # Placeholders outrank the literal terminals so "%h" never lexes as "%" + "h".
        lines.append(f'{kind.name}.2: "{placeholder.token}"')
    lines.append("TEXT: /[^%]+/")
    lines.append('PERCENT: "%"')
    return "\n".join(lines)


_lark = Lark(_build_grammar(), start="template", parser="lalr", lexer="basic")


class _TokenBuilder(Transformer):
    """Turn the parse tree into a flat tuple of ``TemplateToken``."""

    def __default__(self, data, children, meta):
        # Rule names are TokenKind values.
        return TemplateToken(TokenKind(str(data)), "".join(str(c) for c in children))

    def template(self, children):
        return tuple(_merge_literals(children))


def _merge_literals(tokens: list[TemplateToken]) -> list[TemplateToken]:
    """Join adjacent literal tokens ("%" followed by text lexes as two)."""
    merged: list[TemplateToken] = []
    for tok in tokens:
        if (
            tok.kind is TokenKind.LITERAL
            and merged
            and merged[-1].kind is TokenKind.LITERAL
        ):
            merged[-1] = TemplateToken(TokenKind.LITERAL, merged[-1].text + tok.text)
        else:
            merged.append(tok)
    return merged


@lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def tokenize(template: str) -> tuple[TemplateToken, ...]:
    """Split a template into literal and placeholder tokens.

    Every string is a valid template for tokenizing: a ``%`` not followed by
    a known placeholder letter is kept as literal text.
    """
    tokens = _TokenBuilder().transform(_lark.parse(template))
    logger.debug("tokenized template %r into %d tokens", template, len(tokens))
    return tokens


def has_placeholder(tokens: tuple[TemplateToken, ...]) -> bool:
    return any(tok.kind is not TokenKind.LITERAL for tok in tokens)
