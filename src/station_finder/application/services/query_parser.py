"""Parser for extended search queries.

A query switches to extended mode when any whitespace-separated token carries an
operator:

    =ndls       exact field match
    'delhi      field contains text
    ^new        field starts with text
    central$    field ends with text
    !mumbai     no field contains text
    !^new       no field starts with text
    !central$   no field ends with text

Tokens without an operator are matched fuzzily. All tokens must hold.
"""

from dataclasses import dataclass
from enum import Enum

from .field_index_builder import normalize_text


class TokenKind(str, Enum):
    """How a single query token is matched against a field."""

    FUZZY = "fuzzy"
    EXACT = "exact"
    INCLUDE = "include"
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class QueryToken:
    """One term of an extended query."""

    kind: TokenKind
    text: str
    negated: bool = False

    def matches_literally(self, value: str) -> bool:
        """Check a normalized field value against a non-fuzzy token."""
        if self.kind == TokenKind.EXACT:
            return value == self.text
        if self.kind == TokenKind.PREFIX:
            return value.startswith(self.text)
        if self.kind == TokenKind.SUFFIX:
            return value.endswith(self.text)
        return self.text in value


@dataclass(frozen=True)
class ExtendedQuery:
    """A parsed extended query."""

    tokens: list[QueryToken]

    @property
    def positive(self) -> list[QueryToken]:
        return [t for t in self.tokens if not t.negated]

    @property
    def negative(self) -> list[QueryToken]:
        return [t for t in self.tokens if t.negated]


def _parse_token(raw: str) -> QueryToken | None:
    negated = raw.startswith("!")
    body = raw[1:] if negated else raw

    if body.startswith("="):
        kind, body = TokenKind.EXACT, body[1:]
    elif body.startswith("'"):
        kind, body = TokenKind.INCLUDE, body[1:]
    elif body.startswith("^"):
        kind, body = TokenKind.PREFIX, body[1:]
    elif body.endswith("$"):
        kind, body = TokenKind.SUFFIX, body[:-1]
    elif negated:
        kind = TokenKind.INCLUDE
    else:
        kind = TokenKind.FUZZY

    text = normalize_text(body)
    if not text:
        return None
    return QueryToken(kind=kind, text=text, negated=negated)


def _has_operator(raw: str) -> bool:
    return raw[:1] in ("=", "'", "^", "!") or (len(raw) > 1 and raw.endswith("$"))


def parse_extended_query(query: str) -> ExtendedQuery | None:
    """Parse a query into extended tokens.

    Returns:
        The parsed query, or None when no token carries an operator (the query
        is then matched as one fuzzy string).
    """
    raw_tokens = query.split()
    if not any(_has_operator(raw) for raw in raw_tokens):
        return None

    tokens = [token for token in (_parse_token(raw) for raw in raw_tokens) if token]
    if not tokens:
        return None
    return ExtendedQuery(tokens=tokens)
