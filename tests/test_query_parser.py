"""Tests for the extended query parser."""

from station_finder.application.services.query_parser import (
    QueryToken,
    TokenKind,
    parse_extended_query,
)


def test_plain_query_is_not_extended() -> None:
    """Given a query without operators, when parsing, then it is left to plain fuzzy matching."""
    assert parse_extended_query("new delhi") is None
    assert parse_extended_query("$") is None


def test_operators_are_recognized() -> None:
    """Given one token per operator, when parsing, then each token gets its kind."""
    query = parse_extended_query("=NDLS 'del ^new central$ dlhi")

    assert query is not None
    assert [(t.kind, t.text) for t in query.tokens] == [
        (TokenKind.EXACT, "ndls"),
        (TokenKind.INCLUDE, "del"),
        (TokenKind.PREFIX, "new"),
        (TokenKind.SUFFIX, "central"),
        (TokenKind.FUZZY, "dlhi"),
    ]
    assert query.negative == []


def test_negated_tokens() -> None:
    """Given negated tokens, when parsing, then they are split from the positive ones."""
    query = parse_extended_query("mumbai !central !^new")

    assert query is not None
    assert query.positive == [QueryToken(TokenKind.FUZZY, "mumbai")]
    assert query.negative == [
        QueryToken(TokenKind.INCLUDE, "central", negated=True),
        QueryToken(TokenKind.PREFIX, "new", negated=True),
    ]


def test_bare_operators_are_dropped() -> None:
    """Given operators without text, when parsing, then there is nothing to match."""
    assert parse_extended_query("^ ! =") is None


def test_literal_token_matching() -> None:
    """Given literal tokens, when matching field values, then each kind applies its rule."""
    assert QueryToken(TokenKind.EXACT, "bct").matches_literally("bct")
    assert not QueryToken(TokenKind.EXACT, "bct").matches_literally("bcta")
    assert QueryToken(TokenKind.PREFIX, "new").matches_literally("new delhi")
    assert QueryToken(TokenKind.SUFFIX, "delhi").matches_literally("new delhi")
    assert QueryToken(TokenKind.INCLUDE, "w d").matches_literally("new delhi")
