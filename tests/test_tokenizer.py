"""Tokenizer: classification, order, fractional flags, identities."""

from __future__ import annotations

import logging

import pytest

from pricetick.core.errors import TokenizeError
from pricetick.core.identity import CounterAllocator, UuidAllocator, currency_identity
from pricetick.core.tokenizer import classify, tokenize
from pricetick.core.tokens import TokenKind, tokens_to_text
from pricetick.utils.price import format_usd

K = TokenKind


def test_tokenize_grouped_price(alloc) -> None:
    tokens = tokenize("$1,234.56", allocator=alloc)

    assert [t.kind for t in tokens] == [K.CURRENCY_SYMBOL, K.DIGIT, K.GROUP_SEPARATOR, K.DIGIT,
                                        K.DIGIT, K.DIGIT, K.DECIMAL_SEPARATOR, K.DIGIT, K.DIGIT]
    assert [t.value for t in tokens] == ["$", 1, ",", 2, 3, 4, ".", 5, 6]
    assert [t.identity for t in tokens] == ["currency_symbol.$", "t1", "t2", "t3", "t4", "t5", "t6", "t7", "t8"]
    assert not any(t.is_highlighted for t in tokens)


def test_fractional_flag_follows_decimal_separator(alloc) -> None:
    tokens = tokenize("$12,345.67", allocator=alloc)
    digits = [t for t in tokens if t.kind is K.DIGIT]
    assert [t.is_fractional for t in digits] == [False] * 5 + [True] * 2


@pytest.mark.parametrize("value", [0, 7.5, 159.95, 999.99, 1000, 1234567.89])
def test_text_roundtrips_through_tokens(value) -> None:
    text = format_usd(value)
    tokens = tokenize(text)
    assert tokens_to_text(tokens) == text
    assert tokens[0].kind is K.CURRENCY_SYMBOL
    assert sum(t.kind is K.CURRENCY_SYMBOL for t in tokens) == 1
    assert sum(t.kind is K.DECIMAL_SEPARATOR for t in tokens) == 1
    assert len({t.identity for t in tokens}) == len(tokens)


def test_currency_identity_is_stable() -> None:
    a = tokenize("$1.00", allocator=CounterAllocator("a"))
    b = tokenize("$2.00", allocator=CounterAllocator("b"))
    assert a[0].identity == b[0].identity == currency_identity("$")


def test_unrecognized_characters_are_dropped(alloc, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="pricetick.core.tokenizer")
    tokens = tokenize("$1 2٣.00", allocator=alloc)
    assert tokens_to_text(tokens) == "$12.00"
    assert "Dropping unrecognized character" in caplog.text


def test_strict_mode_rejects_unrecognized(alloc) -> None:
    with pytest.raises(TokenizeError):
        tokenize("$1 2.00", allocator=alloc, strict=True)


def test_empty_string() -> None:
    assert tokenize("") == []


def test_classify() -> None:
    assert classify("$") is K.CURRENCY_SYMBOL
    assert classify(",") is K.GROUP_SEPARATOR
    assert classify(".") is K.DECIMAL_SEPARATOR
    assert classify("7") is K.DIGIT
    assert classify("x") is None


def test_uuid_allocator_is_unique() -> None:
    alloc = UuidAllocator()
    ids = {alloc() for _ in range(100)}
    assert len(ids) == 100
