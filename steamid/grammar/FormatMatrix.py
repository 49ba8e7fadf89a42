#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Token grammars for the Steam ID text formats and the decode/encode walkers over them.

Each format is described once as an ordered tuple of tokens. Decoding walks
the tuple with a ``GrammarParser``; encoding walks the same tuple with a
``FormatWriter``. The two walkers share nothing but the token list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from steamid.core.BitField import (
    ACCOUNT_ID,
    ACCOUNT_TYPE,
    COMBINED_ACCOUNT_ID,
    LOWEST_BIT,
    UNIVERSE,
    BitField,
)
from steamid.core.Enums import Format
from steamid.core.Errors import InvalidNumber
from steamid.grammar.FormatWriter import FormatWriter
from steamid.grammar.GrammarParser import GrammarParser


RAW_WORD = BitField("raw", 64, 0)


@dataclass(frozen=True)
class GrammarToken:
    """One step of a format grammar."""

    kind: str
    arg: Optional[str] = None
    children: tuple[GrammarToken, ...] = ()

    def __repr__(self) -> str:
        if self.kind == "literal":
            return repr(self.arg)
        if self.children:
            return f"{self.kind}{list(self.children)}"
        return self.kind


def literal(text: str) -> GrammarToken:
    return GrammarToken("literal", text)


def token(kind: str) -> GrammarToken:
    return GrammarToken(kind)


def bracket(*children: GrammarToken) -> GrammarToken:
    return GrammarToken("bracket", children=children)


SEPARATOR = literal(":")

GRAMMARS: dict[Format, tuple[GrammarToken, ...]] = {
    # STEAM_<universe>:<lowest_bit>:<account_id>
    Format.DEFAULT: (
        literal("STEAM_"),
        token("universe"),
        SEPARATOR,
        token("lowest_bit"),
        SEPARATOR,
        token("account_id"),
    ),
    # [<type letter>:1:<account_id with lowest bit>]
    Format.COMMUNITY32: (
        bracket(
            token("account_type"),
            SEPARATOR,
            literal("1"),
            SEPARATOR,
            token("account_id_with_lowest_bit"),
        ),
    ),
    # <uint64>
    Format.COMMUNITY64: (
        token("uint64"),
    ),
}


# ------------------------------------------------------------
# Decode
# ------------------------------------------------------------

Packed = list[tuple[BitField, int]]


def _consume_field(parser: GrammarParser, field: BitField) -> int:
    start = parser.position
    value = parser.consume_unsigned_int()
    if not field.fits(value):
        raise InvalidNumber(str(value), start, field=field.name)
    return value


def _decode_literal(parser: GrammarParser, tok: GrammarToken, packed: Packed) -> None:
    if len(tok.arg) == 1:
        parser.expect_char(tok.arg)
    else:
        parser.expect_literal(tok.arg)


def _decode_bracket(parser: GrammarParser, tok: GrammarToken, packed: Packed) -> None:
    parser.bracketed(lambda: _decode_tokens(parser, tok.children, packed))


def _decode_universe(parser: GrammarParser, tok: GrammarToken, packed: Packed) -> None:
    packed.append((UNIVERSE, int(parser.universe_digits())))


def _decode_account_type(parser: GrammarParser, tok: GrammarToken, packed: Packed) -> None:
    packed.append((ACCOUNT_TYPE, int(parser.account_type_letter())))


def _decode_field(field: BitField) -> Callable[[GrammarParser, GrammarToken, Packed], None]:
    def handler(parser: GrammarParser, tok: GrammarToken, packed: Packed) -> None:
        packed.append((field, _consume_field(parser, field)))
    return handler


decode_operation_mapping: dict[str, Callable[[GrammarParser, GrammarToken, Packed], None]] = {
    "literal": _decode_literal,
    "bracket": _decode_bracket,
    "universe": _decode_universe,
    "account_type": _decode_account_type,
    "lowest_bit": _decode_field(LOWEST_BIT),
    "account_id": _decode_field(ACCOUNT_ID),
    "account_id_with_lowest_bit": _decode_field(COMBINED_ACCOUNT_ID),
    "uint64": _decode_field(RAW_WORD),
}


def _decode_tokens(parser: GrammarParser, tokens: tuple[GrammarToken, ...], packed: Packed) -> None:
    for tok in tokens:
        decode_operation_mapping[tok.kind](parser, tok, packed)


def decode(text: str, fmt: Format) -> int:
    """Parse ``text`` under one format and return the packed 64-bit word.

    Fields the format does not carry are left as zero bits.

    Args:
        text (str): Input string. Must be consumed completely.
        fmt (Format): Grammar to apply.

    Returns:
        int: Raw 64-bit value.

    Raises:
        ParseError: On the first primitive that fails.
    """
    parser = GrammarParser(text)
    packed: Packed = []
    _decode_tokens(parser, GRAMMARS[fmt], packed)
    parser.expect_end()

    word = 0
    for field, value in packed:
        word |= field.pack(value)
    return word


# ------------------------------------------------------------
# Encode
# ------------------------------------------------------------

def _encode_literal(writer: FormatWriter, tok: GrammarToken) -> None:
    if len(tok.arg) == 1:
        writer.char(tok.arg)
    else:
        writer.literal(tok.arg)


def _encode_bracket(writer: FormatWriter, tok: GrammarToken) -> None:
    writer.bracketed(lambda: _encode_tokens(writer, tok.children))


encode_operation_mapping: dict[str, Callable[[FormatWriter, GrammarToken], None]] = {
    "literal": _encode_literal,
    "bracket": _encode_bracket,
    "universe": lambda writer, tok: writer.universe(),
    "account_type": lambda writer, tok: writer.account_type_letter(),
    "lowest_bit": lambda writer, tok: writer.lowest_bit(),
    "account_id": lambda writer, tok: writer.account_id(),
    "account_id_with_lowest_bit": lambda writer, tok: writer.account_id(include_lowest_bit=True),
    "uint64": lambda writer, tok: writer.uint64(),
}


def _encode_tokens(writer: FormatWriter, tokens: tuple[GrammarToken, ...]) -> None:
    for tok in tokens:
        encode_operation_mapping[tok.kind](writer, tok)


def encode(steam_id, fmt: Format) -> str:
    """Serialize ``steam_id`` under ``fmt``.

    Raises:
        UnwritableAccountType: Community32 with an account type that has no letter.
    """
    writer = FormatWriter(steam_id)
    _encode_tokens(writer, GRAMMARS[fmt])
    return writer.getvalue()
