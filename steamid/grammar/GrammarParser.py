#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Forward-only cursor over a Steam ID string with primitive match/consume operations."""

from __future__ import annotations

from typing import Callable, TypeVar

from steamid.core.BitField import UINT64_MAX, UNIVERSE
from steamid.core.Enums import AccountType, Universe, account_type_from_letter
from steamid.core.Errors import InvalidNumber, Mismatch, UnknownAccountType

T = TypeVar("T")

END_OF_INPUT = "<end of input>"
DIGITS = "0123456789"


class GrammarParser:
    """
    Single-pass, non-backtracking reader.

    The cursor is a code point index into ``text``. Every primitive either
    consumes input and returns a value, or raises a ``ParseError`` subclass.
    """

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        self.text = text
        self.position = 0

    # ------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def current_char(self) -> str:
        """Return the character under the cursor, or '' at end of input."""
        if self.at_end():
            return ""
        return self.text[self.position]

    def next_char(self) -> str:
        char = self.current_char()
        if char:
            self.position += 1
        return char

    def remaining(self) -> str:
        return self.text[self.position:]

    # ------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------

    def expect_literal(self, literal: str) -> str:
        """Consume ``len(literal)`` characters and compare them to ``literal``.

        The whole width is consumed before comparing, so the error shows
        everything that was read, not just the first differing character.

        Args:
            literal (str): Expected text.

        Returns:
            str: The consumed text.

        Raises:
            Mismatch: If the consumed text differs.
        """
        start = self.position
        consumed = "".join(self.next_char() for _ in range(len(literal)))
        if consumed != literal:
            raise Mismatch(literal, consumed, start)
        return consumed

    def expect_char(self, char: str) -> str:
        start = self.position
        actual = self.next_char()
        if actual != char:
            raise Mismatch(char, actual or END_OF_INPUT, start)
        return actual

    def consume_unsigned_int(self) -> int:
        """Consume a maximal run of ASCII digits as an unsigned 64-bit value.

        Raises:
            InvalidNumber: If the run is empty or exceeds ``2**64 - 1``.
        """
        start = self.position
        while self.current_char() and self.current_char() in DIGITS:
            self.position += 1

        digits = self.text[start:self.position]
        if not digits:
            raise InvalidNumber(self.current_char() or END_OF_INPUT, start)

        value = int(digits)
        if value > UINT64_MAX:
            raise InvalidNumber(digits, start)
        return value

    def bracketed(self, inner: Callable[[], T]) -> T:
        """Consume ``[``, run ``inner``, consume ``]``. Returns ``inner``'s result."""
        self.expect_char("[")
        result = inner()
        self.expect_char("]")
        return result

    def account_type_letter(self) -> AccountType:
        start = self.position
        char = self.next_char()
        account_type = account_type_from_letter(char)
        if account_type is None:
            raise UnknownAccountType(char or END_OF_INPUT, start)
        return account_type

    def universe_digits(self) -> Universe:
        start = self.position
        value = self.consume_unsigned_int()
        if not UNIVERSE.fits(value):
            raise InvalidNumber(str(value), start, field=UNIVERSE.name)
        return Universe(value)

    def expect_end(self) -> None:
        if not self.at_end():
            raise Mismatch(END_OF_INPUT, self.remaining(), self.position)
