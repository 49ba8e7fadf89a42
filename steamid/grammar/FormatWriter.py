#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Output side of the grammar: appends Steam ID fields and tokens to a text buffer."""

from __future__ import annotations

from typing import Any, Callable

from steamid.core.Enums import account_type_letter
from steamid.core.Errors import UnwritableAccountType


class FormatWriter:
    """
    Mirror of ``GrammarParser``.

    Each primitive appends text instead of consuming it. Field values are
    read from the identifier given at construction.
    """

    def __init__(self, steam_id: Any) -> None:
        self.steam_id = steam_id
        self.parts: list[str] = []

    def write(self, text: str) -> None:
        self.parts.append(text)

    def literal(self, literal: str) -> None:
        self.write(literal)

    def char(self, char: str) -> None:
        self.write(char)

    def bracketed(self, inner: Callable[[], None]) -> None:
        self.write("[")
        inner()
        self.write("]")

    def uint64(self) -> None:
        self.write(str(self.steam_id.to_u64()))

    def universe(self) -> None:
        self.write(str(int(self.steam_id.universe())))

    def lowest_bit(self) -> None:
        self.write(str(self.steam_id.lowest_bit()))

    def account_id(self, include_lowest_bit: bool = False) -> None:
        self.write(str(self.steam_id.account_id(include_lowest_bit)))

    def account_type_letter(self) -> None:
        """
        Raises:
            UnwritableAccountType: If the account type has no letter.
        """
        account_type = self.steam_id.account_type()
        letter = account_type_letter(account_type)
        if letter is None:
            raise UnwritableAccountType(account_type)
        self.write(letter)

    def getvalue(self) -> str:
        return "".join(self.parts)
