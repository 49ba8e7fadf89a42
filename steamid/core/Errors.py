#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Exception hierarchy for Steam ID parsing, formatting and packing."""

from __future__ import annotations

from typing import Any, Optional


class SteamIDError(Exception):
    """Base class for every error raised by the codec."""


class ParseError(SteamIDError):
    """Raised by grammar primitives. Recoverable by trying another format."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class Mismatch(ParseError):
    """Consumed text differs from the expected token."""

    def __init__(self, expected: str, actual: str, position: Optional[int] = None) -> None:
        super().__init__(f"Expected {expected!r}, got: {actual!r}", position)
        self.expected = expected
        self.actual = actual


class InvalidNumber(ParseError):
    """Digit run is empty, exceeds uint64, or does not fit its field."""

    def __init__(
        self,
        text: str,
        position: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        if field:
            message = f"Value {text} does not fit in field {field}"
        else:
            message = f"Invalid UInt64: {text!r}"
        super().__init__(message, position)
        self.text = text
        self.field = field


class UnknownAccountType(ParseError):
    """Character is not in the account type letter table."""

    def __init__(self, char: str, position: Optional[int] = None) -> None:
        super().__init__(f"Unknown account type identifier: {char!r}", position)
        self.char = char


class UnknownFormat(SteamIDError):
    """No format could parse the input. Terminal for the parse attempt."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown Steam ID format: {text}")
        self.input = text


class FieldOverflowError(SteamIDError, ValueError):
    """Value is negative or wider than the bit field it is packed into."""

    def __init__(self, field: str, width: int, value: Any) -> None:
        super().__init__(f"{field} must fit in {width} bits, got {value}")
        self.field = field
        self.width = width
        self.value = value


class UnwritableAccountType(SteamIDError, ValueError):
    """Account type has no letter in the Community32 letter table."""

    def __init__(self, account_type: Any) -> None:
        name = getattr(account_type, "name", account_type)
        super().__init__(f"Account type {name} has no Community32 letter")
        self.account_type = account_type
