#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""The Steam ID value type: accessors, mutators, parsing and formatting."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from steamid.core.BitField import (
    ACCOUNT_ID,
    ACCOUNT_TYPE,
    COMBINED_ACCOUNT_ID,
    INSTANCE,
    LOWEST_BIT,
    UINT64_MAX,
    UNIVERSE,
)
from steamid.core.Enums import AccountType, Format, Universe
from steamid.core.Errors import ParseError, UnknownFormat
from steamid.grammar import FormatMatrix
from steamid.utils.Logger import Logger


FormatLike = Union[Format, str]


@dataclass
class DecodedSteamID:
    universe: Universe
    account_type: AccountType
    instance: int
    account_id: int
    lowest_bit: int

    def __str__(self) -> str:
        return (
            f"UNIVERSE={self.universe.name} TYPE={self.account_type.name} "
            f"INSTANCE={self.instance} ACCOUNT_ID={self.account_id} LOWEST_BIT={self.lowest_bit}"
        )


def _compose(account_id_with_lowest_bit: int, instance: int, account_type: int, universe: int) -> int:
    """Pack the four logical fields into a 64-bit word, validating each width."""
    return (
        COMBINED_ACCOUNT_ID.pack(COMBINED_ACCOUNT_ID.check(account_id_with_lowest_bit))
        | INSTANCE.pack(INSTANCE.check(instance))
        | ACCOUNT_TYPE.pack(ACCOUNT_TYPE.check(account_type))
        | UNIVERSE.pack(UNIVERSE.check(universe))
    )


class SteamID:
    """
    A 64-bit Steam identifier.

    The raw word is the only stored state. Accessors project bit fields out of
    it; mutators rebuild the whole word and replace it in one assignment.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Steam ID value must be int, got {type(value).__name__}")
        if not (0 <= value <= UINT64_MAX):
            raise ValueError("Steam ID value must fit in uint64")
        self._value = value

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, fmt: FormatLike) -> SteamID:
        """Parse ``text`` under exactly one format.

        Raises:
            ParseError: Propagated unchanged from the grammar.
        """
        return cls(FormatMatrix.decode(text, Format.from_name(fmt)))

    @classmethod
    def parse_any(cls, text: str) -> SteamID:
        """Try every format in declaration order and return the first match.

        Community64 (bare digits) is tried last since it would accept inputs
        meant for nothing else.

        Raises:
            UnknownFormat: If no format parses ``text``.
        """
        for fmt in Format:
            try:
                steam_id = cls.parse(text, fmt)
            except ParseError as e:
                Logger.debug(f"[SteamID] {fmt.value} rejected {text!r}: {e}")
                continue
            Logger.debug(f"[SteamID] {text!r} detected as {fmt.value}")
            return steam_id
        raise UnknownFormat(text)

    @classmethod
    def from_string(cls, text: str, fmt: Optional[FormatLike] = None) -> SteamID:
        if fmt is None:
            return cls.parse_any(text)
        return cls.parse(text, fmt)

    @classmethod
    def from_parts(
        cls,
        account_id: int,
        instance: int = 0,
        account_type: int = AccountType.INVALID,
        universe: int = Universe.INDIVIDUAL,
        lowest_bit: int = 0,
    ) -> SteamID:
        """Build a Steam ID from its fields.

        ``account_id`` is the 31-bit field; the folded low bit is passed
        separately as ``lowest_bit``.

        Raises:
            FieldOverflowError: If any value does not fit its field.
        """
        combined = (ACCOUNT_ID.check(account_id) << 1) | LOWEST_BIT.check(lowest_bit)
        return cls(_compose(combined, instance, int(account_type), int(universe)))

    @classmethod
    def from_le_bytes(cls, data: bytes) -> SteamID:
        if len(data) != 8:
            raise ValueError("Steam ID buffer must be exactly 8 bytes")
        return cls(struct.unpack("<Q", data)[0])

    # ------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------

    def to_u64(self) -> int:
        return self._value

    def to_le_bytes(self) -> bytes:
        return struct.pack("<Q", self._value)

    def lowest_bit(self) -> int:
        return LOWEST_BIT.extract_from(self._value)

    def account_id(self, include_lowest_bit: bool = False) -> int:
        """Return the account number.

        With ``include_lowest_bit`` the lowest bit is folded back in as the
        least significant digit, which is the number Community32 shows.
        """
        value = ACCOUNT_ID.extract_from(self._value)
        if include_lowest_bit:
            return (value << 1) + self.lowest_bit()
        return value

    def instance(self) -> int:
        return INSTANCE.extract_from(self._value)

    def account_type(self) -> AccountType:
        return AccountType(ACCOUNT_TYPE.extract_from(self._value))

    def universe(self) -> Universe:
        return Universe(UNIVERSE.extract_from(self._value))

    def fields(self) -> DecodedSteamID:
        return DecodedSteamID(
            universe=self.universe(),
            account_type=self.account_type(),
            instance=self.instance(),
            account_id=self.account_id(),
            lowest_bit=self.lowest_bit(),
        )

    # ------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------

    def set_instance(self, instance: int) -> SteamID:
        self._value = _compose(
            self.account_id(include_lowest_bit=True),
            instance,
            self.account_type(),
            self.universe(),
        )
        return self

    def set_account_type(self, account_type: int) -> SteamID:
        self._value = _compose(
            self.account_id(include_lowest_bit=True),
            self.instance(),
            int(account_type),
            self.universe(),
        )
        return self

    def set_universe(self, universe: int) -> SteamID:
        self._value = _compose(
            self.account_id(include_lowest_bit=True),
            self.instance(),
            self.account_type(),
            int(universe),
        )
        return self

    # ------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------

    def format(self, fmt: FormatLike = Format.COMMUNITY64) -> str:
        """Serialize under ``fmt`` (Community64 when omitted).

        Raises:
            UnwritableAccountType: Community32 with an account type that has no letter.
        """
        return FormatMatrix.encode(self, Format.from_name(fmt))

    def write(self, stream: TextIO, fmt: FormatLike = Format.COMMUNITY64) -> None:
        stream.write(self.format(fmt))

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.format(Format.COMMUNITY64)

    def __repr__(self) -> str:
        return f"SteamID({self._value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SteamID):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented
