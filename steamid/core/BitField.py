#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Bit range primitives for the 64-bit Steam ID layout.

Layout (LSB → MSB):

    [ universe:8 | account_type:4 | instance:20 | account_id:31 | lowest_bit:1 ]

Example (76561198092541763):

    0b00000001_0001_00000000000000000001_0000011111100010010111110100001_1
      universe  type  instance             account_id                      lowest_bit
"""

from __future__ import annotations

from dataclasses import dataclass, field

from steamid.core.Errors import FieldOverflowError


UINT64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class BitField:
    """One contiguous bit range of a 64-bit word."""

    name: str
    width: int
    offset: int = 0
    mask: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask", ((1 << self.width) - 1) << self.offset)

    @classmethod
    def after(cls, name: str, width: int, previous: BitField) -> BitField:
        """Create a field placed directly above ``previous``."""
        return cls(name, width, previous.width + previous.offset)

    @property
    def limit(self) -> int:
        """Largest value the field can hold."""
        return (1 << self.width) - 1

    def extract_from(self, word: int) -> int:
        """Return the field value stored in ``word``."""
        return (word & self.mask) >> self.offset

    def pack(self, value: int) -> int:
        """Shift ``value`` into position. No truncation is applied."""
        return value << self.offset

    def fits(self, value: int) -> bool:
        return 0 <= value <= self.limit

    def check(self, value: int) -> int:
        """Return ``value`` unchanged, or raise if it does not fit the field.

        Raises:
            FieldOverflowError: If ``value`` is negative or wider than the field.
        """
        if not self.fits(value):
            raise FieldOverflowError(self.name, self.width, value)
        return value


LOWEST_BIT = BitField("lowest_bit", 1, 0)
ACCOUNT_ID = BitField.after("account_id", 31, LOWEST_BIT)
INSTANCE = BitField.after("instance", 20, ACCOUNT_ID)
ACCOUNT_TYPE = BitField.after("account_type", 4, INSTANCE)
UNIVERSE = BitField.after("universe", 8, ACCOUNT_TYPE)

FIELDS = (LOWEST_BIT, ACCOUNT_ID, INSTANCE, ACCOUNT_TYPE, UNIVERSE)

# account_id(include_lowest_bit=True) spans both low fields
COMBINED_ACCOUNT_ID = BitField("account_id_with_lowest_bit", LOWEST_BIT.width + ACCOUNT_ID.width, 0)
