#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Unit tests for BitField and the canonical Steam ID layout."""

from __future__ import annotations

import unittest
from functools import reduce
from itertools import combinations

from steamid.core.BitField import (
    ACCOUNT_ID,
    ACCOUNT_TYPE,
    FIELDS,
    INSTANCE,
    LOWEST_BIT,
    UINT64_MAX,
    UNIVERSE,
    BitField,
)
from steamid.core.Errors import FieldOverflowError


class BitFieldTest(unittest.TestCase):
    """Tests for the BitField primitive."""

    def test_initializes_mask(self) -> None:
        """Derives the mask from width and offset."""
        field = BitField("nibble", 4, 4)
        self.assertEqual(field.mask, 0b11110000)
        self.assertEqual(field.width, 4)
        self.assertEqual(field.offset, 4)
        self.assertEqual(field.limit, 0b1111)

    def test_extracts_values(self) -> None:
        """Masks and shifts the field out of a word."""
        field = BitField("nibble", 4, 4)
        self.assertEqual(field.extract_from(0b1010_1111), 0b1010)

    def test_pack_shifts_without_truncating(self) -> None:
        """Pack is a plain shift; range checks belong to check()."""
        field = BitField("nibble", 4, 4)
        self.assertEqual(field.pack(1), 0b10000)
        self.assertEqual(field.pack(0b10001), 0b100010000)

    def test_check_rejects_out_of_range(self) -> None:
        """Raises FieldOverflowError for negative or too wide values."""
        field = BitField("nibble", 4, 4)
        self.assertEqual(field.check(15), 15)
        with self.assertRaises(FieldOverflowError) as ctx:
            field.check(16)
        self.assertEqual(ctx.exception.field, "nibble")
        self.assertEqual(ctx.exception.value, 16)
        with self.assertRaises(ValueError):
            field.check(-1)

    def test_after_places_field_above_previous(self) -> None:
        """Offsets are derived from the previous field."""
        low = BitField("low", 3, 2)
        high = BitField.after("high", 5, low)
        self.assertEqual(high.offset, 5)
        self.assertEqual(high.mask, 0b11111_00000)


class SteamLayoutTest(unittest.TestCase):
    """Tests for the five canonical fields."""

    def test_masks(self) -> None:
        """Each field masks the documented bit range."""
        self.assertEqual(LOWEST_BIT.mask, 0x0000000000000001)
        self.assertEqual(ACCOUNT_ID.mask, 0x00000000FFFFFFFE)
        self.assertEqual(INSTANCE.mask, 0x000FFFFF00000000)
        self.assertEqual(ACCOUNT_TYPE.mask, 0x00F0000000000000)
        self.assertEqual(UNIVERSE.mask, 0xFF00000000000000)

    def test_fields_are_disjoint_and_cover_64_bits(self) -> None:
        """Pairwise AND is zero and the OR of all masks is all ones."""
        for first, second in combinations(FIELDS, 2):
            self.assertEqual(first.mask & second.mask, 0, f"{first.name} overlaps {second.name}")
        self.assertEqual(reduce(lambda acc, f: acc | f.mask, FIELDS, 0), UINT64_MAX)
        self.assertEqual(sum(f.width for f in FIELDS), 64)

    def test_extracts_documented_example(self) -> None:
        """Splits 76561198092541763 into its fields."""
        binary = 0b00000001_0001_00000000000000000001_0000011111100010010111110100001_1
        self.assertEqual(binary, 76561198092541763)
        self.assertEqual(UNIVERSE.extract_from(binary), 1)
        self.assertEqual(ACCOUNT_TYPE.extract_from(binary), 1)
        self.assertEqual(INSTANCE.extract_from(binary), 1)
        self.assertEqual(ACCOUNT_ID.extract_from(binary), 66138017)
        self.assertEqual(LOWEST_BIT.extract_from(binary), 1)


if __name__ == "__main__":
    unittest.main()
