#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Enumerations for the universe and account type fields, plus the text formats."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from steamid.core.BitField import ACCOUNT_TYPE, UNIVERSE, BitField


def _pseudo_member(enum_cls, value, field: BitField):
    """Build (and cache) a member for an unnamed value that still fits ``field``."""
    if isinstance(value, bool) or not isinstance(value, int) or not field.fits(value):
        return None
    member = int.__new__(enum_cls, value)
    member._name_ = f"UNKNOWN_{value}"
    member._value_ = value
    return enum_cls._value2member_map_.setdefault(value, member)


# =========================
# FIELD ENUMS
# =========================

class Universe(IntEnum):
    INDIVIDUAL = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, UNIVERSE)


class AccountType(IntEnum):
    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    P2P_SUPER_SEEDER = 9
    ANON_USER = 10

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, ACCOUNT_TYPE)


# Community32 letters, indexed by account type value
ACCOUNT_TYPE_LETTERS: tuple[Optional[str], ...] = (
    "I",   # INVALID
    "U",   # INDIVIDUAL
    "M",   # MULTISEAT
    "G",   # GAME_SERVER
    "A",   # ANON_GAME_SERVER
    "P",   # PENDING
    "C",   # CONTENT_SERVER
    "g",   # CLAN
    "T",   # CHAT
    None,  # P2P_SUPER_SEEDER
    "a",   # ANON_USER
)

_LETTER_TO_TYPE = {
    letter: AccountType(index)
    for index, letter in enumerate(ACCOUNT_TYPE_LETTERS)
    if letter is not None
}


def account_type_letter(account_type: int) -> Optional[str]:
    """Return the Community32 letter for ``account_type``, or None if it has none."""
    index = int(account_type)
    if 0 <= index < len(ACCOUNT_TYPE_LETTERS):
        return ACCOUNT_TYPE_LETTERS[index]
    return None


def account_type_from_letter(letter: str) -> Optional[AccountType]:
    return _LETTER_TO_TYPE.get(letter)


# =========================
# TEXT FORMATS
# =========================

class Format(Enum):
    """Text representations. Declaration order is the auto-detect order."""

    DEFAULT = "Default"
    COMMUNITY32 = "Community32"
    COMMUNITY64 = "Community64"

    @classmethod
    def from_name(cls, name: str) -> Format:
        """Resolve a format by member name or label, case-insensitive."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown format name: {name!r}")

