"""Hack & Slash user file layout, player classes, weapons, and armor.

Block layout and field offsets come from reverse-engineering USER files
written by the game. They are a fixed contract: a wrong offset decodes
garbage silently rather than failing.

The class, weapon, and armor code tables below are provisional: the codes
and display names are not confirmed against the game.
"""

from enum import IntEnum


# Block layout (bytes)
BLOCK_SIZE = 0x140
HANDLE_LENGTH = 0x1A
NAME_LENGTH = 0x1E
DATA_LENGTH = BLOCK_SIZE - HANDLE_LENGTH - NAME_LENGTH   # 264

# Display names are single-byte Windows-1252 text; handles are UTF-8.
NAME_ENCODING = "cp1252"

# The game ships a built-in dummy account under this name.
PLACEHOLDER_NAME = "Hack & Slash"


class UserClass(IntEnum):
    """Player class codes. Code 0 (and anything unlisted) means no class."""
    CLERIC = 1
    FIGHTER = 2
    MAGIC_USER = 3
    THIEF = 4
    RANGER = 5
    PALADIN = 6
    DRUID = 7
    BARBARIAN = 8


class Weapon(IntEnum):
    """Weapon codes, ordered from weakest to strongest."""
    NONE = 0
    DAGGER = 1
    CLUB = 2
    SHORT_SWORD = 3
    MACE = 4
    HAND_AXE = 5
    SPEAR = 6
    LONG_SWORD = 7
    MORNING_STAR = 8
    FLAIL = 9
    BATTLE_AXE = 10
    BROAD_SWORD = 11
    WAR_HAMMER = 12
    BASTARD_SWORD = 13
    HALBERD = 14
    TWO_HANDED_SWORD = 15


class Armor(IntEnum):
    """Armor codes, ordered from weakest to strongest."""
    NONE = 0
    PADDED = 1
    LEATHER = 2
    STUDDED_LEATHER = 3
    RING_MAIL = 4
    SCALE_MAIL = 5
    CHAIN_MAIL = 6
    SPLINT_MAIL = 7
    BANDED_MAIL = 8
    PLATE_MAIL = 9
    FULL_PLATE = 10


# Friendly display names
CLASS_NAMES: dict[int, str] = {
    UserClass.CLERIC: "Cleric",
    UserClass.FIGHTER: "Fighter",
    UserClass.MAGIC_USER: "Magic-User",
    UserClass.THIEF: "Thief",
    UserClass.RANGER: "Ranger",
    UserClass.PALADIN: "Paladin",
    UserClass.DRUID: "Druid",
    UserClass.BARBARIAN: "Barbarian",
}

WEAPON_NAMES: dict[int, str] = {
    Weapon.NONE: "None",
    Weapon.DAGGER: "Dagger",
    Weapon.CLUB: "Club",
    Weapon.SHORT_SWORD: "Short Sword",
    Weapon.MACE: "Mace",
    Weapon.HAND_AXE: "Hand Axe",
    Weapon.SPEAR: "Spear",
    Weapon.LONG_SWORD: "Long Sword",
    Weapon.MORNING_STAR: "Morning Star",
    Weapon.FLAIL: "Flail",
    Weapon.BATTLE_AXE: "Battle Axe",
    Weapon.BROAD_SWORD: "Broad Sword",
    Weapon.WAR_HAMMER: "War Hammer",
    Weapon.BASTARD_SWORD: "Bastard Sword",
    Weapon.HALBERD: "Halberd",
    Weapon.TWO_HANDED_SWORD: "Two-Handed Sword",
}

ARMOR_NAMES: dict[int, str] = {
    Armor.NONE: "None",
    Armor.PADDED: "Padded",
    Armor.LEATHER: "Leather",
    Armor.STUDDED_LEATHER: "Studded Leather",
    Armor.RING_MAIL: "Ring Mail",
    Armor.SCALE_MAIL: "Scale Mail",
    Armor.CHAIN_MAIL: "Chain Mail",
    Armor.SPLINT_MAIL: "Splint Mail",
    Armor.BANDED_MAIL: "Banded Mail",
    Armor.PLATE_MAIL: "Plate Mail",
    Armor.FULL_PLATE: "Full Plate",
}

_CLASS_BY_CODE: dict[int, UserClass] = {c.value: c for c in UserClass}
_WEAPON_BY_CODE: dict[int, Weapon] = {w.value: w for w in Weapon}
_ARMOR_BY_CODE: dict[int, Armor] = {a.value: a for a in Armor}


def user_class_from_code(code: int) -> UserClass | None:
    """Map a class byte to a UserClass, or None for unknown codes."""
    return _CLASS_BY_CODE.get(code)


def weapon_from_code(code: int) -> Weapon:
    return _WEAPON_BY_CODE.get(code, Weapon.NONE)


def armor_from_code(code: int) -> Armor:
    return _ARMOR_BY_CODE.get(code, Armor.NONE)
