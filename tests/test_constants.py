"""Tests for the class, weapon, and armor code tables."""

import pytest

from hns_users.models.constants import (
    ARMOR_NAMES,
    BLOCK_SIZE,
    CLASS_NAMES,
    DATA_LENGTH,
    HANDLE_LENGTH,
    NAME_LENGTH,
    WEAPON_NAMES,
    Armor,
    UserClass,
    Weapon,
    armor_from_code,
    user_class_from_code,
    weapon_from_code,
)


def test_block_layout():
    assert BLOCK_SIZE == 320
    assert HANDLE_LENGTH == 26
    assert NAME_LENGTH == 30
    assert DATA_LENGTH == 264


def test_every_variant_has_a_display_name():
    assert set(CLASS_NAMES) == set(UserClass)
    assert set(WEAPON_NAMES) == set(Weapon)
    assert set(ARMOR_NAMES) == set(Armor)


def test_known_codes():
    assert user_class_from_code(3) is UserClass.MAGIC_USER
    assert weapon_from_code(15) is Weapon.TWO_HANDED_SWORD
    assert armor_from_code(10) is Armor.FULL_PLATE


@pytest.mark.parametrize("code", range(256))
def test_lookups_never_raise(code):
    user_class_from_code(code)
    assert isinstance(weapon_from_code(code), Weapon)
    assert isinstance(armor_from_code(code), Armor)


def test_zero_means_nothing_equipped():
    assert user_class_from_code(0) is None
    assert weapon_from_code(0) is Weapon.NONE
    assert armor_from_code(0) is Armor.NONE


def test_code_tables_are_marked_provisional():
    from hns_users.models import constants

    assert "provisional" in constants.__doc__
