"""User account data class and the three-way block decode result.

A block in the USER file decodes to exactly one of:
  - User: an occupied account slot
  - EmptySlot: unoccupied (or unreadable) slot, skipped in output
  - EndOfStream: clean end of file at a block boundary
"""

from dataclasses import dataclass

from hns_users.models.constants import (
    ARMOR_NAMES,
    CLASS_NAMES,
    PLACEHOLDER_NAME,
    WEAPON_NAMES,
    Armor,
    UserClass,
    Weapon,
)


@dataclass(frozen=True, slots=True)
class User:
    """A decoded account. Field order matches the JSON output order."""
    handle: str
    name: str
    immortal: int                       # immortal flag/level byte
    level: int
    experience: float                   # floored
    experience_needed: float | None     # None past level 99
    gold: float
    bank: float
    loan: float
    user_class: UserClass | None        # None for unknown class codes
    strength: int
    intelligence: int
    dexterity: int
    charisma: int
    weapon: Weapon
    armor: Armor

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER_NAME

    def to_dict(self) -> dict:
        return {
            "handle": self.handle,
            "name": self.name,
            "immortal": self.immortal,
            "level": self.level,
            "experience": self.experience,
            "experience_needed": self.experience_needed,
            "gold": self.gold,
            "bank": self.bank,
            "loan": self.loan,
            "class": CLASS_NAMES[self.user_class] if self.user_class is not None else None,
            "strength": self.strength,
            "intelligence": self.intelligence,
            "dexterity": self.dexterity,
            "charisma": self.charisma,
            "weapon": WEAPON_NAMES[self.weapon],
            "armor": ARMOR_NAMES[self.armor],
        }


@dataclass(frozen=True, slots=True)
class EmptySlot:
    """An account slot with no usable handle."""
    reason: str


@dataclass(frozen=True, slots=True)
class EndOfStream:
    """No more blocks: the stream ended exactly at a block boundary."""


DecodeResult = User | EmptySlot | EndOfStream
