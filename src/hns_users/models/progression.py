"""Experience curve.

Mirrors the game's ExpNeed(): the threshold doubles every level and is
scaled down by the character's intelligence. Accounts past level 99 have
no further experience target.
"""

BASE_EXPERIENCE = 1100.0
INTELLIGENCE_MODIFIER = 2.0
MAX_PROGRESSION_LEVEL = 99


def experience_needed(level: int, intelligence: int) -> float | None:
    """Experience required to advance from *level*, or None once capped.

    Plain IEEE double arithmetic, no rounding:
        2^(level-1) * (1100 - 2 * intelligence)
    """
    if level > MAX_PROGRESSION_LEVEL:
        return None
    return 2.0 ** (level - 1) * (BASE_EXPERIENCE - INTELLIGENCE_MODIFIER * intelligence)
