"""
Heart icons for the Jazz HUD.

Maps ``(lives, partial_damage, steps)`` to the ordered row of heart
icons shown on screen: one ``full`` heart per life except the active
one, then the active heart in its damage class.  With no lives left the
row is a single ``empty`` placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jazz.config import DAMAGE_STEPS
from jazz.utils.functions import check_steps, clamp, remaining_quarters


class DamageClass(Enum):
    """Discrete visual state of a heart icon."""
    FULL = "full"
    THREEQUARTER = "threequarter"
    HALF = "half"
    QUARTER = "quarter"
    EMPTY = "empty"


# Intact quarters of the active heart -> icon class
_QUARTER_CLASSES: dict[int, DamageClass] = {
    4: DamageClass.FULL,
    3: DamageClass.THREEQUARTER,
    2: DamageClass.HALF,
    1: DamageClass.QUARTER,
}


@dataclass(frozen=True)
class HeartIcon:
    """One heart in the rendered row."""
    damage_class: DamageClass


def damage_class_for(partial_damage: int, steps: int = DAMAGE_STEPS) -> DamageClass:
    """Return the icon class of an active heart with *partial_damage*.

    For the default four steps this is the fixed table
    0 -> full, 1 -> threequarter, 2 -> half, 3 -> quarter.  Other step
    counts scale proportionally (see ``remaining_quarters``).
    """
    check_steps(steps)
    safe_partial = clamp(partial_damage, 0, steps - 1)
    return _QUARTER_CLASSES[remaining_quarters(safe_partial, steps)]


def render_lives(
    lives: int,
    partial_damage: int = 0,
    steps: int = DAMAGE_STEPS,
) -> list[HeartIcon]:
    """Build the heart row for *lives* with the active heart damaged.

    Inputs are clamped rather than rejected: negative lives count as
    zero and partial damage is forced into ``[0, steps - 1]``.  Raises
    ValueError only for ``steps < 1``.
    """
    check_steps(steps)
    safe_lives = max(0, lives)

    if safe_lives <= 0:
        return [HeartIcon(DamageClass.EMPTY)]

    icons = [HeartIcon(DamageClass.FULL) for _ in range(safe_lives - 1)]
    icons.append(HeartIcon(damage_class_for(partial_damage, steps)))
    return icons
