"""
Vitals model for the Jazz HUD.

Holds the player's score, level, lives, running flag and the partial
damage of the active heart, plus the pure transitions that move it
between states:

- ``hit`` damages the active heart one step; a fully depleted heart is
  consumed and the next one becomes active at full.
- ``hit`` at zero lives is a no-op, so lives never go negative.
- ``heal`` grants one full heart and clears partial damage.

Transitions return a new ``VitalsState`` and never touch a display.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from jazz.config import (
    DAMAGE_STEPS,
    DEFAULT_LEVEL,
    DEFAULT_LIVES,
    DEFAULT_PARTIAL_DAMAGE,
    DEFAULT_SCORE,
)


# ── VitalsState ────────────────────────────────────────────────────────────


@dataclass
class VitalsState:
    """Authoritative record of game vitals.

    ``score`` and ``level`` are written directly by scoring and level
    code elsewhere; nothing here validates them.
    """

    running: bool = False
    score: int = DEFAULT_SCORE
    level: int = DEFAULT_LEVEL
    lives: int = DEFAULT_LIVES
    partial_damage: int = DEFAULT_PARTIAL_DAMAGE

    @property
    def is_dead(self) -> bool:
        return self.lives <= 0


# ── Transitions ────────────────────────────────────────────────────────────


def init_state() -> VitalsState:
    """Return a fresh state: score 0, 3 lives, level 1, not running."""
    return VitalsState()


def hit(state: VitalsState, steps: int = DAMAGE_STEPS) -> VitalsState:
    """Apply one unit of damage to the active heart."""
    if state.lives <= 0:
        return state
    if state.partial_damage < steps - 1:
        return replace(state, partial_damage=state.partial_damage + 1)
    return replace(state, lives=state.lives - 1, partial_damage=0)


def heal(state: VitalsState) -> VitalsState:
    """Grant one extra full heart.  No upper bound on lives."""
    return replace(state, lives=state.lives + 1, partial_damage=0)


def start(state: VitalsState) -> VitalsState:
    """Mark the game loop as running."""
    return replace(state, running=True)
