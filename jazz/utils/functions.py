"""
Shared utility functions for the Jazz HUD.

Clamping and damage-fraction helpers used by the vitals model and the
heart renderer.
"""

from __future__ import annotations


def clamp(value: int, low: int, high: int) -> int:
    """Clamp *value* into the closed range [low, high]."""
    return min(max(value, low), high)


def check_steps(steps: int) -> int:
    """Return *steps* unchanged, raising ValueError when it is below 1."""
    if steps < 1:
        raise ValueError(f"damage steps must be >= 1, got {steps!r}")
    return steps


def remaining_quarters(partial_damage: int, steps: int) -> int:
    """Return how many quarters of the active heart are still intact.

    The intact fraction ``(steps - partial_damage) / steps`` is rounded up
    to the next quarter, and any damaged heart is capped at three
    quarters so it never reads as full.  Integer arithmetic only.
    """
    quarters = -(-(steps - partial_damage) * 4 // steps)
    if partial_damage > 0:
        quarters = min(quarters, 3)
    return clamp(quarters, 1, 4)
