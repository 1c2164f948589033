"""
HUD synchronisation for the Jazz HUD.

``sync_display`` pushes a ``VitalsState`` onto any surface that speaks
the ``HudSurface`` protocol: the heart row is rebuilt from scratch on
every call, and score and level are written as plain text.  Best score
and sound mode are not part of the HUD yet and are never written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from jazz.config import DAMAGE_STEPS
from jazz.models.heart import DamageClass, HeartIcon, render_lives
from jazz.models.vitals import VitalsState
from jazz.ui.text import format_level, format_score


class HudSurface(Protocol):
    """Display surface the HUD is drawn onto."""

    def clear_hearts(self) -> None: ...

    def append_heart(self, damage_class: DamageClass) -> None: ...

    def set_score(self, text: str) -> None: ...

    def set_level(self, text: str) -> None: ...


@dataclass
class RecordingHud:
    """In-memory HUD surface.

    Keeps the heart row and text slots as plain values; used headless
    and as the base for the pygame surface.
    """

    hearts: list[DamageClass] = field(default_factory=list)
    score_text: str = ""
    level_text: str = ""

    def clear_hearts(self) -> None:
        self.hearts.clear()

    def append_heart(self, damage_class: DamageClass) -> None:
        self.hearts.append(damage_class)

    def set_score(self, text: str) -> None:
        self.score_text = text

    def set_level(self, text: str) -> None:
        self.level_text = text

    @property
    def heart_tags(self) -> list[str]:
        """Damage-class tags of the current row, left to right."""
        return [h.value for h in self.hearts]


def sync_display(
    state: VitalsState,
    surface: HudSurface,
    steps: int = DAMAGE_STEPS,
) -> list[HeartIcon]:
    """Replace the surface's hearts and text with *state*.

    Returns the heart row that was drawn.
    """
    icons = render_lives(state.lives, state.partial_damage, steps)
    surface.clear_hearts()
    for icon in icons:
        surface.append_heart(icon.damage_class)
    surface.set_score(format_score(state.score))
    surface.set_level(format_level(state.level))
    return icons
