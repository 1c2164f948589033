"""
Game controller for the Jazz HUD.

Owns one ``VitalsState`` and the HUD surface it is shown on.  Every
transition swaps in the new state, re-syncs the HUD, then notifies
subscribers (overlay, menus and other observers of vitals changes).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from jazz.config import DAMAGE_STEPS
from jazz.models.heart import HeartIcon, render_lives
from jazz.models import vitals
from jazz.models.vitals import VitalsState
from jazz.ui.hud import HudSurface, RecordingHud, sync_display
from jazz.utils.functions import check_steps

logger = logging.getLogger(__name__)

Observer = Callable[[VitalsState], None]


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level vitals controller.

    Several games can run side by side; each owns its own state and HUD.
    """

    hud: HudSurface = field(default_factory=RecordingHud)
    steps: int = DAMAGE_STEPS
    state: VitalsState = field(default_factory=vitals.init_state)
    _observers: list[Observer] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        check_steps(self.steps)

    # ── Observers ───────────────────────────────────────────────────────

    def subscribe(self, callback: Observer) -> None:
        """Call *callback* with the new state after every change."""
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _commit(self, new_state: VitalsState) -> VitalsState:
        self.state = new_state
        self.sync()
        for callback in list(self._observers):
            callback(self.state)
        return self.state

    # ── Transitions ─────────────────────────────────────────────────────

    def init(self) -> VitalsState:
        """Reset vitals to their defaults and redraw the HUD."""
        logger.debug("init")
        return self._commit(vitals.init_state())

    def hit(self) -> VitalsState:
        """Damage the active heart one step.  No-op once lives run out."""
        if self.state.is_dead:
            logger.debug("hit ignored, no lives left")
            return self.state
        new_state = vitals.hit(self.state, self.steps)
        logger.debug("hit -> lives=%d partial=%d",
                     new_state.lives, new_state.partial_damage)
        return self._commit(new_state)

    def heal(self) -> VitalsState:
        """Add one full heart."""
        new_state = vitals.heal(self.state)
        logger.debug("heal -> lives=%d", new_state.lives)
        return self._commit(new_state)

    def start(self) -> VitalsState:
        """Flag the game loop as running."""
        logger.debug("start")
        return self._commit(vitals.start(self.state))

    # ── Direct writes from scoring / level code ─────────────────────────

    def add_score(self, points: int) -> VitalsState:
        return self._commit(replace(self.state, score=self.state.score + points))

    def set_level(self, level: int) -> VitalsState:
        return self._commit(replace(self.state, level=level))

    # ── Display ─────────────────────────────────────────────────────────

    def sync(self) -> list[HeartIcon]:
        """Push the current state onto the HUD."""
        return sync_display(self.state, self.hud, self.steps)

    def render(self) -> list[HeartIcon]:
        """Heart row for the current state, without touching the HUD."""
        return render_lives(self.state.lives, self.state.partial_damage, self.steps)
