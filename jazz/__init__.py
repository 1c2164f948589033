"""
Jazz the Cat in the Hat - vitals state and heads-up display
"""

__version__ = "1.0.0"

from .game import Game
from .models import (
    DamageClass,
    HeartIcon,
    VitalsState,
    heal,
    hit,
    init_state,
    render_lives,
    start,
)
from .ui import RecordingHud, sync_display

__all__ = [
    "DamageClass",
    "Game",
    "HeartIcon",
    "RecordingHud",
    "VitalsState",
    "heal",
    "hit",
    "init_state",
    "render_lives",
    "start",
    "sync_display",
]
