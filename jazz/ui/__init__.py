"""User interface components."""

from .hud import HudSurface, RecordingHud, sync_display
from .text import format_label, format_level, format_score

__all__ = [
    "HudSurface",
    "RecordingHud",
    "format_label",
    "format_level",
    "format_score",
    "sync_display",
]
