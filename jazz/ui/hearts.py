"""
Pygame heart drawing for the Jazz HUD.

Each heart is drawn as a faint silhouette with a red fill clipped from
the bottom up to the fraction given by its damage class, so a ``half``
heart is filled to half height and an ``empty`` heart shows only the
silhouette.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame

from jazz.config import (
    COLOR_HEART_EMPTY,
    COLOR_HEART_FILL,
    COLOR_TEXT,
    HEART_FILL,
    HEART_SIZE,
    HEART_SPACING,
    HUD_FONT_SIZE,
    HUD_MARGIN,
)
from jazz.models.heart import DamageClass
from jazz.ui.hud import RecordingHud
from jazz.ui.text import format_label


def heart_shape(size: int, color: tuple[int, int, int]) -> pygame.Surface:
    """Return a transparent *size* x *size* surface with a heart on it."""
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    r = size // 4
    top = r + 1
    pygame.draw.circle(surf, color, (r, top), r)
    pygame.draw.circle(surf, color, (size - r, top), r)
    pygame.draw.polygon(surf, color, [(0, top), (size, top), (size // 2, size - 1)])
    return surf


def fill_height(damage_class: DamageClass, size: int) -> int:
    """Pixel rows of the fill for a heart of *size* in *damage_class*."""
    return round(size * HEART_FILL[damage_class.value])


def draw_heart(
    surface: pygame.Surface,
    damage_class: DamageClass,
    x: int,
    y: int,
    size: int = HEART_SIZE,
) -> pygame.Rect:
    """Draw one heart icon with its top-left corner at (*x*, *y*)."""
    surface.blit(heart_shape(size, COLOR_HEART_EMPTY), (x, y))

    rows = fill_height(damage_class, size)
    if rows > 0:
        filled = heart_shape(size, COLOR_HEART_FILL)
        area = pygame.Rect(0, size - rows, size, rows)
        surface.blit(filled, (x, y + size - rows), area)

    return pygame.Rect(x, y, size, size)


@dataclass
class PygameHud(RecordingHud):
    """HUD surface that paints the heart row and text with pygame.

    Call ``draw`` once per frame after the HUD has been synced.
    """

    scale: int = 1
    _font: Any = field(default=None, repr=False)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, HUD_FONT_SIZE * self.scale)
        return self._font

    def heart_positions(self) -> list[tuple[int, int]]:
        """Top-left corner of every heart in the row, in screen pixels."""
        size = HEART_SIZE * self.scale
        step = size + HEART_SPACING * self.scale
        margin = HUD_MARGIN * self.scale
        return [(margin + i * step, margin) for i in range(len(self.hearts))]

    def draw(self, target: pygame.Surface) -> None:
        """Paint hearts on the top-left and score / level on the top-right."""
        size = HEART_SIZE * self.scale
        for damage_class, (x, y) in zip(self.hearts, self.heart_positions()):
            draw_heart(target, damage_class, x, y, size)

        font = self._get_font()
        margin = HUD_MARGIN * self.scale
        y = margin
        for label, text in (("SCORE", self.score_text), ("LEVEL", self.level_text)):
            surf = font.render(format_label(label, text), True, COLOR_TEXT)
            target.blit(surf, (target.get_width() - surf.get_width() - margin, y))
            y += surf.get_height() + HEART_SPACING * self.scale
