"""
UI text utilities for the Jazz HUD.

Plain-text rendering of the numeric HUD fields.
"""

from __future__ import annotations


def format_score(score: int) -> str:
    return str(score)


def format_level(level: int) -> str:
    return str(level)


def format_label(label: str, text: str) -> str:
    """Prefix a field value with its HUD label, e.g. ``SCORE 120``."""
    return f"{label} {text}"
