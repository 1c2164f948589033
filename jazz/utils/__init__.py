"""Utility functions and helpers."""

from .functions import check_steps, clamp, remaining_quarters

__all__ = [
    "check_steps",
    "clamp",
    "remaining_quarters",
]
