"""Utility modules for cattocol."""

from .terminal_utils import (
    EscapeScanner,
    calculate_display_width,
    max_display_width,
    pad_to_width,
    strip_escapes,
)

__all__ = [
    "EscapeScanner",
    "calculate_display_width",
    "max_display_width",
    "pad_to_width",
    "strip_escapes",
]
