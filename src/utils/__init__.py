"""Utilities package for the Scale Compare application."""

from .number_format import format_number

__all__ = [
    "format_number",
]
