"""
Models package.

This package contains the in-memory value objects of the application:
translatable labels, measurement units and scale object entries.
"""

from .translatable_label import TranslatableLabel, normalize_language
from .unit import Unit
from .scale_object import ScaleObjectEntry

__all__ = [
    "TranslatableLabel",
    "normalize_language",
    "Unit",
    "ScaleObjectEntry",
]
