"""
Scale object model for Scale Compare.

A scale object is a real-world item (an ant, Mount Everest, the Milky Way)
with a known size, used as an intuition anchor when comparing sizes.

Each entry is bound to the best-fitting Unit when it is added to the
ScaleObjectCatalog. The binding is computed once and never refreshed:
later changes to the unit catalog do not rebind existing entries.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from src.models.translatable_label import TranslatableLabel
from src.models.unit import Unit


@dataclass(frozen=True, eq=False)
class ScaleObjectEntry:
    """
    A catalog entry for a real-world object of known size.

    Attributes:
        name_label: Localized object name
        size_in_meter: Object size (or distance) in meters
        url: Reference link for the object (may be empty)
        is_distance: True when the size is a distance rather than an extent
        bound_unit: Unit chosen for this size at insertion time (borrowed
            from the UnitCatalog)
        size_in_bound_unit: size_in_meter expressed in bound_unit
        raw: The source record the entry was parsed from
    """

    name_label: TranslatableLabel
    size_in_meter: float
    url: str
    is_distance: bool
    bound_unit: Unit
    size_in_bound_unit: float
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def get_name(self, lang: str) -> Optional[str]:
        """Localized object name, or None if missing in that language."""
        return self.name_label.get(lang)

    def get_unit_symbol(self, lang: str) -> Optional[str]:
        """Localized symbol of the bound unit."""
        return self.bound_unit.get_symbol(lang)

    def get_unit_name(self, lang: str) -> Optional[str]:
        """Localized name of the bound unit."""
        return self.bound_unit.get_name(lang)

    def get_unit_description(self, lang: str) -> Optional[str]:
        """Localized description of the bound unit."""
        return self.bound_unit.get_description(lang)
