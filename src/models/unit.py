"""
Measurement unit model for Scale Compare.

A Unit is a named length scale (nanometer, meter, light year, ...) with its
conversion factor to meters. Units are immutable once created; the
UnitCatalog owns them and orders them by size.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.models.translatable_label import TranslatableLabel


@dataclass(frozen=True, eq=False)
class Unit:
    """
    Reference measurement unit.

    Identity is the object itself (its position in the catalog), not its
    size or symbol: two units may share a size.

    Attributes:
        size_in_meter: Length of one unit expressed in meters
        symbol: Localized symbol (e.g., "km")
        name: Localized name (e.g., "kilometer" / "kilomètre")
        description: Localized description shown as a tooltip
    """

    size_in_meter: float
    symbol: TranslatableLabel = field(default_factory=TranslatableLabel)
    name: TranslatableLabel = field(default_factory=TranslatableLabel)
    description: TranslatableLabel = field(default_factory=TranslatableLabel)

    def get_symbol(self, lang: str) -> Optional[str]:
        """Localized unit symbol."""
        return self.symbol.get(lang)

    def get_name(self, lang: str) -> Optional[str]:
        """Localized unit name."""
        return self.name.get(lang)

    def get_description(self, lang: str) -> Optional[str]:
        """Localized unit description."""
        return self.description.get(lang)

    def __repr__(self) -> str:
        """Return string representation of Unit."""
        return f"Unit(size_in_meter={self.size_in_meter!r}, symbol={self.symbol.get('EN')!r})"
