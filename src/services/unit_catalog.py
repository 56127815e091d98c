"""Unit Catalog - Measurement units and best-unit selection.

The catalog keeps its units in ascending size order and picks the most
human-friendly unit for an arbitrary size: the largest unit that does not
exceed the size on a logarithmic scale.

Example Usage:
    >>> catalog = UnitCatalog()
    >>> catalog.add_unit(1, TranslatableLabel([("EN", "m")]))
    >>> catalog.add_unit(1000, TranslatableLabel([("EN", "km")]))
    >>> catalog.best_unit_for(5000).get_symbol("EN")
    'km'
    >>> catalog.best_unit_for(0.01).get_symbol("EN")   # nothing smaller: smallest unit
    'm'

Selection policy:
    - The catalog is sorted before every selection.
    - Every unit with log10(unit size) <= log10(size) qualifies; the last
      qualifying unit wins, so when two units have the same size the one
      with the higher index is chosen.
    - When no unit qualifies, the smallest unit with a positive size is
      returned; units without a positive size are never selected.
    - An empty catalog raises EmptyCatalogError and a size that is not a
      positive finite number raises InvalidMagnitudeError.
"""

import logging
import math
from typing import Any, Iterator, List, Optional, Tuple

from src.models.translatable_label import TranslatableLabel
from src.models.unit import Unit
from src.services.exceptions import EmptyCatalogError, InvalidMagnitudeError
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def coerce_size(value: Any) -> float:
    """
    Convert a raw size field to float.

    Resource files store sizes as numbers or numeric strings. Anything that
    cannot be parsed (None, "", "abc", NaN) becomes 0.0 instead of raising.
    """
    if isinstance(value, bool):
        return 0.0
    try:
        size = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(size):
        return 0.0
    return size


def _log10(size: float) -> Optional[float]:
    """log10 of a size, or None where it is undefined (size <= 0)."""
    if size > 0:
        return math.log10(size)
    return None


class UnitCatalog:
    """
    Ordered collection of measurement units.

    Canonical order is ascending size_in_meter; sort_by_size() is stable so
    units of equal size keep their insertion order.
    """

    def __init__(self):
        """Construct an empty unit catalog."""
        self._units: List[Unit] = []

    def add_unit(
        self,
        size_in_meter: Any,
        symbol: Optional[TranslatableLabel] = None,
        name: Optional[TranslatableLabel] = None,
        description: Optional[TranslatableLabel] = None,
    ) -> Unit:
        """
        Append a unit to the catalog.

        Args:
            size_in_meter: Unit size in meters (number or numeric string;
                unparseable values become 0.0)
            symbol: Localized unit symbol
            name: Localized unit name
            description: Localized unit description

        Returns:
            The created Unit
        """
        unit = Unit(
            size_in_meter=coerce_size(size_in_meter),
            symbol=symbol or TranslatableLabel(),
            name=name or TranslatableLabel(),
            description=description or TranslatableLabel(),
        )
        self._units.append(unit)
        log_operation(
            logger,
            operation="add_unit",
            outcome="success",
            level=logging.DEBUG,
            size_in_meter=unit.size_in_meter,
        )
        return unit

    def sort_by_size(self) -> None:
        """Sort units by size, ascending (stable)."""
        self._units.sort(key=lambda unit: unit.size_in_meter)

    def best_unit_for(self, size_in_meter: float) -> Unit:
        """
        Select the most appropriate unit for a size.

        Args:
            size_in_meter: Size in meters (must be positive and finite)

        Returns:
            The largest unit not exceeding the size; the later unit on ties;
            the smallest positive unit when every unit is larger than the size.

        Raises:
            EmptyCatalogError: If the catalog has no unit with a positive size
            InvalidMagnitudeError: If the size is not a positive finite number
        """
        if not self._units:
            raise EmptyCatalogError()
        try:
            size = float(size_in_meter)
        except (TypeError, ValueError):
            raise InvalidMagnitudeError(size_in_meter)
        if not math.isfinite(size) or size <= 0:
            raise InvalidMagnitudeError(size_in_meter)

        self.sort_by_size()
        target = math.log10(size)

        # Units without a positive size cannot express any size
        usable = [unit for unit in self._units if _log10(unit.size_in_meter) is not None]
        if not usable:
            raise EmptyCatalogError(reason="has no unit with a positive size")

        best = usable[0]
        for unit in usable:
            if _log10(unit.size_in_meter) <= target:
                best = unit
        return best

    @property
    def units(self) -> Tuple[Unit, ...]:
        """Snapshot of the units in their current order."""
        return tuple(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(tuple(self._units))

    def __repr__(self) -> str:
        return f"UnitCatalog(units={len(self._units)})"
