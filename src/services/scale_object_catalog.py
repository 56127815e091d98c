"""Scale Object Catalog - Real-world objects of known size.

The catalog stores ScaleObjectEntry objects in a mutable order (by size for
the result table, by name for the selection lists) and answers name and size
lookups.

Each added object is bound to its best unit at insertion time, so the unit
catalog must be populated before objects are added.

Lookup policy:
    Both lookups scan the whole catalog and keep the LAST matching entry in
    the current order. Duplicate names and overlapping sizes are therefore
    resolved in favor of the entry with the highest index. Neither lookup
    raises when nothing matches; they return None.

Example Usage:
    >>> objects = ScaleObjectCatalog(unit_catalog)
    >>> objects.add_object({"ObjectEn": "Ant", "ObjectFr": "Fourmi",
    ...                     "SizeInMeter": "0.01", "URL": "", "IsDistance": "false"})
    >>> objects.find_by_name("Fourmi", "FR").size_in_meter
    0.01
"""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from src.models.scale_object import ScaleObjectEntry
from src.models.translatable_label import label_from_record
from src.utils.constants import NEAREST_SIZE_TOLERANCE
from src.services.exceptions import ValidationError
from src.services.logging_utils import get_service_logger, log_operation
from src.services.unit_catalog import UnitCatalog, coerce_size

logger = get_service_logger(__name__)


def parse_is_distance(value: Any) -> bool:
    """Parse a case-insensitive "true"/"false" token; anything else is False."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() == "true"


class ScaleObjectCatalog:
    """
    Ordered collection of scale objects bound to a unit catalog.

    The unit catalog is borrowed: it is used for best-unit queries at
    insertion time and, through unit_catalog, for scaled sizes on demand.
    """

    def __init__(self, unit_catalog: UnitCatalog):
        """
        Initialize the catalog.

        Args:
            unit_catalog: Populated unit catalog used to bind entries
        """
        self._unit_catalog = unit_catalog
        self._entries: List[ScaleObjectEntry] = []

    @property
    def unit_catalog(self) -> UnitCatalog:
        """Unit catalog used for unit selection."""
        return self._unit_catalog

    @property
    def entries(self) -> Tuple[ScaleObjectEntry, ...]:
        """Snapshot of the entries in their current order."""
        return tuple(self._entries)

    def add_object(self, raw: Mapping[str, Any]) -> ScaleObjectEntry:
        """
        Parse a raw object record, bind it to its best unit and append it.

        Expected fields: ObjectEn/ObjectFr (names), SizeInMeter (number or
        numeric string), URL, IsDistance ("true"/"false", any case).

        Args:
            raw: Decoded object record

        Returns:
            The created entry

        Raises:
            ValidationError: If the record is not a mapping
            EmptyCatalogError: If the unit catalog has no units
            InvalidMagnitudeError: If the size is not positive (the entry
                cannot be bound to a unit)
        """
        if not isinstance(raw, Mapping):
            raise ValidationError([f"Object record must be a mapping, got {type(raw).__name__}"])

        size_in_meter = coerce_size(raw.get("SizeInMeter"))
        unit = self._unit_catalog.best_unit_for(size_in_meter)

        entry = ScaleObjectEntry(
            name_label=label_from_record(raw, "Object"),
            size_in_meter=size_in_meter,
            url=str(raw.get("URL") or ""),
            is_distance=parse_is_distance(raw.get("IsDistance")),
            bound_unit=unit,
            size_in_bound_unit=size_in_meter / unit.size_in_meter,
            raw=dict(raw),
        )
        self._entries.append(entry)
        log_operation(
            logger,
            operation="add_object",
            outcome="success",
            level=logging.DEBUG,
            size_in_meter=size_in_meter,
        )
        return entry

    def sort_by_size(self) -> None:
        """Sort entries by size, ascending (stable)."""
        self._entries.sort(key=lambda entry: entry.size_in_meter)

    def sort_by_name(self, lang: str) -> None:
        """
        Sort entries by localized name, case-insensitively (stable).

        Entries without a name in the language sort as an empty name.
        """
        self._entries.sort(key=lambda entry: (entry.get_name(lang) or "").casefold())

    def find_by_name(self, name: str, lang: str) -> Optional[ScaleObjectEntry]:
        """
        Find an entry by exact, case-sensitive localized name.

        Args:
            name: Display name to look for
            lang: Language the name is expressed in

        Returns:
            The last entry with that name, or None
        """
        match = None
        for entry in self._entries:
            if entry.get_name(lang) == name:
                match = entry
        return match

    def find_nearest_by_size(self, size_in_meter: float) -> Optional[ScaleObjectEntry]:
        """
        Find an entry of about the given size.

        An entry matches when its size lies within +/-10% of the target,
        bounds included.

        Args:
            size_in_meter: Target size in meters

        Returns:
            The last matching entry, or None
        """
        min_size = size_in_meter * (1 - NEAREST_SIZE_TOLERANCE)
        max_size = size_in_meter * (1 + NEAREST_SIZE_TOLERANCE)
        match = None
        for entry in self._entries:
            if min_size <= entry.size_in_meter <= max_size:
                match = entry
        return match

    def names_ordered_by(self, lang: str) -> List[str]:
        """
        Sort the catalog by name and list the localized names.

        Note: this reorders the catalog as a side effect.

        Args:
            lang: Language of the names

        Returns:
            Names in catalog order after sorting (missing names as "")
        """
        self.sort_by_name(lang)
        return [entry.get_name(lang) or "" for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScaleObjectEntry]:
        return iter(tuple(self._entries))

    def __repr__(self) -> str:
        return f"ScaleObjectCatalog(objects={len(self._entries)})"
