"""Data Transfer Objects for service layer.

This module provides the presentation-ready structures produced by the
RatioPresenter and consumed by the CLI and desktop viewer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.models.scale_object import ScaleObjectEntry


@dataclass(frozen=True)
class ScaleRow:
    """One row of the comparison table.

    Text fields are already localized and formatted; numeric fields are kept
    for callers that render their own way.

    Attributes:
        entry: Catalog entry the row describes
        bucket: Magnitude bucket of the entry's unscaled size
        name: Localized object name
        url: Reference link of the object
        size_in_meter_text: Formatted size in meters (e.g. "1.800 m")
        size_in_unit_text: Formatted size in the entry's bound unit
        unit_symbol: Symbol of the bound unit
        unit_name: Name of the bound unit
        unit_description: Description of the bound unit
        scaled_size_in_meter: Size multiplied by the comparison ratio
        scaled_size_in_unit: Scaled size expressed in scaled_unit_symbol
        scaled_size_text: Formatted scaled size with its unit symbol
        scaled_unit_symbol: Symbol of the best unit for the scaled size
        scaled_unit_name: Name of that unit
        scaled_unit_description: Description of that unit
        nearest_at_scale: Object of about the scaled size, if any
        nearest_name: Localized name of nearest_at_scale, or ""
    """

    entry: ScaleObjectEntry
    bucket: str
    name: str
    url: str
    size_in_meter_text: str
    size_in_unit_text: str
    unit_symbol: str
    unit_name: str
    unit_description: str
    scaled_size_in_meter: float
    scaled_size_in_unit: float
    scaled_size_text: str
    scaled_unit_symbol: str
    scaled_unit_name: str
    scaled_unit_description: str
    nearest_at_scale: Optional[ScaleObjectEntry] = None
    nearest_name: str = ""


@dataclass(frozen=True)
class BucketSection:
    """A contiguous run of rows sharing a magnitude bucket."""

    bucket: str
    rows: List[ScaleRow] = field(default_factory=list)


@dataclass(frozen=True)
class RatioTable:
    """Result of comparing two objects.

    Attributes:
        first: The reference object (denominator of the ratio)
        second: The compared object (numerator of the ratio)
        ratio: second.size_in_meter / first.size_in_meter
        ratio_text: Display text such as "↑ 5.000 x 10⁵ : 1"
        language: Language the text fields are localized in
        rows: All rows in ascending size order
        sections: Rows grouped into runs of equal bucket
    """

    first: ScaleObjectEntry
    second: ScaleObjectEntry
    ratio: float
    ratio_text: str
    language: str
    rows: List[ScaleRow] = field(default_factory=list)
    sections: List[BucketSection] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Number of rows in the table."""
        return len(self.rows)
