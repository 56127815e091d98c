"""Ratio Presenter - Builds the comparison table for two scale objects.

Given a reference object and a compared object, the presenter computes the
size ratio and re-expresses every catalog entry "as if" scaled by it:

    ratio = second.size_in_meter / first.size_in_meter

For each entry (in ascending size order) it derives the scaled size, the
best unit for that scaled size, the magnitude bucket of the entry's own
(unscaled) size, and the catalog object that is about the scaled size.

Example:
    Comparing an ant (0.01 m) with a mountain (5000 m) gives a ratio of
    500000 ("↑ 5.000 x 10⁵ : 1"): at that scale the ant is 5 km long.

Rendering is left to the caller (CLI or desktop viewer).
"""

import logging
from typing import List, Optional

from src.models.scale_object import ScaleObjectEntry
from src.models.translatable_label import TranslatableLabel, normalize_language
from src.utils.constants import (
    BUCKET_BREAKPOINTS,
    BUCKET_COSMIC,
    BUCKETS,
    DEFAULT_SIGNIFICANT_DIGITS,
    RATIO_DOWN_GLYPH,
    RATIO_UP_GLYPH,
)
from src.utils.number_format import format_number
from src.services.dto import BucketSection, RatioTable, ScaleRow
from src.services.label_store import LabelStore
from src.services.logging_utils import get_service_logger, log_operation
from src.services.scale_object_catalog import ScaleObjectCatalog
from src.services.unit_catalog import UnitCatalog

logger = get_service_logger(__name__)


def classify_magnitude(size_in_meter: float) -> str:
    """
    Classify a size into its magnitude bucket.

    Breakpoints (meters): <=4e-5 micro, <1e3 human, <=1.2e7 travel,
    <=1e10 planetary, <=3e16 solar, <=1.25e21 galactic, else cosmic.
    """
    for upper_bound, inclusive, bucket in BUCKET_BREAKPOINTS:
        if size_in_meter < upper_bound or (inclusive and size_in_meter == upper_bound):
            return bucket
    return BUCKET_COSMIC


def bucket_rank(bucket: str) -> int:
    """Position of a bucket in the micro..cosmic order."""
    return BUCKETS.index(bucket)


def format_ratio(ratio: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """
    Render a ratio with a direction glyph.

    Ratios below 1 read as "↓ 1 : N" (the compared object is smaller),
    others as "↑ N : 1".
    """
    if ratio < 1:
        return f"{RATIO_DOWN_GLYPH} 1 : {format_number(1 / ratio, significant_digits)}"
    return f"{RATIO_UP_GLYPH} {format_number(ratio, significant_digits)} : 1"


def group_sections(rows: List[ScaleRow]) -> List[BucketSection]:
    """Group consecutive rows into sections, starting a new one whenever the bucket changes."""
    sections: List[BucketSection] = []
    for row in rows:
        if not sections or sections[-1].bucket != row.bucket:
            sections.append(BucketSection(bucket=row.bucket))
        sections[-1].rows.append(row)
    return sections


class RatioPresenter:
    """
    Derives presentation-ready comparison rows from the loaded catalogs.

    Building a table sorts the object catalog by size (the catalog order is
    shared with the selection lists, which re-sort by name when refreshed).
    Building twice with the same inputs yields equal tables.
    """

    def __init__(
        self,
        labels: LabelStore,
        units: UnitCatalog,
        objects: ScaleObjectCatalog,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
    ):
        """
        Initialize the presenter.

        Args:
            labels: Label store (provides current and fallback languages)
            units: Unit catalog used for scaled sizes
            objects: Object catalog to tabulate
            significant_digits: Significant digits of every formatted number
        """
        self._labels = labels
        self._units = units
        self._objects = objects
        self._digits = significant_digits

    def _localize(self, label: TranslatableLabel, lang: str) -> str:
        text = label.get(lang)
        if text is None:
            text = label.get(self._labels.fallback_language)
        return text or ""

    def _format(self, value: float) -> str:
        return format_number(value, self._digits)

    def build(
        self,
        first: ScaleObjectEntry,
        second: ScaleObjectEntry,
        lang: Optional[str] = None,
    ) -> RatioTable:
        """
        Build the comparison table.

        Args:
            first: Reference object
            second: Compared object
            lang: Language of the text fields (defaults to the label
                store's current language)

        Returns:
            RatioTable with rows in ascending size order
        """
        lang = normalize_language(lang) if lang else self._labels.current_language
        ratio = second.size_in_meter / first.size_in_meter

        self._objects.sort_by_size()
        rows = [self._build_row(entry, ratio, lang) for entry in self._objects]
        table = RatioTable(
            first=first,
            second=second,
            ratio=ratio,
            ratio_text=format_ratio(ratio, self._digits),
            language=lang,
            rows=rows,
            sections=group_sections(rows),
        )
        log_operation(
            logger,
            operation="build_ratio_table",
            outcome="success",
            level=logging.DEBUG,
            ratio=ratio,
            row_count=len(rows),
            language=lang,
        )
        return table

    def build_by_name(
        self,
        first_name: str,
        second_name: str,
        lang: Optional[str] = None,
    ) -> Optional[RatioTable]:
        """
        Build the comparison table from two localized object names.

        Returns:
            RatioTable, or None while the selection is incomplete (a name is
            blank or does not match any object)
        """
        lang = normalize_language(lang) if lang else self._labels.current_language
        if not first_name or not second_name:
            return None

        first = self._objects.find_by_name(first_name, lang)
        second = self._objects.find_by_name(second_name, lang)
        if first is None or second is None:
            log_operation(
                logger,
                operation="build_ratio_table",
                outcome="unknown_object",
                level=logging.DEBUG,
                first_name=first_name,
                second_name=second_name,
                language=lang,
            )
            return None
        return self.build(first, second, lang)

    def _build_row(self, entry: ScaleObjectEntry, ratio: float, lang: str) -> ScaleRow:
        unit = entry.bound_unit
        scaled_size = entry.size_in_meter * ratio
        scaled_unit = self._units.best_unit_for(scaled_size)
        scaled_size_in_unit = scaled_size / scaled_unit.size_in_meter
        scaled_symbol = self._localize(scaled_unit.symbol, lang)

        nearest = self._objects.find_nearest_by_size(scaled_size)
        nearest_name = self._localize(nearest.name_label, lang) if nearest is not None else ""

        unit_symbol = self._localize(unit.symbol, lang)
        return ScaleRow(
            entry=entry,
            bucket=classify_magnitude(entry.size_in_meter),
            name=self._localize(entry.name_label, lang),
            url=entry.url,
            size_in_meter_text=f"{self._format(entry.size_in_meter)} m",
            size_in_unit_text=f"{self._format(entry.size_in_bound_unit)} {unit_symbol}",
            unit_symbol=unit_symbol,
            unit_name=self._localize(unit.name, lang),
            unit_description=self._localize(unit.description, lang),
            scaled_size_in_meter=scaled_size,
            scaled_size_in_unit=scaled_size_in_unit,
            scaled_size_text=f"{self._format(scaled_size_in_unit)} {scaled_symbol}",
            scaled_unit_symbol=scaled_symbol,
            scaled_unit_name=self._localize(scaled_unit.name, lang),
            scaled_unit_description=self._localize(scaled_unit.description, lang),
            nearest_at_scale=nearest,
            nearest_name=nearest_name,
        )
