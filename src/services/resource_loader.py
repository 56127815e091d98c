"""Resource Loader - Startup pipeline that builds the catalogs.

The application needs three resources, loaded in a strict order:

    1. units   -> UnitCatalog (sorted by size once loaded)
    2. labels  -> LabelStore
    3. objects -> ScaleObjectCatalog (each object is bound to a unit on
                  insertion, so units must be complete first)

Each stage either succeeds or raises ResourceLoadError naming the stage; a
failed stage stops the chain and no partially loaded bundle is returned.

Example Usage:
    >>> bundle = load_catalogs_from_directory("data")
    >>> presenter = bundle.presenter()
    >>> table = presenter.build_by_name("Ant", "Mount Everest", "EN")
    >>> table.ratio_text
    '↑ 8.849 x 10⁵ : 1'
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from src.models.translatable_label import TranslatableLabel, label_from_record
from src.utils.constants import (
    DEFAULT_SIGNIFICANT_DIGITS,
    LABELS_FILENAME,
    OBJECTS_FILENAME,
    SUPPORTED_LANGUAGES,
    UNITS_FILENAME,
)
from src.services.exceptions import (
    EmptyCatalogError,
    InvalidMagnitudeError,
    ResourceLoadError,
    ServiceError,
    ValidationError,
)
from src.services.label_store import LabelStore
from src.services.logging_utils import get_service_logger, log_operation
from src.services.ratio_presenter import RatioPresenter
from src.services.scale_object_catalog import ScaleObjectCatalog
from src.services.unit_catalog import UnitCatalog, coerce_size

logger = get_service_logger(__name__)

Records = Sequence[Mapping[str, Any]]

STAGE_UNITS = "units"
STAGE_LABELS = "labels"
STAGE_OBJECTS = "objects"


@dataclass(frozen=True)
class CatalogBundle:
    """The fully loaded, ready-to-query catalogs.

    Attributes:
        labels: Label store with current/fallback languages set
        units: Unit catalog sorted by size
        objects: Object catalog with every entry bound to a unit
    """

    labels: LabelStore
    units: UnitCatalog
    objects: ScaleObjectCatalog

    def presenter(self, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> RatioPresenter:
        """Create a RatioPresenter over these catalogs."""
        return RatioPresenter(self.labels, self.units, self.objects, significant_digits)

    def object_names(self, lang: Optional[str] = None) -> List[str]:
        """Object names ordered by name, for selection lists."""
        return self.objects.names_ordered_by(lang or self.labels.current_language)


def _require_mapping(record: Any, stage: str, index: int) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise ValidationError(
            [f"{stage} record {index} must be an object, got {type(record).__name__}"]
        )
    return record


def parse_unit_record(
    record: Mapping[str, Any],
) -> Tuple[Any, TranslatableLabel, TranslatableLabel, TranslatableLabel]:
    """
    Split a units resource record into UnitCatalog.add_unit arguments.

    Returns:
        Tuple of (raw size, symbol, name, description); the size is left
        for the catalog to coerce
    """
    return (
        record.get("SizeInMeter"),
        label_from_record(record, "UnitSymbol"),
        label_from_record(record, "UnitName"),
        label_from_record(record, "UnitDesc"),
    )


def parse_label_record(record: Mapping[str, Any]) -> Tuple[Any, TranslatableLabel]:
    """
    Split a labels resource record into its id and label.

    Raises:
        ValidationError: If the record has no id
    """
    if record.get("id") is None:
        raise ValidationError(["label record has no id"])
    return record["id"], label_from_record(record, "Label")


def load_units(records: Records, catalog: UnitCatalog) -> int:
    """
    Add unit records to a unit catalog and sort it.

    Each record provides SizeInMeter and the UnitSymbol*, UnitName* and
    UnitDesc* fields for every supported language. A unit whose size is not
    a positive number cannot express any size; it is skipped with a warning.

    Returns:
        Number of units added

    Raises:
        ValidationError: If a record is not a mapping
        EmptyCatalogError: If the catalog is still empty afterwards
    """
    count = 0
    for index, record in enumerate(records):
        record = _require_mapping(record, STAGE_UNITS, index)
        size, symbol, name, description = parse_unit_record(record)
        if coerce_size(size) <= 0:
            log_operation(
                logger,
                operation="load_units",
                outcome="skipped",
                level=logging.WARNING,
                record_index=index,
                size_in_meter=size,
            )
            continue
        catalog.add_unit(size, symbol, name, description)
        count += 1
    if len(catalog) == 0:
        raise EmptyCatalogError()
    catalog.sort_by_size()
    return count


def load_labels(records: Records, store: LabelStore) -> int:
    """
    Add label records ({id, LabelEn, LabelFr}) to a label store.

    Returns:
        Number of labels added

    Raises:
        ValidationError: If a record is not a mapping or has no id
    """
    count = 0
    for index, record in enumerate(records):
        record = _require_mapping(record, STAGE_LABELS, index)
        store.add_label(*parse_label_record(record))
        count += 1
    return count


def load_objects(records: Records, catalog: ScaleObjectCatalog) -> int:
    """
    Add object records to an object catalog.

    Records whose size is not a positive number cannot be bound to a unit;
    they are skipped with a warning and the rest of the resource is loaded.

    Returns:
        Number of objects added

    Raises:
        ValidationError: If a record is not a mapping
    """
    count = 0
    for index, record in enumerate(records):
        record = _require_mapping(record, STAGE_OBJECTS, index)
        try:
            catalog.add_object(record)
        except InvalidMagnitudeError as e:
            log_operation(
                logger,
                operation="load_objects",
                outcome="skipped",
                level=logging.WARNING,
                record_index=index,
                object_name=record.get("ObjectEn"),
                error=str(e),
            )
            continue
        count += 1
    return count


def _run_stage(stage: str, action: Callable[[], int]) -> int:
    """Run one loading stage, converting any failure into ResourceLoadError."""
    try:
        count = action()
    except ResourceLoadError:
        raise
    except (ServiceError, ArithmeticError, TypeError, ValueError) as e:
        log_operation(
            logger,
            operation="load_catalogs",
            outcome="error",
            level=logging.ERROR,
            stage=stage,
            error=str(e),
        )
        raise ResourceLoadError(stage, str(e), original_error=e) from e
    log_operation(logger, operation="load_catalogs", outcome="success", stage=stage, count=count)
    return count


def initialize_catalogs(
    units: Records,
    labels: Records,
    objects: Records,
    languages: Iterable[str] = SUPPORTED_LANGUAGES,
    user_locale: Optional[str] = None,
    fallback_language: Optional[str] = None,
) -> CatalogBundle:
    """
    Build every catalog from decoded resources, in the canonical order.

    Args:
        units: Decoded units resource
        labels: Decoded labels resource
        objects: Decoded objects resource
        languages: Supported language codes (the first is the default
            fallback language)
        user_locale: User locale signal used to pick the current language
        fallback_language: Explicit fallback language

    Returns:
        CatalogBundle ready to query

    Raises:
        ResourceLoadError: On the first stage that fails
    """
    unit_catalog = UnitCatalog()
    label_store = LabelStore(languages, fallback_language=fallback_language, user_locale=user_locale)
    object_catalog = ScaleObjectCatalog(unit_catalog)

    stages: List[Tuple[str, Callable[[], int]]] = [
        (STAGE_UNITS, lambda: load_units(units, unit_catalog)),
        (STAGE_LABELS, lambda: load_labels(labels, label_store)),
        (STAGE_OBJECTS, lambda: load_objects(objects, object_catalog)),
    ]
    for stage, action in stages:
        _run_stage(stage, action)

    return CatalogBundle(labels=label_store, units=unit_catalog, objects=object_catalog)


def read_json_resource(path: Union[str, Path], stage: Optional[str] = None) -> List[Any]:
    """
    Read a JSON array resource from disk.

    Args:
        path: File path
        stage: Stage name reported on failure (defaults to the file stem)

    Returns:
        The decoded list of records

    Raises:
        ResourceLoadError: If the file is missing, unreadable, not valid
            JSON, or not a JSON array
    """
    path = Path(path)
    stage = stage or path.stem
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ResourceLoadError(stage, f"file not found: {path}", original_error=e) from e
    except json.JSONDecodeError as e:
        raise ResourceLoadError(stage, f"invalid JSON in {path}: {e}", original_error=e) from e
    except OSError as e:
        raise ResourceLoadError(stage, f"cannot read {path}: {e}", original_error=e) from e

    if not isinstance(data, list):
        raise ResourceLoadError(stage, f"{path} must contain a JSON array")
    return data


def load_catalogs_from_directory(
    data_dir: Union[str, Path],
    languages: Iterable[str] = SUPPORTED_LANGUAGES,
    user_locale: Optional[str] = None,
    fallback_language: Optional[str] = None,
    units_filename: str = UNITS_FILENAME,
    labels_filename: str = LABELS_FILENAME,
    objects_filename: str = OBJECTS_FILENAME,
) -> CatalogBundle:
    """
    Read the three resources from a directory and build the catalogs.

    Files are read in stage order, so a missing units file is reported
    before the others are touched.

    Raises:
        ResourceLoadError: On the first resource or stage that fails
    """
    data_dir = Path(data_dir)
    units = read_json_resource(data_dir / units_filename, STAGE_UNITS)
    labels = read_json_resource(data_dir / labels_filename, STAGE_LABELS)
    objects = read_json_resource(data_dir / objects_filename, STAGE_OBJECTS)
    return initialize_catalogs(
        units,
        labels,
        objects,
        languages=languages,
        user_locale=user_locale,
        fallback_language=fallback_language,
    )
