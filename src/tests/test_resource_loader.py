"""
Tests for the resource loading pipeline.

Tests cover:
- Building all catalogs from decoded resources
- Stage ordering and stage-specific failures
- Skipping objects that cannot be bound to a unit
- Reading JSON resources from disk
- The sample data shipped in data/
"""

import json
import logging

import pytest

from src.services.exceptions import EmptyCatalogError, ResourceLoadError, ValidationError
from src.services.resource_loader import (
    STAGE_LABELS,
    STAGE_OBJECTS,
    STAGE_UNITS,
    _run_stage,
    initialize_catalogs,
    load_catalogs_from_directory,
    load_labels,
    load_units,
    parse_label_record,
    parse_unit_record,
    read_json_resource,
)
from src.services.label_store import LabelStore
from src.services.unit_catalog import UnitCatalog
from src.tests.factories import object_record, unit_record


@pytest.fixture
def units():
    return [
        unit_record(1000, "km", name_en="kilometer", name_fr="kilomètre"),
        unit_record(1, "m", name_en="meter", name_fr="mètre"),
        unit_record(0.001, "mm", name_en="millimeter", name_fr="millimètre"),
    ]


@pytest.fixture
def labels():
    return [
        {"id": 1, "LabelEn": "Scale Compare", "LabelFr": "Comparateur d'échelles"},
        {"id": "6", "LabelEn": "Object", "LabelFr": "Objet"},
    ]


@pytest.fixture
def objects():
    return [
        object_record("Ant", 0.01, "Fourmi"),
        object_record("Mount Everest", "8849", "Mont Everest"),
    ]


def write_resources(directory, units, labels, objects):
    for name, data in [("units", units), ("labels", labels), ("objects", objects)]:
        (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


# ============================================================================
# initialize_catalogs Tests
# ============================================================================


class TestInitializeCatalogs:
    """Test building the bundle from decoded resources."""

    def test_builds_every_catalog(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects, user_locale="fr_FR")

        assert len(bundle.units) == 3
        assert len(bundle.labels) == 2
        assert len(bundle.objects) == 2
        assert bundle.labels.current_language == "FR"
        assert bundle.labels.resolve(6) == "Objet"

    def test_units_are_sorted(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects)
        assert [u.get_symbol("EN") for u in bundle.units] == ["mm", "m", "km"]

    def test_objects_are_bound_to_units(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects)
        everest = bundle.objects.find_by_name("Mount Everest", "EN")
        assert everest.get_unit_symbol("EN") == "km"
        assert everest.size_in_bound_unit == pytest.approx(8.849)

    def test_object_names(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects, user_locale="fr")
        assert bundle.object_names() == ["Fourmi", "Mont Everest"]
        assert bundle.object_names("EN") == ["Ant", "Mount Everest"]

    def test_presenter(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects)
        table = bundle.presenter().build_by_name("Ant", "Mount Everest", "EN")
        assert table.ratio_text == "↑ 8.849 x 10⁵ : 1"

    def test_explicit_fallback_language(self, units, labels, objects):
        bundle = initialize_catalogs(units, labels, objects, fallback_language="FR")
        assert bundle.labels.fallback_language == "FR"
        assert bundle.labels.current_language == "FR"

    def test_successful_stages_are_logged(self, units, labels, objects, caplog):
        with caplog.at_level(logging.INFO, logger="scale_compare.services.resource_loader"):
            initialize_catalogs(units, labels, objects)

        stages = [(r.stage, r.count) for r in caplog.records if r.getMessage() == "load_catalogs: success"]
        assert stages == [(STAGE_UNITS, 3), (STAGE_LABELS, 2), (STAGE_OBJECTS, 2)]


class TestStageFailures:
    """Test that failures name the stage that failed."""

    def test_empty_units(self, labels, objects):
        with pytest.raises(ResourceLoadError) as exc_info:
            initialize_catalogs([], labels, objects)
        assert exc_info.value.stage == STAGE_UNITS
        assert isinstance(exc_info.value.original_error, EmptyCatalogError)

    def test_malformed_unit_record(self, labels, objects):
        with pytest.raises(ResourceLoadError) as exc_info:
            initialize_catalogs(["not a record"], labels, objects)
        assert exc_info.value.stage == STAGE_UNITS

    def test_label_without_id(self, units, objects):
        with pytest.raises(ResourceLoadError) as exc_info:
            initialize_catalogs(units, [{"LabelEn": "Orphan"}], objects)
        assert exc_info.value.stage == STAGE_LABELS
        assert "Failed to load labels" in str(exc_info.value)

    def test_malformed_object_record(self, units, labels):
        with pytest.raises(ResourceLoadError) as exc_info:
            initialize_catalogs(units, labels, [42])
        assert exc_info.value.stage == STAGE_OBJECTS

    def test_failure_is_logged(self, labels, objects, caplog):
        with caplog.at_level(logging.ERROR, logger="scale_compare.services.resource_loader"):
            with pytest.raises(ResourceLoadError):
                initialize_catalogs([], labels, objects)
        assert "load_catalogs: error" in caplog.text

    def test_units_failure_stops_chain(self, objects, caplog):
        """Test later stages do not run after a failure."""
        with caplog.at_level(logging.INFO, logger="scale_compare.services.resource_loader"):
            with pytest.raises(ResourceLoadError):
                initialize_catalogs([], [{"LabelEn": "Orphan"}], objects)
        stages = [r.stage for r in caplog.records if hasattr(r, "stage")]
        assert stages == [STAGE_UNITS]


class TestSkippedObjects:
    """Test objects that cannot be bound to a unit."""

    @pytest.mark.parametrize("size", [0, -5, "n/a", None])
    def test_non_positive_size_is_skipped(self, units, labels, size):
        records = [object_record("Ant", 0.01), object_record("Nothing", size)]
        bundle = initialize_catalogs(units, labels, records)

        assert len(bundle.objects) == 1
        assert bundle.objects.find_by_name("Nothing", "EN") is None

    def test_skip_is_logged_as_warning(self, units, labels, caplog):
        records = [object_record("Ant", 0.01), object_record("Nothing", 0)]
        with caplog.at_level(logging.WARNING, logger="scale_compare.services.resource_loader"):
            initialize_catalogs(units, labels, records)

        record = next(r for r in caplog.records if r.getMessage() == "load_objects: skipped")
        assert record.levelno == logging.WARNING
        assert record.record_index == 1
        assert record.object_name == "Nothing"


class TestSkippedUnits:
    """Test units whose size cannot express any other size."""

    @pytest.mark.parametrize("size", [0, -1, "n/a", None])
    def test_non_positive_unit_is_skipped(self, units, labels, objects, size):
        records = [unit_record(size, "?")] + units
        bundle = initialize_catalogs(records, labels, objects)

        assert len(bundle.units) == 3
        assert all(u.size_in_meter > 0 for u in bundle.units)
        ant = bundle.objects.find_by_name("Ant", "EN")
        assert ant.get_unit_symbol("EN") == "mm"
        assert ant.size_in_bound_unit == pytest.approx(10)

    def test_skip_is_logged_as_warning(self, caplog):
        records = [unit_record("n/a", "?"), unit_record(1, "m")]
        with caplog.at_level(logging.WARNING, logger="scale_compare.services.resource_loader"):
            count = load_units(records, UnitCatalog())

        assert count == 1
        record = next(r for r in caplog.records if r.getMessage() == "load_units: skipped")
        assert record.levelno == logging.WARNING
        assert record.record_index == 0
        assert record.size_in_meter == "n/a"

    def test_only_non_positive_units(self, labels, objects):
        """Test a units resource with no usable unit fails the units stage."""
        with pytest.raises(ResourceLoadError) as exc_info:
            initialize_catalogs([unit_record(0, "zero"), unit_record("bad", "?")], labels, objects)
        assert exc_info.value.stage == STAGE_UNITS
        assert isinstance(exc_info.value.original_error, EmptyCatalogError)

    def test_arithmetic_failure_names_stage(self):
        """Test an arithmetic error raised while loading still becomes ResourceLoadError."""

        def failing_stage():
            return 1 / 0

        with pytest.raises(ResourceLoadError) as exc_info:
            _run_stage(STAGE_OBJECTS, failing_stage)
        assert exc_info.value.stage == STAGE_OBJECTS
        assert isinstance(exc_info.value.original_error, ZeroDivisionError)


class TestStageFunctions:
    """Test the individual stage loaders."""

    def test_load_units_reads_language_fields(self):
        catalog = UnitCatalog()
        count = load_units([unit_record(1, "m", "m", "meter", "mètre", "SI unit", "Unité SI")], catalog)

        unit = catalog.units[0]
        assert count == 1
        assert unit.get_name("FR") == "mètre"
        assert unit.get_description("EN") == "SI unit"

    def test_parse_unit_record(self):
        size, symbol, name, description = parse_unit_record(
            unit_record("1000", "km", name_en="kilometer", name_fr="kilomètre")
        )
        assert size == "1000"
        assert symbol.get("FR") == "km"
        assert name.get("FR") == "kilomètre"
        assert description.get("EN") == ""

    def test_parse_label_record(self):
        label_id, label = parse_label_record({"id": 4, "LabelEn": "Ratio", "LabelFr": "Rapport"})
        assert label_id == 4
        assert label.get("FR") == "Rapport"

    def test_parse_label_record_requires_id(self):
        with pytest.raises(ValidationError):
            parse_label_record({"LabelEn": "Orphan"})

    def test_load_units_empty(self):
        with pytest.raises(EmptyCatalogError):
            load_units([], UnitCatalog())

    def test_load_labels_normalizes_ids(self):
        store = LabelStore(["EN", "FR"])
        load_labels([{"id": "12", "LabelEn": "Human scale", "LabelFr": "Échelle humaine"}], store)
        assert store.resolve(12) == "Human scale"

    def test_load_labels_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            load_labels(["label"], LabelStore(["EN"]))


# ============================================================================
# File Reading Tests
# ============================================================================


class TestReadJsonResource:
    """Test reading resources from disk."""

    def test_reads_array(self, tmp_path):
        path = tmp_path / "units.json"
        path.write_text('[{"SizeInMeter": 1}]', encoding="utf-8")
        assert read_json_resource(path) == [{"SizeInMeter": 1}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceLoadError) as exc_info:
            read_json_resource(tmp_path / "units.json")
        assert exc_info.value.stage == "units"
        assert isinstance(exc_info.value.original_error, FileNotFoundError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "labels.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ResourceLoadError) as exc_info:
            read_json_resource(path, STAGE_LABELS)
        assert exc_info.value.stage == STAGE_LABELS
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "objects.json"
        path.write_text('{"ObjectEn": "Ant"}', encoding="utf-8")
        with pytest.raises(ResourceLoadError) as exc_info:
            read_json_resource(path)
        assert exc_info.value.stage == "objects"


class TestLoadFromDirectory:
    """Test loading the three resources from a directory."""

    def test_loads_directory(self, tmp_path, units, labels, objects):
        write_resources(tmp_path, units, labels, objects)
        bundle = load_catalogs_from_directory(tmp_path, user_locale="en_GB")
        assert len(bundle.objects) == 2
        assert bundle.labels.current_language == "EN"

    def test_missing_units_reported_first(self, tmp_path):
        with pytest.raises(ResourceLoadError) as exc_info:
            load_catalogs_from_directory(tmp_path)
        assert exc_info.value.stage == STAGE_UNITS

    def test_missing_objects(self, tmp_path, units, labels, objects):
        write_resources(tmp_path, units, labels, objects)
        (tmp_path / "objects.json").unlink()
        with pytest.raises(ResourceLoadError) as exc_info:
            load_catalogs_from_directory(tmp_path)
        assert exc_info.value.stage == STAGE_OBJECTS


class TestSampleData:
    """Test the resources shipped with the application."""

    def test_sample_data_loads(self, sample_bundle):
        assert len(sample_bundle.units) >= 10
        assert len(sample_bundle.objects) >= 20
        assert sample_bundle.labels.current_language == "EN"

    def test_every_object_has_both_names(self, sample_bundle):
        for entry in sample_bundle.objects:
            assert entry.get_name("EN")
            assert entry.get_name("FR")

    def test_every_label_is_translated(self, sample_bundle):
        for label_id in range(1, 18):
            for lang in ["EN", "FR"]:
                sample_bundle.labels.current_language = lang
                text = sample_bundle.labels.resolve(label_id)
                assert text != str(label_id)
                assert not text.startswith("*LABEL")

    def test_french_names(self, sample_bundle):
        assert sample_bundle.objects.find_by_name("Fourmi", "FR") is sample_bundle.objects.find_by_name("Ant", "EN")
        assert sample_bundle.objects.find_by_name("Terre", "FR").size_in_meter == 12742000
