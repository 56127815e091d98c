"""Pytest configuration and fixtures for Scale Compare tests."""

import pytest

from src.services.label_store import LabelStore
from src.services.resource_loader import load_catalogs_from_directory
from src.services.scale_object_catalog import ScaleObjectCatalog
from src.services.unit_catalog import UnitCatalog
from src.tests.factories import PROJECT_DATA_DIR, make_label, object_record
from src.utils.config import reset_config


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the configuration singleton around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def unit_catalog():
    """Provide a unit catalog with meters and kilometers."""
    catalog = UnitCatalog()
    catalog.add_unit(1000, make_label("km", "km"), make_label("kilometer", "kilomètre"),
                     make_label("One thousand meters", "Mille mètres"))
    catalog.add_unit(1, make_label("m", "m"), make_label("meter", "mètre"),
                     make_label("SI base unit", "Unité SI"))
    catalog.sort_by_size()
    return catalog


@pytest.fixture
def meter_only_catalog():
    """Provide a unit catalog that only knows meters."""
    catalog = UnitCatalog()
    catalog.add_unit(1, make_label("m", "m"), make_label("meter", "mètre"), make_label("", ""))
    return catalog


@pytest.fixture
def label_store():
    """Provide an EN/FR label store with English as current language."""
    store = LabelStore(["EN", "FR"], user_locale="en_US.UTF-8")
    store.add_label(6, make_label("Object", "Objet"))
    store.add_label(7, make_label("Size", "Taille"))
    return store


@pytest.fixture
def object_catalog(unit_catalog):
    """Provide an object catalog with an ant and a mountain."""
    catalog = ScaleObjectCatalog(unit_catalog)
    catalog.add_object(object_record("Ant", 0.01, "Fourmi"))
    catalog.add_object(object_record("Mountain", 5000, "Montagne"))
    return catalog


@pytest.fixture
def sample_bundle():
    """Provide catalogs loaded from the project's data/ directory."""
    return load_catalogs_from_directory(PROJECT_DATA_DIR, user_locale="en_US")
