"""Services package - Catalog and comparison logic for Scale Compare.

This package contains the in-memory catalogs and the logic that turns two
selected objects into a presentation-ready comparison table.

Architecture:
- Catalogs: Encapsulated classes (labels, units, objects) exposing only their
  query operations; backing collections are never handed out for mutation
- Loading: resource_loader builds all catalogs in the canonical order
  (units -> labels -> objects) and returns a CatalogBundle
- Exceptions: Consistent error handling via the ServiceError hierarchy

Service Modules:
- label_store: Multilingual labels with current/fallback resolution
- unit_catalog: Measurement units and best-unit selection
- scale_object_catalog: Scale objects with name and size lookups
- ratio_presenter: Ratio, magnitude buckets and comparison rows
- resource_loader: Startup loading pipeline

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- logging_utils: Structured service logging
- dto: Row and table data transfer objects
"""

from .exceptions import (
    EmptyCatalogError,
    InvalidMagnitudeError,
    ResourceLoadError,
    ServiceError,
    ValidationError,
)
from .label_store import LabelStore
from .unit_catalog import UnitCatalog
from .scale_object_catalog import ScaleObjectCatalog
from .dto import BucketSection, RatioTable, ScaleRow
from .ratio_presenter import RatioPresenter, classify_magnitude, format_ratio
from .resource_loader import (
    CatalogBundle,
    initialize_catalogs,
    load_catalogs_from_directory,
    read_json_resource,
)

__all__ = [
    # Exceptions
    "ServiceError",
    "EmptyCatalogError",
    "InvalidMagnitudeError",
    "ResourceLoadError",
    "ValidationError",
    # Catalogs
    "LabelStore",
    "UnitCatalog",
    "ScaleObjectCatalog",
    # Presentation
    "RatioPresenter",
    "RatioTable",
    "ScaleRow",
    "BucketSection",
    "classify_magnitude",
    "format_ratio",
    # Loading
    "CatalogBundle",
    "initialize_catalogs",
    "load_catalogs_from_directory",
    "read_json_resource",
]
