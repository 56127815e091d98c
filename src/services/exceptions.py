"""Service layer exception classes for Scale Compare.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── EmptyCatalogError
    ├── InvalidMagnitudeError
    ├── ValidationError
    └── ResourceLoadError

Lookups that simply find nothing (unknown object name, no object near a
size) are not errors: they return None.
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class EmptyCatalogError(ServiceError):
    """Raised when a unit selection is requested from a catalog with no usable units."""

    def __init__(self, catalog_name: str = "unit catalog", reason: str = "is empty"):
        self.catalog_name = catalog_name
        super().__init__(f"Cannot select a unit: the {catalog_name} {reason}")


class InvalidMagnitudeError(ServiceError):
    """Raised when a size cannot be placed on the logarithmic unit scale.

    Sizes must be finite and strictly positive.
    """

    def __init__(self, size_in_meter: float):
        self.size_in_meter = size_in_meter
        super().__init__(
            f"Invalid magnitude {size_in_meter!r}: size must be a positive, finite number of meters"
        )


class ValidationError(ServiceError):
    """Raised when a resource record does not have the expected shape."""

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")


class ResourceLoadError(ServiceError):
    """Raised when a stage of the startup loading chain fails.

    The chain is terminal on failure: no partially loaded catalogs are
    returned to the caller.
    """

    def __init__(self, stage: str, message: str, original_error: Optional[Exception] = None):
        self.stage = stage
        self.original_error = original_error
        super().__init__(f"Failed to load {stage}: {message}")
