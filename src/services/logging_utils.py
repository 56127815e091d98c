"""Service layer logging utilities.

Every service module logs under the ``scale_compare.services`` hierarchy,
so one logger level controls catalog loading, unit binding and ratio
table building together. Log records carry their context as attributes
(``record.stage``, ``record.record_index``...) rather than only in the text.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)   # scale_compare.services.unit_catalog

    log_operation(logger, operation="load_units", outcome="success", count=27)

    log_operation(
        logger,
        operation="load_objects",
        outcome="skipped",
        level=logging.WARNING,
        record_index=12,
        object_name="Nothing",
    )
"""

import logging
from typing import Any

SERVICE_LOGGER_ROOT = "scale_compare.services"

# Import path of the service package, as seen in a module's __name__
_SERVICE_PACKAGE = "src.services."


def service_logger_name(module_name: str) -> str:
    """
    Map a service module's ``__name__`` to its logger name.

    >>> service_logger_name("src.services.unit_catalog")
    'scale_compare.services.unit_catalog'
    >>> service_logger_name("ratio_presenter")
    'scale_compare.services.ratio_presenter'
    """
    if module_name.startswith(_SERVICE_PACKAGE):
        module_name = module_name[len(_SERVICE_PACKAGE):]
    elif module_name == "__main__":
        return SERVICE_LOGGER_ROOT
    return f"{SERVICE_LOGGER_ROOT}.{module_name}"


def get_service_logger(module_name: str) -> logging.Logger:
    """
    Get the logger for a service module.

    Args:
        module_name: ``__name__`` of the calling module; a bare name such
            as "unit_catalog" is accepted too

    Returns:
        Logger under the 'scale_compare.services' prefix
    """
    return logging.getLogger(service_logger_name(module_name))


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation as "<operation>: <outcome>".

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "load_units", "build_ratio_table")
        outcome: "success", "skipped", "error", ...
        level: Log level (default: INFO). Use DEBUG for per-record logs.
        **context: Fields attached to the log record, e.g. stage,
            record_index, ratio or error
    """
    extra = {"operation": operation, "outcome": outcome, **context}
    logger.log(level, "%s: %s", operation, outcome, extra=extra)
