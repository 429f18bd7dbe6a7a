"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across importers and the read API.

Usage:
    from storefront.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    # Log successful operation
    log_operation(
        logger,
        operation="import_categories",
        outcome="success",
        categories=12,
    )

    # Log a skipped row
    log_operation(
        logger,
        operation="import_products",
        outcome="row_skipped",
        level=logging.WARNING,
        row=14,
        reason="barcode is empty",
    )
"""

import logging
import sys
from typing import Any

ROOT_LOGGER_NAME = "storefront"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'storefront.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'storefront.services.category_import_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging
    and appended to the message so console output stays readable.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "import_products")
        outcome: Outcome description (e.g., "success", "row_skipped", "error")
        level: Log level (default: INFO)
        **context: Additional context fields (row numbers, counts, error details)
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    message = f"{operation}: {outcome}"
    if context:
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        message = f"{message} ({details})"
    logger.log(level, message, extra=extra)


def configure_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Attach a console handler to the package root logger.

    Safe to call more than once; existing handlers are replaced.

    Args:
        level: Logging level for the package
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured 'storefront' logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    return logger
