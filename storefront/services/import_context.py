"""
Import Context - explicit options threaded through every import run.

An ImportContext carries everything an importer needs from its caller:
the source file, the store's session factory, the logger, and the run
deadline. Importers never read process-wide configuration.

Usage:
    from storefront.services.import_context import ImportContext

    context = ImportContext.create("products.csv", session_factory, timeout=60)
    import_products(context)
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.services.database import session_scope
from storefront.services.exceptions import DatabaseError, ImportTimeoutError
from storefront.services.logging_utils import get_service_logger
from storefront.utils.constants import DEFAULT_IMPORT_TIMEOUT


@dataclass(frozen=True)
class ImportContext:
    """
    Options for a single import run.

    Attributes:
        path: Source CSV file path
        session_factory: Factory for sessions on the target store
        logger: Logger receiving run diagnostics
        deadline: time.monotonic() value after which store calls are refused
    """

    path: str
    session_factory: sessionmaker
    logger: logging.Logger = field(default_factory=lambda: get_service_logger("importer"))
    deadline: Optional[float] = None

    @classmethod
    def create(
        cls,
        path: str,
        session_factory: sessionmaker,
        timeout: Optional[float] = DEFAULT_IMPORT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ) -> "ImportContext":
        """
        Build a context whose deadline starts now.

        Args:
            path: Source CSV file path
            session_factory: Factory for sessions on the target store
            timeout: Seconds the run may take; None disables the deadline
            logger: Optional logger (default: storefront.services.importer)

        Returns:
            ImportContext
        """
        deadline = time.monotonic() + timeout if timeout is not None else None
        return cls(
            path=path,
            session_factory=session_factory,
            logger=logger or get_service_logger("importer"),
            deadline=deadline,
        )

    def ensure_time_remaining(self, operation: str) -> None:
        """
        Refuse to start a store call once the deadline has passed.

        Args:
            operation: Name of the store call about to start

        Raises:
            ImportTimeoutError: If the deadline has passed
        """
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise ImportTimeoutError(operation)

    @contextmanager
    def store_call(self, operation: str) -> Iterator[Session]:
        """
        Run one store call in its own transaction.

        Checks the deadline first, commits on success, and wraps any
        driver failure in DatabaseError carrying the operation name.

        Args:
            operation: Name of the store call, used in error messages

        Yields:
            Database session

        Raises:
            ImportTimeoutError: If the deadline has passed
            DatabaseError: If the store call fails
        """
        self.ensure_time_remaining(operation)
        try:
            with session_scope(self.session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            raise DatabaseError(operation, e) from e
