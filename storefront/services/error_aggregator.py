"""
Error Aggregator - collects non-fatal row problems across an import run.

Some row problems (an unresolved category, an unparsable maximum order)
do not stop the in-memory pass. They are recorded here and, once every
row has been processed, fail the run before anything is written.

Usage:
    errors = DeferredErrors()
    errors.record("failed to find category with EN name: Drinks, on row: 4")
    ...
    errors.raise_if_any(logger, "products")
"""

import logging
from typing import List

from storefront.services.exceptions import DeferredImportErrors


class DeferredErrors:
    """Ordered collection of deferred error messages for one run."""

    def __init__(self):
        self._messages: List[str] = []

    def record(self, message: str) -> None:
        """Record one deferred error message."""
        self._messages.append(message)

    @property
    def messages(self) -> List[str]:
        """Recorded messages, in the order they were recorded."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def raise_if_any(self, logger: logging.Logger, entity_type: str) -> None:
        """
        Fail the run if anything was recorded.

        Every message is logged in a single ERROR record; the raised
        exception only carries a generic summary plus the message list.

        Args:
            logger: Logger receiving the detailed messages
            entity_type: Plural entity name used in the summary (e.g. "products")

        Raises:
            DeferredImportErrors: If at least one message was recorded
        """
        if not self._messages:
            return

        logger.error(
            "found %d error(s) while importing %s:\n%s",
            len(self._messages),
            entity_type,
            "\n".join(self._messages),
        )
        raise DeferredImportErrors(entity_type, self._messages)
