"""
Bulk Writer - persists validated aggregates in a single store call.

Root documents are added together with their nested children (through the
models' cascading relationships) and committed once. Any failure rolls
the whole batch back.
"""

from typing import Sequence

from storefront.models.base import BaseModel
from storefront.services.exceptions import NothingToImportError
from storefront.services.import_context import ImportContext
from storefront.services.logging_utils import log_operation


def bulk_insert(context: ImportContext, documents: Sequence[BaseModel], entity_type: str) -> int:
    """
    Insert every root document in one transaction.

    Args:
        context: Import run context
        documents: Validated root documents, in output order
        entity_type: Plural entity name (e.g. "categories"), used in messages

    Returns:
        Number of root documents inserted

    Raises:
        NothingToImportError: If documents is empty
        DatabaseError: If the write fails (nothing is written)
        ImportTimeoutError: If the run deadline has passed
    """
    if not documents:
        raise NothingToImportError(entity_type)

    with context.store_call(f"BulkWrite, on import {entity_type}") as session:
        session.add_all(list(documents))

    log_operation(
        context.logger,
        operation=f"import_{entity_type}",
        outcome="written",
        documents=len(documents),
    )
    return len(documents)


def insert_one(context: ImportContext, document: BaseModel, entity_type: str) -> str:
    """
    Insert a single document (with its nested children).

    Returns:
        Identifier of the inserted document
    """
    with context.store_call(f"InsertOne, on import {entity_type}") as session:
        session.add(document)

    log_operation(
        context.logger,
        operation=f"import_{entity_type}",
        outcome="written",
        document_id=document.id,
    )
    return document.id
