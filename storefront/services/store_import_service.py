"""
Store Import Service - seeds the single placeholder dark store.

Store data is not read from the source file yet; the run inserts one
well-known store and refuses to run again once any store exists.
"""

from storefront.models import Store, new_object_id
from storefront.services.bulk_writer import insert_one
from storefront.services.exceptions import StoreAlreadyExistsError
from storefront.services.import_context import ImportContext
from storefront.services.import_result import ImportResult
from storefront.services.logging_utils import log_operation
from storefront.services.reference_resolver import get_stores
from storefront.utils.constants import (
    PLACEHOLDER_STORE_LOCATION_CODE,
    PLACEHOLDER_STORE_NAME,
    PLACEHOLDER_STORE_SHOPTREE_LOCATION_ID,
)

ENTITY_TYPE = "stores"


def build_placeholder_store() -> Store:
    """Build the placeholder store document."""
    return Store(
        id=new_object_id(),
        name=PLACEHOLDER_STORE_NAME,
        shoptree_location_id=PLACEHOLDER_STORE_SHOPTREE_LOCATION_ID,
        location_code=PLACEHOLDER_STORE_LOCATION_CODE,
    )


def import_store(context: ImportContext) -> ImportResult:
    """
    Insert the placeholder store unless a store already exists.

    Args:
        context: Import run context (the source path is not read)

    Returns:
        ImportResult with one document written

    Raises:
        StoreAlreadyExistsError: If any store exists
        DatabaseError: If a store call fails
    """
    stores = get_stores(context)
    if stores:
        raise StoreAlreadyExistsError(len(stores))

    store = build_placeholder_store()
    insert_one(context, store, ENTITY_TYPE)

    log_operation(
        context.logger,
        operation="import_store",
        outcome="success",
        store_id=store.id,
        store_name=store.name,
    )
    return ImportResult(entity_type=ENTITY_TYPE, documents=1)
