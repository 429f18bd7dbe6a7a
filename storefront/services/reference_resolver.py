"""
Reference Resolver - previously imported documents needed as foreign keys.

Every lookup runs as its own store call through the run's ImportContext,
so each one checks the run deadline and reports failures with the
operation name. Returned instances are detached from their session with
their child collections already loaded.

Brand and variant type follow a "find-or-create-one" contract: a single
well-known document is looked up by name and inserted with only that name
when absent. Calling either resolver twice returns the same identifier.
"""

from typing import List, Type, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import NoResultFound

from storefront.models import Brand, Category, Product, Store, VariantType
from storefront.services.import_context import ImportContext
from storefront.services.logging_utils import get_service_logger, log_operation
from storefront.utils.constants import DEFAULT_BRAND_NAME, DEFAULT_VARIANT_TYPE_NAME

logger = get_service_logger(__name__)

Named = TypeVar("Named", Brand, VariantType)


def _find_or_create_by_name(session: Session, model: Type[Named], name: str) -> Named:
    """
    Find a document by its name, inserting a new one if absent.

    Args:
        session: Database session
        model: Brand or VariantType
        name: Business name of the single well-known document

    Returns:
        The existing or newly created document
    """
    try:
        return session.query(model).filter(model.name == name).limit(1).one()
    except NoResultFound:
        pass

    document = model(name=name)
    session.add(document)
    session.flush()
    log_operation(
        logger,
        operation=f"find_or_create_{model.__tablename__}",
        outcome="created",
        document_id=document.id,
        document_name=name,
    )
    return document


def find_or_create_brand(context: ImportContext, name: str = DEFAULT_BRAND_NAME) -> Brand:
    """
    Resolve the brand every imported product is filed under.

    Args:
        context: Import run context
        name: Brand name (default: the single catalog brand)

    Returns:
        Brand instance (detached)

    Raises:
        DatabaseError: If the lookup or insert fails
        ImportTimeoutError: If the run deadline has passed
    """
    with context.store_call("FindOne, on resolve brand") as session:
        return _find_or_create_by_name(session, Brand, name)


def find_or_create_variant_type(
    context: ImportContext, name: str = DEFAULT_VARIANT_TYPE_NAME
) -> VariantType:
    """
    Resolve the variant type stamped on every imported variant.

    Args:
        context: Import run context
        name: Variant type name (default: the "unit of measure" type)

    Returns:
        VariantType instance (detached)
    """
    with context.store_call("FindOne, on resolve variant type") as session:
        return _find_or_create_by_name(session, VariantType, name)


def get_categories(context: ImportContext) -> List[Category]:
    """
    Get all Level 1 categories with their Level 2 children.

    Returns:
        Level 1 categories in insertion order (may be empty)
    """
    with context.store_call("Find, on get categories") as session:
        return (
            session.query(Category)
            .filter(Category.parent_id.is_(None))
            .order_by(Category.sort_order, Category.created_at)
            .all()
        )


def get_stores(context: ImportContext) -> List[Store]:
    """Get all stores in insertion order."""
    with context.store_call("Find, on get stores") as session:
        return session.query(Store).order_by(Store.created_at).all()


def get_products(context: ImportContext) -> List[Product]:
    """Get all products, with variants, in insertion order."""
    with context.store_call("Find, on get products") as session:
        return session.query(Product).order_by(Product.created_at).all()
