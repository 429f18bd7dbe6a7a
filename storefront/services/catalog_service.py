"""
Catalog Service - read-side queries backing the HTTP read API.

Functions take an open session and return plain dictionaries ready for
JSON serialization. Names are the localized (ID) names.
"""

from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.models import Category, Product
from storefront.services.exceptions import DatabaseError
from storefront.services.logging_utils import get_service_logger

logger = get_service_logger(__name__)


def _category_entry(category: Category) -> Dict[str, Any]:
    return {
        "category_id": category.id,
        "level": category.level.value,
        "name": category.name_id,
        "images_urls": list(category.images_urls or []),
    }


def list_categories(session: Session) -> List[Dict[str, Any]]:
    """
    List the full category tree.

    Args:
        session: Database session

    Returns:
        Level 1 category entries, each with its Level 2 children under
        "child_categories"

    Raises:
        DatabaseError: If the query fails
    """
    try:
        parents = (
            session.query(Category)
            .filter(Category.parent_id.is_(None))
            .order_by(Category.sort_order, Category.created_at)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"failed to fetch categories from store: {e}")
        raise DatabaseError("Find, on get categories", e) from e

    result = []
    for parent in parents:
        entry = _category_entry(parent)
        entry["child_categories"] = [_category_entry(child) for child in parent.child_categories]
        result.append(entry)
    return result


def list_products(session: Session) -> List[Dict[str, Any]]:
    """
    List every product with its category references.

    Product image URLs are those of its variants, in variant order.

    Args:
        session: Database session

    Returns:
        Product entries

    Raises:
        DatabaseError: If the query fails
    """
    try:
        products = session.query(Product).order_by(Product.created_at).all()
    except SQLAlchemyError as e:
        logger.error(f"failed to fetch products from store: {e}")
        raise DatabaseError("Find, on get products", e) from e

    return [
        {
            "product_id": product.id,
            "name": product.name_id,
            "images_urls": product.images_urls,
            "category_1": {"category_id": product.category1_id},
            "category_2": {"category_id": product.category2_id},
        }
        for product in products
    ]
