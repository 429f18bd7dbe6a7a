"""
api.routes_catalog - /v1/categories and /v1/products endpoints.
"""

from flask import current_app, jsonify

from storefront.api import api_bp
from storefront.services import catalog_service
from storefront.services.database import session_scope


def _session_factory():
    return current_app.config["SESSION_FACTORY"]


@api_bp.route("/categories", methods=["GET"])
def get_categories():
    """
    GET /v1/categories

    Returns the category tree: Level 1 entries with their Level 2
    children, named by their localized name.
    """
    with session_scope(_session_factory()) as session:
        categories = catalog_service.list_categories(session)
    return jsonify({"categories": categories})


@api_bp.route("/products", methods=["GET"])
def get_products():
    """
    GET /v1/products

    Returns every product with its image URLs and category ids.
    """
    with session_scope(_session_factory()) as session:
        products = catalog_service.list_products(session)
    return jsonify({"products": products})
