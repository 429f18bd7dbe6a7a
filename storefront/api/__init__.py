"""
api - read-only HTTP API for the catalog.

All route modules register on a single Flask Blueprint
with url_prefix /v1.
"""

from flask import Blueprint

from storefront.utils.constants import API_PREFIX

api_bp = Blueprint("api", __name__, url_prefix=API_PREFIX)

# Import route modules so their @api_bp decorators execute
from storefront.api import routes_catalog  # noqa: F401, E402
from storefront.api import errors  # noqa: F401, E402
