"""Storefront catalog backend: CSV bulk importers and a read-only catalog API."""

from storefront.utils.constants import APP_VERSION

__version__ = APP_VERSION
