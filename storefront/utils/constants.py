"""
Constants for the storefront catalog backend.

This module defines system-wide constants including:
- Application metadata
- Import operation names
- Well-known reference documents (brand, variant type, placeholder store)
- Source file markers and derived-value conventions
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Storefront Catalog"
APP_VERSION = "0.1.0"
SERVICE_NAME = "ems-api"

# ============================================================================
# Import Operations
# ============================================================================

OPERATION_CATEGORY = "category"
OPERATION_BRAND = "brand"
OPERATION_PRODUCT = "product"
OPERATION_STORE = "store"
OPERATION_INVENTORY = "inventory"

IMPORT_OPERATIONS: List[str] = [
    OPERATION_CATEGORY,
    OPERATION_BRAND,
    OPERATION_PRODUCT,
    OPERATION_STORE,
    OPERATION_INVENTORY,
]

# Seconds an import run may take before it is abandoned
DEFAULT_IMPORT_TIMEOUT = 60.0

# ============================================================================
# Well-known Reference Documents
# ============================================================================

# Single brand shared by all products until brands can be imported
DEFAULT_BRAND_NAME = "Dropezy"

# Single "unit of measure" variant type used by the product importer
DEFAULT_VARIANT_TYPE_NAME = "UOM"

# Placeholder store inserted by the store importer
PLACEHOLDER_STORE_NAME = "Dropezy Store"
PLACEHOLDER_STORE_SHOPTREE_LOCATION_ID = "962553ec420c45388a6bfb26308bdc23"
PLACEHOLDER_STORE_LOCATION_CODE = "WHT"

# Placeholder stock stamped on every inventory product
PLACEHOLDER_STOCK = 10

# ============================================================================
# Source File Conventions
# ============================================================================

# Image URLs are derived as "<key>-0.<ext>"
IMAGE_EXTENSION = "webp"

# Description cells holding this marker mean "no description"
NOT_APPLICABLE_MARKER = "#N/A"

# Literal flag value for yes/no columns (compared case-sensitively)
YES = "yes"

# Selling prices in the source are whole units; stored amounts are in cents
PRICE_MINOR_UNIT_SUFFIX = "00"

# Range of a maximum-order quantity (32-bit signed)
MAX_ORDER_MIN = -(2**31)
MAX_ORDER_MAX = 2**31 - 1

# ============================================================================
# HTTP Read API
# ============================================================================

API_PREFIX = "/v1"
