"""
Enumerations shared by catalog models.

This module contains enums used across catalog-related models:
- CategoryLevel: Position of a category in the two-level tree
- VariantStatus: Catalog status of a product variant
- ProductStatus: Sellable status of an inventory product
- Currency: Currency of an inventory price amount
"""

from enum import Enum


class CategoryLevel(str, Enum):
    """
    Category tree level.

    Values:
        LEVEL_1: Top-level (parent) category, carries an abbreviation
        LEVEL_2: Child category, only reachable through its parent
    """

    LEVEL_1 = "L1"
    LEVEL_2 = "L2"


class VariantStatus(str, Enum):
    """
    Product variant status.

    Values:
        UNSPECIFIED: No explicit status; the variant is enabled
        DEFAULT: The variant shown by default for its product
    """

    UNSPECIFIED = "unspecified"
    DEFAULT = "default"


class ProductStatus(str, Enum):
    """Sellable status of a product stocked in an inventory."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class Currency(str, Enum):
    """Currency codes used by inventory prices."""

    IDR = "IDR"
