"""
Database models package.

This package contains all SQLAlchemy ORM models for the catalog store.
Each model maps to one document collection; nested documents are child
rows reached through cascading relationships.
"""

from .base import Base, BaseModel, new_object_id
from .enums import CategoryLevel, Currency, ProductStatus, VariantStatus
from .category import Category
from .brand import Brand
from .variant_type import VariantType
from .product import Product
from .product_variant import ProductVariant
from .store import Store
from .inventory import Inventory, InventoryProduct

__all__ = [
    "Base",
    "BaseModel",
    "new_object_id",
    # Enums
    "CategoryLevel",
    "Currency",
    "ProductStatus",
    "VariantStatus",
    # Catalog
    "Category",
    "Brand",
    "VariantType",
    "Product",
    "ProductVariant",
    # Stores and stock
    "Store",
    "Inventory",
    "InventoryProduct",
]
