"""
Inventory models - per-store stock and price snapshot.

An Inventory aggregate belongs to a single store and lists one
InventoryProduct per stocked product variant.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship

from .base import BaseModel
from .enums import Currency, ProductStatus


class Inventory(BaseModel):
    """
    Inventory model.

    Attributes:
        store_id: Foreign key to Store
        shoptree_location_id: The store's external location identifier

    Relationships:
        products: One-to-Many with InventoryProduct (cascade delete)
    """

    __tablename__ = "inventory"

    store_id = Column(String(32), ForeignKey("store.id"), nullable=False, index=True)
    shoptree_location_id = Column(String(100), nullable=False)

    products = relationship(
        "InventoryProduct",
        back_populates="inventory",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class InventoryProduct(BaseModel):
    """
    Stock and price of one product variant within an inventory.

    Attributes:
        inventory_id: Foreign key to Inventory
        stock: Units in stock
        price_num: Price amount in minor units, as a decimal string
        price_currency: Currency of the price
        product_id: Foreign key to Product
        variant_id: Foreign key to ProductVariant
        shoptree_variant_id: External variant identifier
        status: ProductStatus (sellable or not)
    """

    __tablename__ = "inventory_product"

    inventory_id = Column(
        String(32), ForeignKey("inventory.id", ondelete="CASCADE"), nullable=False, index=True
    )
    stock = Column(Integer, nullable=False, default=0)
    price_num = Column(String(50), nullable=True)
    price_currency = Column(SQLEnum(Currency), nullable=True)
    product_id = Column(String(32), ForeignKey("product.id"), nullable=False)
    variant_id = Column(String(32), ForeignKey("product_variant.id"), nullable=False)
    shoptree_variant_id = Column(String(100), nullable=False)
    status = Column(SQLEnum(ProductStatus), nullable=False, default=ProductStatus.DISABLED)

    inventory = relationship("Inventory", back_populates="products")

    @property
    def has_price(self) -> bool:
        """True when both amount and currency are set."""
        return self.price_num is not None and self.price_currency is not None
