"""
Product model - container for purchasable product variants.

A product (e.g., "Coca Cola") is filed under one Level 1 and, where that
category has children, one Level 2 category. It owns an ordered list of
variants (e.g., "330 ml can", "1.5 l bottle").
"""

from sqlalchemy import Column, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import BaseModel


class Product(BaseModel):
    """
    Product model.

    Attributes:
        name_en: English name, unique within one import run
        name_id: Localized (Indonesian) name
        description_en: Optional English description
        description_id: Optional localized description
        brand_id: Foreign key to Brand
        category1_id: Foreign key to the Level 1 Category
        category2_id: Foreign key to the Level 2 Category (None when the
            Level 1 category has no children)

    Relationships:
        variants: One-to-Many with ProductVariant (cascade delete, ordered)
        brand: Many-to-One with Brand
    """

    __tablename__ = "product"

    name_en = Column(String(200), nullable=False, index=True)
    name_id = Column(String(200), nullable=False)
    description_en = Column(Text, nullable=True)
    description_id = Column(Text, nullable=True)

    brand_id = Column(String(32), ForeignKey("brand.id"), nullable=False, index=True)
    category1_id = Column(String(32), ForeignKey("category.id"), nullable=False, index=True)
    category2_id = Column(String(32), ForeignKey("category.id"), nullable=True, index=True)

    # Relationships
    variants = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.sort_order",
        lazy="selectin",
    )
    brand = relationship("Brand")

    __table_args__ = (
        Index("idx_product_categories", "category1_id", "category2_id"),
    )

    @property
    def images_urls(self) -> list:
        """Image URLs of all variants, in variant order."""
        urls = []
        for variant in self.variants:
            urls.extend(variant.images_urls or [])
        return urls

    def __repr__(self) -> str:
        """String representation of product."""
        return f"Product(id='{self.id}', name_en='{self.name_en}')"
