"""
ProductVariant model for specific purchasable versions of products.

Each CSV row of the product extract becomes one variant, carrying the
shoptree (POS) variant identifier, SKU and barcode.

Example: "330 ml" (variant value "330", quantifier "ml") is a variant of
         the "Coca Cola" product.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship

from .base import BaseModel
from .enums import VariantStatus


class ProductVariant(BaseModel):
    """
    ProductVariant model.

    Attributes:
        product_id: Foreign key to Product
        shoptree_variant_id: External variant identifier in the shoptree POS
        images_urls: Image URL list derived from the SKU
        variant_type_id: Foreign key to VariantType
        variant_value: Value of the variant (e.g., "330")
        variant_quantifier_en: English quantifier (e.g., "ml")
        variant_quantifier_id: Localized quantifier
        maximum_order: Maximum order quantity; 0 means no limit
        sku: Structured SKU, embeds the Level 1 category abbreviation
        barcode: Barcode(s) as provided by the source
        variant_status: VariantStatus
        sort_order: Position within the product (source row order)
    """

    __tablename__ = "product_variant"

    product_id = Column(
        String(32), ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True
    )

    shoptree_variant_id = Column(String(100), nullable=False, index=True)
    images_urls = Column(JSON, nullable=False, default=list)
    variant_type_id = Column(String(32), ForeignKey("variant_type.id"), nullable=False)
    variant_value = Column(String(100), nullable=False)
    variant_quantifier_en = Column(String(50), nullable=False)
    variant_quantifier_id = Column(String(50), nullable=False)
    maximum_order = Column(Integer, nullable=False, default=0)  # 0 means no limit
    sku = Column(String(100), nullable=False, index=True)
    barcode = Column(String(200), nullable=False)
    variant_status = Column(
        SQLEnum(VariantStatus), nullable=False, default=VariantStatus.UNSPECIFIED
    )
    sort_order = Column(Integer, nullable=False, default=0)

    # Relationships
    product = relationship("Product", back_populates="variants")
    variant_type = relationship("VariantType")

    def __repr__(self) -> str:
        """String representation of product variant."""
        return f"ProductVariant(id='{self.id}', sku='{self.sku}')"
