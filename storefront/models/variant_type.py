"""
VariantType model.

Describes what a variant value measures. The product importer uses a single
"unit of measure" variant type for every variant it creates.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class VariantType(BaseModel):
    """
    VariantType model.

    Attributes:
        name: Variant type name (e.g., "UOM"), used as the business lookup key
    """

    __tablename__ = "variant_type"

    name = Column(String(100), nullable=False, index=True)
