"""
Brand model.

A single well-known brand is shared by every imported product until a
real brand catalog exists.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class Brand(BaseModel):
    """
    Brand model.

    Attributes:
        name: Brand name, used as the business lookup key
    """

    __tablename__ = "brand"

    name = Column(String(200), nullable=False, index=True)
