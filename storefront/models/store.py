"""
Store model for dark stores (fulfilment locations).
"""

from sqlalchemy import Column, String

from .base import BaseModel


class Store(BaseModel):
    """
    Store model.

    Attributes:
        name: Store display name
        shoptree_location_id: Location identifier in the shoptree POS
        location_code: Short location code (e.g., "WHT")
    """

    __tablename__ = "store"

    name = Column(String(200), nullable=False)
    shoptree_location_id = Column(String(100), nullable=False)
    location_code = Column(String(20), nullable=True)
