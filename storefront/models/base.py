"""
Base model class for all catalog documents.

Provides common functionality and fields for all models:
- Primary key (opaque hex string, generated in-process at construction)
- Timestamp fields (created_at, updated_at)
- SQLAlchemy declarative base
"""

import uuid as uuid_lib

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

from storefront.utils.datetime_utils import utc_now

# Create the declarative base for all models
Base = declarative_base()


def new_object_id() -> str:
    """
    Generate a new opaque, globally unique document identifier.

    Identifiers are generated before a document is persisted so that
    derived values (such as image URLs) can be built while folding rows.

    Returns:
        32-character lowercase hex string
    """
    return uuid_lib.uuid4().hex


class BaseModel(Base):
    """
    Abstract base model with common fields and methods.

    All models should inherit from this class to get:
    - id: Primary key (hex string, generated by new_object_id)
    - created_at: Timestamp when record was created
    - updated_at: Timestamp when record was last modified
    """

    __abstract__ = True

    id = Column(String(32), primary_key=True, default=new_object_id)

    # Timestamp fields
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        """
        String representation of model instance.

        Returns:
            String like "ClassName(id='...', name='...')"
        """
        class_name = self.__class__.__name__
        attrs = []

        if getattr(self, "id", None) is not None:
            attrs.append(f"id='{self.id}'")

        if getattr(self, "name", None) is not None:
            attrs.append(f"name='{self.name}'")

        attrs_str = ", ".join(attrs)
        return f"{class_name}({attrs_str})"
