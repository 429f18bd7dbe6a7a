"""
Category model for the two-level catalog taxonomy.

Level 1 categories (e.g., "Drinks") are identified within an import by a
short business abbreviation (e.g., "DRK") that is also embedded in every
SKU of the products filed under them. Level 2 categories (e.g., "Soda")
hang off exactly one Level 1 parent.
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship

from .base import BaseModel
from .enums import CategoryLevel


class Category(BaseModel):
    """
    Category model representing one node of the category tree.

    Attributes:
        level: CategoryLevel.LEVEL_1 or CategoryLevel.LEVEL_2
        parent_id: Foreign key to the parent category (Level 2 only)
        name_en: English name
        name_id: Localized (Indonesian) name
        abbreviation: Short business code (Level 1 only)
        images_urls: Image URL list, at least one entry
        sort_order: Position among siblings (source row order)

    Relationships:
        child_categories: One-to-Many with Category (Level 1 only, cascade)
        parent: Many-to-One with Category (Level 2 only)
    """

    __tablename__ = "category"

    level = Column(SQLEnum(CategoryLevel), nullable=False, default=CategoryLevel.LEVEL_1)
    parent_id = Column(
        String(32),
        ForeignKey("category.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    name_en = Column(String(200), nullable=False, default="")
    name_id = Column(String(200), nullable=False, default="")
    abbreviation = Column(String(20), nullable=True)
    images_urls = Column(JSON, nullable=False, default=list)
    sort_order = Column(Integer, nullable=False, default=0)

    # Relationships
    child_categories = relationship(
        "Category",
        back_populates="parent",
        cascade="all, delete-orphan",
        order_by="Category.sort_order",
        lazy="selectin",
    )
    parent = relationship(
        "Category",
        back_populates="child_categories",
        remote_side="Category.id",
    )

    __table_args__ = (
        Index("idx_category_level", "level"),
        Index("idx_category_name_en", "name_en"),
    )

    @property
    def is_parent(self) -> bool:
        """True for Level 1 categories."""
        return self.level == CategoryLevel.LEVEL_1

    def __repr__(self) -> str:
        """String representation of category."""
        return f"Category(id='{self.id}', level={self.level}, name_en='{self.name_en}')"
