"""
Category Import Service - folds the category CSV into a two-level tree.

Each source row names one Level 2 category and its Level 1 parent. Rows
sharing an abbreviation share one Level 1 node, so the output holds one
Level 1 node per distinct abbreviation (in first-seen order), each with
one Level 2 child per row (in row order).

Any row problem aborts the run before anything is written.

Usage:
    from storefront.services.category_import_service import import_categories

    context = ImportContext.create("categories.csv", session_factory)
    result = import_categories(context)
    print(result.get_summary())
"""

from typing import Dict, List, Sequence, Tuple

from storefront.models import Category, CategoryLevel, new_object_id
from storefront.services.bulk_writer import bulk_insert
from storefront.services.exceptions import AbbreviationConflictError, MissingFieldError, RowError
from storefront.services.import_context import ImportContext
from storefront.services.import_result import ImportResult
from storefront.services.logging_utils import log_operation
from storefront.services.tabular_reader import CategoryHeaders, Row, read_table, split_header
from storefront.utils.constants import IMAGE_EXTENSION
from storefront.utils.validators import validate_child_category, validate_parent_category

ENTITY_TYPE = "categories"


def derive_image_urls(key: str) -> List[str]:
    """Image URL list derived from an identifier or SKU: ["<key>-0.webp"]."""
    return [f"{key}-0.{IMAGE_EXTENSION}"]


def _build_child(row: Row, headers: CategoryHeaders, sort_order: int) -> Category:
    category_id = new_object_id()
    return Category(
        id=category_id,
        level=CategoryLevel.LEVEL_2,
        name_en=row[headers.subcategory_name_en],
        name_id=row[headers.subcategory_name_id],
        images_urls=derive_image_urls(category_id),
        sort_order=sort_order,
    )


def _build_parent(row: Row, headers: CategoryHeaders, sort_order: int) -> Category:
    category_id = new_object_id()
    return Category(
        id=category_id,
        level=CategoryLevel.LEVEL_1,
        name_en=row[headers.category_name_en],
        name_id=row[headers.category_name_id],
        abbreviation=row[headers.abbreviation],
        images_urls=derive_image_urls(category_id),
        sort_order=sort_order,
    )


def build_categories(header: Sequence[str], rows: List[Tuple[int, Row]]) -> List[Category]:
    """
    Fold category rows into Level 1 categories with their children.

    Args:
        header: Header row of the category file
        rows: (row_number, row) pairs, header excluded

    Returns:
        Level 1 categories in first-seen order, each with >=1 child

    Raises:
        AbbreviationConflictError: If one abbreviation labels two EN names
        RowError: If a built category lacks a required field
    """
    headers = CategoryHeaders.from_header_row(header)
    parents: List[Category] = []
    by_abbreviation: Dict[str, Category] = {}

    for row_number, row in rows:
        abbreviation = row[headers.abbreviation]
        parent = by_abbreviation.get(abbreviation)
        if parent is not None and parent.name_en != row[headers.category_name_en]:
            raise AbbreviationConflictError(row_number, abbreviation)

        child_order = len(parent.child_categories) if parent is not None else 0
        child = _build_child(row, headers, child_order)
        try:
            validate_child_category(child)
        except MissingFieldError as e:
            raise RowError(row_number, e) from e

        if parent is not None:
            parent.child_categories.append(child)
            continue

        parent = _build_parent(row, headers, len(parents))
        parent.child_categories.append(child)
        try:
            validate_parent_category(parent)
        except MissingFieldError as e:
            raise RowError(row_number, e) from e

        parents.append(parent)
        by_abbreviation[abbreviation] = parent

    return parents


def import_categories(context: ImportContext) -> ImportResult:
    """
    Import the category file named by the context.

    Args:
        context: Import run context

    Returns:
        ImportResult with Level 1 (documents) and Level 2 (children) counts

    Raises:
        SourceFileError, MalformedTableError: If the file cannot be read
        AbbreviationConflictError, RowError: If a row is invalid
        NothingToImportError: If the file has no data rows
        DatabaseError: If the bulk write fails
    """
    log_operation(context.logger, operation="import_categories", outcome="started", path=context.path)

    header, rows = split_header(read_table(context.path))
    categories = build_categories(header, rows)
    bulk_insert(context, categories, ENTITY_TYPE)

    result = ImportResult(
        entity_type=ENTITY_TYPE,
        documents=len(categories),
        children=sum(len(c.child_categories) for c in categories),
    )
    log_operation(
        context.logger,
        operation="import_categories",
        outcome="success",
        categories=result.documents,
        subcategories=result.children,
    )
    return result
