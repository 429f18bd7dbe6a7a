"""
Product Import Service - folds the product CSV into products with variants.

Every source row is one product variant. Rows sharing an English product
name contribute variants to the same product; the first such row decides
the product's names, descriptions and categories.

Three kinds of row outcome:
  • Skipped: empty image link or barcode. The row is logged and ignored.
  • Deferred: unresolved category or unparsable maximum order. The pass
    continues, then the whole run fails before anything is written.
  • Immediate: a missing required field or a SKU that does not embed its
    Level 1 category abbreviation. The run fails at once.

Usage:
    from storefront.services.product_import_service import import_products

    context = ImportContext.create("products.csv", session_factory)
    result = import_products(context)
"""

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from storefront.models import (
    Brand,
    Category,
    Product,
    ProductVariant,
    VariantStatus,
    VariantType,
    new_object_id,
)
from storefront.services.bulk_writer import bulk_insert
from storefront.services.category_import_service import derive_image_urls
from storefront.services.error_aggregator import DeferredErrors
from storefront.services.exceptions import (
    MissingFieldError,
    NoCategoriesFoundError,
    RowError,
    SkuAbbreviationMismatchError,
)
from storefront.services.import_context import ImportContext
from storefront.services.import_result import ImportResult
from storefront.services.logging_utils import get_service_logger, log_operation
from storefront.services.reference_resolver import (
    find_or_create_brand,
    find_or_create_variant_type,
    get_categories,
)
from storefront.services.tabular_reader import ProductHeaders, Row, read_table, split_header
from storefront.utils.constants import MAX_ORDER_MAX, MAX_ORDER_MIN, NOT_APPLICABLE_MARKER, YES
from storefront.utils.validators import validate_product, validate_product_variant

logger = get_service_logger(__name__)

ENTITY_TYPE = "products"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_maximum_order(value: str) -> int:
    """
    Parse a maximum order quantity as a 32-bit signed integer.

    Args:
        value: Cell text, e.g. "12"

    Returns:
        Parsed quantity (0 means no limit)

    Raises:
        ValueError: If value is empty, not an integer, or out of range
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f'parsing "{value}": invalid syntax')
    number = int(value)
    if number < MAX_ORDER_MIN or number > MAX_ORDER_MAX:
        raise ValueError(f'parsing "{value}": value out of range')
    return number


def optional_description(value: str) -> Optional[str]:
    """Description cell text, or None when the source marks it "#N/A"."""
    if value == NOT_APPLICABLE_MARKER:
        return None
    return value


def find_parent_category(categories: Sequence[Category], name_en: str) -> Optional[Category]:
    """First Level 1 category with the given English name, if any."""
    for category in categories:
        if category.name_en == name_en:
            return category
    return None


def find_child_category(parent: Category, name_en: str) -> Optional[Category]:
    """First child of parent with the given English name, if any."""
    for child in parent.child_categories:
        if child.name_en == name_en:
            return child
    return None


def _skip_reason(row: Row, headers: ProductHeaders) -> Optional[str]:
    if row[headers.image_url] == "":
        return "image url is empty"
    if row[headers.barcode] == "":
        return "barcode is empty"
    return None


def _build_variant(
    row: Row,
    headers: ProductHeaders,
    variant_type: VariantType,
    maximum_order: int,
    sort_order: int,
) -> ProductVariant:
    sku = row[headers.sku]
    status = VariantStatus.DEFAULT if row[headers.default_variant] == YES else VariantStatus.UNSPECIFIED
    return ProductVariant(
        id=new_object_id(),
        shoptree_variant_id=row[headers.shoptree_variant_id],
        images_urls=derive_image_urls(sku),
        variant_type_id=variant_type.id,
        variant_value=row[headers.variant_value],
        variant_quantifier_en=row[headers.variant_quantifier_en],
        variant_quantifier_id=row[headers.variant_quantifier_id],
        maximum_order=maximum_order,
        sku=sku,
        barcode=row[headers.barcode],
        variant_status=status,
        sort_order=sort_order,
    )


class ProductBuilder:
    """
    Accumulates products across the rows of one product file.

    Args:
        categories: Persisted Level 1 categories with their children
        brand: Brand stamped on every product
        variant_type: Variant type stamped on every variant
        run_logger: Logger for skipped rows and deferred errors
    """

    def __init__(
        self,
        categories: Sequence[Category],
        brand: Brand,
        variant_type: VariantType,
        run_logger: Optional[logging.Logger] = None,
    ):
        self.categories = list(categories)
        self.brand = brand
        self.variant_type = variant_type
        self.logger = run_logger or logger
        self.errors = DeferredErrors()
        self.products: List[Product] = []
        self.skipped_rows: List[int] = []
        self._by_name: Dict[str, Product] = {}

    def add_row(self, row_number: int, row: Row, headers: ProductHeaders) -> None:
        """
        Fold one data row into the accumulated products.

        Raises:
            RowError: If the variant or a new product lacks a required field
            SkuAbbreviationMismatchError: If the SKU does not embed the
                resolved Level 1 abbreviation
        """
        reason = _skip_reason(row, headers)
        if reason is not None:
            self.skipped_rows.append(row_number)
            log_operation(
                self.logger,
                operation="import_products",
                outcome="row_skipped",
                level=logging.WARNING,
                row=row_number,
                reason=reason,
            )
            return

        try:
            maximum_order = parse_maximum_order(row[headers.maximum_order])
        except ValueError as e:
            self.errors.record(f"failed to convert maximum order on row: {row_number}, err: {e}")
            maximum_order = 0

        product = self._by_name.get(row[headers.product_name_en])

        sort_order = len(product.variants) if product is not None else 0
        variant = _build_variant(row, headers, self.variant_type, maximum_order, sort_order)
        try:
            validate_product_variant(variant)
        except MissingFieldError as e:
            raise RowError(row_number, e) from e

        if product is not None:
            product.variants.append(variant)
            return

        self._add_product(row_number, row, headers, variant)

    def _add_product(
        self, row_number: int, row: Row, headers: ProductHeaders, variant: ProductVariant
    ) -> None:
        deferred_before = len(self.errors)

        parent_name = row[headers.category_name_en]
        parent = find_parent_category(self.categories, parent_name)
        child = None
        if parent is None:
            self.errors.record(
                f"failed to find level 1 category with EN name: {parent_name}, on row: {row_number}"
            )
        else:
            child_name = row[headers.subcategory_name_en]
            child = find_child_category(parent, child_name)
            if child is None and parent.child_categories:
                self.errors.record(
                    f"failed to find level 2 category with EN name: {child_name}, "
                    f"on row: {row_number}"
                )

        if parent is not None and (parent.abbreviation or "") not in variant.sku:
            raise SkuAbbreviationMismatchError(variant.sku, parent.abbreviation, row_number)

        product = Product(
            id=new_object_id(),
            name_id=row[headers.product_name_id],
            name_en=row[headers.product_name_en],
            description_en=optional_description(row[headers.description_en]),
            description_id=optional_description(row[headers.description_id]),
            brand_id=self.brand.id,
            category1_id=parent.id if parent is not None else None,
            category2_id=child.id if child is not None else None,
        )
        product.variants.append(variant)

        # A Level 1 category without children files products under Level 1 only
        try:
            validate_product(
                product,
                require_categories=len(self.errors) == deferred_before,
                require_category2=parent is None or bool(parent.child_categories),
            )
        except MissingFieldError as e:
            raise RowError(row_number, e) from e

        self.products.append(product)
        self._by_name[product.name_en] = product


def build_products(
    header: Sequence[str],
    rows: List[Tuple[int, Row]],
    categories: Sequence[Category],
    brand: Brand,
    variant_type: VariantType,
    run_logger: Optional[logging.Logger] = None,
) -> ProductBuilder:
    """
    Fold product rows into products, then apply the deferred-error gate.

    Args:
        header: Header row of the product file
        rows: (row_number, row) pairs, header excluded
        categories: Persisted Level 1 categories with their children
        brand: Brand stamped on every product
        variant_type: Variant type stamped on every variant
        run_logger: Logger for skipped rows and deferred errors

    Returns:
        The builder, holding products (in first-seen order) and skipped rows

    Raises:
        RowError, SkuAbbreviationMismatchError: On the first invalid row
        DeferredImportErrors: If any deferred error was recorded
    """
    headers = ProductHeaders.from_header_row(header)
    builder = ProductBuilder(categories, brand, variant_type, run_logger)
    for row_number, row in rows:
        builder.add_row(row_number, row, headers)

    builder.errors.raise_if_any(builder.logger, ENTITY_TYPE)
    return builder


def import_products(context: ImportContext) -> ImportResult:
    """
    Import the product file named by the context.

    Reference data is resolved first: the persisted categories, then the
    catalog brand and the "unit of measure" variant type (created on first
    use). Nothing is written unless every row passes.

    Args:
        context: Import run context

    Returns:
        ImportResult with product, variant and skipped-row counts

    Raises:
        NoCategoriesFoundError: If no category has been imported yet
        SourceFileError, MalformedTableError: If the file cannot be read
        RowError, SkuAbbreviationMismatchError: On the first invalid row
        DeferredImportErrors: If rows had unresolved categories or bad
            maximum order values
        NothingToImportError: If no row produced a product
        DatabaseError: If a store call fails
    """
    log_operation(context.logger, operation="import_products", outcome="started", path=context.path)

    categories = get_categories(context)
    if not categories:
        raise NoCategoriesFoundError()
    brand = find_or_create_brand(context)
    variant_type = find_or_create_variant_type(context)

    header, rows = split_header(read_table(context.path))
    builder = build_products(header, rows, categories, brand, variant_type, context.logger)
    bulk_insert(context, builder.products, ENTITY_TYPE)

    result = ImportResult(
        entity_type=ENTITY_TYPE,
        documents=len(builder.products),
        children=sum(len(p.variants) for p in builder.products),
        skipped_rows=builder.skipped_rows,
    )
    log_operation(
        context.logger,
        operation="import_products",
        outcome="success",
        products=result.documents,
        variants=result.children,
        skipped=len(result.skipped_rows),
    )
    return result
