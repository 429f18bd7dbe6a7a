"""
Inventory Import Service - placeholder stock and prices for the first store.

Prices are read from the product file until a dedicated inventory extract
exists. Every row becomes one inventory product line with placeholder
stock; all lines go into a single inventory for the first store.

Any unresolved product or variant fails the run immediately.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from storefront.models import (
    Currency,
    Inventory,
    InventoryProduct,
    Product,
    ProductStatus,
    ProductVariant,
    Store,
    new_object_id,
)
from storefront.services.bulk_writer import insert_one
from storefront.services.exceptions import (
    MissingFieldError,
    NoProductsFoundError,
    NoStoresFoundError,
    ProductNotFoundError,
    RowError,
    VariantNotFoundError,
)
from storefront.services.import_context import ImportContext
from storefront.services.import_result import ImportResult
from storefront.services.logging_utils import log_operation
from storefront.services.reference_resolver import get_products, get_stores
from storefront.services.tabular_reader import InventoryHeaders, Row, read_table, split_header
from storefront.utils.constants import PLACEHOLDER_STOCK, PRICE_MINOR_UNIT_SUFFIX, YES
from storefront.utils.validators import validate_inventory, validate_inventory_product

ENTITY_TYPE = "inventories"


def to_minor_units(price: str) -> str:
    """Whole-unit price text to minor units, e.g. "15000" -> "1500000"."""
    return f"{price}{PRICE_MINOR_UNIT_SUFFIX}"


def find_variant(product: Product, shoptree_variant_id: str) -> Optional[ProductVariant]:
    """First variant of product with the given shoptree variant id, if any."""
    for variant in product.variants:
        if variant.shoptree_variant_id == shoptree_variant_id:
            return variant
    return None


def build_inventory(
    header: Sequence[str],
    rows: List[Tuple[int, Row]],
    store: Store,
    products: Sequence[Product],
) -> Inventory:
    """
    Build one inventory for store from the rows of the product file.

    Args:
        header: Header row of the source file
        rows: (row_number, row) pairs, header excluded
        store: Store the inventory belongs to
        products: Persisted products with their variants

    Returns:
        Validated Inventory with one line per row

    Raises:
        ProductNotFoundError: If a row names an unknown product
        VariantNotFoundError: If a row names an unknown shoptree variant
        RowError: If a line lacks a required field
        MissingFieldError: If the inventory itself is incomplete (no rows)
    """
    headers = InventoryHeaders.from_header_row(header)

    by_name: Dict[str, Product] = {}
    for product in products:
        by_name.setdefault(product.name_en, product)

    inventory = Inventory(
        id=new_object_id(),
        store_id=store.id,
        shoptree_location_id=store.shoptree_location_id,
    )

    for row_number, row in rows:
        product = by_name.get(row[headers.product_name_en])
        if product is None:
            raise ProductNotFoundError(row[headers.product_name_en], row_number)

        variant = find_variant(product, row[headers.shoptree_variant_id])
        if variant is None:
            raise VariantNotFoundError(row[headers.shoptree_variant_id], row_number)

        status = ProductStatus.ENABLED if row[headers.sellable] == YES else ProductStatus.DISABLED
        item = InventoryProduct(
            id=new_object_id(),
            stock=PLACEHOLDER_STOCK,
            price_num=to_minor_units(row[headers.price]),
            price_currency=Currency.IDR,
            product_id=product.id,
            variant_id=variant.id,
            shoptree_variant_id=variant.shoptree_variant_id,
            status=status,
        )
        try:
            validate_inventory_product(item)
        except MissingFieldError as e:
            raise RowError(row_number, e) from e

        inventory.products.append(item)

    validate_inventory(inventory)
    return inventory


def import_inventories(context: ImportContext) -> ImportResult:
    """
    Import placeholder inventory for the first store.

    Args:
        context: Import run context (path of the product file)

    Returns:
        ImportResult with one inventory and its line count

    Raises:
        NoStoresFoundError: If no store exists
        NoProductsFoundError: If no product exists
        ProductNotFoundError, VariantNotFoundError, RowError: On a bad row
        MissingFieldError: If the file has no data rows
        DatabaseError: If a store call fails
    """
    log_operation(context.logger, operation="import_inventories", outcome="started", path=context.path)

    stores = get_stores(context)
    if not stores:
        raise NoStoresFoundError()
    products = get_products(context)
    if not products:
        raise NoProductsFoundError()

    header, rows = split_header(read_table(context.path))
    inventory = build_inventory(header, rows, stores[0], products)
    insert_one(context, inventory, ENTITY_TYPE)

    result = ImportResult(entity_type=ENTITY_TYPE, documents=1, children=len(inventory.products))
    log_operation(
        context.logger,
        operation="import_inventories",
        outcome="success",
        store_id=stores[0].id,
        lines=result.children,
    )
    return result
