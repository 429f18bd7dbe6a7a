"""
Document validation functions for the catalog importers.

Each validator checks the required fields of one document kind in a fixed
order and raises MissingFieldError for the FIRST missing field it meets,
so a document missing several fields always reports the same one:

- Level 1 category: name EN, name ID, abbreviation, image URL
- Level 2 category: name EN, name ID, image URL
- Product variant: id, shoptree variant id, image URL, variant type,
  value, quantifier ID, quantifier EN, SKU, barcode
- Product: id, name ID, name EN, brand, category 1, category 2, variants
- Inventory product: id, price, product id, variant id, shoptree variant id
- Inventory: id, store id, shoptree location id, products
"""

from typing import Any, Iterable, Tuple

from storefront.models import Category, Inventory, InventoryProduct, Product, ProductVariant
from storefront.services.exceptions import MissingFieldError, RequiredField

Check = Tuple[Any, RequiredField]


def is_present(value: Any) -> bool:
    """True unless value is None or empty (string, list)."""
    if value is None:
        return False
    if isinstance(value, (str, list, tuple)):
        return len(value) > 0
    return True


def require_fields(checks: Iterable[Check]) -> None:
    """
    Raise for the first (value, field) pair whose value is missing.

    Args:
        checks: (value, RequiredField) pairs in check order

    Raises:
        MissingFieldError: For the first missing value
    """
    for value, field in checks:
        if not is_present(value):
            raise MissingFieldError(field)


def validate_parent_category(category: Category) -> None:
    """Validate a Level 1 category."""
    require_fields(
        [
            (category.name_en, RequiredField.CATEGORY_NAME_EN),
            (category.name_id, RequiredField.CATEGORY_NAME_ID),
            (category.abbreviation, RequiredField.ABBREVIATION),
            (category.images_urls, RequiredField.CATEGORY_IMAGE_URL),
        ]
    )


def validate_child_category(category: Category) -> None:
    """Validate a Level 2 category."""
    require_fields(
        [
            (category.name_en, RequiredField.SUBCATEGORY_NAME_EN),
            (category.name_id, RequiredField.SUBCATEGORY_NAME_ID),
            (category.images_urls, RequiredField.SUBCATEGORY_IMAGE_URL),
        ]
    )


def validate_product_variant(variant: ProductVariant) -> None:
    """Validate a product variant."""
    require_fields(
        [
            (variant.id, RequiredField.PRODUCT_VARIANT_ID),
            (variant.shoptree_variant_id, RequiredField.SHOPTREE_VARIANT_ID),
            (variant.images_urls, RequiredField.PRODUCT_VARIANT_IMAGE_URL),
            (variant.variant_type_id, RequiredField.PRODUCT_VARIANT_VARIANT_TYPE_ID),
            (variant.variant_value, RequiredField.VARIANT_VALUE),
            (variant.variant_quantifier_id, RequiredField.VARIANT_QUANTIFIER_ID),
            (variant.variant_quantifier_en, RequiredField.VARIANT_QUANTIFIER_EN),
            (variant.sku, RequiredField.SKU),
            (variant.barcode, RequiredField.BARCODE),
        ]
    )


def validate_product(
    product: Product, require_categories: bool = True, require_category2: bool = True
) -> None:
    """
    Validate a product.

    Args:
        product: Product to validate
        require_categories: If False, skip the category reference checks.
            Used when an unresolved category was already recorded as a
            deferred error, so the row is not reported twice.
        require_category2: If False, the Level 2 reference may be absent.
            Used when the Level 1 category has no children.

    Raises:
        MissingFieldError: For the first missing field
    """
    checks = [
        (product.id, RequiredField.PRODUCT_ID),
        (product.name_id, RequiredField.PRODUCT_NAME_ID),
        (product.name_en, RequiredField.PRODUCT_NAME_EN),
        (product.brand_id, RequiredField.PRODUCT_BRAND_ID),
    ]
    if require_categories:
        checks.append((product.category1_id, RequiredField.PRODUCT_CATEGORY_1_ID))
        if require_category2:
            checks.append((product.category2_id, RequiredField.PRODUCT_CATEGORY_2_ID))
    require_fields(checks)

    # An empty list still counts as "variants present"; only absence fails
    if product.variants is None:
        raise MissingFieldError(RequiredField.PRODUCT_VARIANTS)


def validate_inventory_product(item: InventoryProduct) -> None:
    """Validate one inventory product line."""
    require_fields(
        [
            (item.id, RequiredField.INVENTORY_PRODUCT_ID),
            (item.price_num if item.has_price else None, RequiredField.INVENTORY_PRODUCT_PRICE),
            (item.product_id, RequiredField.INVENTORY_PRODUCT_PRODUCT_ID),
            (item.variant_id, RequiredField.INVENTORY_PRODUCT_VARIANT_ID),
            (item.shoptree_variant_id, RequiredField.INVENTORY_PRODUCT_SHOPTREE_VARIANT_ID),
        ]
    )


def validate_inventory(inventory: Inventory) -> None:
    """Validate an inventory aggregate (at least one product line)."""
    require_fields(
        [
            (inventory.id, RequiredField.INVENTORY_ID),
            (inventory.store_id, RequiredField.INVENTORY_STORE_ID),
            (inventory.shoptree_location_id, RequiredField.INVENTORY_SHOPTREE_LOCATION_ID),
            (list(inventory.products or []), RequiredField.INVENTORY_PRODUCTS),
        ]
    )
