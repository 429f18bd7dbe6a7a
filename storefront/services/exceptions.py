"""Service layer exception classes for the storefront catalog backend.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across importers and the read API.

Exception Hierarchy:
    ServiceError (base)
    ├── DatabaseError
    └── CatalogImportError
        ├── SourceFileError
        ├── MalformedTableError
        ├── MissingFieldError
        ├── RowError
        ├── AbbreviationConflictError
        ├── SkuAbbreviationMismatchError
        ├── DeferredImportErrors
        ├── ReferenceNotFoundError
        │   ├── NoCategoriesFoundError
        │   ├── NoStoresFoundError
        │   ├── NoProductsFoundError
        │   ├── ProductNotFoundError
        │   └── VariantNotFoundError
        ├── StoreAlreadyExistsError
        ├── NothingToImportError
        ├── ImportTimeoutError
        └── UnsupportedOperationError
"""

from enum import Enum
from typing import List, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class DatabaseError(ServiceError):
    """Raised when a store operation fails.

    Args:
        operation: Name of the failed store call, used for diagnostics
        original_error: The underlying driver exception

    Example:
        >>> raise DatabaseError("BulkWrite, on import categories", exc)
        DatabaseError: failed to execute BulkWrite, on import categories: ...
    """

    def __init__(self, operation: str, original_error: Optional[Exception] = None):
        self.operation = operation
        self.original_error = original_error
        message = f"failed to execute {operation}"
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message)


class CatalogImportError(ServiceError):
    """Base exception for failures that abort an import run."""

    pass


class SourceFileError(CatalogImportError):
    """Raised when the source file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to open source file '{path}': {reason}")


class MalformedTableError(CatalogImportError):
    """Raised when the source file is not a well-formed table.

    Args:
        row_number: 1-based line number of the offending row
        reason: What is wrong with the row
    """

    def __init__(self, row_number: int, reason: str):
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"malformed table on row: {row_number}: {reason}")


class RequiredField(str, Enum):
    """Required document fields, in the message form reported to users."""

    # Level 1 category
    CATEGORY_NAME_EN = "category name EN is required"
    CATEGORY_NAME_ID = "category name ID is required"
    ABBREVIATION = "abbreviation is required"
    CATEGORY_IMAGE_URL = "category image url is required"

    # Level 2 category
    SUBCATEGORY_NAME_EN = "subcategory name EN is required"
    SUBCATEGORY_NAME_ID = "subcategory name ID is required"
    SUBCATEGORY_IMAGE_URL = "subcategory image url is required"

    # Product
    PRODUCT_ID = "product id is required"
    PRODUCT_NAME_EN = "product name EN is required"
    PRODUCT_NAME_ID = "product name ID is required"
    PRODUCT_BRAND_ID = "product brand id is required"
    PRODUCT_CATEGORY_1_ID = "product category 1 id is required"
    PRODUCT_CATEGORY_2_ID = "product category 2 id is required"
    PRODUCT_VARIANTS = "product variants is required"

    # Product variant
    PRODUCT_VARIANT_ID = "product variant id is required"
    SHOPTREE_VARIANT_ID = "shoptree variant id is required"
    PRODUCT_VARIANT_IMAGE_URL = "product variant image url is required"
    PRODUCT_VARIANT_VARIANT_TYPE_ID = "product variant variant type id is required"
    VARIANT_VALUE = "variant value is required"
    VARIANT_QUANTIFIER_ID = "variant quantifier ID is required"
    VARIANT_QUANTIFIER_EN = "variant quantifier EN is required"
    SKU = "sku is required"
    BARCODE = "barcode is required"

    # Inventory
    INVENTORY_ID = "inventory id is required"
    INVENTORY_STORE_ID = "inventory store id is required"
    INVENTORY_SHOPTREE_LOCATION_ID = "inventory shoptree location id is required"
    INVENTORY_PRODUCTS = "inventory product is required"

    # Inventory product
    INVENTORY_PRODUCT_ID = "inventory product id is required"
    INVENTORY_PRODUCT_PRICE = "inventory product price is required"
    INVENTORY_PRODUCT_PRODUCT_ID = "inventory product product id is required"
    INVENTORY_PRODUCT_VARIANT_ID = "inventory product variant id is required"
    INVENTORY_PRODUCT_SHOPTREE_VARIANT_ID = "inventory product shoptree variant id is required"


class MissingFieldError(CatalogImportError):
    """Raised when a document lacks a required field.

    Args:
        field: The first missing field, in validation order

    Example:
        >>> raise MissingFieldError(RequiredField.SKU)
        MissingFieldError: sku is required
    """

    def __init__(self, field: RequiredField):
        self.field = field
        super().__init__(field.value)


class RowError(CatalogImportError):
    """Raised when a source row fails validation.

    Args:
        row_number: 1-based line number of the row (header is row 1)
        cause: The underlying error (usually a MissingFieldError)
    """

    def __init__(self, row_number: int, cause: Exception):
        self.row_number = row_number
        self.cause = cause
        super().__init__(f"error on row: {row_number}, error: {cause}")


class AbbreviationConflictError(CatalogImportError):
    """Raised when one abbreviation labels two differently named categories."""

    def __init__(self, row_number: int, abbreviation: str):
        self.row_number = row_number
        self.abbreviation = abbreviation
        super().__init__(
            f"abbreviation '{abbreviation}' is used by two different categories, "
            f"on row: {row_number}"
        )


class SkuAbbreviationMismatchError(CatalogImportError):
    """Raised when a SKU does not embed its Level 1 category abbreviation."""

    def __init__(self, sku: str, abbreviation: str, row_number: Optional[int] = None):
        self.sku = sku
        self.abbreviation = abbreviation
        self.row_number = row_number
        message = f"mismatch sku: {sku} and category abbreviation: {abbreviation}"
        if row_number is not None:
            message = f"{message}, on row: {row_number}"
        super().__init__(message)


class DeferredImportErrors(CatalogImportError):
    """Raised after a full pass when non-fatal row problems were collected.

    The detailed messages are logged by the collector and kept on
    ``messages``; the exception text stays generic.
    """

    def __init__(self, entity_type: str, messages: List[str]):
        self.entity_type = entity_type
        self.messages = list(messages)
        super().__init__(f"found several errors while importing {entity_type}")


class ReferenceNotFoundError(CatalogImportError):
    """Base for missing previously-imported reference data."""

    pass


class NoCategoriesFoundError(ReferenceNotFoundError):
    """Raised when products are imported before any category exists."""

    def __init__(self):
        super().__init__("no categories found in database")


class NoStoresFoundError(ReferenceNotFoundError):
    """Raised when no store exists."""

    def __init__(self):
        super().__init__("no stores found in database")


class NoProductsFoundError(ReferenceNotFoundError):
    """Raised when inventories are imported before any product exists."""

    def __init__(self):
        super().__init__("no products found in database")


class ProductNotFoundError(ReferenceNotFoundError):
    """Raised when an inventory row names an unknown product."""

    def __init__(self, name_en: str, row_number: int):
        self.name_en = name_en
        self.row_number = row_number
        super().__init__(f"failed to find product with EN name: {name_en}, on row: {row_number}")


class VariantNotFoundError(ReferenceNotFoundError):
    """Raised when an inventory row names an unknown shoptree variant."""

    def __init__(self, shoptree_variant_id: str, row_number: int):
        self.shoptree_variant_id = shoptree_variant_id
        self.row_number = row_number
        super().__init__(
            f"failed to find product variant with shoptree variant id: "
            f"{shoptree_variant_id}, on row: {row_number}"
        )


class StoreAlreadyExistsError(CatalogImportError):
    """Raised when the store importer finds existing stores."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} store(s) already exist in database")


class NothingToImportError(CatalogImportError):
    """Raised when a source file yields no documents to write."""

    def __init__(self, entity_type: str):
        self.entity_type = entity_type
        super().__init__(f"no {entity_type} found in source file")


class ImportTimeoutError(CatalogImportError):
    """Raised when an import run exceeds its deadline."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"deadline exceeded before {operation}")


class UnsupportedOperationError(CatalogImportError):
    """Raised for import operations that are not implemented."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"currently import {operation} is unimplemented")
