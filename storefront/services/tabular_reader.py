"""
Tabular Reader - Low-level CSV reading and header binding.

Responsibilities:
  • UTF-8 decoding with BOM removal
  • Rejecting ragged tables (every row must match the header width)
  • Binding recognised header names to column indices, once per file

Column order in a source file is irrelevant; only header names matter.
Unrecognised headers are ignored, and a recognised header absent from the
file keeps column index 0.
"""

import csv
from dataclasses import dataclass, fields
from pathlib import Path
from typing import ClassVar, Dict, List, Sequence, Tuple, Type, TypeVar

from storefront.services.exceptions import MalformedTableError, SourceFileError

Row = List[str]

H = TypeVar("H", bound="HeaderIndex")


def read_table(path: str) -> List[Row]:
    """
    Read every row of a CSV file.

    Row 0 is the header row. Header cells are whitespace-stripped and
    blank lines are dropped.

    Args:
        path: Path of the CSV file

    Returns:
        All rows, header included, as lists of strings

    Raises:
        SourceFileError: If the file cannot be opened or decoded
        MalformedTableError: If a row's width differs from the header's
    """
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8-sig", newline="") as fh:
            rows = [row for row in csv.reader(fh, strict=True) if row]
    except FileNotFoundError as e:
        raise SourceFileError(str(path), "file not found") from e
    except UnicodeDecodeError as e:
        raise SourceFileError(str(path), f"not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise MalformedTableError(0, str(e)) from e
    except OSError as e:
        raise SourceFileError(str(path), str(e)) from e

    if not rows:
        return rows

    rows[0] = [header.strip() for header in rows[0]]
    width = len(rows[0])
    for i, row in enumerate(rows[1:], start=2):
        if len(row) != width:
            raise MalformedTableError(
                i, f"wrong number of fields, expected {width}, got {len(row)}"
            )
    return rows


def split_header(rows: List[Row]) -> Tuple[Row, List[Tuple[int, Row]]]:
    """
    Separate the header row from numbered data rows.

    Args:
        rows: Rows as returned by read_table

    Returns:
        (header, [(row_number, row), ...]) with 1-based file row numbers
    """
    if not rows:
        return [], []
    return rows[0], list(enumerate(rows[1:], start=2))


@dataclass(frozen=True)
class HeaderIndex:
    """
    Base for per-file header bindings.

    Subclasses declare one int field per recognised column and map source
    header names to those fields in HEADERS.
    """

    HEADERS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_header_row(cls: Type[H], header: Sequence[str]) -> H:
        """
        Bind recognised header names to their column indices.

        Args:
            header: The header row of a source file

        Returns:
            Header index with 0 for every recognised header not present
        """
        indices = {f.name: 0 for f in fields(cls)}
        for idx, name in enumerate(header):
            attr = cls.HEADERS.get(name)
            if attr is not None:
                indices[attr] = idx
        return cls(**indices)

    @classmethod
    def recognized_headers(cls) -> frozenset:
        """Header names this binding understands."""
        return frozenset(cls.HEADERS)


@dataclass(frozen=True)
class CategoryHeaders(HeaderIndex):
    """Column binding for the category file."""

    HEADERS: ClassVar[Dict[str, str]] = {
        "category_name_EN": "category_name_en",
        "category_name_ID": "category_name_id",
        "abbreviation": "abbreviation",
        "subcategory_name_EN": "subcategory_name_en",
        "subcategory_name_ID": "subcategory_name_id",
    }

    category_name_en: int = 0
    category_name_id: int = 0
    abbreviation: int = 0
    subcategory_name_en: int = 0
    subcategory_name_id: int = 0


@dataclass(frozen=True)
class ProductHeaders(HeaderIndex):
    """Column binding for the product file."""

    HEADERS: ClassVar[Dict[str, str]] = {
        "product_variant_id": "shoptree_variant_id",
        "sku_structured": "sku",
        "product_name_ENG": "product_name_en",
        "product_name_IND": "product_name_id",
        "option_value_1": "variant_value",
        "quantifier_ENG": "variant_quantifier_en",
        "quantifier_IND": "variant_quantifier_id",
        "maximum_ordered_qty": "maximum_order",
        "barcodes": "barcode",
        "category_name_EN": "category_name_en",
        "sub_category_name_EN": "subcategory_name_en",
        "product_description_IND": "description_id",
        "product_description_ENG": "description_en",
        "image_link": "image_url",
        "default_variant": "default_variant",
    }

    shoptree_variant_id: int = 0
    sku: int = 0
    product_name_en: int = 0
    product_name_id: int = 0
    variant_value: int = 0
    variant_quantifier_en: int = 0
    variant_quantifier_id: int = 0
    maximum_order: int = 0
    barcode: int = 0
    category_name_en: int = 0
    subcategory_name_en: int = 0
    description_id: int = 0
    description_en: int = 0
    image_url: int = 0
    default_variant: int = 0


@dataclass(frozen=True)
class InventoryHeaders(HeaderIndex):
    """Column binding for the inventory file (currently the product file)."""

    HEADERS: ClassVar[Dict[str, str]] = {
        "product_name_ENG": "product_name_en",
        "product_variant_id": "shoptree_variant_id",
        "variant_product_sellable": "sellable",
        "selling_price": "price",
    }

    product_name_en: int = 0
    shoptree_variant_id: int = 0
    sellable: int = 0
    price: int = 0
