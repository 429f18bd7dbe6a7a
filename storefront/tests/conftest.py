"""Pytest configuration and fixtures for catalog import and read API tests."""

import csv

import pytest

from storefront.services.database import (
    create_database_engine,
    create_session_factory,
    init_database,
)
from storefront.services.import_context import ImportContext

CATEGORY_HEADER = [
    "category_name_EN",
    "category_name_ID",
    "abbreviation",
    "subcategory_name_EN",
    "subcategory_name_ID",
]

PRODUCT_HEADER = [
    "product_variant_id",
    "sku_structured",
    "product_name_ENG",
    "product_name_IND",
    "option_value_1",
    "quantifier_ENG",
    "quantifier_IND",
    "maximum_ordered_qty",
    "barcodes",
    "category_name_EN",
    "sub_category_name_EN",
    "product_description_IND",
    "product_description_ENG",
    "image_link",
    "default_variant",
    "variant_product_sellable",
    "selling_price",
]

DEFAULT_PRODUCT_ROW = {
    "product_variant_id": "st-1001",
    "sku_structured": "DRK-SOD-0001",
    "product_name_ENG": "Cola",
    "product_name_IND": "Kola",
    "option_value_1": "330",
    "quantifier_ENG": "ml",
    "quantifier_IND": "ml",
    "maximum_ordered_qty": "5",
    "barcodes": "8991002101234",
    "category_name_EN": "Drinks",
    "sub_category_name_EN": "Soda",
    "product_description_IND": "Minuman bersoda",
    "product_description_ENG": "Fizzy drink",
    "image_link": "https://img.example.com/cola.jpg",
    "default_variant": "yes",
    "variant_product_sellable": "yes",
    "selling_price": "7500",
}

SEED_CATEGORY_ROWS = [
    ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
    ["Drinks", "Minuman", "DRK", "Water", "Air-ID"],
    ["Snacks", "Camilan", "SNK", "Chips", "Keripik"],
]


@pytest.fixture(scope="function")
def engine():
    """Provide a clean in-memory SQLite engine with all tables created."""
    engine = create_database_engine("sqlite://")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    """Provide a session factory bound to the in-memory engine."""
    return create_session_factory(engine)


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file under tmp_path and return its path."""

    def _write(name, header, rows):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            writer.writerows(rows)
        return str(path)

    return _write


@pytest.fixture
def make_context(session_factory):
    """Build an ImportContext for a source file on the in-memory store."""

    def _make(path, timeout=60.0):
        return ImportContext.create(path, session_factory, timeout=timeout)

    return _make


@pytest.fixture
def product_row():
    """Build a product file row (in PRODUCT_HEADER order) from overrides."""

    def _row(**overrides):
        values = dict(DEFAULT_PRODUCT_ROW)
        values.update(overrides)
        return [values[column] for column in PRODUCT_HEADER]

    return _row


@pytest.fixture
def category_file(write_csv):
    """Category file with two Level 1 categories (DRK, SNK) and three children."""
    return write_csv("categories.csv", CATEGORY_HEADER, SEED_CATEGORY_ROWS)


@pytest.fixture
def seeded_categories(category_file, make_context):
    """Import the seed category file into the store."""
    from storefront.services.category_import_service import import_categories

    return import_categories(make_context(category_file))


@pytest.fixture
def product_file(write_csv, product_row):
    """Product file: Cola (two variants) and Sparkling Water, all valid."""
    rows = [
        product_row(),
        product_row(
            product_variant_id="st-1002",
            sku_structured="DRK-SOD-0002",
            option_value_1="1.5",
            quantifier_ENG="l",
            quantifier_IND="l",
            barcodes="8991002101241",
            default_variant="no",
            variant_product_sellable="no",
            selling_price="15000",
        ),
        product_row(
            product_variant_id="st-2001",
            sku_structured="DRK-WTR-0001",
            product_name_ENG="Sparkling Water",
            product_name_IND="Air Soda",
            sub_category_name_EN="Water",
            barcodes="8991002109999",
            product_description_ENG="#N/A",
        ),
    ]
    return write_csv("products.csv", PRODUCT_HEADER, rows)
