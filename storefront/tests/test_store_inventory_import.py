"""
Tests for the Store and Inventory Import Services.
"""

import pytest

from conftest import PRODUCT_HEADER
from storefront.models import (
    Currency,
    Inventory,
    InventoryProduct,
    Product,
    ProductStatus,
    Store,
)
from storefront.services.database import session_scope
from storefront.services.exceptions import (
    MissingFieldError,
    NoProductsFoundError,
    NoStoresFoundError,
    ProductNotFoundError,
    RequiredField,
    StoreAlreadyExistsError,
    VariantNotFoundError,
)
from storefront.services.inventory_import_service import import_inventories, to_minor_units
from storefront.services.product_import_service import import_products
from storefront.services.store_import_service import import_store


@pytest.fixture
def seeded_store(make_context, tmp_path):
    """Insert the placeholder store."""
    return import_store(make_context(str(tmp_path / "stores.csv")))


@pytest.fixture
def seeded_products(seeded_categories, product_file, make_context):
    """Import the sample product file."""
    return import_products(make_context(product_file))


class TestImportStore:
    """Test import_store()."""

    def test_inserts_placeholder(self, make_context, tmp_path, session_factory):
        """Test the placeholder store is inserted on an empty store."""
        result = import_store(make_context(str(tmp_path / "stores.csv")))

        assert result.documents == 1
        with session_scope(session_factory) as session:
            store = session.query(Store).one()
            assert store.name == "Dropezy Store"
            assert store.shoptree_location_id == "962553ec420c45388a6bfb26308bdc23"
            assert store.location_code == "WHT"

    def test_refuses_second_run(self, seeded_store, make_context, tmp_path, session_factory):
        """Test a second run fails and leaves a single store."""
        with pytest.raises(StoreAlreadyExistsError) as exc:
            import_store(make_context(str(tmp_path / "stores.csv")))

        assert exc.value.count == 1
        with session_scope(session_factory) as session:
            assert session.query(Store).count() == 1


class TestImportInventories:
    """Test import_inventories()."""

    def test_to_minor_units(self):
        """Test whole-unit prices gain two minor-unit digits."""
        assert to_minor_units("7500") == "750000"

    def test_requires_store(self, seeded_products, product_file, make_context):
        """Test inventories need an existing store."""
        with pytest.raises(NoStoresFoundError):
            import_inventories(make_context(product_file))

    def test_requires_products(self, seeded_store, product_file, make_context):
        """Test inventories need existing products."""
        with pytest.raises(NoProductsFoundError):
            import_inventories(make_context(product_file))

    def test_success(self, seeded_store, seeded_products, product_file, make_context, session_factory):
        """Test one inventory with a line per row is written for the first store."""
        result = import_inventories(make_context(product_file))

        assert result.documents == 1
        assert result.children == 3

        with session_scope(session_factory) as session:
            store = session.query(Store).one()
            inventory = session.query(Inventory).one()
            assert inventory.store_id == store.id
            assert inventory.shoptree_location_id == store.shoptree_location_id

            lines = {line.shoptree_variant_id: line for line in inventory.products}
            assert set(lines) == {"st-1001", "st-1002", "st-2001"}

            cola = session.query(Product).filter(Product.name_en == "Cola").one()
            first = lines["st-1001"]
            assert first.product_id == cola.id
            assert first.variant_id == cola.variants[0].id
            assert first.stock == 10
            assert first.price_num == "750000"
            assert first.price_currency == Currency.IDR
            assert first.status == ProductStatus.ENABLED

            second = lines["st-1002"]
            assert second.variant_id == cola.variants[1].id
            assert second.price_num == "1500000"
            assert second.status == ProductStatus.DISABLED

    def test_unknown_product(
        self, seeded_store, seeded_products, write_csv, product_row, make_context, session_factory
    ):
        """Test an unknown product name fails the run with nothing written."""
        path = write_csv(
            "inventory.csv",
            PRODUCT_HEADER,
            [product_row(), product_row(product_name_ENG="Ghost")],
        )

        with pytest.raises(ProductNotFoundError) as exc:
            import_inventories(make_context(path))

        assert exc.value.row_number == 3
        with session_scope(session_factory) as session:
            assert session.query(InventoryProduct).count() == 0

    def test_unknown_variant(self, seeded_store, seeded_products, write_csv, product_row, make_context):
        """Test an unknown shoptree variant id fails the run."""
        path = write_csv(
            "inventory.csv", PRODUCT_HEADER, [product_row(product_variant_id="st-404")]
        )

        with pytest.raises(VariantNotFoundError) as exc:
            import_inventories(make_context(path))

        assert exc.value.shoptree_variant_id == "st-404"

    def test_header_only_file(self, seeded_store, seeded_products, write_csv, make_context):
        """Test an inventory without lines is rejected."""
        path = write_csv("inventory.csv", PRODUCT_HEADER, [])

        with pytest.raises(MissingFieldError) as exc:
            import_inventories(make_context(path))

        assert exc.value.field is RequiredField.INVENTORY_PRODUCTS
