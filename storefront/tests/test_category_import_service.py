"""
Tests for the Category Import Service.

Tests cover grouping rows by abbreviation, abbreviation conflicts,
required-field ordering and the persisted tree.
"""

import pytest

from conftest import CATEGORY_HEADER
from storefront.models import Category, CategoryLevel
from storefront.services.category_import_service import (
    build_categories,
    derive_image_urls,
    import_categories,
)
from storefront.services.database import session_scope
from storefront.services.exceptions import (
    AbbreviationConflictError,
    MalformedTableError,
    NothingToImportError,
    RequiredField,
    RowError,
)


def _numbered(rows):
    return list(enumerate(rows, start=2))


def _count_categories(session_factory):
    with session_scope(session_factory) as session:
        return session.query(Category).count()


class TestBuildCategories:
    """Test build_categories() folding."""

    def test_groups_rows_by_abbreviation(self):
        """Test rows sharing an abbreviation share one Level 1 node, in row order."""
        rows = _numbered(
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Snacks", "Camilan", "SNK", "Chips", "Keripik"],
                ["Drinks", "Minuman", "DRK", "Water", "Air-ID"],
            ]
        )

        parents = build_categories(CATEGORY_HEADER, rows)

        assert [p.abbreviation for p in parents] == ["DRK", "SNK"]
        drinks = parents[0]
        assert [c.name_en for c in drinks.child_categories] == ["Soda", "Water"]
        assert [c.sort_order for c in drinks.child_categories] == [0, 1]
        assert [p.sort_order for p in parents] == [0, 1]

    def test_levels_and_image_urls(self):
        """Test levels are set and image URLs derive from each node's id."""
        parents = build_categories(
            CATEGORY_HEADER, _numbered([["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"]])
        )
        parent = parents[0]
        child = parent.child_categories[0]

        assert parent.level == CategoryLevel.LEVEL_1
        assert child.level == CategoryLevel.LEVEL_2
        assert parent.images_urls == [f"{parent.id}-0.webp"]
        assert child.images_urls == [f"{child.id}-0.webp"]
        assert child.abbreviation is None
        assert parent.id != child.id

    def test_header_order_irrelevant(self):
        """Test columns are found by header name."""
        header = list(reversed(CATEGORY_HEADER))
        rows = _numbered([["Soda-ID", "Soda", "DRK", "Minuman", "Drinks"]])

        parent = build_categories(header, rows)[0]

        assert parent.name_en == "Drinks"
        assert parent.name_id == "Minuman"
        assert parent.child_categories[0].name_id == "Soda-ID"

    def test_abbreviation_conflict(self):
        """Test one abbreviation naming two categories fails the run."""
        rows = _numbered(
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Dairy", "Susu", "DRK", "Milk", "Susu-ID"],
            ]
        )

        with pytest.raises(AbbreviationConflictError) as exc:
            build_categories(CATEGORY_HEADER, rows)

        assert exc.value.row_number == 3
        assert exc.value.abbreviation == "DRK"

    def test_missing_both_names_reports_english_first(self):
        """Test a row missing both Level 1 names reports the EN name."""
        rows = _numbered([["", "", "DRK", "Soda", "Soda-ID"]])

        with pytest.raises(RowError) as exc:
            build_categories(CATEGORY_HEADER, rows)

        assert exc.value.row_number == 2
        assert exc.value.cause.field is RequiredField.CATEGORY_NAME_EN
        assert "category name EN is required" in str(exc.value)

    def test_child_checked_before_parent(self):
        """Test a row invalid at both levels reports the Level 2 error."""
        rows = _numbered([["", "Minuman", "DRK", "", "Soda-ID"]])

        with pytest.raises(RowError) as exc:
            build_categories(CATEGORY_HEADER, rows)

        assert exc.value.cause.field is RequiredField.SUBCATEGORY_NAME_EN

    @pytest.mark.parametrize(
        "row,expected",
        [
            (["Drinks", "", "DRK", "Soda", "Soda-ID"], RequiredField.CATEGORY_NAME_ID),
            (["Drinks", "Minuman", "", "Soda", "Soda-ID"], RequiredField.ABBREVIATION),
            (["Drinks", "Minuman", "DRK", "Soda", ""], RequiredField.SUBCATEGORY_NAME_ID),
        ],
    )
    def test_missing_single_field(self, row, expected):
        """Test each missing field maps to its own error."""
        with pytest.raises(RowError) as exc:
            build_categories(CATEGORY_HEADER, _numbered([row]))
        assert exc.value.cause.field is expected

    def test_invalid_child_of_existing_parent(self):
        """Test a child row under a known abbreviation is still validated."""
        rows = _numbered(
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Drinks", "Minuman", "DRK", "", "Air-ID"],
            ]
        )

        with pytest.raises(RowError) as exc:
            build_categories(CATEGORY_HEADER, rows)

        assert exc.value.row_number == 3


class TestImportCategories:
    """Test import_categories() against the store."""

    def test_end_to_end_tree(self, write_csv, make_context, session_factory):
        """Test two DRK rows persist as one Level 1 node with two children."""
        path = write_csv(
            "categories.csv",
            CATEGORY_HEADER,
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Drinks", "Minuman", "DRK", "Water", "Air-ID"],
            ],
        )

        result = import_categories(make_context(path))

        assert result.documents == 1
        assert result.children == 2
        with session_scope(session_factory) as session:
            parents = session.query(Category).filter(Category.parent_id.is_(None)).all()
            assert len(parents) == 1
            drk = parents[0]
            assert drk.abbreviation == "DRK"
            assert (drk.name_en, drk.name_id) == ("Drinks", "Minuman")
            assert drk.images_urls == [f"{drk.id}-0.webp"]
            children = [(c.name_en, c.name_id) for c in drk.child_categories]
            assert children == [("Soda", "Soda-ID"), ("Water", "Air-ID")]
            for child in drk.child_categories:
                assert child.images_urls == derive_image_urls(child.id)
                assert child.level == CategoryLevel.LEVEL_2
                assert child.parent_id == drk.id

    def test_conflict_writes_nothing(self, write_csv, make_context, session_factory):
        """Test an abbreviation conflict leaves the store empty."""
        path = write_csv(
            "categories.csv",
            CATEGORY_HEADER,
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Snacks", "Camilan", "SNK", "Chips", "Keripik"],
                ["Dairy", "Susu", "DRK", "Milk", "Susu-ID"],
            ],
        )

        with pytest.raises(AbbreviationConflictError):
            import_categories(make_context(path))

        assert _count_categories(session_factory) == 0

    def test_invalid_row_writes_nothing(self, write_csv, make_context, session_factory):
        """Test a validation failure on a late row writes nothing."""
        path = write_csv(
            "categories.csv",
            CATEGORY_HEADER,
            [
                ["Drinks", "Minuman", "DRK", "Soda", "Soda-ID"],
                ["Snacks", "", "SNK", "Chips", "Keripik"],
            ],
        )

        with pytest.raises(RowError):
            import_categories(make_context(path))

        assert _count_categories(session_factory) == 0

    def test_header_only_file(self, write_csv, make_context):
        """Test a file with no data rows has nothing to import."""
        path = write_csv("categories.csv", CATEGORY_HEADER, [])

        with pytest.raises(NothingToImportError):
            import_categories(make_context(path))

    def test_malformed_file(self, tmp_path, make_context):
        """Test a ragged file fails before any write."""
        path = tmp_path / "categories.csv"
        path.write_text(",".join(CATEGORY_HEADER) + "\nDrinks,Minuman\n", encoding="utf-8")

        with pytest.raises(MalformedTableError):
            import_categories(make_context(str(path)))
