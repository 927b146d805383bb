"""Tests for the Nusaf product taxonomy."""

import dataclasses

import pytest

from nusaf_catalog.catalog.taxonomy import (
    CATEGORY_CODE_MIGRATION,
    CATEGORY_DEFINITIONS,
    SUBCATEGORY_CODE_MIGRATION,
    SubCategoryDefinition,
    find_category,
    find_sub_category,
    find_sub_category_code,
    get_category,
    get_parent_category,
    get_sub_categories_for_category,
    is_valid_category_code,
    is_valid_sub_category_code,
    normalize_sub_category_name,
    to_slug,
)


class TestCategoryDefinitions:
    """Tests for the static category table."""

    def test_eleven_categories(self) -> None:
        """Table holds the eleven single-letter categories in order."""
        codes = [c.code for c in CATEGORY_DEFINITIONS]
        assert codes == ["C", "L", "B", "T", "M", "P", "S", "D", "W", "V", "G"]

    def test_sort_orders_follow_table_order(self) -> None:
        """Categories are numbered 1..11."""
        assert [c.sort_order for c in CATEGORY_DEFINITIONS] == list(range(1, 12))

    def test_sub_category_prefix_matches_parent(self) -> None:
        """Every subcategory code starts with its category code."""
        for category in CATEGORY_DEFINITIONS:
            for sub in category.sub_categories:
                assert sub.code.startswith(f"{category.code}-")
                assert sub.category_code == category.code

    def test_sub_category_codes_well_formed_and_unique(self) -> None:
        """Subcategory codes are X-NNN and unique within a category."""
        for category in CATEGORY_DEFINITIONS:
            codes = [s.code for s in category.sub_categories]
            assert len(codes) == len(set(codes))
            assert all(is_valid_sub_category_code(code) for code in codes)

    def test_sub_categories_strictly_increasing_sort_order(self) -> None:
        """Subcategories are listed in strictly increasing sort order."""
        for category in CATEGORY_DEFINITIONS:
            orders = [s.sort_order for s in category.sub_categories]
            assert orders == sorted(set(orders))

    def test_definitions_are_immutable(self) -> None:
        """Definitions cannot be modified."""
        category = CATEGORY_DEFINITIONS[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            category.name = "Changed"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            category.sub_categories[0].code = "C-999"  # type: ignore[misc]

    def test_migration_tables_are_read_only(self) -> None:
        """Legacy code tables cannot be modified."""
        with pytest.raises(TypeError):
            CATEGORY_CODE_MIGRATION["NEW"] = "C"  # type: ignore[index]
        with pytest.raises(TypeError):
            SUBCATEGORY_CODE_MIGRATION["NEW"] = "C-001"  # type: ignore[index]

    def test_migration_tables_point_at_real_codes(self) -> None:
        """Every legacy code maps to an existing code."""
        assert all(is_valid_category_code(c) for c in CATEGORY_CODE_MIGRATION.values())
        assert all(is_valid_sub_category_code(c) for c in SUBCATEGORY_CODE_MIGRATION.values())
        assert CATEGORY_CODE_MIGRATION["CONV"] == "C"
        assert SUBCATEGORY_CODE_MIGRATION["HYGIENIC_MOTORS"] == "G-007"


class TestNormalizeSubCategoryName:
    """Tests for normalize_sub_category_name."""

    def test_variants_normalize_equal(self) -> None:
        """Case, underscore and hyphen variants share one key."""
        expected = normalize_sub_category_name("Fixed feet")
        assert normalize_sub_category_name("FIXED_FEET") == expected
        assert normalize_sub_category_name("fixed-feet") == expected
        assert expected == "fixed feet"

    def test_collapses_and_trims_whitespace(self) -> None:
        """Runs of whitespace collapse and ends are trimmed."""
        assert normalize_sub_category_name("  Side _ guide\t\taccessories \n") == (
            "side guide accessories"
        )

    @pytest.mark.parametrize(
        "name",
        ["", "   ", "Fixed feet", "__A--b  C__", "½\" pitch belts", "Electric motors \"Hygienic\""],
    )
    def test_idempotent(self, name: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize_sub_category_name(name)
        assert normalize_sub_category_name(once) == once

    def test_empty_string(self) -> None:
        """Empty input yields empty key."""
        assert normalize_sub_category_name("") == ""


class TestFindSubCategoryCode:
    """Tests for find_sub_category_code."""

    @pytest.mark.parametrize(
        "name",
        ["Side guide accessories", "SIDE_GUIDE_ACCESSORIES", "side-guide-accessories"],
    )
    def test_finds_by_normalized_name(self, name: str) -> None:
        """Name variations resolve to the same code."""
        assert find_sub_category_code("C", name) == "C-013"

    def test_unknown_category_returns_none(self) -> None:
        """Unknown category code yields None."""
        assert find_sub_category_code("ZZ", "Bases") is None

    def test_unknown_name_returns_none(self) -> None:
        """No match yields None."""
        assert find_sub_category_code("C", "Flux capacitors") is None

    def test_name_matched_within_category_only(self) -> None:
        """Same name in two categories resolves per category."""
        assert find_sub_category_code("C", "Bushings") == "C-016"
        assert find_sub_category_code("L", "Bushings") == "L-007"

    def test_category_code_is_exact(self) -> None:
        """Lowercase category codes are not matched."""
        assert find_sub_category_code("c", "Bases") is None


class TestGetSubCategoriesForCategory:
    """Tests for get_sub_categories_for_category."""

    def test_returns_ordered_list(self) -> None:
        """Subcategories are returned in sort order."""
        subs = get_sub_categories_for_category("S")
        assert subs == [
            SubCategoryDefinition("S-001", "Moulded sprockets and idlers", 1),
            SubCategoryDefinition("S-002", "Machined sprockets and idlers", 2),
        ]

    def test_unknown_category_returns_empty(self) -> None:
        """Unknown category yields an empty list."""
        assert get_sub_categories_for_category("ZZ") == []

    def test_returned_list_is_a_copy(self) -> None:
        """Mutating the result does not touch the table."""
        subs = get_sub_categories_for_category("W")
        subs.clear()
        assert len(get_sub_categories_for_category("W")) == 2


class TestCodeValidation:
    """Tests for is_valid_category_code and is_valid_sub_category_code."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("C", True), ("G", True), ("CONV", False), ("", False), ("c", False), ("X", False)],
    )
    def test_category_codes(self, code: str, expected: bool) -> None:
        assert is_valid_category_code(code) is expected

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("C-013", True),
            ("G-007", True),
            ("C-999", False),
            ("C013", False),
            ("c-013", False),
            ("X-001", False),
            ("C-13", False),
            ("C-0130", False),
            ("C-013\n", False),
            (" C-013", False),
            ("", False),
        ],
    )
    def test_sub_category_codes(self, code: str, expected: bool) -> None:
        assert is_valid_sub_category_code(code) is expected


class TestLookups:
    """Tests for slug and code lookups."""

    def test_to_slug(self) -> None:
        """Names become lowercase hyphenated slugs."""
        assert to_slug("Conveyor Components") == "conveyor-components"
        assert to_slug("Sprockets & Idlers") == "sprockets-idlers"
        assert to_slug("½\" pitch belts and chains") == "pitch-belts-and-chains"
        assert to_slug("Platewheels/Wheels/Hubs/Adaptors") == "platewheels-wheels-hubs-adaptors"

    def test_get_category(self) -> None:
        category = get_category("B")
        assert category is not None
        assert category.name == "Bearings"
        assert get_category("BRG") is None

    def test_find_category_by_code_case_insensitive(self) -> None:
        category = find_category("v")
        assert category is not None
        assert category.code == "V"

    def test_find_category_by_slug(self) -> None:
        category = find_category("gearbox-motors")
        assert category is not None
        assert category.code == "G"

    def test_find_category_not_found(self) -> None:
        assert find_category("nonexistent") is None

    def test_find_sub_category_by_slug_or_code(self) -> None:
        category = find_category("C")
        assert category is not None
        by_slug = find_sub_category(category, "side-guide-accessories")
        by_code = find_sub_category(category, "c-013")
        assert by_slug is not None
        assert by_slug == by_code
        assert find_sub_category(category, "L-001") is None

    def test_get_parent_category(self) -> None:
        parent = get_parent_category("T-009")
        assert parent is not None
        assert parent.code == "T"
        assert get_parent_category("T-999") is None
