"""Nusaf product taxonomy.

Single source of truth for category and subcategory codes and names.
Category codes are single uppercase letters (C, L, B, ...). Subcategory
codes are ``{category_code}-{3-digit number}`` (C-001, L-001, ...).

Sort order and the numeric suffix of a subcategory code usually agree but
are not guaranteed to; callers must not assume suffixes are contiguous.

The table is used by:
    - Database seeding and reseeding
    - Legacy code migration (see ``nusaf_catalog.catalog.migration``)
    - Supplier price-list imports (code validation)
    - Public category browsing
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class SubCategoryDefinition:
    """A subcategory owned by exactly one category.

    Attributes:
        code: Subcategory code (e.g., "C-013").
        name: Display name.
        sort_order: Ordering within the parent category.
    """

    code: str
    name: str
    sort_order: int

    @property
    def category_code(self) -> str:
        """Get the parent category code encoded in the subcategory code."""
        return self.code.split("-", 1)[0]

    @property
    def slug(self) -> str:
        """Get URL-friendly name."""
        return to_slug(self.name)


@dataclass(frozen=True)
class CategoryDefinition:
    """A top-level product category.

    Attributes:
        code: Single-letter category code.
        name: Display name.
        sort_order: Display ordering.
        sub_categories: Subcategories in ``sort_order``.
    """

    code: str
    name: str
    sort_order: int
    sub_categories: tuple[SubCategoryDefinition, ...] = ()

    @property
    def slug(self) -> str:
        """Get URL-friendly name."""
        return to_slug(self.name)


def _category(
    code: str,
    name: str,
    sort_order: int,
    sub_categories: list[tuple[str, str, int]],
) -> CategoryDefinition:
    return CategoryDefinition(
        code=code,
        name=name,
        sort_order=sort_order,
        sub_categories=tuple(
            SubCategoryDefinition(code=c, name=n, sort_order=s)
            for c, n, s in sub_categories
        ),
    )


CATEGORY_DEFINITIONS: tuple[CategoryDefinition, ...] = (
    _category("C", "Conveyor Components", 1, [
        ("C-001", "Bases", 1),
        ("C-002", "Bearing heads", 2),
        ("C-003", "Connecting joints", 3),
        ("C-004", "Guide rail brackets", 4),
        ("C-005", "Tightening eyebolts", 5),
        ("C-006", "Heads for brackets", 6),
        ("C-007", "Knobs and handles", 7),
        ("C-008", "Clamps", 8),
        ("C-009", "Return rollers", 9),
        ("C-010", "Nose over", 10),
        ("C-011", "Split shaft collars", 11),
        ("C-012", "Shoes", 12),
        ("C-013", "Side guide accessories", 13),
        ("C-014", "Chain tensioners", 14),
        ("C-015", "Bearing supports", 15),
        ("C-016", "Bushings", 16),
        ("C-017", "Hinges", 17),
        ("C-018", "Process control", 18),
        ("C-019", "Modular transfer plates", 19),
        ("C-020", "Product guides and accessories", 20),
        ("C-021", "Guide rail clamps", 21),
        ("C-022", "Product / chain guides and accessories", 22),
        ("C-023", "Chain guides and accessories", 23),
    ]),
    _category("L", "Levelling Feet", 2, [
        ("L-001", "Fixed feet", 1),
        ("L-002", "Articulated feet", 2),
        ("L-003", "Adjustable feet", 3),
        ("L-004", "Articulated feet, sanitizable", 4),
        ("L-005", "Adjustable feet, sanitizable", 5),
        ("L-006", "Support accessories", 6),
        ("L-007", "Bushings", 7),
    ]),
    _category("B", "Bearings", 3, [
        ("B-001", "UCF", 1),
        ("B-002", "UCFL", 2),
        ("B-003", "UCFB", 3),
        ("B-004", "UCP", 4),
        ("B-005", "UCPA", 5),
        ("B-006", "UCT", 6),
        ("B-007", "UCFC", 7),
        ("B-008", "F series", 8),
    ]),
    _category("T", "Table Top Chain", 4, [
        ("T-001", "Straight running steel chains", 1),
        ("T-002", "Sideflexing steel chains", 2),
        ("T-003", "Rubberized surface steel chains", 3),
        ("T-004", "Straight running plastic chains", 4),
        ("T-005", "Sideflexing plastic chains", 5),
        ("T-006", "Rubberized surface plastic chains", 6),
        ("T-007", "Two-piece chains", 7),
        ("T-008", "Gripper chains", 8),
        ("T-009", "LBP chains", 9),
    ]),
    _category("M", "Modular Chain", 5, [
        ("M-001", "8mm Nanopitch belt", 1),
        ("M-002", "½\" pitch belts and chains", 2),
        ("M-003", "1\" pitch light duty", 3),
        ("M-004", "¾\" pitch medium duty", 4),
        ("M-005", "1\" pitch heavy duty", 5),
        ("M-006", "1\" pitch sideflexing", 6),
        ("M-007", "1¼\" pitch heavy duty sideflexing", 7),
        ("M-008", "Heavy duty fixed radius", 8),
        ("M-009", "2\" pitch heavy duty raised rib", 9),
        ("M-010", "1½\" pitch heavy duty UCC", 10),
    ]),
    _category("P", "Power Transmission", 6, [
        ("P-001", "Sprockets", 1),
        ("P-002", "Platewheels/Wheels/Hubs/Adaptors", 2),
        ("P-003", "Chains and Chain riders", 3),
        ("P-004", "Straight spur gears and racks", 4),
        ("P-005", "Bevel gears", 5),
        ("P-006", "Timing pulleys", 6),
        ("P-007", "V-belt pulleys", 7),
        ("P-008", "Timing bars/Flanges/Clamping plates", 8),
        ("P-009", "Taper bushes", 9),
        ("P-010", "Clamping elements", 10),
        ("P-011", "Flexible couplings/Torque limiters", 11),
        ("P-012", "Collars and washers", 12),
        ("P-013", "Pillow blocks", 13),
    ]),
    _category("S", "Sprockets & Idlers", 7, [
        ("S-001", "Moulded sprockets and idlers", 1),
        ("S-002", "Machined sprockets and idlers", 2),
    ]),
    _category("D", "Bends", 8, [
        ("D-001", "Magnetic bends", 1),
        ("D-002", "TAB bends", 2),
    ]),
    _category("W", "Wear Strips", 9, [
        ("W-001", "Machined", 1),
        ("W-002", "Extruded", 2),
    ]),
    _category("V", "V-belts", 10, [
        ("V-001", "Wrapped classical section", 1),
        ("V-002", "Wrapped narrow section", 2),
        ("V-003", "Classical raw edge cogged", 3),
        ("V-004", "Narrow raw edge cogged", 4),
    ]),
    _category("G", "Gearbox & Motors", 11, [
        ("G-001", "CHM Worm geared motors", 1),
        ("G-002", "CHML Worm gearboxes with torque limiter", 2),
        ("G-003", "CH Worm geared motors", 3),
        ("G-004", "CHC Helical gear units", 4),
        ("G-005", "Bevel helical gear units", 5),
        ("G-006", "Electric motors", 6),
        ("G-007", "Electric motors \"Hygienic\"", 7),
    ]),
)

# Old multi-letter category codes -> correct single-letter codes
CATEGORY_CODE_MIGRATION: Mapping[str, str] = MappingProxyType({
    "CONV": "C",
    "LVL": "L",
    "BRG": "B",
    "TTC": "T",
    "MOD": "M",
    "PWR": "P",
    "SPR": "S",
    "BND": "D",
    "WRS": "W",
    "VBT": "V",
    "GBX": "G",
})

# Old symbolic subcategory codes -> correct X-NNN codes, for records whose
# stored name no longer matches the current name after normalization.
SUBCATEGORY_CODE_MIGRATION: Mapping[str, str] = MappingProxyType({
    # Conveyor Components
    "SIDE_GUIDE_ACCESSORIES": "C-013",
    # Table Top Chain
    "LBP": "T-009",
    # Modular Chain
    "1IN_LIGHT": "M-003",
    "3QTR_MEDIUM": "M-004",
    "1IN_HEAVY": "M-005",
    "1IN_SIDEFLEX": "M-006",
    "1QTR_SIDEFLEX": "M-007",
    "FIXED_RADIUS": "M-008",
    "2IN_RIB": "M-009",
    "1HALF_UCC": "M-010",
    # Power Transmission
    "CHAINS_RIDERS": "P-002",
    "TIMING_ACCESSORIES": "P-008",
    # V-belts
    "WRAPPED_NARROW": "V-002",
    "COGGED_CLASSICAL": "V-003",
    # Gearbox & Motors
    "CH_WORM": "G-003",
    "HYGIENIC_MOTORS": "G-007",
})

_CATEGORIES_BY_CODE: Mapping[str, CategoryDefinition] = MappingProxyType(
    {c.code: c for c in CATEGORY_DEFINITIONS}
)

SUB_CATEGORY_CODE_PATTERN = re.compile(r"^([A-Z])-(\d{3})$")


# ============================================================================
# Name Handling
# ============================================================================


def normalize_sub_category_name(name: str) -> str:
    """Normalize a subcategory name for matching.

    Handles variations like "Fixed feet" vs "FIXED_FEET" or "fixed-feet".
    The result is a matching key, not a display value.

    Args:
        name: Name to normalize.

    Returns:
        Lowercased name with underscores and hyphens turned into single
        spaces and surrounding whitespace removed.
    """
    normalized = re.sub(r"[_-]", " ", name.lower())
    return re.sub(r"\s+", " ", normalized).strip()


def to_slug(name: str) -> str:
    """Convert a name to a URL-friendly slug.

    "Conveyor Components" -> "conveyor-components"
    """
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


# ============================================================================
# Lookups
# ============================================================================


def get_category(category_code: str) -> CategoryDefinition | None:
    """Get a category by exact code.

    Args:
        category_code: Single-letter category code.

    Returns:
        Category if found, None otherwise.
    """
    return _CATEGORIES_BY_CODE.get(category_code)


def find_sub_category_code(category_code: str, name: str) -> str | None:
    """Find a subcategory code by matching its name within a category.

    Matching is exact after normalization. Unknown categories yield None.

    Args:
        category_code: Category to search in.
        name: Subcategory name in any case/underscore/hyphen variation.

    Returns:
        Subcategory code if found, None otherwise.
    """
    category = get_category(category_code)
    if category is None:
        return None

    normalized_name = normalize_sub_category_name(name)
    for sub in category.sub_categories:
        if normalize_sub_category_name(sub.name) == normalized_name:
            return sub.code
    return None


def get_sub_categories_for_category(category_code: str) -> list[SubCategoryDefinition]:
    """Get all subcategories for a category, in sort order.

    Args:
        category_code: Category code.

    Returns:
        List of subcategories (empty for unknown category codes).
    """
    category = get_category(category_code)
    if category is None:
        return []
    return list(category.sub_categories)


def get_parent_category(sub_category_code: str) -> CategoryDefinition | None:
    """Get the category owning a subcategory code.

    Returns:
        Owning category, or None if the code does not exist.
    """
    if not is_valid_sub_category_code(sub_category_code):
        return None
    return get_category(sub_category_code[0])


def find_category(slug_or_code: str) -> CategoryDefinition | None:
    """Find a category by code (case-insensitive) or by slug.

    Args:
        slug_or_code: Category code like "c" or slug like "bearings".

    Returns:
        Category if found, None otherwise.
    """
    category = get_category(slug_or_code.upper())
    if category is not None:
        return category

    slug = slug_or_code.lower()
    for candidate in CATEGORY_DEFINITIONS:
        if candidate.slug == slug:
            return candidate
    return None


def find_sub_category(
    category: CategoryDefinition,
    slug_or_code: str,
) -> SubCategoryDefinition | None:
    """Find a subcategory of ``category`` by slug or code (case-insensitive).

    Args:
        category: Parent category.
        slug_or_code: Subcategory slug like "bases" or code like "c-001".

    Returns:
        Subcategory if found, None otherwise.
    """
    key = slug_or_code.lower()
    for sub in category.sub_categories:
        if sub.slug == key or sub.code.lower() == key:
            return sub
    return None


# ============================================================================
# Validation
# ============================================================================


def is_valid_category_code(code: str) -> bool:
    """Check whether ``code`` is one of the category codes."""
    return code in _CATEGORIES_BY_CODE


def is_valid_sub_category_code(code: str) -> bool:
    """Check whether ``code`` is an existing subcategory code.

    The code must match ``X-NNN`` exactly (uppercase letter, hyphen, three
    digits) and be listed under its category.

    Args:
        code: Code to validate.

    Returns:
        True if the subcategory exists, False otherwise.
    """
    match = SUB_CATEGORY_CODE_PATTERN.fullmatch(code)
    if not match:
        return False

    category = get_category(match.group(1))
    if category is None:
        return False
    return any(sub.code == code for sub in category.sub_categories)
