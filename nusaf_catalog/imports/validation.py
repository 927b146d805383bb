"""Supplier price-list import validation.

Validates parsed spreadsheet rows before products are created or updated.
Category and subcategory codes are checked against the static taxonomy,
units of measure are normalized and supplier SKUs are converted to
internal SKUs.
"""

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

import structlog

from nusaf_catalog.catalog.taxonomy import (
    get_parent_category,
    is_valid_category_code,
)
from nusaf_catalog.domain.exceptions import SkuConversionError, UnknownSupplierError
from nusaf_catalog.imports.sku import convert_supplier_sku, get_sku_handling

logger = structlog.get_logger()

DEFAULT_UNIT_OF_MEASURE = "EA"

VALID_UNITS_OF_MEASURE = frozenset({"EA", "MTR", "KG", "SET", "PR", "ROL", "BX"})

_UNIT_OF_MEASURE_ALIASES = {
    # Each
    "NR": "EA",
    "PC": "EA",
    "PCS": "EA",
    # Metre
    "MT": "MTR",
    "M": "MTR",
    # Kilogram
    "KGM": "KG",
    # Pair
    "PAIR": "PR",
    # Roll
    "ROLL": "ROL",
    # Box
    "BOX": "BX",
}


def normalize_unit_of_measure(um: str) -> str:
    """Normalize a unit of measure code to its canonical form.

    Unknown codes are returned uppercased and trimmed, not rejected.
    """
    normalized = um.upper().strip()
    return _UNIT_OF_MEASURE_ALIASES.get(normalized, normalized)


# ============================================================================
# Results
# ============================================================================


@dataclass(frozen=True)
class ImportRow:
    """A parsed spreadsheet row mapped to import fields."""

    row_number: int
    code: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    subcategory: str | None = None
    um: str | None = None


@dataclass(frozen=True)
class RowIssue:
    """An error or warning attached to a single field of a row."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidatedProduct:
    """Product data extracted from a valid row."""

    supplier_sku: str
    internal_sku: str
    description: str
    price: Decimal
    unit_of_measure: str
    category_code: str
    subcategory_code: str | None = None


@dataclass
class RowValidationResult:
    """Validation outcome for one row."""

    row_number: int
    errors: list[RowIssue] = field(default_factory=list)
    warnings: list[RowIssue] = field(default_factory=list)
    data: ValidatedProduct | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class ImportSummary:
    new_products: int = 0
    existing_products: int = 0
    category_breakdown: dict[str, int] = field(default_factory=dict)


@dataclass
class ImportValidationResult:
    """Validation outcome for a whole import file."""

    total_rows: int
    rows: list[RowValidationResult] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)
    summary: ImportSummary = field(default_factory=ImportSummary)

    @property
    def valid_rows(self) -> int:
        return sum(1 for r in self.rows if r.is_valid)

    @property
    def error_rows(self) -> int:
        # A file-level error fails every row
        if self.errors:
            return self.total_rows
        return sum(1 for r in self.rows if not r.is_valid)

    @property
    def warning_rows(self) -> int:
        return sum(1 for r in self.rows if r.warnings)

    @property
    def is_valid(self) -> bool:
        return self.error_rows == 0 and not self.errors


# ============================================================================
# Validation
# ============================================================================


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_row(
    row: ImportRow,
    supplier_code: str,
    seen_skus: set[str],
) -> RowValidationResult:
    """Validate a single import row.

    Args:
        row: Mapped row data.
        supplier_code: Supplier the file belongs to.
        seen_skus: Supplier SKUs seen earlier in the same file. Updated in place.

    Returns:
        Row result; ``data`` is only set when the row has no errors.
    """
    result = RowValidationResult(row_number=row.row_number)
    errors = result.errors
    warnings = result.warnings

    if _is_blank(row.code):
        errors.append(RowIssue("CODE", "Product code is required"))

    if row.price is None:
        errors.append(RowIssue("PRICE", "Price is required"))
    elif row.price <= 0:
        warnings.append(RowIssue("PRICE", "Price is zero or negative"))

    if _is_blank(row.description):
        errors.append(RowIssue("DESCRIPTION", "Description is required"))

    if _is_blank(row.category):
        errors.append(RowIssue("CATEGORY", "Category code is required"))
    elif not is_valid_category_code(row.category):
        errors.append(RowIssue("CATEGORY", f"Unknown category code: {row.category}"))

    if not _is_blank(row.subcategory):
        parent = get_parent_category(row.subcategory)
        if parent is None:
            errors.append(
                RowIssue("SUBCATEGORY", f"Unknown subcategory code: {row.subcategory}")
            )
        elif is_valid_category_code(row.category or "") and parent.code != row.category:
            errors.append(
                RowIssue(
                    "SUBCATEGORY",
                    f"Subcategory {row.subcategory} does not belong to category {row.category}",
                )
            )

    um = normalize_unit_of_measure(row.um or DEFAULT_UNIT_OF_MEASURE)
    if um not in VALID_UNITS_OF_MEASURE:
        warnings.append(
            RowIssue("UM", f"Unknown unit of measure: {um}, defaulting to {DEFAULT_UNIT_OF_MEASURE}")
        )
        um = DEFAULT_UNIT_OF_MEASURE

    internal_sku = row.code or ""
    if not _is_blank(row.code):
        try:
            internal_sku = convert_supplier_sku(supplier_code, row.code)
        except SkuConversionError:
            errors.append(RowIssue("CODE", f"Invalid {supplier_code} SKU format: {row.code}"))

        if row.code in seen_skus:
            warnings.append(RowIssue("CODE", "Duplicate SKU in file"))
        else:
            seen_skus.add(row.code)

    if result.is_valid:
        result.data = ValidatedProduct(
            supplier_sku=row.code,  # type: ignore[arg-type]
            internal_sku=internal_sku,
            description=row.description,  # type: ignore[arg-type]
            price=row.price,  # type: ignore[arg-type]
            unit_of_measure=um,
            category_code=row.category,  # type: ignore[arg-type]
            subcategory_code=row.subcategory or None,
        )

    return result


def validate_import(
    rows: Iterable[ImportRow],
    supplier_code: str,
    existing_skus: Iterable[str] = (),
) -> ImportValidationResult:
    """Validate all rows of an import file.

    Args:
        rows: Mapped rows in file order.
        supplier_code: Supplier the file belongs to.
        existing_skus: Internal SKUs already in the catalog for this supplier.

    Returns:
        File-level result with per-row results and a summary.
    """
    rows = list(rows)

    try:
        get_sku_handling(supplier_code)
    except UnknownSupplierError as e:
        logger.warning("Import rejected", supplier_code=supplier_code, reason=e.message)
        return ImportValidationResult(
            total_rows=len(rows),
            errors=[{"code": "INVALID_SUPPLIER", "message": e.message}],
        )

    known_skus = frozenset(existing_skus)
    seen_skus: set[str] = set()
    results = [validate_row(row, supplier_code, seen_skus) for row in rows]

    summary = ImportSummary()
    breakdown: Counter[str] = Counter()
    for row_result in results:
        if row_result.data is None:
            continue
        if row_result.data.internal_sku in known_skus:
            summary.existing_products += 1
        else:
            summary.new_products += 1
        breakdown[row_result.data.category_code] += 1
    summary.category_breakdown = dict(breakdown)

    validation = ImportValidationResult(
        total_rows=len(rows),
        rows=results,
        summary=summary,
    )

    logger.info(
        "Import validated",
        supplier_code=supplier_code,
        total_rows=validation.total_rows,
        valid_rows=validation.valid_rows,
        error_rows=validation.error_rows,
        warning_rows=validation.warning_rows,
    )
    return validation
