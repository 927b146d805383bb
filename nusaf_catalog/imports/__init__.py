"""Supplier price-list imports.

SKU conversion per supplier and row validation against the taxonomy.
"""

from nusaf_catalog.imports.sku import (
    SUPPLIER_SKU_HANDLING,
    SkuHandling,
    convert_supplier_sku,
    convert_tecom_sku,
    get_sku_handling,
)
from nusaf_catalog.imports.validation import (
    ImportRow,
    ImportSummary,
    ImportValidationResult,
    RowIssue,
    RowValidationResult,
    ValidatedProduct,
    normalize_unit_of_measure,
    validate_import,
    validate_row,
)

__all__ = [
    # SKU
    "SUPPLIER_SKU_HANDLING",
    "SkuHandling",
    "convert_supplier_sku",
    "convert_tecom_sku",
    "get_sku_handling",
    # Validation
    "ImportRow",
    "ImportSummary",
    "ImportValidationResult",
    "RowIssue",
    "RowValidationResult",
    "ValidatedProduct",
    "normalize_unit_of_measure",
    "validate_import",
    "validate_row",
]
