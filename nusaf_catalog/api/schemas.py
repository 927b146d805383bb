"""API schemas for the Nusaf catalog API.

Pydantic models for request/response validation and serialization.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from nusaf_catalog.catalog.migration import MigrationRule
from nusaf_catalog.imports.sku import SkuHandling


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryRefSchema(BaseModel):
    """Short reference to a parent category."""

    code: str
    name: str
    slug: str


class SubCategorySchema(BaseModel):
    """Subcategory representation."""

    code: str = Field(..., description="Subcategory code (e.g., C-013)")
    name: str
    slug: str
    sort_order: int


class SubCategoryDetailResponse(SubCategorySchema):
    """Subcategory with its parent category."""

    category: CategoryRefSchema


class CategorySchema(BaseModel):
    """Category with its subcategories."""

    code: str = Field(..., description="Single-letter category code")
    name: str
    slug: str
    sort_order: int
    sub_categories: list[SubCategorySchema] = Field(default_factory=list)


class CategoryListResponse(BaseModel):
    """List of all categories."""

    categories: list[CategorySchema]
    total: int


# ============================================================================
# Migration Schemas
# ============================================================================


class MigrationRecordSchema(BaseModel):
    """Stored category assignment to check."""

    category_code: str = Field(..., min_length=1, description="Stored category code")
    sub_category_code: str | None = Field(default=None, description="Stored subcategory code")
    sub_category_name: str | None = Field(default=None, description="Stored subcategory name")


class MigrationPlanRequest(BaseModel):
    """Request to plan a code migration."""

    records: list[MigrationRecordSchema] = Field(..., min_length=1, max_length=5000)


class MigrationResultSchema(BaseModel):
    """Migration outcome for one record."""

    record: MigrationRecordSchema
    category_code: str | None
    sub_category_code: str | None
    category_rule: MigrationRule
    sub_category_rule: MigrationRule | None
    resolved: bool
    changed: bool


class MigrationPlanResponse(BaseModel):
    """Migration plan for a batch."""

    results: list[MigrationResultSchema]
    total: int
    changed: int
    unchanged: int
    unresolved: int


# ============================================================================
# SKU Schemas
# ============================================================================


class SkuConvertRequest(BaseModel):
    """Request to convert a supplier SKU."""

    supplier_code: str = Field(..., min_length=1, description="Supplier code (e.g., TECOM)")
    supplier_sku: str = Field(..., description="SKU as it appears in the supplier's price list")


class SkuConvertResponse(BaseModel):
    """Converted SKU."""

    supplier_code: str
    supplier_sku: str
    internal_sku: str
    sku_handling: SkuHandling


# ============================================================================
# Import Schemas
# ============================================================================


class ImportRowSchema(BaseModel):
    """A parsed spreadsheet row."""

    row_number: int = Field(..., ge=1)
    code: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    subcategory: str | None = None
    um: str | None = None


class ImportValidateRequest(BaseModel):
    """Request to validate an import file."""

    supplier_code: str = Field(..., min_length=1)
    rows: list[ImportRowSchema] = Field(..., max_length=50000)
    existing_skus: list[str] = Field(
        default_factory=list,
        description="Internal SKUs already in the catalog for this supplier",
    )


class ValidatedProductSchema(BaseModel):
    supplier_sku: str
    internal_sku: str
    description: str
    price: Decimal
    unit_of_measure: str
    category_code: str
    subcategory_code: str | None = None


class RowValidationSchema(BaseModel):
    row_number: int
    is_valid: bool
    errors: list[ErrorDetail]
    warnings: list[ErrorDetail]
    data: ValidatedProductSchema | None = None


class ImportSummarySchema(BaseModel):
    new_products: int
    existing_products: int
    category_breakdown: dict[str, int]


class ImportValidateResponse(BaseModel):
    """Validation result for an import file."""

    is_valid: bool
    total_rows: int
    valid_rows: int
    error_rows: int
    warning_rows: int
    errors: list[dict[str, str]]
    rows: list[RowValidationSchema]
    summary: ImportSummarySchema
