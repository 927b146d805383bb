"""Import API endpoints.

Provides supplier SKU conversion and price-list validation. Both are
read-only: products are written by the import executor, not here.
"""

from fastapi import APIRouter, HTTPException, status

from nusaf_catalog.api.schemas import (
    ErrorDetail,
    ErrorResponse,
    ImportSummarySchema,
    ImportValidateRequest,
    ImportValidateResponse,
    RowValidationSchema,
    SkuConvertRequest,
    SkuConvertResponse,
    ValidatedProductSchema,
)
from nusaf_catalog.domain.exceptions import SkuConversionError, UnknownSupplierError
from nusaf_catalog.imports.sku import convert_supplier_sku, get_sku_handling
from nusaf_catalog.imports.validation import (
    ImportRow,
    ImportValidationResult,
    RowValidationResult,
    validate_import,
)

router = APIRouter(prefix="/api/v1", tags=["Imports"])


# ============================================================================
# Converters
# ============================================================================


def row_result_to_schema(result: RowValidationResult) -> RowValidationSchema:
    """Convert a row validation result to its response schema."""
    data = result.data
    return RowValidationSchema(
        row_number=result.row_number,
        is_valid=result.is_valid,
        errors=[ErrorDetail(field=e.field, message=e.message) for e in result.errors],
        warnings=[ErrorDetail(field=w.field, message=w.message) for w in result.warnings],
        data=(
            ValidatedProductSchema(
                supplier_sku=data.supplier_sku,
                internal_sku=data.internal_sku,
                description=data.description,
                price=data.price,
                unit_of_measure=data.unit_of_measure,
                category_code=data.category_code,
                subcategory_code=data.subcategory_code,
            )
            if data
            else None
        ),
    )


def validation_to_response(result: ImportValidationResult) -> ImportValidateResponse:
    """Convert an import validation result to its response schema."""
    return ImportValidateResponse(
        is_valid=result.is_valid,
        total_rows=result.total_rows,
        valid_rows=result.valid_rows,
        error_rows=result.error_rows,
        warning_rows=result.warning_rows,
        errors=result.errors,
        rows=[row_result_to_schema(r) for r in result.rows],
        summary=ImportSummarySchema(
            new_products=result.summary.new_products,
            existing_products=result.summary.existing_products,
            category_breakdown=result.summary.category_breakdown,
        ),
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/skus/convert",
    response_model=SkuConvertResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Convert supplier SKU",
    description="Convert a supplier SKU to an internal SKU using the supplier's SKU handling.",
)
async def convert_sku(request: SkuConvertRequest) -> SkuConvertResponse:
    """Convert a single supplier SKU.

    Args:
        request: Supplier code and SKU.

    Returns:
        Internal SKU and the strategy used.

    Raises:
        HTTPException: If the supplier is unknown or the SKU is malformed.
    """
    try:
        handling = get_sku_handling(request.supplier_code)
        internal_sku = convert_supplier_sku(request.supplier_code, request.supplier_sku)
    except UnknownSupplierError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error_code": e.error_code, "message": e.message},
        ) from e
    except SkuConversionError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_code": e.error_code,
                "message": e.message,
                "details": [{"field": "supplier_sku", "message": e.message}],
            },
        ) from e

    return SkuConvertResponse(
        supplier_code=request.supplier_code,
        supplier_sku=request.supplier_sku,
        internal_sku=internal_sku,
        sku_handling=handling,
    )


@router.post(
    "/imports/validate",
    response_model=ImportValidateResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Validate import",
    description=(
        "Validate parsed price-list rows against the taxonomy and convert "
        "supplier SKUs. Unknown suppliers are reported in the result body."
    ),
)
async def validate_import_rows(request: ImportValidateRequest) -> ImportValidateResponse:
    """Validate an import file's rows.

    Args:
        request: Supplier, rows and existing internal SKUs.

    Returns:
        Validation result with per-row detail and summary.
    """
    rows = [
        ImportRow(
            row_number=r.row_number,
            code=r.code,
            description=r.description,
            price=r.price,
            category=r.category,
            subcategory=r.subcategory,
            um=r.um,
        )
        for r in request.rows
    ]
    result = validate_import(rows, request.supplier_code, request.existing_skus)
    return validation_to_response(result)
