"""Category API endpoints.

Public endpoints for browsing the product taxonomy, plus an authenticated
endpoint for planning legacy code migrations.
"""

from fastapi import APIRouter, HTTPException, status

from nusaf_catalog.api.schemas import (
    CategoryListResponse,
    CategoryRefSchema,
    CategorySchema,
    ErrorResponse,
    MigrationPlanRequest,
    MigrationPlanResponse,
    MigrationRecordSchema,
    MigrationResultSchema,
    SubCategoryDetailResponse,
    SubCategorySchema,
)
from nusaf_catalog.catalog.migration import MigrationRecord, MigrationResult, plan_migration
from nusaf_catalog.catalog.taxonomy import (
    CATEGORY_DEFINITIONS,
    CategoryDefinition,
    SubCategoryDefinition,
    find_category,
    find_sub_category,
)

public_router = APIRouter(prefix="/api/v1/public/categories", tags=["Categories"])
router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])


# ============================================================================
# Converters
# ============================================================================


def sub_category_to_schema(sub: SubCategoryDefinition) -> SubCategorySchema:
    """Convert a subcategory definition to its response schema."""
    return SubCategorySchema(
        code=sub.code,
        name=sub.name,
        slug=sub.slug,
        sort_order=sub.sort_order,
    )


def category_to_schema(category: CategoryDefinition) -> CategorySchema:
    """Convert a category definition to its response schema."""
    return CategorySchema(
        code=category.code,
        name=category.name,
        slug=category.slug,
        sort_order=category.sort_order,
        sub_categories=[sub_category_to_schema(s) for s in category.sub_categories],
    )


def migration_result_to_schema(result: MigrationResult) -> MigrationResultSchema:
    record = result.record
    return MigrationResultSchema(
        record=MigrationRecordSchema(
            category_code=record.category_code,
            sub_category_code=record.sub_category_code,
            sub_category_name=record.sub_category_name,
        ),
        category_code=result.category_code,
        sub_category_code=result.sub_category_code,
        category_rule=result.category_rule,
        sub_category_rule=result.sub_category_rule,
        resolved=result.resolved,
        changed=result.changed,
    )


def _category_not_found(slug_or_code: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "CATEGORY_NOT_FOUND",
            "message": f"Category not found: {slug_or_code}",
        },
    )


# ============================================================================
# Public Endpoints
# ============================================================================


@public_router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
    description="List all categories with their subcategories, in display order.",
)
async def list_categories() -> CategoryListResponse:
    """List all categories.

    Returns:
        Categories sorted by sort order.
    """
    categories = sorted(CATEGORY_DEFINITIONS, key=lambda c: c.sort_order)
    return CategoryListResponse(
        categories=[category_to_schema(c) for c in categories],
        total=len(categories),
    )


@public_router.get(
    "/{slug_or_code}",
    response_model=CategorySchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get category",
    description="Get a category by code (e.g. 'C') or slug (e.g. 'conveyor-components').",
)
async def get_category(slug_or_code: str) -> CategorySchema:
    """Get a single category with its subcategories.

    Raises:
        HTTPException: If no category matches.
    """
    category = find_category(slug_or_code)
    if category is None:
        raise _category_not_found(slug_or_code)
    return category_to_schema(category)


@public_router.get(
    "/{category_slug}/{sub_category_slug}",
    response_model=SubCategoryDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get subcategory",
    description="Get a subcategory by parent category slug/code and subcategory slug/code.",
)
async def get_sub_category(
    category_slug: str,
    sub_category_slug: str,
) -> SubCategoryDetailResponse:
    """Get a subcategory with a reference to its parent.

    Raises:
        HTTPException: If the category or subcategory does not exist.
    """
    category = find_category(category_slug)
    if category is None:
        raise _category_not_found(category_slug)

    sub = find_sub_category(category, sub_category_slug)
    if sub is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "SUBCATEGORY_NOT_FOUND",
                "message": f"Subcategory not found: {sub_category_slug}",
            },
        )

    return SubCategoryDetailResponse(
        code=sub.code,
        name=sub.name,
        slug=sub.slug,
        sort_order=sub.sort_order,
        category=CategoryRefSchema(
            code=category.code,
            name=category.name,
            slug=category.slug,
        ),
    )


# ============================================================================
# Migration Endpoints
# ============================================================================


@router.post(
    "/migrations/plan",
    response_model=MigrationPlanResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Plan code migration",
    description=(
        "Resolve legacy category and subcategory codes to current codes. "
        "Nothing is written; the caller applies the plan."
    ),
)
async def plan_code_migration(request: MigrationPlanRequest) -> MigrationPlanResponse:
    """Plan a migration for a batch of stored records.

    Args:
        request: Records to check.

    Returns:
        Per-record results and counts.
    """
    plan = plan_migration(
        MigrationRecord(
            category_code=r.category_code,
            sub_category_code=r.sub_category_code,
            sub_category_name=r.sub_category_name,
        )
        for r in request.records
    )
    return MigrationPlanResponse(
        results=[migration_result_to_schema(r) for r in plan.results],
        total=len(plan.results),
        changed=plan.changed,
        unchanged=plan.unchanged,
        unresolved=plan.unresolved,
    )
