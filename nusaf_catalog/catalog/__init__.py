"""Product catalog taxonomy.

Provides the static category/subcategory table, lookup and validation
helpers, and legacy code migration.
"""

from nusaf_catalog.catalog.migration import (
    MigrationPlan,
    MigrationRecord,
    MigrationResult,
    MigrationRule,
    migrate_category_code,
    migrate_record,
    migrate_sub_category_code,
    plan_migration,
)
from nusaf_catalog.catalog.taxonomy import (
    CATEGORY_CODE_MIGRATION,
    CATEGORY_DEFINITIONS,
    SUBCATEGORY_CODE_MIGRATION,
    CategoryDefinition,
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

__all__ = [
    # Taxonomy
    "CATEGORY_CODE_MIGRATION",
    "CATEGORY_DEFINITIONS",
    "SUBCATEGORY_CODE_MIGRATION",
    "CategoryDefinition",
    "SubCategoryDefinition",
    "find_category",
    "find_sub_category",
    "find_sub_category_code",
    "get_category",
    "get_parent_category",
    "get_sub_categories_for_category",
    "is_valid_category_code",
    "is_valid_sub_category_code",
    "normalize_sub_category_name",
    "to_slug",
    # Migration
    "MigrationPlan",
    "MigrationRecord",
    "MigrationResult",
    "MigrationRule",
    "migrate_category_code",
    "migrate_record",
    "migrate_sub_category_code",
    "plan_migration",
]
