"""Legacy category code migration.

Repairs category and subcategory codes stored before the taxonomy moved to
single-letter categories and ``X-NNN`` subcategories. Nothing here touches
storage: callers pass the stored codes in and receive the corrected codes
plus a record of which rule produced them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

import structlog

from nusaf_catalog.catalog.taxonomy import (
    CATEGORY_CODE_MIGRATION,
    SUBCATEGORY_CODE_MIGRATION,
    find_sub_category_code,
    get_category,
    is_valid_category_code,
    is_valid_sub_category_code,
)

logger = structlog.get_logger()


class MigrationRule(str, Enum):
    """Which rule resolved a code."""

    VALID = "valid"
    NAME = "name"
    TABLE = "table"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class MigrationRecord:
    """A stored category assignment to be checked.

    Attributes:
        category_code: Stored category code (possibly legacy, e.g. "CONV").
        sub_category_code: Stored subcategory code, if any.
        sub_category_name: Stored subcategory name, used for name matching.
    """

    category_code: str
    sub_category_code: str | None = None
    sub_category_name: str | None = None


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of migrating one record."""

    record: MigrationRecord
    category_code: str | None
    sub_category_code: str | None
    category_rule: MigrationRule
    sub_category_rule: MigrationRule | None = None

    @property
    def resolved(self) -> bool:
        """True when every code present on the record was resolved."""
        if self.category_rule == MigrationRule.UNRESOLVED:
            return False
        return self.sub_category_rule != MigrationRule.UNRESOLVED

    @property
    def changed(self) -> bool:
        """True when a resolved code differs from the stored one."""
        if not self.resolved:
            return False
        return (
            self.category_code != self.record.category_code
            or self.sub_category_code != self.record.sub_category_code
        )


@dataclass
class MigrationPlan:
    """Migration results for a batch of records."""

    results: list[MigrationResult] = field(default_factory=list)

    @property
    def changed(self) -> int:
        return sum(1 for r in self.results if r.changed)

    @property
    def unchanged(self) -> int:
        return sum(1 for r in self.results if r.resolved and not r.changed)

    @property
    def unresolved(self) -> int:
        return sum(1 for r in self.results if not r.resolved)


def _category_rule(code: str) -> tuple[str | None, MigrationRule]:
    if is_valid_category_code(code):
        return code, MigrationRule.VALID
    migrated = CATEGORY_CODE_MIGRATION.get(code)
    if migrated is not None:
        return migrated, MigrationRule.TABLE
    return None, MigrationRule.UNRESOLVED


def _sub_category_rule(
    category_code: str,
    code: str | None,
    name: str | None,
) -> tuple[str | None, MigrationRule]:
    if code and is_valid_sub_category_code(code) and code[0] == category_code:
        return code, MigrationRule.VALID

    if name:
        matched = find_sub_category_code(category_code, name)
        if matched is not None:
            return matched, MigrationRule.NAME

    if code:
        migrated = SUBCATEGORY_CODE_MIGRATION.get(code)
        # Table entries are only trusted inside the record's own category
        if migrated is not None and migrated[0] == category_code:
            return migrated, MigrationRule.TABLE

    return None, MigrationRule.UNRESOLVED


def migrate_category_code(code: str) -> str | None:
    """Get the current code for a possibly legacy category code.

    Args:
        code: Stored category code.

    Returns:
        Current single-letter code, or None if it cannot be resolved.
    """
    return _category_rule(code)[0]


def migrate_sub_category_code(
    category_code: str,
    code: str | None,
    name: str | None = None,
) -> str | None:
    """Get the current code for a possibly legacy subcategory code.

    Resolution order: an existing code already in the category, then a
    name match within the category, then the legacy code table.

    Args:
        category_code: Current (already migrated) category code.
        code: Stored subcategory code.
        name: Stored subcategory name.

    Returns:
        Current ``X-NNN`` code, or None if it cannot be resolved.
    """
    if get_category(category_code) is None:
        return None
    return _sub_category_rule(category_code, code, name)[0]


def migrate_record(record: MigrationRecord) -> MigrationResult:
    """Resolve the category and subcategory codes of a single record."""
    category_code, category_rule = _category_rule(record.category_code)

    if record.sub_category_code is None and record.sub_category_name is None:
        return MigrationResult(
            record=record,
            category_code=category_code,
            sub_category_code=None,
            category_rule=category_rule,
        )

    if category_code is None:
        return MigrationResult(
            record=record,
            category_code=None,
            sub_category_code=None,
            category_rule=category_rule,
            sub_category_rule=MigrationRule.UNRESOLVED,
        )

    sub_code, sub_rule = _sub_category_rule(
        category_code, record.sub_category_code, record.sub_category_name
    )
    return MigrationResult(
        record=record,
        category_code=category_code,
        sub_category_code=sub_code,
        category_rule=category_rule,
        sub_category_rule=sub_rule,
    )


def plan_migration(records: Iterable[MigrationRecord]) -> MigrationPlan:
    """Build a migration plan for a batch of stored records.

    Args:
        records: Stored category assignments.

    Returns:
        Plan with one result per record, in input order.
    """
    plan = MigrationPlan(results=[migrate_record(r) for r in records])

    for result in plan.results:
        if not result.resolved:
            logger.warning(
                "Unresolved category code",
                category_code=result.record.category_code,
                sub_category_code=result.record.sub_category_code,
                sub_category_name=result.record.sub_category_name,
            )

    logger.info(
        "Category code migration planned",
        total=len(plan.results),
        changed=plan.changed,
        unchanged=plan.unchanged,
        unresolved=plan.unresolved,
    )
    return plan
