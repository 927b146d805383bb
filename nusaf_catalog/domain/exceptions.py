"""Domain exceptions.

Errors raised by the SKU conversion layer when a supplier code cannot be
turned into an internal SKU. Taxonomy lookups and validators never raise;
they report absence as ``None``, ``[]`` or ``False``.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# SKU Conversion Errors
# ============================================================================


class SkuConversionError(DomainError):
    """Base class for supplier SKU conversion errors."""

    pass


class InvalidSkuError(SkuConversionError):
    """Raised when a supplier SKU is malformed.

    Covers SKUs too short to hold a prefix and identifying code, and
    part numbers that are not plain decimal digits.
    """

    error_code = "INVALID_SKU"

    def __init__(self, supplier_sku: str, reason: str = "too short") -> None:
        """Initialize invalid SKU error.

        Args:
            supplier_sku: The malformed SKU as received.
            reason: Why the SKU was rejected.
        """
        super().__init__(
            f"Invalid Tecom SKU: {supplier_sku!r} ({reason})",
            details={"supplier_sku": supplier_sku, "reason": reason},
        )


class UnsupportedSkuPrefixError(SkuConversionError):
    """Raised when a Tecom SKU starts with a prefix other than B, C or L."""

    error_code = "UNSUPPORTED_SKU_PREFIX"

    def __init__(self, supplier_sku: str, prefix: str) -> None:
        """Initialize unsupported prefix error.

        Args:
            supplier_sku: The SKU as received.
            prefix: The offending first character.
        """
        super().__init__(
            f"Unknown Tecom SKU prefix: {prefix}",
            details={"supplier_sku": supplier_sku, "prefix": prefix},
        )


# ============================================================================
# Supplier Errors
# ============================================================================


class UnknownSupplierError(DomainError):
    """Raised when no SKU handling strategy is registered for a supplier."""

    error_code = "UNKNOWN_SUPPLIER"

    def __init__(self, supplier_code: str) -> None:
        """Initialize unknown supplier error.

        Args:
            supplier_code: The supplier code that was looked up.
        """
        super().__init__(
            f"Unknown supplier: {supplier_code}",
            details={"supplier_code": supplier_code},
        )
