"""Domain layer - shared error types.

Example usage:
    from nusaf_catalog.domain import DomainError, InvalidSkuError

    try:
        convert_tecom_sku(code)
    except InvalidSkuError as e:
        print(e.details["reason"])
"""

from nusaf_catalog.domain.exceptions import (
    DomainError,
    InvalidSkuError,
    SkuConversionError,
    UnknownSupplierError,
    UnsupportedSkuPrefixError,
)

__all__ = [
    "DomainError",
    "InvalidSkuError",
    "SkuConversionError",
    "UnknownSupplierError",
    "UnsupportedSkuPrefixError",
]
