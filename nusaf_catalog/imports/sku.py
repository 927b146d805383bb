"""Supplier SKU conversion.

Each supplier is assigned a SKU handling strategy. Most suppliers' codes
are used as-is; Tecom part codes are rewritten into the internal format:

    C020080271 -> 1200-80271
    L008580271 -> 185-80271
    B00123456  -> B00123456
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from nusaf_catalog.domain.exceptions import (
    InvalidSkuError,
    UnknownSupplierError,
    UnsupportedSkuPrefixError,
)

TECOM_MIN_SKU_LENGTH = 6


class SkuHandling(str, Enum):
    """How a supplier's SKUs map to internal SKUs."""

    DIRECT = "DIRECT"
    TECOM_CONVERSION = "TECOM_CONVERSION"
    NUSAF_INTERNAL = "NUSAF_INTERNAL"


SUPPLIER_SKU_HANDLING: Mapping[str, SkuHandling] = MappingProxyType({
    "TECOM": SkuHandling.TECOM_CONVERSION,
    "CHIARAVALLI": SkuHandling.DIRECT,
    "REGINA": SkuHandling.DIRECT,
    "NUSAF": SkuHandling.NUSAF_INTERNAL,
})


def convert_tecom_sku(supplier_sku: str) -> str:
    """Convert a Tecom part code to an internal SKU.

    Rules by first character (case-insensitive):
        - ``B``: returned unchanged.
        - ``C`` / ``L``: characters 1-4 are the part number and the rest is
          the identifying code. Output is ``"1" + part_number`` with leading
          zeros stripped, a hyphen, then the identifying code.

    Args:
        supplier_sku: Tecom part code, at least 6 characters.

    Returns:
        Internal SKU.

    Raises:
        InvalidSkuError: If the SKU is too short or the part number is not
            made of decimal digits.
        UnsupportedSkuPrefixError: If the prefix is not B, C or L.
    """
    if len(supplier_sku) < TECOM_MIN_SKU_LENGTH:
        raise InvalidSkuError(supplier_sku)

    prefix = supplier_sku[0].upper()

    if prefix == "B":
        return supplier_sku

    if prefix in ("C", "L"):
        part_number = supplier_sku[1:5]
        identifying_code = supplier_sku[5:]

        if not (part_number.isascii() and part_number.isdigit()):
            raise InvalidSkuError(supplier_sku, reason="part number is not numeric")

        return f"1{int(part_number)}-{identifying_code}"

    raise UnsupportedSkuPrefixError(supplier_sku, supplier_sku[0])


def get_sku_handling(supplier_code: str) -> SkuHandling:
    """Get the SKU handling strategy for a supplier.

    Raises:
        UnknownSupplierError: If the supplier is not registered.
    """
    handling = SUPPLIER_SKU_HANDLING.get(supplier_code.upper())
    if handling is None:
        raise UnknownSupplierError(supplier_code)
    return handling


def convert_supplier_sku(supplier_code: str, supplier_sku: str) -> str:
    """Convert a supplier SKU to an internal SKU using the supplier's strategy.

    Args:
        supplier_code: Supplier code (e.g., "TECOM").
        supplier_sku: SKU as it appears in the supplier's price list.

    Returns:
        Internal SKU.

    Raises:
        UnknownSupplierError: If the supplier is not registered.
        SkuConversionError: If the supplier's conversion rejects the SKU.
    """
    handling = get_sku_handling(supplier_code)
    sku = supplier_sku.strip()

    if handling == SkuHandling.TECOM_CONVERSION:
        return convert_tecom_sku(sku)
    return sku
