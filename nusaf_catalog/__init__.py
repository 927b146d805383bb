"""Nusaf catalog service.

Product taxonomy, supplier SKU conversion and price-list import validation.
"""

__version__ = "0.1.0"
