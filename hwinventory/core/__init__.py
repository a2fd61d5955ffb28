"""
==============================================================================
Core Package
==============================================================================

Application exception and its factory functions.

Usage:
------
    from hwinventory.core import CatalogError
    from hwinventory.core import exceptions

    raise exceptions.unsupported_product("Monitor")

==============================================================================
"""

from .exceptions import (
    CatalogError,
    invalid_product,
    unsupported_product,
)

__all__ = [
    "CatalogError",
    "invalid_product",
    "unsupported_product",
]
