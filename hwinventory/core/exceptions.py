"""
Application Exception Handling

Single CatalogError class for the few failures the catalog can report.
Lookup misses are not errors and never raise.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """
    Unified application exception for catalog failures.

    Usage:
        raise CatalogError("Unsupported product type: Monitor", "UNSUPPORTED_PRODUCT")

    Error Codes:
        - INVALID_PRODUCT: product data could not be turned into a variant
        - UNSUPPORTED_PRODUCT: no creator registered for the product type
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_PRODUCT")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a plain dictionary."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_product(errors: List[Dict[str, Any]]) -> CatalogError:
    """Create invalid product data exception."""
    return CatalogError(
        f"Invalid product data ({len(errors)} error{'s' if len(errors) != 1 else ''})",
        "INVALID_PRODUCT",
        {"errors": errors}
    )


def unsupported_product(kind: str) -> CatalogError:
    """Create unsupported product type exception."""
    return CatalogError(
        f"Unsupported product type: {kind}",
        "UNSUPPORTED_PRODUCT",
        {"kind": kind}
    )
