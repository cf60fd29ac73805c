"""
Custom exceptions for catalog loading.
"""

from typing import List, Optional


class CatalogException(Exception):
    """Base exception for all catalog-related errors."""
    pass


class CatalogNotFoundError(CatalogException):
    """Raised when the catalog data file cannot be found."""
    pass


class CatalogFormatError(CatalogException):
    """Raised when the catalog data file cannot be parsed."""
    pass


class CatalogValidationError(CatalogException):
    """Raised when catalog data does not match the catalog schema."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class DuplicateToolError(CatalogException):
    """Raised when two tool records share the same id."""

    def __init__(self, tool_ids: List[int]):
        super().__init__(f"Duplicate tool ids: {', '.join(str(i) for i in tool_ids)}")
        self.tool_ids = tool_ids
