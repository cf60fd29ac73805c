"""
Tool catalog package.

Provides the read-only catalog data model, the loader and the engine that
derives the visible tools and category counts from the UI state.
"""

from .models import ALL_CATEGORY_ID, Catalog, CategoryRecord, SortMode, ToolRecord, ViewMode
from .exceptions import (
    CatalogException, CatalogNotFoundError, CatalogFormatError,
    CatalogValidationError, DuplicateToolError
)
from .loader import load_catalog, build_catalog, derive_categories, read_catalog_data
from .engine import CatalogEngine, UIState
from .view import build_view

__all__ = [
    'ALL_CATEGORY_ID',
    'Catalog',
    'CategoryRecord',
    'SortMode',
    'ToolRecord',
    'ViewMode',
    'CatalogException',
    'CatalogNotFoundError',
    'CatalogFormatError',
    'CatalogValidationError',
    'DuplicateToolError',
    'load_catalog',
    'build_catalog',
    'derive_categories',
    'read_catalog_data',
    'CatalogEngine',
    'UIState',
    'build_view',
]
