"""
Catalog loading.

Reads the static tool list (embedded literal or a bundled JSON/YAML file),
validates it, derives the category buckets and falls back to an empty
catalog when anything goes wrong.
"""

import json
import logging
import re
from collections import OrderedDict
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import jsonschema
import yaml

from config.tools import CATEGORY_DEFINITIONS, TOOLS

from .exceptions import (
    CatalogException, CatalogNotFoundError, CatalogFormatError,
    CatalogValidationError, DuplicateToolError
)
from .icons import DEFAULT_ICON
from .models import ALL_CATEGORY_ID, Catalog, CategoryRecord, ToolRecord
from .schema import CATALOG_SCHEMA

logger = logging.getLogger(__name__)

CatalogSource = Union[str, Path, Sequence[Dict[str, Any]], Dict[str, Any], None]

YAML_SUFFIXES = ('.yaml', '.yml')


def read_catalog_data(path: Union[str, Path]) -> Any:
    """Read a catalog data file (JSON or YAML, chosen by suffix)."""
    path = Path(path)
    if not path.exists():
        raise CatalogNotFoundError(f"Catalog file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogFormatError(f"Invalid JSON in {path}: {e}")
    except yaml.YAMLError as e:
        raise CatalogFormatError(f"Invalid YAML in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogFormatError(f"Cannot read {path}: {e}")


def validate_catalog_data(data: Any) -> List[Dict[str, Any]]:
    """
    Validate a catalog document and return its list of tool mappings.

    Raises:
        CatalogValidationError: if the document does not match the schema
    """
    validator = jsonschema.Draft7Validator(CATALOG_SCHEMA)
    errors = list(validator.iter_errors(data))
    if errors:
        messages = []
        for error in errors:
            # oneOf failures carry the per-branch errors in their context
            for detail in error.context or [error]:
                path = " -> ".join(str(p) for p in detail.absolute_path) if detail.absolute_path else "root"
                messages.append(f"At '{path}': {detail.message}")
        raise CatalogValidationError("Catalog data does not match schema", messages)

    if isinstance(data, dict):
        return list(data['tools'])
    return list(data)


def find_duplicate_ids(tools: Iterable[ToolRecord]) -> List[int]:
    seen = set()
    duplicates = []
    for tool in tools:
        if tool.id in seen and tool.id not in duplicates:
            duplicates.append(tool.id)
        seen.add(tool.id)
    return duplicates


def normalize_name(name: str) -> str:
    """Normalize a tool name for duplicate detection."""
    normalized = re.sub(r'\s+', '', name.lower())
    normalized = re.sub(r'[^A-Za-z0-9_\u4e00-\u9fff]', '', normalized)
    normalized = re.sub(r'工具$', '', normalized)
    return re.sub(r'器$', '', normalized)


def find_duplicate_names(tools: Iterable[ToolRecord]) -> List[Tuple[ToolRecord, ToolRecord]]:
    """Return (first, duplicate) pairs of tools whose normalized names collide."""
    by_name: Dict[str, ToolRecord] = {}
    duplicates = []
    for tool in tools:
        key = normalize_name(tool.name)
        if not key:
            continue
        if key in by_name:
            duplicates.append((by_name[key], tool))
        else:
            by_name[key] = tool
    return duplicates


def derive_categories(tools: Sequence[ToolRecord],
                      definitions: Optional[Sequence[Dict[str, str]]] = None) -> Tuple[CategoryRecord, ...]:
    """
    Group tools by category and build the sidebar buckets.

    One record per distinct category value, ordered by the known
    definitions first and then by first appearance. The synthetic 'all'
    bucket is always first and counts every tool.
    """
    if definitions is None:
        definitions = CATEGORY_DEFINITIONS
    known = OrderedDict((d['id'], d) for d in definitions)

    counts: Dict[str, int] = OrderedDict()
    for tool in tools:
        counts[tool.category] = counts.get(tool.category, 0) + 1

    ordered_ids = [cid for cid in known if cid in counts and cid != ALL_CATEGORY_ID]
    ordered_ids += [cid for cid in counts if cid not in known]

    all_definition = known.get(ALL_CATEGORY_ID, {})
    categories = [CategoryRecord(
        id=ALL_CATEGORY_ID,
        name=all_definition.get('name', ALL_CATEGORY_ID),
        icon=all_definition.get('icon', DEFAULT_ICON),
        count=len(tools),
    )]
    for category_id in ordered_ids:
        definition = known.get(category_id, {})
        categories.append(CategoryRecord(
            id=category_id,
            name=definition.get('name', category_id),
            icon=definition.get('icon', DEFAULT_ICON),
            count=counts[category_id],
        ))
    return tuple(categories)


def build_catalog(data: Any,
                  definitions: Optional[Sequence[Dict[str, str]]] = None,
                  is_enabled: Optional[Callable[[ToolRecord], bool]] = None) -> Catalog:
    """
    Build a catalog from a raw document.

    Raises:
        CatalogValidationError: if the document does not match the schema
        DuplicateToolError: if two tools share an id
    """
    tools = [ToolRecord.from_dict(item) for item in validate_catalog_data(data)]

    duplicate_ids = find_duplicate_ids(tools)
    if duplicate_ids:
        raise DuplicateToolError(duplicate_ids)

    for first, duplicate in find_duplicate_names(tools):
        logger.warning("Tool %s (%s) looks like a duplicate of tool %s (%s)",
                       duplicate.id, duplicate.name, first.id, first.name)

    if is_enabled is not None:
        tools = [tool for tool in tools if is_enabled(tool)]

    return Catalog(tools=tuple(tools), categories=derive_categories(tools, definitions))


def load_catalog(source: CatalogSource = None,
                 definitions: Optional[Sequence[Dict[str, str]]] = None,
                 is_enabled: Optional[Callable[[ToolRecord], bool]] = None) -> Catalog:
    """
    Load the catalog, never raising.

    Args:
        source: None for the embedded tool list, a path to a JSON/YAML file,
            or an in-memory document (list of tools or {'tools': [...]})
        definitions: category display definitions (defaults to the built-in ones)
        is_enabled: optional predicate dropping disabled tools

    Returns:
        The loaded catalog, or an empty catalog if the source is missing or
        malformed.
    """
    try:
        if source is None:
            data = TOOLS
        elif isinstance(source, (str, Path)):
            data = read_catalog_data(source)
        else:
            data = source
        catalog = build_catalog(data, definitions, is_enabled)
    except CatalogValidationError as e:
        logger.error("Failed to load catalog: %s (%s)", e, "; ".join(e.errors[:5]))
        return Catalog.empty()
    except CatalogException as e:
        logger.error("Failed to load catalog: %s", e)
        return Catalog.empty()

    logger.info("Loaded %d tools in %d categories",
                len(catalog.tools), len(catalog.categories) - 1)
    return catalog
