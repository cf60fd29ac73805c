"""
Catalog engine.

Holds the UI state for one session and derives the visible tool list and
the per-category counts from it. Rendering lives in ``catalog.view``.
"""

import locale
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .models import ALL_CATEGORY_ID, Catalog, SortMode, ToolRecord, ViewMode

logger = logging.getLogger(__name__)

ALL_TOOLS_TAGLINE = '发现最新最实用的AI工具'


@dataclass
class UIState:
    """Single-owner UI state; every setter replaces exactly one field."""
    current_category: str = ALL_CATEGORY_ID
    search_query: str = ''
    sort_by: SortMode = SortMode.DEFAULT
    current_view: ViewMode = ViewMode.GRID

    def to_dict(self) -> Dict[str, str]:
        return {
            'category': self.current_category,
            'q': self.search_query,
            'sort': self.sort_by.value,
            'view': self.current_view.value,
        }


def _name_key(tool: ToolRecord):
    return locale.strxfrm(tool.name)


def _category_key(tool: ToolRecord):
    return locale.strxfrm(tool.category)


def _popular_key(tool: ToolRecord):
    return 0 if tool.popular else 1


# list.sort is stable, so ties keep catalog order in every mode
SORT_KEYS = {
    SortMode.NAME: _name_key,
    SortMode.CATEGORY: _category_key,
    SortMode.POPULAR: _popular_key,
}


class CatalogEngine:
    def __init__(self, catalog: Catalog, state: Optional[UIState] = None):
        self.catalog = catalog
        self.state = state if state is not None else UIState()

    @classmethod
    def from_params(cls, catalog: Catalog, params: Mapping[str, Any]) -> 'CatalogEngine':
        """Build an engine from request-style parameters (category, q, sort, view)."""
        engine = cls(catalog)
        if params.get('category'):
            engine.set_category(params['category'])
        if params.get('q') is not None:
            engine.set_search_query(params['q'])
        if params.get('sort'):
            engine.set_sort_mode(params['sort'])
        if params.get('view'):
            engine.set_view(params['view'])
        return engine

    # State mutators

    def set_category(self, category_id: str) -> None:
        """Select a category. Unknown ids are accepted and match nothing."""
        self.state.current_category = category_id

    def set_search_query(self, raw: str) -> None:
        self.state.search_query = (raw or '').strip()

    def set_sort_mode(self, mode: Union[SortMode, str]) -> None:
        try:
            self.state.sort_by = SortMode(mode)
        except ValueError:
            logger.warning("Unknown sort mode %r, using default order", mode)
            self.state.sort_by = SortMode.DEFAULT

    def set_view(self, mode: Union[ViewMode, str]) -> None:
        try:
            self.state.current_view = ViewMode(mode)
        except ValueError:
            logger.warning("Unknown view mode %r, using grid", mode)
            self.state.current_view = ViewMode.GRID

    # Derived views

    def matches_search(self, tool: ToolRecord) -> bool:
        """Case-insensitive substring match on name, description or any tag."""
        if not self.state.search_query:
            return True
        query = self.state.search_query.casefold()
        return (query in tool.name.casefold()
                or query in tool.description.casefold()
                or any(query in tag.casefold() for tag in tool.tags))

    def sort_tools(self, tools: List[ToolRecord]) -> List[ToolRecord]:
        key = SORT_KEYS.get(self.state.sort_by)
        if key is None:
            return list(tools)
        return sorted(tools, key=key)

    def get_visible_tools(self) -> List[ToolRecord]:
        """Category filter, then search filter, then sort."""
        tools = list(self.catalog.tools)

        if self.state.current_category != ALL_CATEGORY_ID:
            tools = [tool for tool in tools if tool.category == self.state.current_category]

        if self.state.search_query:
            tools = [tool for tool in tools if self.matches_search(tool)]

        return self.sort_tools(tools)

    @property
    def is_empty(self) -> bool:
        return not self.get_visible_tools()

    def get_visible_category_counts(self) -> Dict[str, int]:
        """
        Counts shown next to each category.

        'all' counts the visible set (category and search applied). Every
        other bucket counts search matches in that category while ignoring
        the selected category, or its load-time count when no search is
        active.
        """
        counts = {}
        for category in self.catalog.categories:
            if category.id == ALL_CATEGORY_ID:
                counts[category.id] = len(self.get_visible_tools())
            elif not self.state.search_query:
                counts[category.id] = category.count
            else:
                counts[category.id] = sum(
                    1 for tool in self.catalog.tools
                    if tool.category == category.id and self.matches_search(tool)
                )
        return counts

    def get_heading(self) -> Tuple[str, str]:
        """Title and subtitle for the current category and search."""
        category = self.catalog.get_category(self.state.current_category)
        name = category.name if category else self.state.current_category

        if self.state.search_query:
            title = f'搜索结果: "{self.state.search_query}"'
            subtitle = f'在 {name} 中找到 {len(self.get_visible_tools())} 个工具'
        else:
            title = name
            if self.state.current_category == ALL_CATEGORY_ID:
                subtitle = ALL_TOOLS_TAGLINE
            else:
                subtitle = f'{category.count if category else 0} 个工具'
        return title, subtitle
