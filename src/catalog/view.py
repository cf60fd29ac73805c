"""
Rendering adapter.

Turns a CatalogEngine into plain dictionaries consumed by the dashboard
template and the JSON API.
"""

from typing import Any, Dict, List

from .engine import CatalogEngine
from .icons import get_category_icon
from .models import SortMode, ToolRecord, ViewMode

SORT_LABELS = {
    SortMode.DEFAULT: 'Default',
    SortMode.NAME: 'Name',
    SortMode.CATEGORY: 'Category',
    SortMode.POPULAR: 'Popular',
}


def tool_view(tool: ToolRecord) -> Dict[str, Any]:
    data = tool.to_dict()
    data['open_path'] = f'/open/{tool.id}'
    return data


def category_views(engine: CatalogEngine, with_svg: bool = False) -> List[Dict[str, Any]]:
    """Sidebar entries with the counts for the current state."""
    counts = engine.get_visible_category_counts()
    views = []
    for category in engine.catalog.categories:
        entry = category.to_dict()
        entry['count'] = counts.get(category.id, 0)
        entry['active'] = category.id == engine.state.current_category
        if with_svg:
            entry['icon_svg'] = get_category_icon(category.icon)
        views.append(entry)
    return views


def sort_mode_views(engine: CatalogEngine) -> List[Dict[str, Any]]:
    return [
        {'value': mode.value, 'label': SORT_LABELS[mode], 'selected': mode == engine.state.sort_by}
        for mode in SortMode
    ]


def build_view(engine: CatalogEngine, with_svg: bool = False) -> Dict[str, Any]:
    """Full view model for one render pass."""
    tools = engine.get_visible_tools()
    title, subtitle = engine.get_heading()
    return {
        'state': engine.state.to_dict(),
        'tools': [tool_view(tool) for tool in tools],
        'count': len(tools),
        'empty': not tools,
        'categories': category_views(engine, with_svg=with_svg),
        'heading': {'title': title, 'subtitle': subtitle},
        'sort_modes': sort_mode_views(engine),
        'list_view': engine.state.current_view == ViewMode.LIST,
    }
