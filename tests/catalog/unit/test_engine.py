"""
Tests for CatalogEngine filtering, sorting and category counts.
"""

import pytest
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..', 'src'))

from catalog.engine import CatalogEngine, UIState
from catalog.loader import build_catalog
from catalog.models import Catalog, SortMode, ViewMode


def make_catalog(tools):
    return build_catalog(tools)


@pytest.fixture
def scenario_catalog():
    return make_catalog([
        {"id": 1, "name": "Color Picker", "category": "design", "tags": ["color"], "url": "/tools/color-picker/"},
        {"id": 2, "name": "JSON Formatter", "category": "dev", "tags": ["json"], "url": "/tools/json-formatter/"},
        {"id": 3, "name": "QR Generator", "category": "utility", "tags": ["qr", "generator"], "url": "/tools/qr/"},
    ])


@pytest.fixture
def engine(scenario_catalog):
    return CatalogEngine(scenario_catalog)


def visible_ids(engine):
    return [tool.id for tool in engine.get_visible_tools()]


class TestInitialState:
    """Test the default UI state."""

    def test_defaults(self, engine):
        assert engine.state == UIState()
        assert engine.state.current_category == 'all'
        assert engine.state.search_query == ''
        assert engine.state.sort_by == SortMode.DEFAULT
        assert engine.state.current_view == ViewMode.GRID

    def test_all_tools_visible_in_insertion_order(self, engine):
        assert visible_ids(engine) == [1, 2, 3]


class TestScenario:
    """End-to-end walk through category, search and sort changes."""

    def test_category_then_search_then_sort(self, engine):
        engine.set_category('design')
        assert visible_ids(engine) == [1]

        engine.set_category('all')
        engine.set_search_query('generator')
        assert visible_ids(engine) == [3]

        engine.set_search_query('')
        engine.set_sort_mode('name')
        assert visible_ids(engine) == [1, 2, 3]


class TestCategoryFilter:

    def test_unknown_category_yields_empty_set(self, engine):
        engine.set_category('does-not-exist')
        assert engine.get_visible_tools() == []
        assert engine.is_empty

    def test_all_ignores_category_dimension(self, engine):
        engine.set_search_query('o')
        engine.set_sort_mode(SortMode.NAME)
        with_all = visible_ids(engine)

        unfiltered = CatalogEngine(engine.catalog, UIState(search_query='o', sort_by=SortMode.NAME))
        assert with_all == visible_ids(unfiltered)
        assert with_all == [1, 2, 3]

    def test_tool_with_unlisted_category_is_still_displayed(self):
        catalog = make_catalog([
            {"id": 7, "name": "Misc", "category": "others", "url": "/tools/misc/"},
        ])
        engine = CatalogEngine(catalog)
        assert visible_ids(engine) == [7]


class TestSearch:
    """Test search matching."""

    def test_query_is_trimmed(self, engine):
        engine.set_search_query('   qr  ')
        assert engine.state.search_query == 'qr'
        assert visible_ids(engine) == [3]

    def test_whitespace_only_query_clears_filter(self, engine):
        engine.set_search_query('qr')
        engine.set_search_query('   ')
        assert engine.state.search_query == ''
        assert visible_ids(engine) == [1, 2, 3]

    def test_case_insensitive_name_and_tag(self):
        catalog = make_catalog([
            {"id": 16, "name": "JSON格式化", "category": "utility", "tags": ["格式化"], "url": "./tools/json-formatter/"},
            {"id": 40, "name": "数据查看器", "category": "development", "tags": ["JSON"], "url": "./tools/viewer/"},
            {"id": 41, "name": "计算器", "category": "calculator", "tags": ["数学"], "url": "./tools/calc/"},
        ])
        engine = CatalogEngine(catalog)
        engine.set_search_query('json')
        assert visible_ids(engine) == [16, 40]

    def test_description_match(self):
        catalog = make_catalog([
            {"id": 5, "name": "Counter", "description": "Counts words in a text", "category": "text",
             "url": "/tools/counter/"},
        ])
        engine = CatalogEngine(catalog)
        engine.set_search_query('WORDS')
        assert visible_ids(engine) == [5]

    def test_tag_only_match(self):
        catalog = make_catalog([
            {"id": 9, "name": "Picker", "description": "Pick things", "category": "design",
             "tags": ["palette"], "url": "/tools/picker/"},
        ])
        tag_engine = CatalogEngine(catalog)
        tag_engine.set_search_query('palette')
        assert visible_ids(tag_engine) == [9]

    def test_no_matches_is_empty_not_error(self, engine):
        engine.set_search_query('zzz-no-such-tool')
        assert engine.get_visible_tools() == []
        assert engine.is_empty

    def test_search_combines_with_category(self, engine):
        engine.set_category('dev')
        engine.set_search_query('generator')
        assert visible_ids(engine) == []


class TestSorting:
    """Test sort modes."""

    @pytest.fixture
    def mixed_catalog(self):
        return make_catalog([
            {"id": 1, "name": "b-tool", "category": "text", "url": "/1/"},
            {"id": 2, "name": "a-tool", "category": "design", "url": "/2/"},
            {"id": 3, "name": "d-tool", "category": "text", "url": "/3/", "popular": True},
            {"id": 4, "name": "c-tool", "category": "design", "url": "/4/"},
            {"id": 5, "name": "e-tool", "category": "text", "url": "/5/", "popular": True},
        ])

    def test_default_keeps_insertion_order(self, mixed_catalog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode('default')
        assert visible_ids(engine) == [1, 2, 3, 4, 5]

    def test_name(self, mixed_catalog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode(SortMode.NAME)
        assert visible_ids(engine) == [2, 1, 4, 3, 5]

    def test_category_is_stable(self, mixed_catalog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode('category')
        first = engine.get_visible_tools()
        assert [tool.id for tool in first] == [2, 4, 1, 3, 5]

        # Re-sorting an already sorted list changes nothing
        assert engine.sort_tools(first) == first

    def test_popular_first_and_stable(self, mixed_catalog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode('popular')
        assert visible_ids(engine) == [3, 5, 1, 2, 4]

    def test_unknown_mode_falls_back_to_default(self, mixed_catalog, caplog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode('newest')
        assert engine.state.sort_by == SortMode.DEFAULT
        assert visible_ids(engine) == [1, 2, 3, 4, 5]
        assert 'Unknown sort mode' in caplog.text

    def test_sort_does_not_mutate_catalog(self, mixed_catalog):
        engine = CatalogEngine(mixed_catalog)
        engine.set_sort_mode('name')
        engine.get_visible_tools()
        assert [tool.id for tool in mixed_catalog.tools] == [1, 2, 3, 4, 5]


class TestPurity:

    def test_repeated_calls_are_equal(self, engine):
        engine.set_search_query('o')
        engine.set_sort_mode('name')
        assert engine.get_visible_tools() == engine.get_visible_tools()
        assert engine.get_visible_category_counts() == engine.get_visible_category_counts()


class TestCategoryCounts:
    """Test the counts shown next to each category."""

    @pytest.fixture
    def two_tool_engine(self):
        catalog = make_catalog([
            {"id": 1, "name": "foo", "category": "x", "url": "/a/"},
            {"id": 2, "name": "bar", "category": "y", "url": "/b/"},
        ])
        return CatalogEngine(catalog)

    def test_load_time_counts_without_search(self, engine):
        assert engine.get_visible_category_counts() == {'all': 3, 'design': 1, 'dev': 1, 'utility': 1}

    def test_all_reflects_category_and_search_others_search_only(self, two_tool_engine):
        two_tool_engine.set_category('x')
        two_tool_engine.set_search_query('foo')
        counts = two_tool_engine.get_visible_category_counts()
        assert counts['all'] == 1
        assert counts['x'] == 1
        assert counts['y'] == 0

    def test_other_buckets_ignore_selected_category(self, two_tool_engine):
        two_tool_engine.set_category('x')
        two_tool_engine.set_search_query('bar')
        counts = two_tool_engine.get_visible_category_counts()
        assert counts['all'] == 0
        assert counts['x'] == 0
        assert counts['y'] == 1

    def test_all_reflects_category_without_search(self, two_tool_engine):
        two_tool_engine.set_category('y')
        counts = two_tool_engine.get_visible_category_counts()
        assert counts == {'all': 1, 'x': 1, 'y': 1}

    def test_empty_catalog(self):
        engine = CatalogEngine(Catalog.empty())
        assert engine.get_visible_tools() == []
        assert engine.get_visible_category_counts() == {'all': 0}


class TestFromParams:

    def test_applies_each_param(self, scenario_catalog):
        engine = CatalogEngine.from_params(scenario_catalog, {
            'category': 'utility', 'q': ' qr ', 'sort': 'name', 'view': 'list'
        })
        assert engine.state == UIState(current_category='utility', search_query='qr',
                                       sort_by=SortMode.NAME, current_view=ViewMode.LIST)
        assert visible_ids(engine) == [3]

    def test_missing_params_keep_defaults(self, scenario_catalog):
        engine = CatalogEngine.from_params(scenario_catalog, {})
        assert engine.state == UIState()

    def test_unknown_view_falls_back_to_grid(self, scenario_catalog):
        engine = CatalogEngine.from_params(scenario_catalog, {'view': 'carousel'})
        assert engine.state.current_view == ViewMode.GRID


class TestHeading:

    def test_all_category(self, engine):
        title, subtitle = engine.get_heading()
        assert title == '全部工具'
        assert subtitle == '发现最新最实用的AI工具'

    def test_specific_category(self, engine):
        engine.set_category('design')
        assert engine.get_heading() == ('设计工具', '1 个工具')

    def test_search(self, engine):
        engine.set_search_query('generator')
        title, subtitle = engine.get_heading()
        assert title == '搜索结果: "generator"'
        assert subtitle == '在 全部工具 中找到 1 个工具'

    def test_unknown_category_uses_id(self, engine):
        engine.set_category('mystery')
        assert engine.get_heading() == ('mystery', '0 个工具')
