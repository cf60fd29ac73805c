import os
import json
import logging
from datetime import datetime
from pathlib import Path
from urllib.parse import urljoin
from flask import Flask, render_template_string, request, jsonify, redirect, url_for

# Import catalog engine
from catalog import CatalogEngine, SortMode, ToolRecord, UIState, build_view, load_catalog
from catalog.view import category_views, tool_view

# Import preference manager
from api.preferences import preference_manager, THEMES

from config.template import DASHBOARD_TEMPLATE
from utils.formatting import format_number

logger = logging.getLogger(__name__)

app = Flask(__name__)

app_root = Path(__file__).parent.parent


# Load app configuration from config.json
def load_app_config(config_file=None):
    """Load app configuration from config/config.json"""
    if config_file is None:
        config_file = app_root / "config" / "config.json"
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
                if isinstance(config, dict):
                    return config
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", config_file, e)
    return {}


def load_tool_config(app_config):
    """Per-tool settings keyed by tool id. Malformed sections are ignored."""
    tools = app_config.get('tools')
    if not isinstance(tools, dict):
        return {}
    return {str(tool_id): conf for tool_id, conf in tools.items() if isinstance(conf, dict)}


APP_CONFIG = load_app_config()
TOOL_CONFIG = load_tool_config(APP_CONFIG)


def is_tool_enabled(tool: ToolRecord, tool_config=None):
    """Check if a tool is enabled in config. Defaults to True if not specified."""
    if tool_config is None:
        tool_config = TOOL_CONFIG
    tool_conf = tool_config.get(str(tool.id), {})
    return tool_conf.get('enabled', True)


def get_catalog_source():
    """Catalog data file from env or config; None means the embedded tool list."""
    return os.environ.get('TOOLBOX_CATALOG_DATA') or APP_CONFIG.get('catalog_file') or None


CATALOG = load_catalog(get_catalog_source(), is_enabled=is_tool_enabled)

if APP_CONFIG.get('default_theme') in THEMES:
    preference_manager.default_theme = APP_CONFIG['default_theme']


DEFAULT_PARAMS = UIState().to_dict()


def get_engine():
    """Build an engine for the current request's query string."""
    return CatalogEngine.from_params(CATALOG, request.args)


@app.route('/')
def dashboard():
    engine = get_engine()
    view = build_view(engine, with_svg=True)
    state = view['state']

    def link(**overrides):
        params = {**state, **overrides}
        # Default values are left out of the query string
        params = {k: v for k, v in params.items() if v and v != DEFAULT_PARAMS.get(k)}
        return url_for('dashboard', **params)

    return render_template_string(
        DASHBOARD_TEMPLATE,
        theme=preference_manager.get_theme(),
        link=link,
        total_tools=format_number(len(CATALOG.tools)),
        **view
    )


# Catalog API Routes
@app.route('/api/tools')
def api_tools():
    engine = get_engine()
    tools = engine.get_visible_tools()
    return jsonify({
        'tools': [tool_view(tool) for tool in tools],
        'count': len(tools),
        'empty': not tools
    })


@app.route('/api/categories')
def api_categories():
    return jsonify({'categories': category_views(get_engine())})


@app.route('/api/catalog')
def api_catalog():
    return jsonify(build_view(get_engine()))


@app.route('/api/sort-modes')
def api_sort_modes():
    return jsonify({'sort_modes': [mode.value for mode in SortMode], 'default': SortMode.DEFAULT.value})


# Tool Routes
@app.route('/open/<int:tool_id>')
def open_tool(tool_id):
    tool = CATALOG.get_tool(tool_id)
    if tool is None:
        return jsonify({'success': False, 'error': 'Tool not found'}), 404

    logger.info("Opening tool %s: %s", tool.id, tool.name)
    # Relative tool urls are relative to the site root, not to /open/
    response = redirect(urljoin(request.url_root, tool.url))
    response.headers['Referrer-Policy'] = 'no-referrer'
    return response


# Theme API Routes
@app.route('/api/theme', methods=['GET'])
def get_theme():
    return jsonify({'theme': preference_manager.get_theme()})


@app.route('/api/theme', methods=['PUT'])
def set_theme():
    data = request.get_json(silent=True)
    if not data or 'theme' not in data:
        return jsonify({'success': False, 'error': 'No theme provided'}), 400

    try:
        theme = preference_manager.set_theme(data['theme'])
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    return jsonify({'success': True, 'theme': theme})


@app.route('/api/theme/toggle', methods=['POST'])
def toggle_theme():
    return jsonify({'success': True, 'theme': preference_manager.toggle_theme()})


@app.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'tools_count': len(CATALOG.tools),
        'categories_count': len(CATALOG.categories)
    })


if __name__ == '__main__':
    app.run(host='127.0.0.1', port=8000, debug=True)
