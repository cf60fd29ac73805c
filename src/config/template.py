# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="zh-CN" data-theme="{{ theme }}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Toolbox Catalog</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        :root {
            --bg: #f5f7fb;
            --panel: #ffffff;
            --text: #2d3748;
            --muted: #718096;
            --accent: #667eea;
            --tag-bg: #e3f2fd;
            --tag-text: #1565c0;
        }
        [data-theme="dark"] {
            --bg: #1a202c;
            --panel: #2d3748;
            --text: #f7fafc;
            --muted: #a0aec0;
            --accent: #9f7aea;
            --tag-bg: #434190;
            --tag-text: #e9d8fd;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: var(--bg);
            min-height: 100vh;
            color: var(--text);
        }
        .header {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 20px;
            padding: 20px 30px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }
        .header h1 {
            font-size: 1.8em;
            font-weight: 300;
        }
        .search-form {
            flex: 1;
            max-width: 500px;
            position: relative;
        }
        .search-box {
            width: 100%;
            padding: 12px 20px;
            font-size: 16px;
            border: none;
            border-radius: 50px;
            background: rgba(255, 255, 255, 0.95);
            outline: none;
        }
        .search-clear {
            position: absolute;
            right: 16px;
            top: 50%;
            transform: translateY(-50%);
            color: #718096;
            text-decoration: none;
        }
        .theme-toggle {
            background: rgba(255, 255, 255, 0.2);
            color: white;
            border: 2px solid rgba(255, 255, 255, 0.3);
            padding: 8px 18px;
            border-radius: 50px;
            cursor: pointer;
        }
        .main {
            display: flex;
            gap: 30px;
            padding: 30px;
        }
        .sidebar {
            width: 240px;
            flex-shrink: 0;
        }
        .category-list {
            list-style: none;
        }
        .category-item a {
            display: flex;
            align-items: center;
            gap: 10px;
            padding: 10px 14px;
            border-radius: 10px;
            color: var(--text);
            text-decoration: none;
        }
        .category-item.active a {
            background: var(--accent);
            color: white;
        }
        .category-count {
            margin-left: auto;
            font-size: 0.85em;
            opacity: 0.8;
        }
        .content {
            flex: 1;
        }
        .content-header {
            display: flex;
            justify-content: space-between;
            align-items: flex-end;
            margin-bottom: 20px;
        }
        .content-header p {
            color: var(--muted);
        }
        .controls {
            display: flex;
            gap: 10px;
            align-items: center;
        }
        .view-btn {
            color: var(--text);
            text-decoration: none;
            padding: 6px 12px;
            border-radius: 8px;
        }
        .view-btn.active {
            background: var(--accent);
            color: white;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(280px, 1fr));
            gap: 20px;
        }
        .tools-grid.list-view {
            grid-template-columns: 1fr;
        }
        .tool-card {
            display: block;
            background: var(--panel);
            border-radius: 15px;
            padding: 25px;
            box-shadow: 0 8px 25px rgba(0,0,0,0.1);
            transition: all 0.3s ease;
            color: inherit;
            text-decoration: none;
        }
        .tool-card:hover {
            transform: translateY(-4px);
        }
        .card-icon {
            width: 44px;
            height: 44px;
            border-radius: 12px;
            background: var(--accent);
            color: white;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 1.3em;
            margin-bottom: 12px;
        }
        .tool-card h3 {
            margin-bottom: 10px;
            font-size: 1.2em;
            font-weight: 600;
        }
        .tool-card p {
            color: var(--muted);
            line-height: 1.5;
            margin-bottom: 15px;
        }
        .card-tags {
            display: flex;
            flex-wrap: wrap;
            gap: 8px;
        }
        .card-tag {
            background: var(--tag-bg);
            color: var(--tag-text);
            padding: 4px 12px;
            border-radius: 20px;
            font-size: 0.8em;
        }
        .empty-state {
            text-align: center;
            padding: 60px 20px;
            color: var(--muted);
        }
        .empty-state h2 {
            font-size: 1.6em;
            margin-bottom: 15px;
            font-weight: 300;
        }
        .footer {
            text-align: center;
            padding: 30px 20px;
            color: var(--muted);
            font-size: 0.9em;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Toolbox Catalog</h1>
        <form class="search-form" method="get" action="{{ link() }}">
            <input type="hidden" name="category" value="{{ state.category }}">
            <input type="hidden" name="sort" value="{{ state.sort }}">
            <input type="hidden" name="view" value="{{ state.view }}">
            <input type="text" class="search-box" name="q" placeholder="Search tools..." id="searchInput" value="{{ state.q }}">
            {% if state.q %}
            <a class="search-clear" id="searchClear" href="{{ link(q='') }}">&times;</a>
            {% endif %}
        </form>
        <button class="theme-toggle" id="themeToggle" type="button">{{ 'Light' if theme == 'dark' else 'Dark' }} mode</button>
    </div>

    <div class="main">
        <aside class="sidebar">
            <ul class="category-list" id="categoryList">
                {% for category in categories %}
                <li class="category-item {{ 'active' if category.active }}" data-category="{{ category.id }}">
                    <a href="{{ link(category=category.id) }}" class="category-link">
                        {{ category.icon_svg | safe }}
                        <span class="category-name">{{ category.name }}</span>
                        <span class="category-count" id="count-{{ category.id }}">{{ category.count }}</span>
                    </a>
                </li>
                {% endfor %}
            </ul>
        </aside>

        <section class="content">
            <div class="content-header">
                <div>
                    <h2 id="currentCategoryTitle">{{ heading.title }}</h2>
                    <p id="currentCategorySubtitle">{{ heading.subtitle }}</p>
                </div>
                <div class="controls">
                    <form method="get" action="{{ link() }}">
                        <input type="hidden" name="category" value="{{ state.category }}">
                        <input type="hidden" name="q" value="{{ state.q }}">
                        <input type="hidden" name="view" value="{{ state.view }}">
                        <select name="sort" id="sortSelect" onchange="this.form.submit()">
                            {% for mode in sort_modes %}
                            <option value="{{ mode.value }}" {{ 'selected' if mode.selected }}>{{ mode.label }}</option>
                            {% endfor %}
                        </select>
                    </form>
                    <a class="view-btn {{ 'active' if not list_view }}" data-view="grid" href="{{ link(view='grid') }}">Grid</a>
                    <a class="view-btn {{ 'active' if list_view }}" data-view="list" href="{{ link(view='list') }}">List</a>
                </div>
            </div>

            {% if empty %}
            <div class="empty-state" id="emptyState">
                <h2>No tools found</h2>
                <p>Try another category or adjust your search terms</p>
            </div>
            {% else %}
            <div class="tools-grid {{ 'list-view' if list_view }}" id="toolsGrid">
                {% for tool in tools %}
                <a class="tool-card" data-tool-id="{{ tool.id }}" href="{{ tool.open_path }}" target="_blank" rel="noopener noreferrer">
                    <div class="card-icon">{{ tool.icon }}</div>
                    <h3 class="card-title">{{ tool.name }}</h3>
                    <p class="card-description">{{ tool.description }}</p>
                    <div class="card-tags">
                        {% for tag in tool.tags %}
                        <span class="card-tag">{{ tag }}</span>
                        {% endfor %}
                    </div>
                </a>
                {% endfor %}
            </div>
            {% endif %}
        </section>
    </div>

    <div class="footer">
        <p>Toolbox Catalog - {{ total_tools }} tools | Built with Flask</p>
    </div>

    <script>
        document.getElementById('themeToggle').addEventListener('click', function() {
            fetch('/api/theme/toggle', { method: 'POST' })
                .then(response => response.json())
                .then(data => {
                    document.documentElement.setAttribute('data-theme', data.theme);
                    this.textContent = (data.theme === 'dark' ? 'Light' : 'Dark') + ' mode';
                });
        });

        document.getElementById('searchInput').addEventListener('keydown', function(e) {
            if (e.key === 'Escape' && this.value) {
                this.value = '';
                this.form.submit();
            }
        });
    </script>
</body>
</html>
'''
