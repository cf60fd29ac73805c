"""
Integration tests against a running Toolbox Catalog server.
"""

import pytest
import requests

pytestmark = pytest.mark.integration


class TestCatalogServer:

    def test_health(self, base_url):
        response = requests.get(f"{base_url}/health", timeout=5)
        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'healthy'
        assert data['tools_count'] > 0

    def test_filtered_tools(self, base_url):
        response = requests.get(f"{base_url}/api/tools", params={'category': 'games', 'sort': 'name'}, timeout=5)
        assert response.status_code == 200
        data = response.json()
        assert data['count'] > 0
        assert all(tool['category'] == 'games' for tool in data['tools'])

    def test_search_without_matches(self, base_url):
        response = requests.get(f"{base_url}/api/tools", params={'q': 'zzz-no-such-tool'}, timeout=5)
        data = response.json()
        assert data['tools'] == []
        assert data['empty'] is True

    def test_open_tool_redirects(self, base_url):
        response = requests.get(f"{base_url}/open/13", allow_redirects=False, timeout=5)
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/tools/text-counter/')

    def test_theme_round_trip(self, base_url):
        response = requests.put(f"{base_url}/api/theme", json={'theme': 'dark'}, timeout=5)
        assert response.status_code == 200
        assert requests.get(f"{base_url}/api/theme", timeout=5).json()['theme'] == 'dark'
        requests.put(f"{base_url}/api/theme", json={'theme': 'light'}, timeout=5)
