"""
Tests for the theme preference store.
"""

import json
import pytest
import sys
import os
import threading
from pathlib import Path

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from api.preferences import PreferenceManager, THEME_KEY, get_config_directory


@pytest.fixture
def manager(tmp_path):
    return PreferenceManager(tmp_path / "prefs" / "preferences.json")


class TestPreferenceStore:

    def test_absent_key_returns_none(self, manager):
        assert manager.get('missing') is None

    def test_set_then_get(self, manager):
        manager.set('answer', 'yes')
        assert manager.get('answer') == 'yes'
        assert json.loads(manager.preferences_file.read_text()) == {'answer': 'yes'}

    def test_unreadable_file_is_treated_as_empty(self, manager):
        manager.preferences_file.parent.mkdir(parents=True)
        manager.preferences_file.write_text('{broken')
        assert manager.get(THEME_KEY) is None
        manager.set(THEME_KEY, 'dark')
        assert manager.get(THEME_KEY) == 'dark'

    def test_non_string_values_are_ignored(self, manager):
        manager.preferences_file.parent.mkdir(parents=True)
        manager.preferences_file.write_text(json.dumps({THEME_KEY: 1}))
        assert manager.get(THEME_KEY) is None

    def test_save_replaces_file_without_leftovers(self, manager):
        manager.set('a', '1')
        manager.set('b', '2')
        assert [p.name for p in manager.preferences_file.parent.iterdir()] == ['preferences.json']
        assert json.loads(manager.preferences_file.read_text()) == {'a': '1', 'b': '2'}

    def test_failed_write_keeps_previous_file(self, manager, monkeypatch):
        manager.set(THEME_KEY, 'dark')

        def broken_dump(*args, **kwargs):
            raise TypeError("not serializable")

        monkeypatch.setattr(json, 'dump', broken_dump)
        with pytest.raises(TypeError):
            manager.set(THEME_KEY, 'light')
        monkeypatch.undo()

        assert manager.get(THEME_KEY) == 'dark'
        assert [p.name for p in manager.preferences_file.parent.iterdir()] == ['preferences.json']


class TestTheme:

    def test_default_theme_is_light(self, manager):
        assert manager.get_theme() == 'light'

    def test_configured_default(self, tmp_path):
        manager = PreferenceManager(tmp_path / "preferences.json", default_theme='dark')
        assert manager.get_theme() == 'dark'

    def test_invalid_configured_default_is_ignored(self, tmp_path):
        manager = PreferenceManager(tmp_path / "preferences.json", default_theme='sepia')
        assert manager.get_theme() == 'light'

    def test_set_theme_persists(self, manager):
        assert manager.set_theme('dark') == 'dark'
        assert PreferenceManager(manager.preferences_file).get_theme() == 'dark'

    def test_invalid_theme_raises(self, manager):
        with pytest.raises(ValueError):
            manager.set_theme('sepia')
        assert manager.get(THEME_KEY) is None

    def test_stored_invalid_theme_falls_back(self, manager):
        manager.set(THEME_KEY, 'sepia')
        assert manager.get_theme() == 'light'

    def test_toggle(self, manager):
        assert manager.toggle_theme() == 'dark'
        assert manager.toggle_theme() == 'light'
        assert manager.get(THEME_KEY) == 'light'

    def test_concurrent_toggles_are_not_lost(self, manager):
        results = []

        def toggle():
            results.append(manager.toggle_theme())

        threads = [threading.Thread(target=toggle) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count('dark') == 10
        assert results.count('light') == 10
        assert manager.get_theme() == 'light'


class TestConfigDirectory:

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv('TOOLBOX_CATALOG_CONFIG_DIR', str(tmp_path))
        assert get_config_directory() == tmp_path
        assert PreferenceManager().preferences_file == tmp_path / 'preferences.json'

    def test_default_location(self, monkeypatch):
        monkeypatch.delenv('TOOLBOX_CATALOG_CONFIG_DIR', raising=False)
        assert get_config_directory() == Path.home() / '.config' / 'toolbox-catalog'
