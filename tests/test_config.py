"""
Tests for configuration loading and path resolution

Tests cover:
- Defaults when no config file exists
- Overrides from overlay.json
- Extension normalisation
- Malformed config files
- Assets / config folder resolution and environment overrides
"""

import json

import pytest

from overlay.constants import SUPPORTED_EXTENSIONS, DEFAULT_ASSETS_DIRNAME
from overlay.utils import logger as overlay_logger
from overlay.utils.config import load_config, resolve_assets_dir
from overlay.utils.path_resolver import get_assets_dir, get_base_dir, get_config_path


def test_defaults_without_file(tmp_path):
    config = load_config(tmp_path / 'missing.json')

    assert config['assets_dir'] is None
    assert config['extensions'] == SUPPORTED_EXTENSIONS


def test_default_path_uses_config_dir(isolated_environment):
    (isolated_environment / 'overlay.json').write_text(json.dumps({'assets_dir': 'images'}))

    assert get_config_path() == isolated_environment / 'overlay.json'
    assert load_config()['assets_dir'] == 'images'


def test_file_overrides(tmp_path):
    path = tmp_path / 'overlay.json'
    path.write_text(json.dumps({'assets_dir': '/srv/layers', 'extensions': ['PNG', '.webp'], 'unknown': 1}))

    config = load_config(path)

    assert config['assets_dir'] == '/srv/layers'
    assert config['extensions'] == ('.png', '.webp')
    assert 'unknown' not in config


def test_malformed_json(tmp_path):
    path = tmp_path / 'overlay.json'
    path.write_text('{not json')

    with pytest.raises(ValueError):
        load_config(path)


def test_non_object_json(tmp_path):
    path = tmp_path / 'overlay.json'
    path.write_text('[1, 2, 3]')

    with pytest.raises(ValueError, match='JSON object'):
        load_config(path)


def test_malformed_json_logged_in_release_mode(tmp_path, monkeypatch, caplog):
    """Release builds log the failure before re-raising"""
    monkeypatch.setattr(overlay_logger, 'DEBUG_MODE', False)
    path = tmp_path / 'overlay.json'
    path.write_text('{not json')

    with pytest.raises(ValueError):
        load_config(path)

    assert 'Error loading config' in caplog.text


def test_resolve_assets_dir_from_config(tmp_path):
    assert resolve_assets_dir({'assets_dir': str(tmp_path)}) == tmp_path


def test_resolve_assets_dir_default():
    assert resolve_assets_dir({'assets_dir': None}) == get_base_dir() / DEFAULT_ASSETS_DIRNAME


def test_assets_dir_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv('OVERLAY_ASSETS_DIR', str(tmp_path))

    assert get_assets_dir() == tmp_path
    assert resolve_assets_dir({'assets_dir': None}) == tmp_path


def test_logger_raise_debug_mode_reraises(monkeypatch):
    monkeypatch.setattr(overlay_logger, 'DEBUG_MODE', True)

    with pytest.raises(KeyError):
        overlay_logger.loggerRaise(KeyError('boom'))


@pytest.mark.parametrize('settings, key', [
    ({'extensions': 5}, 'extensions'),
    ({'extensions': 'png'}, 'extensions'),
    ({'extensions': [1, '.png']}, 'extensions'),
    ({'extensions': ['']}, 'extensions'),
    ({'assets_dir': 5}, 'assets_dir'),
    ({'assets_dir': ['images']}, 'assets_dir'),
])
def test_wrong_value_types(tmp_path, settings, key):
    path = tmp_path / 'overlay.json'
    path.write_text(json.dumps(settings))

    with pytest.raises(ValueError, match=key):
        load_config(path)


def test_null_assets_dir_allowed(tmp_path):
    path = tmp_path / 'overlay.json'
    path.write_text(json.dumps({'assets_dir': None, 'extensions': ['png']}))

    config = load_config(path)

    assert config['assets_dir'] is None
    assert config['extensions'] == ('.png',)
