"""Tests for application settings."""

from pathlib import Path

from citynamegen.settings import (
    PACKAGE_ROOT,
    default_data_file,
    get_setting,
    load_app_config,
    resolve_path,
)


def test_app_config_loads():
    assert isinstance(load_app_config(), dict)


def test_nested_setting():
    assert get_setting('generation.count.default') == 10
    assert get_setting('generation.count.min') == 1
    assert get_setting('generation.count.max') == 999


def test_missing_setting_default():
    assert get_setting('generation.nope', 'x') == 'x'
    assert get_setting('generation.count.default.deeper', 5) == 5


def test_resolve_relative_path():
    assert resolve_path('data/x.yaml') == (PACKAGE_ROOT / 'data' / 'x.yaml').resolve()


def test_resolve_absolute_path(tmp_path):
    assert resolve_path(str(tmp_path)) == tmp_path


def test_resolve_with_base(tmp_path):
    assert resolve_path('a.json', base=tmp_path) == (tmp_path / 'a.json').resolve()


def test_default_data_file_exists():
    path = default_data_file()
    assert isinstance(path, Path)
    assert path.is_file()
