"""
Tests for configuration loading.
"""
import json

import pytest
import yaml

from hyperglossary.core.exceptions import InvalidConfigError
from hyperglossary.utils.config_manager import AppConfig, ConfigManager


def test_defaults_without_file():
    manager = ConfigManager()

    assert manager.config.render.index_title == "Glossary"
    assert manager.config.render.index_filename == "index.html"
    assert manager.config.input.encoding == "utf-8"


def test_log_level_from_environment():
    assert ConfigManager().config.logging.log_level == "WARNING"


def test_output_dir_from_environment(monkeypatch):
    monkeypatch.setenv("GLOSSARY_OUTPUT_DIR", "public")

    assert ConfigManager().config.output_dir == "public"


def test_load_yaml(temp_dir):
    path = temp_dir / "config.yaml"
    path.write_text(yaml.dump({
        'render': {'index_title': 'Terms', 'page_suffix': '.htm'},
        'output_dir': 'public',
    }), encoding="utf-8")

    config = ConfigManager(path).config

    assert config.render.index_title == "Terms"
    assert config.render.page_suffix == ".htm"
    assert config.render.index_filename == "index.html"
    assert config.output_dir == "public"


def test_load_json(temp_dir):
    path = temp_dir / "config.json"
    path.write_text(json.dumps({'input': {'encoding': 'latin-1'}}), encoding="utf-8")

    assert ConfigManager(path).config.input.encoding == "latin-1"


def test_unknown_section_key(temp_dir):
    path = temp_dir / "config.yaml"
    path.write_text("render:\n  colour: red\n", encoding="utf-8")

    with pytest.raises(InvalidConfigError):
        ConfigManager(path)


def test_unsupported_format(temp_dir):
    path = temp_dir / "config.ini"
    path.write_text("[render]\n", encoding="utf-8")

    with pytest.raises(InvalidConfigError):
        ConfigManager(path)


def test_create_if_missing(temp_dir):
    path = temp_dir / "nested" / "config.yaml"

    ConfigManager(path, create_if_missing=True)

    assert path.exists()
    assert yaml.safe_load(path.read_text(encoding="utf-8"))['render']['index_title'] == "Glossary"


def test_missing_file_is_not_created_by_default(temp_dir):
    path = temp_dir / "config.yaml"

    ConfigManager(path)

    assert not path.exists()


def test_get_and_set(temp_dir):
    manager = ConfigManager(temp_dir / "config.yaml")

    manager.set('render.index_title', 'Terms')

    assert manager.get('render.index_title') == 'Terms'
    assert manager.get('render.missing', 'fallback') == 'fallback'
    with pytest.raises(KeyError):
        manager.set('render.missing', 1)


def test_save_and_reload(temp_dir):
    path = temp_dir / "config.json"
    config = AppConfig()
    config.render.index_title = "Lexicon"

    ConfigManager(path).save(config)

    assert ConfigManager(path).config.render.index_title == "Lexicon"


def test_export_template_loads_as_defaults(temp_dir):
    path = temp_dir / "template.yaml"
    ConfigManager().export_template(path)

    config = ConfigManager(path).config

    assert config.render.index_title == "Glossary"
    assert config.output_dir == "output"
    assert config.logging.log_to_file is True
