# tests/test_config_loader.py
"""
Tests for the Pydantic‑based ``services.excerpts.config_loader`` module.

The loader returns **validated Pydantic models**, so the tests use
attribute access (e.g. ``cfg.sources["default"].source_field``) rather than
key‑lookup on raw dictionaries.
"""

import pytest
import yaml
from pydantic import ValidationError

from core.config import get_settings
from models.excerpt_config import PluginConfiguration, SourceConfiguration
from services.excerpts.config_loader import (
    load_plugin_configuration,
    parse_plugin_configuration,
)


# ----------------------------------------------------------------------
# The shipped sample configuration must load and be self‑consistent.
# ----------------------------------------------------------------------
def test_sample_configuration_loads():
    """
    Load ``configs/excerpts.yaml`` (the default path from the settings) and
    check every cross reference – the loader itself only checks the shape.
    """
    cfg = load_plugin_configuration(get_settings().EXCERPTS_CONFIG_PATH)
    assert isinstance(cfg, PluginConfiguration)

    for excerpt_name, excerpt in cfg.excerpts.items():
        for node_type, source_set_name in excerpt.node_type_source_set.items():
            assert source_set_name in cfg.source_sets, (
                f"{excerpt_name}/{node_type} points at unknown Source Set {source_set_name}"
            )
    for source_set_name, source_names in cfg.source_sets.items():
        for source_name in source_names:
            assert source_name in cfg.sources, f"{source_set_name} lists unknown Source {source_name}"


def test_default_path_comes_from_settings():
    assert load_plugin_configuration() == load_plugin_configuration(get_settings().EXCERPTS_CONFIG_PATH)


# ----------------------------------------------------------------------
# camelCase keys from the file map onto snake_case attributes.
# ----------------------------------------------------------------------
def test_camel_case_keys_are_accepted(raw_config):
    cfg = parse_plugin_configuration(raw_config)

    source = cfg.sources["excerptElement"]
    assert isinstance(source, SourceConfiguration)
    assert source.source_field == "html"
    assert source.excerpt_selector == ".excerpt"
    assert source.strip_selector == "a"
    assert source.ignore_selector is None
    assert source.element_replacements == []

    assert cfg.source_sets["markdownHtml"] == ["excerptElement", "default"]
    assert cfg.excerpts["snippet"].node_type_source_set == {"MarkdownRemark": "markdownHtml"}


def test_wrapped_file_is_unwrapped(tmp_path, raw_config):
    path = tmp_path / "plugin.yaml"
    path.write_text(yaml.safe_dump({"excerpts_plugin": raw_config}), encoding="utf-8")

    cfg = load_plugin_configuration(path)
    assert set(cfg.excerpts) == {"snippet", "plainSnippet"}


def test_dangling_references_are_not_rejected_at_load_time(tmp_path):
    """Cross references are validated lazily by the resolver, not here."""
    path = tmp_path / "plugin.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "sourceSets": {"broken": ["doesNotExist"]},
                "excerpts": {"e": {"type": "text", "nodeTypeSourceSet": {"*": "alsoMissing"}}},
            }
        ),
        encoding="utf-8",
    )
    cfg = load_plugin_configuration(path)
    assert cfg.sources == {}


# ----------------------------------------------------------------------
# Shape errors surface as ``ValidationError``.
# ----------------------------------------------------------------------
@pytest.mark.parametrize(
    "raw",
    [
        {"excerpts": {"e": {"type": "markdown", "nodeTypeSourceSet": {}}}},
        {"sources": {"s": {"type": "htmlQuery"}}},
        {"sources": {"s": {"type": "htmlQuery", "sourceField": "html", "truncate": {"length": -1}}}},
        {"sourceSets": {"s": "not-a-list"}},
    ],
)
def test_invalid_configuration_raises(raw):
    with pytest.raises(ValidationError):
        parse_plugin_configuration(raw)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plugin_configuration(tmp_path / "nope.yaml")


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_plugin_configuration(path)
