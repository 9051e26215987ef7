# tests/test_excerpt_config.py
import pytest
from pydantic import ValidationError

from models.excerpt_config import ExcerptConfiguration, SourceConfiguration


def test_specific_node_type_wins_over_wildcard(plugin_config):
    excerpt = plugin_config.excerpts["plainSnippet"]
    assert excerpt.source_set_name_for("MarkdownRemark") == "markdownHtml"
    assert excerpt.source_set_name_for("Mdx") == "summaryFirst"


def test_unmapped_node_type_without_wildcard(plugin_config):
    excerpt = plugin_config.excerpts["snippet"]
    assert excerpt.source_set_name_for("Mdx") is None
    assert excerpt.applies_to("Mdx") is False


def test_excerpts_for_node_type(plugin_config):
    assert set(plugin_config.excerpts_for_node_type("MarkdownRemark")) == {"snippet", "plainSnippet"}
    assert set(plugin_config.excerpts_for_node_type("Mdx")) == {"plainSnippet"}


def test_snake_case_names_are_accepted_too():
    excerpt = ExcerptConfiguration(type="html", node_type_source_set={"*": "x"})
    assert excerpt.node_type_source_set == {"*": "x"}


def test_configuration_is_frozen(plugin_config):
    source = plugin_config.sources["default"]
    with pytest.raises(ValidationError):
        source.source_field = "other"


def test_extra_settings_are_kept_for_other_strategy_types():
    source = SourceConfiguration.model_validate(
        {"type": "jsonPath", "sourceField": "data", "path": "$.summary"}
    )
    assert source.model_extra == {"path": "$.summary"}
