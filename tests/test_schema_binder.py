# tests/test_schema_binder.py
import pytest

from services.excerpts import ExcerptResolver, SchemaFieldBinder


@pytest.fixture
def binder(plugin_config, field_resolver):
    return SchemaFieldBinder(ExcerptResolver(plugin_config, field_resolver))


def test_directly_mapped_type_gets_every_matching_excerpt(binder):
    fields = binder.fields_for("MarkdownRemark")
    assert set(fields) == {"snippet", "plainSnippet"}
    assert fields["snippet"].output_type == "html"
    assert fields["plainSnippet"].output_type == "text"


def test_wildcard_only_type_gets_wildcard_excerpts(binder):
    assert set(binder.fields_for("Mdx")) == {"plainSnippet"}


def test_type_outside_every_mapping_gets_nothing(plugin_config, field_resolver):
    config = plugin_config.model_copy(
        update={"excerpts": {"snippet": plugin_config.excerpts["snippet"]}}
    )
    binder = SchemaFieldBinder(ExcerptResolver(config, field_resolver))
    assert binder.fields_for("Mdx") == {}


@pytest.mark.asyncio
async def test_field_resolution_delegates_to_the_resolver(binder, field_resolver):
    field = binder.fields_for("Mdx")["plainSnippet"]
    node = {"summary": "<p>Bound</p>"}

    assert await field.resolve(node) == "Bound"
    # A second read starts from an empty field cache.
    assert await field.resolve(node) == "Bound"
    assert field_resolver.calls == ["summary", "summary"]
