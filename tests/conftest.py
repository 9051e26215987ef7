import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.excerpt_config import PluginConfiguration
from services.excerpts.exceptions import MissingFieldError


RAW_CONFIG = {
    "sources": {
        "excerptElement": {
            "type": "htmlQuery",
            "sourceField": "html",
            "excerptSelector": ".excerpt",
            "stripSelector": "a",
        },
        "default": {
            "type": "htmlQuery",
            "sourceField": "html",
            "ignoreSelector": "img, pre",
            "stripSelector": "a",
        },
        "summaryField": {
            "type": "htmlQuery",
            "sourceField": "summary",
        },
    },
    "sourceSets": {
        "markdownHtml": ["excerptElement", "default"],
        "summaryFirst": ["summaryField", "excerptElement", "default"],
    },
    "excerpts": {
        "snippet": {
            "type": "html",
            "nodeTypeSourceSet": {"MarkdownRemark": "markdownHtml"},
        },
        "plainSnippet": {
            "type": "text",
            "nodeTypeSourceSet": {
                "MarkdownRemark": "markdownHtml",
                "*": "summaryFirst",
            },
        },
    },
}


@pytest.fixture
def raw_config():
    return RAW_CONFIG


@pytest.fixture
def plugin_config():
    return PluginConfiguration.model_validate(RAW_CONFIG)


class RecordingFieldResolver:
    """
    Field resolver over plain dict nodes that records every request.

    A value that is an ``Exception`` instance is raised instead of returned;
    ``async_fields`` are returned as coroutines.
    """

    def __init__(self, async_fields=()):
        self.calls = []
        self.async_fields = set(async_fields)

    def resolve(self, node, node_type, field_name, context):
        self.calls.append(field_name)
        if field_name not in node:
            raise MissingFieldError(node_type, field_name)
        value = node[field_name]
        if isinstance(value, Exception):
            raise value
        if field_name in self.async_fields:
            async def _later():
                return value

            return _later()
        return value


@pytest.fixture
def field_resolver():
    return RecordingFieldResolver()


@pytest.fixture
def async_field_resolver():
    return RecordingFieldResolver(async_fields={"html", "summary"})
