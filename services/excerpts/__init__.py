"""Configurable excerpt extraction for content nodes."""

from .strategies import ExcerptStrategy, StrategyRegistry, registry

# Importing the module registers the built-in ``htmlQuery`` strategy.
from .html_query import HtmlQueryStrategy, extract_fragment
from .excerpt_resolver import ExcerptResolver
from .field_resolver import (
    FieldResolver,
    FieldValueCache,
    NodeAttributeFieldResolver,
    SchemaFieldResolver,
)
from .schema_binder import ExcerptField, SchemaFieldBinder
from .exceptions import (
    ExcerptConfigurationError,
    MissingFieldError,
    NoApplicableSourceSetError,
    UnknownExcerptError,
    UnknownSourceError,
    UnknownSourceSetError,
    UnknownStrategyTypeError,
)

__all__ = [
    "ExcerptStrategy",
    "StrategyRegistry",
    "registry",
    "HtmlQueryStrategy",
    "extract_fragment",
    "ExcerptResolver",
    "FieldResolver",
    "FieldValueCache",
    "NodeAttributeFieldResolver",
    "SchemaFieldResolver",
    "ExcerptField",
    "SchemaFieldBinder",
    "ExcerptConfigurationError",
    "MissingFieldError",
    "NoApplicableSourceSetError",
    "UnknownExcerptError",
    "UnknownSourceError",
    "UnknownSourceSetError",
    "UnknownStrategyTypeError",
]
