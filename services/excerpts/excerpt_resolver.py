# services/excerpts/excerpt_resolver.py
"""
Resolve one named excerpt for one content node.

Given an excerpt name, the node's type and the node itself, the resolver
picks the Source Set configured for that type (or the ``*`` fallback), then
tries its Sources in order:

* resolve the Source's ``source_field`` (once per field per call);
* skip the Source when the field has no value for this node;
* run the Source's strategy on the value;
* on the first match, serialize it to the excerpt's output type and stop.

Sources after the first match are never evaluated, so their fields are
never requested from the host.  When no Source matches the result is
``None`` – content without excerptable material is not an error.

Misconfiguration (unknown excerpt, Source Set, Source or strategy type) is
logged and raised.
"""

from typing import Any, List, Optional, Tuple

from loguru import logger

from models.excerpt_config import ExcerptConfiguration, PluginConfiguration, SourceConfiguration
from .exceptions import (
    NoApplicableSourceSetError,
    UnknownExcerptError,
    UnknownSourceError,
    UnknownSourceSetError,
)
from .field_resolver import FieldResolver, FieldValueCache
from .strategies import StrategyRegistry, registry as default_registry


class ExcerptResolver:
    """Resolves excerpts against an immutable ``PluginConfiguration``."""

    def __init__(
        self,
        configuration: PluginConfiguration,
        field_resolver: FieldResolver,
        strategies: Optional[StrategyRegistry] = None,
    ):
        self.configuration = configuration
        self.field_resolver = field_resolver
        self.strategies = strategies or default_registry

    # ------------------------------------------------------------------
    # Configuration lookups – each raises a descriptive error
    # ------------------------------------------------------------------
    def _excerpt(self, excerpt_name: str) -> ExcerptConfiguration:
        excerpt = self.configuration.excerpts.get(excerpt_name)
        if excerpt is None:
            logger.error(f"Unknown excerpt '{excerpt_name}'")
            raise UnknownExcerptError(excerpt_name)
        return excerpt

    def _source_set(
        self, excerpt_name: str, excerpt: ExcerptConfiguration, node_type: str
    ) -> Tuple[str, List[str]]:
        """Name and Source list of the Source Set serving ``node_type``."""
        source_set_name = excerpt.source_set_name_for(node_type)
        if source_set_name is None:
            logger.error(f"Excerpt '{excerpt_name}' does not apply to node type '{node_type}'")
            raise NoApplicableSourceSetError(excerpt_name, node_type)

        source_names = self.configuration.source_sets.get(source_set_name)
        if source_names is None:
            logger.error(f"Source Set '{source_set_name}' used by excerpt '{excerpt_name}' is not defined")
            raise UnknownSourceSetError(source_set_name, excerpt_name)
        return source_set_name, source_names

    def _source(self, source_name: str, source_set_name: str) -> SourceConfiguration:
        source = self.configuration.sources.get(source_name)
        if source is None:
            logger.error(f"Source '{source_name}' listed in Source Set '{source_set_name}' is not defined")
            raise UnknownSourceError(source_name, source_set_name)
        return source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def resolve_excerpt(
        self,
        excerpt_name: str,
        node_type: str,
        node: Any,
        context: Any = None,
    ) -> Optional[str]:
        """
        Return the excerpt ``excerpt_name`` for ``node`` or ``None`` when no
        Source produced anything.

        Raises
        ------
        ExcerptConfigurationError
            One of its subclasses, when the configuration references a name it
            does not define.
        """
        excerpt = self._excerpt(excerpt_name)
        source_set_name, source_names = self._source_set(excerpt_name, excerpt, node_type)
        fields = FieldValueCache(
            self.field_resolver, node_type, node, context, excerpt_name=excerpt_name
        )

        for source_name in source_names:
            source = self._source(source_name, source_set_name)

            value = await fields.get(source.source_field)
            if value is None:
                logger.debug(
                    f"[{excerpt_name}] source '{source_name}': field '{source.source_field}' has no value"
                )
                continue

            strategy = self.strategies.create(source.type, source)
            match = strategy.search(value)
            if match is None:
                logger.debug(f"[{excerpt_name}] source '{source_name}': no match")
                continue

            logger.debug(f"[{excerpt_name}] source '{source_name}' matched for a {node_type} node")
            return strategy.convert(match, excerpt.type)

        logger.debug(f"[{excerpt_name}] no source produced an excerpt for a {node_type} node")
        return None
