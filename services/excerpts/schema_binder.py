# services/excerpts/schema_binder.py
"""
Expose configured excerpts as fields of the host's node types.

For a node type, every excerpt whose ``nodeTypeSourceSet`` names that type
(or carries a ``*`` entry) becomes a field.  Reading the field resolves the
excerpt lazily through ``ExcerptResolver``; each read gets its own field
value cache.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from models.excerpt_config import OutputType
from .excerpt_resolver import ExcerptResolver


@dataclass(frozen=True)
class ExcerptField:
    """A lazily resolved excerpt field on one node type."""

    name: str
    node_type: str
    output_type: OutputType
    resolver: ExcerptResolver

    async def resolve(self, node: Any, context: Any = None) -> Optional[str]:
        return await self.resolver.resolve_excerpt(self.name, self.node_type, node, context)


class SchemaFieldBinder:
    """Builds the excerpt fields for node types of the host schema."""

    def __init__(self, resolver: ExcerptResolver):
        self.resolver = resolver

    def fields_for(self, node_type: str) -> Dict[str, ExcerptField]:
        excerpts = self.resolver.configuration.excerpts_for_node_type(node_type)
        fields = {
            name: ExcerptField(
                name=name,
                node_type=node_type,
                output_type=excerpt.type,
                resolver=self.resolver,
            )
            for name, excerpt in excerpts.items()
        }
        if fields:
            logger.debug(f"Adding excerpt fields {sorted(fields)} to node type '{node_type}'")
        return fields
