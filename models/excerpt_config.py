# models/excerpt_config.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Wildcard key inside ``nodeTypeSourceSet`` – applies to every node type.
WILDCARD_NODE_TYPE = "*"

OutputType = Literal["text", "html"]


class _ConfigModel(BaseModel):
    """
    Shared pydantic configuration for every plugin config model.

    The config file uses camelCase keys (``sourceField``, ``nodeTypeSourceSet``)
    while Python code uses snake_case; both spellings are accepted.  Models are
    frozen because the configuration is read‑only once loaded.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ----------------------------------------------------------------------
# Source settings
# ----------------------------------------------------------------------
class ElementReplacement(_ConfigModel):
    """Rename every element matching ``selector`` to ``replace_with``."""

    selector: str
    replace_with: str = Field(..., min_length=1)


class TruncateOptions(_ConfigModel):
    """How to shorten an extracted fragment while keeping valid markup."""

    length: int = Field(..., gt=0, description="Max characters (or words with by_words)")
    by_words: bool = False
    ellipsis: str = "..."
    reserve_last_word: bool = Field(
        default=False,
        description="Character mode only: never cut a word in half",
    )


class SourceConfiguration(_ConfigModel):
    """
    A named, reusable extraction strategy bound to one input field.

    ``type`` selects the strategy class from the registry.  The remaining
    fields are the settings of the built‑in ``htmlQuery`` strategy; extra keys
    are kept so that other strategy types can carry their own settings.
    """

    type: str
    source_field: str

    excerpt_selector: Optional[str] = None
    ignore_selector: Optional[str] = None
    strip_selector: Optional[str] = None
    element_replacements: List[ElementReplacement] = Field(default_factory=list)
    truncate: Optional[TruncateOptions] = None

    model_config = ConfigDict(extra="allow")


# ----------------------------------------------------------------------
# Excerpts & the aggregate plugin configuration
# ----------------------------------------------------------------------
class ExcerptConfiguration(_ConfigModel):
    """Output kind plus the node type → Source Set mapping of one excerpt."""

    type: OutputType
    node_type_source_set: Dict[str, str] = Field(default_factory=dict)

    def source_set_name_for(self, node_type: str) -> Optional[str]:
        """Source Set for ``node_type``, falling back to the ``*`` entry."""
        mapping = self.node_type_source_set
        if node_type in mapping:
            return mapping[node_type]
        return mapping.get(WILDCARD_NODE_TYPE)

    def applies_to(self, node_type: str) -> bool:
        return self.source_set_name_for(node_type) is not None


class PluginConfiguration(_ConfigModel):
    """
    Top‑level container: ``sources``, ``sourceSets`` and ``excerpts``.

    Only the shape is validated here.  Cross references (Source Set names used
    by excerpts, Source names listed in a Source Set) are checked lazily by
    the resolver the first time they are used.
    """

    sources: Dict[str, SourceConfiguration] = Field(default_factory=dict)
    source_sets: Dict[str, List[str]] = Field(default_factory=dict)
    excerpts: Dict[str, ExcerptConfiguration] = Field(default_factory=dict)

    def excerpts_for_node_type(self, node_type: str) -> Dict[str, ExcerptConfiguration]:
        """All excerpts that apply to ``node_type`` (directly or via ``*``)."""
        return {
            name: excerpt
            for name, excerpt in self.excerpts.items()
            if excerpt.applies_to(node_type)
        }
