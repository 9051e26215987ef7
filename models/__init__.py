from .excerpt_config import (
    ElementReplacement,
    ExcerptConfiguration,
    PluginConfiguration,
    SourceConfiguration,
    TruncateOptions,
    WILDCARD_NODE_TYPE,
)

__all__ = [
    'ElementReplacement',
    'ExcerptConfiguration',
    'PluginConfiguration',
    'SourceConfiguration',
    'TruncateOptions',
    'WILDCARD_NODE_TYPE',
]
