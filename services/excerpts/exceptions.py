# services/excerpts/exceptions.py
"""
Error taxonomy of the excerpt engine.

Configuration errors mean the deployment is set up wrong (a name that is
referenced but never defined).  They are logged and raised to the caller and
surface as build failures.  ``MissingFieldError`` is the only per‑node
condition: the resolver logs it and moves on to the next Source.
"""


class ExcerptConfigurationError(KeyError):
    """Base class for every misconfiguration detected while resolving."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownExcerptError(ExcerptConfigurationError):
    """Raised when the requested excerpt is not defined in ``excerpts``."""

    def __init__(self, excerpt_name: str):
        super().__init__(f"Excerpt '{excerpt_name}' not found.")
        self.excerpt_name = excerpt_name


class NoApplicableSourceSetError(ExcerptConfigurationError):
    """Raised when an excerpt maps neither the node type nor ``*``."""

    def __init__(self, excerpt_name: str, node_type: str):
        super().__init__(
            f"Excerpt '{excerpt_name}' has no Source Set for node type '{node_type}' "
            "and no '*' fallback."
        )
        self.excerpt_name = excerpt_name
        self.node_type = node_type


class UnknownSourceSetError(ExcerptConfigurationError):
    """Raised when an excerpt points at a Source Set missing from ``sourceSets``."""

    def __init__(self, source_set_name: str, excerpt_name: str):
        super().__init__(
            f"Source Set '{source_set_name}' (used by excerpt '{excerpt_name}') not found."
        )
        self.source_set_name = source_set_name
        self.excerpt_name = excerpt_name


class UnknownSourceError(ExcerptConfigurationError):
    """Raised when a Source Set lists a Source missing from ``sources``."""

    def __init__(self, source_name: str, source_set_name: str):
        super().__init__(
            f"Source '{source_name}' (listed in Source Set '{source_set_name}') not found."
        )
        self.source_name = source_name
        self.source_set_name = source_set_name


class UnknownStrategyTypeError(ExcerptConfigurationError):
    """Raised when no strategy class is registered for a Source's ``type``."""

    def __init__(self, type_tag: str):
        super().__init__(f"No excerpt strategy registered for type '{type_tag}'.")
        self.type_tag = type_tag


class MissingFieldError(LookupError):
    """The requested field is not declared on the node's type."""

    def __init__(self, node_type: str, field_name: str):
        super().__init__(f"Field '{field_name}' does not exist on node type '{node_type}'.")
        self.node_type = node_type
        self.field_name = field_name
