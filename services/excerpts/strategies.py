# services/excerpts/strategies.py
"""
Strategy base class and the registry that maps a Source's ``type`` tag to the
class implementing it.

A strategy is built per Source from its ``SourceConfiguration`` and exposes
``search`` (field value → match or ``None``) plus a table of output
converters keyed by output kind.  New strategy types are added by
registering another subclass; the resolver never looks at the tag itself.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Type

from loguru import logger

from models.excerpt_config import SourceConfiguration
from .exceptions import UnknownStrategyTypeError


class ExcerptStrategy(ABC):
    """Base class of every excerpt extraction strategy."""

    type_tag: ClassVar[str] = ""

    def __init__(self, settings: SourceConfiguration) -> None:
        self.settings = settings

    @abstractmethod
    def search(self, field_value: Any) -> Optional[Any]:
        """Return a match for ``field_value`` or ``None`` when nothing was found."""

    @property
    @abstractmethod
    def output_converters(self) -> Mapping[str, Callable[[Any], str]]:
        """Output kind (``text`` / ``html``) → serializer for a match."""

    def convert(self, match: Any, output_type: str) -> str:
        converter = self.output_converters.get(output_type)
        if converter is None:
            raise ValueError(
                f"Strategy '{self.type_tag}' cannot produce output type '{output_type}'"
            )
        return converter(match)


class StrategyRegistry:
    """Keeps the type tag → strategy class mapping."""

    def __init__(self) -> None:
        self._registry: Dict[str, Type[ExcerptStrategy]] = {}

    def register(self, strategy_cls: Type[ExcerptStrategy]) -> Type[ExcerptStrategy]:
        """
        Register ``strategy_cls`` under its ``type_tag``.  A later registration
        for the same tag replaces the earlier one.  Returns the class so it can
        be used as a decorator.
        """
        if not strategy_cls.type_tag:
            raise ValueError(f"{strategy_cls.__name__} does not define a type_tag")
        if strategy_cls.type_tag in self._registry:
            logger.debug(f"Replacing excerpt strategy for type '{strategy_cls.type_tag}'")
        self._registry[strategy_cls.type_tag] = strategy_cls
        return strategy_cls

    def create(self, type_tag: str, settings: SourceConfiguration) -> ExcerptStrategy:
        strategy_cls = self._registry.get(type_tag)
        if strategy_cls is None:
            logger.error(f"Unknown excerpt source type '{type_tag}'")
            raise UnknownStrategyTypeError(type_tag)
        return strategy_cls(settings)

    def available(self) -> List[str]:
        return sorted(self._registry)


# Default registry; the built‑in strategies register themselves on import.
registry = StrategyRegistry()
