# services/excerpts/field_resolver.py
"""
Bridge between the excerpt engine and the host's per‑field resolution.

The host (a content schema / graph layer) knows how to compute the value of
any field declared on a node type.  The engine only needs "give me field X of
this node" and goes through the ``FieldResolver`` protocol for it.

Note: the ``context`` handed to the resolver is the ambient context of the
*excerpt* request, not of a request for the source field itself.  Fields
whose value depends on their own arguments therefore resolve as if called
without arguments; their output is not guaranteed to match a direct query.
"""

import inspect
import json
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol, Union

from loguru import logger

from .exceptions import MissingFieldError

FieldValue = Any
FieldResolveFn = Callable[[Any, Any], Union[FieldValue, Awaitable[FieldValue]]]


class FieldResolver(Protocol):
    """
    Resolves the value of ``field_name`` on ``node`` (of type ``node_type``).

    May return the value directly or an awaitable.  Raises
    ``MissingFieldError`` when the type does not declare the field; any other
    exception is treated as a failed resolution.
    """

    def resolve(
        self, node: Any, node_type: str, field_name: str, context: Any
    ) -> Union[FieldValue, Awaitable[FieldValue]]:
        ...


# ----------------------------------------------------------------------
# Host glue
# ----------------------------------------------------------------------
class SchemaFieldResolver:
    """
    Resolver backed by a schema mapping: node type → field name → callable.

    Each callable receives ``(node, context)`` and may be sync or async.
    """

    def __init__(self, schema: Mapping[str, Mapping[str, FieldResolveFn]]):
        self._schema = schema

    def resolve(self, node: Any, node_type: str, field_name: str, context: Any):
        fields = self._schema.get(node_type, {})
        resolve_fn = fields.get(field_name)
        if resolve_fn is None:
            raise MissingFieldError(node_type, field_name)
        return resolve_fn(node, context)


class NodeAttributeFieldResolver:
    """
    Reads fields straight off the node: a key for mapping nodes, an
    attribute for anything else.  Used for plain data nodes (CLI, tests).
    """

    def resolve(self, node: Any, node_type: str, field_name: str, context: Any):
        if isinstance(node, Mapping):
            if field_name not in node:
                raise MissingFieldError(node_type, field_name)
            return node[field_name]
        if not hasattr(node, field_name):
            raise MissingFieldError(node_type, field_name)
        return getattr(node, field_name)


# ----------------------------------------------------------------------
# Per‑call memoization
# ----------------------------------------------------------------------
def _describe_node(node: Any) -> str:
    try:
        return json.dumps(node, default=str)
    except (TypeError, ValueError):
        return repr(node)


class FieldValueCache:
    """
    Field values for one excerpt resolution.

    Each distinct field is resolved at most once, however many Sources read
    it.  Failures are logged and remembered as absent (``None``) so that the
    caller just moves on to its next Source.  Never shared between calls.
    """

    def __init__(
        self,
        resolver: FieldResolver,
        node_type: str,
        node: Any,
        context: Any = None,
        excerpt_name: Optional[str] = None,
    ):
        self.resolver = resolver
        self.node_type = node_type
        self.node = node
        self.context = context
        self.excerpt_name = excerpt_name
        self._values: Dict[str, Optional[FieldValue]] = {}

    async def get(self, field_name: str) -> Optional[FieldValue]:
        if field_name not in self._values:
            self._values[field_name] = await self._resolve(field_name)
        return self._values[field_name]

    async def _resolve(self, field_name: str) -> Optional[FieldValue]:
        try:
            value = self.resolver.resolve(self.node, self.node_type, field_name, self.context)
            if inspect.isawaitable(value):
                value = await value
        except MissingFieldError as exc:
            logger.info(f"{exc} Skipping it for excerpt '{self.excerpt_name}'.")
            return None
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning(
                f"Failed to retrieve field '{field_name}' for excerpt '{self.excerpt_name}' "
                f"on node {_describe_node(self.node)}: {exc}"
            )
            return None
        return value
