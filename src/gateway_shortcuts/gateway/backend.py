from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from gateway_shortcuts.errors import ConfigurationError, ShortcutError
from gateway_shortcuts.shortcut.expression import ExpressionResolver, TemplateExpressionResolver
from gateway_shortcuts.shortcut.ir import RouteIR, ShortcutDefinition

from .configurable import ShortcutConfigurable
from .filters import BUILTIN_FILTERS
from .models.route import BoundDefinition, Route
from .predicates import BUILTIN_PREDICATES


logger = logging.getLogger(__name__)


class GatewayBackend:
    """Compile IR routes into routes with bound predicate/filter configs."""

    def __init__(
        self,
        *,
        predicates: Optional[Mapping[str, ShortcutConfigurable]] = None,
        filters: Optional[Mapping[str, ShortcutConfigurable]] = None,
        resolver: Optional[ExpressionResolver] = None,
        registry: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._predicates = dict(BUILTIN_PREDICATES if predicates is None else predicates)
        self._filters = dict(BUILTIN_FILTERS if filters is None else filters)
        self._resolver = resolver if resolver is not None else TemplateExpressionResolver()
        self._registry = registry if registry is not None else {}

    def compile(self, routes: List[RouteIR]) -> List[Route]:
        compiled: List[Route] = []
        for route in sorted(routes, key=lambda r: r.order):
            compiled.append(
                Route(
                    id=route.id,
                    uri=route.uri,
                    order=route.order,
                    predicates=[
                        self._bind(route, d, self._predicates, kind="predicate")
                        for d in route.predicates
                    ],
                    filters=[
                        self._bind(route, d, self._filters, kind="filter")
                        for d in route.filters
                    ],
                    metadata=dict(route.metadata),
                )
            )
            logger.info("compiled route %s -> %s", route.id, route.uri)
        return compiled

    def _bind(
        self,
        route: RouteIR,
        definition: ShortcutDefinition,
        table: Mapping[str, ShortcutConfigurable],
        *,
        kind: str,
    ) -> BoundDefinition:
        declaration = table.get(definition.name)
        if declaration is None:
            raise ConfigurationError(
                f"Unable to find {kind} with name {definition.name!r} (route {route.id!r})"
            )

        try:
            normalized = declaration.normalize(definition.args, self._resolver, self._registry)
            config = declaration.bind(normalized)
        except ShortcutError:
            logger.error("route %s: invalid %s %s", route.id, kind, definition.name)
            raise

        logger.debug("route %s: bound %s %s %r", route.id, kind, definition.name, normalized)
        return BoundDefinition(name=definition.name, config=config)
