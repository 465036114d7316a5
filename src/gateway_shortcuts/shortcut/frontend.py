from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Union
import tomllib

from ..errors import ConfigurationError
from .config import Config, DefinitionConfig
from .dsl import parse_shortcut
from .ir import RouteIR, ShortcutDefinition


logger = logging.getLogger(__name__)


class RouteFrontend:
    """Parse route config (TOML) into platform-agnostic IR routes."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML config file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> List[RouteIR]:
        cfg = Config.model_validate(config)

        routes: List[RouteIR] = []
        for route in cfg.routes:
            parsed = RouteIR(
                id=route.id,
                uri=route.uri,
                order=route.order,
                predicates=[_to_definition(p) for p in route.predicates],
                filters=[_to_definition(f) for f in route.filters],
                metadata=dict(route.metadata),
            )
            logger.debug(
                "parsed route %s: %d predicate(s), %d filter(s)",
                parsed.id,
                len(parsed.predicates),
                len(parsed.filters),
            )
            routes.append(parsed)

        return routes


def _to_definition(item: Union[str, DefinitionConfig]) -> ShortcutDefinition:
    if isinstance(item, str):
        return parse_shortcut(item)
    # Expanded form: args are already named; keep declaration order.
    args: Dict[str, str | None] = {}
    for key, value in item.args.items():
        if isinstance(value, list):
            # Lists flatten to indexed keys: patterns[0], patterns[1], ...
            for i, element in enumerate(value):
                args[f"{key}[{i}]"] = _stringify(item.name, f"{key}[{i}]", element)
        else:
            args[str(key)] = _stringify(item.name, str(key), value)
    return ShortcutDefinition(name=item.name, args=args)


def _stringify(name: str, key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ConfigurationError(f"unsupported nested value for {name!r} arg {key!r}: {value!r}")
    return str(value)
