from __future__ import annotations

from .backend import GatewayBackend
from .configurable import ShortcutConfigurable
from .filters import BUILTIN_FILTERS
from .models.route import BoundDefinition, Route
from .predicates import BUILTIN_PREDICATES

__all__ = [
    "BUILTIN_FILTERS",
    "BUILTIN_PREDICATES",
    "BoundDefinition",
    "GatewayBackend",
    "Route",
    "ShortcutConfigurable",
]
