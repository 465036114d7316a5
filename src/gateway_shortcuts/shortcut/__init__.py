from __future__ import annotations

from .dsl import GENERATED_NAME_PREFIX, generate_name, is_generated_name, parse_shortcut
from .expression import ExpressionResolver, TemplateExpressionResolver
from .frontend import RouteFrontend
from .ir import RouteIR, ShortcutDefinition
from .normalizer import ShortcutType, normalize, normalize_key, resolve_value

__all__ = [
    "GENERATED_NAME_PREFIX",
    "ExpressionResolver",
    "RouteFrontend",
    "RouteIR",
    "ShortcutDefinition",
    "ShortcutType",
    "TemplateExpressionResolver",
    "generate_name",
    "is_generated_name",
    "normalize",
    "normalize_key",
    "parse_shortcut",
    "resolve_value",
]
