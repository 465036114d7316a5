from __future__ import annotations

from .errors import (
    ConfigurationError,
    ExpressionEvaluationError,
    ShortcutError,
    ShortcutSyntaxError,
)
from .shortcut.normalizer import ShortcutType, normalize

__all__ = [
    "ConfigurationError",
    "ExpressionEvaluationError",
    "ShortcutError",
    "ShortcutSyntaxError",
    "ShortcutType",
    "normalize",
]
