from __future__ import annotations


class ShortcutError(ValueError):
    """Base error for shortcut parsing, normalization and binding."""


class ConfigurationError(ShortcutError):
    """A predicate/filter declaration cannot be turned into a config."""


class ExpressionEvaluationError(ShortcutError):
    """A `#{...}` template could not be parsed or evaluated."""


class ShortcutSyntaxError(ShortcutError):
    """Shorthand text is not of the form `Name=arg1,arg2`."""
