from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..errors import ConfigurationError
from .dsl import is_generated_name
from .expression import EXPRESSION_PREFIX, EXPRESSION_SUFFIX, ExpressionResolver


RawArgs = Mapping[str, Optional[str]]
NormalizedConfig = Dict[str, Any]


class ShortcutType(str, Enum):
    """How shorthand args are mapped onto the fields of a config type."""

    # Each entry becomes its own field; unnamed entries take positional hints.
    DEFAULT = "default"
    # All values collected into a list under the single hinted field.
    GATHER_LIST = "gather_list"
    # Like GATHER_LIST, but a trailing true/false goes to the second field.
    GATHER_LIST_TAIL_FLAG = "gather_list_tail_flag"


def normalize_key(key: str, index: int, field_hints: Sequence[str], args: RawArgs) -> str:
    """Replace a generated placeholder key with the field hint at its position."""

    if (
        is_generated_name(key)
        and field_hints
        and index < len(args)
        and index < len(field_hints)
    ):
        return field_hints[index]
    return key


def resolve_value(
    value: Optional[str],
    resolver: ExpressionResolver,
    registry: Mapping[str, Any],
) -> Any:
    """Evaluate `value` if it looks like a `#{...}` template, else return it as is."""

    if value is None:
        return None
    if value.strip().startswith(EXPRESSION_PREFIX) and value.endswith(EXPRESSION_SUFFIX):
        return resolver.resolve(value, registry)
    return value


def _normalize_default(
    args: RawArgs,
    field_hints: Sequence[str],
    resolver: ExpressionResolver,
    registry: Mapping[str, Any],
) -> NormalizedConfig:
    normalized: NormalizedConfig = {}
    for index, (key, value) in enumerate(args.items()):
        # Duplicate keys after normalization: the later entry wins.
        normalized[normalize_key(key, index, field_hints, args)] = resolve_value(
            value, resolver, registry
        )
    return normalized


def _normalize_gather_list(
    args: RawArgs,
    field_hints: Sequence[str],
    resolver: ExpressionResolver,
    registry: Mapping[str, Any],
) -> NormalizedConfig:
    _require_hints(ShortcutType.GATHER_LIST, field_hints, 1)
    return {field_hints[0]: [resolve_value(v, resolver, registry) for v in args.values()]}


def _normalize_gather_list_tail_flag(
    args: RawArgs,
    field_hints: Sequence[str],
    resolver: ExpressionResolver,
    registry: Mapping[str, Any],
) -> NormalizedConfig:
    _require_hints(ShortcutType.GATHER_LIST_TAIL_FLAG, field_hints, 2)

    normalized: NormalizedConfig = {}
    values: List[Optional[str]] = list(args.values())
    if values and _is_boolean_literal(values[-1]):
        normalized[field_hints[1]] = resolve_value(values.pop(), resolver, registry)

    normalized[field_hints[0]] = [resolve_value(v, resolver, registry) for v in values]
    return normalized


def _is_boolean_literal(value: Optional[str]) -> bool:
    return value is not None and value.lower() in ("true", "false")


def _require_hints(mode: ShortcutType, field_hints: Sequence[str], size: int) -> None:
    if field_hints is None or len(field_hints) != size:
        raise ConfigurationError(
            f"Shortcut Configuration Type {mode.name} must have shortcut field hints of size {size}"
        )


NormalizeStrategy = Callable[
    [RawArgs, Sequence[str], ExpressionResolver, Mapping[str, Any]], NormalizedConfig
]

_STRATEGIES: Dict[ShortcutType, NormalizeStrategy] = {
    ShortcutType.DEFAULT: _normalize_default,
    ShortcutType.GATHER_LIST: _normalize_gather_list,
    ShortcutType.GATHER_LIST_TAIL_FLAG: _normalize_gather_list_tail_flag,
}


def normalize(
    args: RawArgs,
    field_hints: Sequence[str],
    mode: ShortcutType,
    resolver: ExpressionResolver,
    registry: Mapping[str, Any] | None = None,
) -> NormalizedConfig:
    """Normalize ordered shorthand args into a field-name -> value mapping.

    `field_hints` is the ordered field list of the target config type and
    `mode` its declared ShortcutType. Values that look like `#{...}`
    templates are evaluated through `resolver` against `registry`; resolver
    errors propagate unchanged.
    """

    try:
        strategy = _STRATEGIES[ShortcutType(mode)]
    except ValueError as exc:
        raise ConfigurationError(f"unknown shortcut type {mode!r}") from exc
    return strategy(args, field_hints, resolver, registry if registry is not None else {})
