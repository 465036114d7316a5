from __future__ import annotations

import re
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import ValidationError

from gateway_shortcuts.errors import ConfigurationError
from gateway_shortcuts.shortcut.expression import ExpressionResolver
from gateway_shortcuts.shortcut.normalizer import NormalizedConfig, ShortcutType, normalize

from .models.base import ShortcutConfig


_INDEXED_KEY_RE = re.compile(r"^(.+)\[(\d+)\]$")


class ShortcutConfigurable:
    """Declares how shorthand args map onto a predicate/filter config type.

    Subclasses set `name`, `config_class` and, where the shorthand form
    takes positional args, `shortcut_field_order` (the field hints) and
    `shortcut_type`.
    """

    name: ClassVar[str]
    config_class: ClassVar[Type[ShortcutConfig]]
    shortcut_type: ClassVar[ShortcutType] = ShortcutType.DEFAULT
    shortcut_field_order: ClassVar[Tuple[str, ...]] = ()
    shortcut_field_prefix: ClassVar[str] = ""

    def normalize(
        self,
        args: Mapping[str, Optional[str]],
        resolver: ExpressionResolver,
        registry: Mapping[str, Any],
    ) -> NormalizedConfig:
        return normalize(args, list(self.shortcut_field_order), self.shortcut_type, resolver, registry)

    def bind(self, normalized: NormalizedConfig) -> ShortcutConfig:
        """Validate normalized args into an instance of `config_class`."""

        data = _gather_indexed(_strip_prefix(normalized, self.shortcut_field_prefix))
        try:
            return self.config_class.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid args for {self.name!r}: {exc}") from exc


def _strip_prefix(normalized: NormalizedConfig, prefix: str) -> NormalizedConfig:
    if not prefix:
        return dict(normalized)
    marker = f"{prefix}."
    return {
        (key[len(marker) :] if key.startswith(marker) else key): value
        for key, value in normalized.items()
    }


def _gather_indexed(normalized: NormalizedConfig) -> NormalizedConfig:
    """Collect `field[0]`, `field[1]`, ... keys into a list under `field`."""

    data: NormalizedConfig = {}
    indexed: Dict[str, List[Tuple[int, Any]]] = {}
    for key, value in normalized.items():
        match = _INDEXED_KEY_RE.match(key)
        if match is None:
            data[key] = value
        else:
            indexed.setdefault(match.group(1), []).append((int(match.group(2)), value))
    for field, items in indexed.items():
        data[field] = [value for _, value in sorted(items, key=lambda item: item[0])]
    return data
