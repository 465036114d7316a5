from __future__ import annotations

from gateway_shortcuts.shortcut.normalizer import ShortcutType

from .configurable import ShortcutConfigurable
from .models.predicates import (
    CookieConfig,
    HeaderConfig,
    HostConfig,
    MethodConfig,
    PathConfig,
    QueryConfig,
)


class CookiePredicate(ShortcutConfigurable):
    name = "Cookie"
    config_class = CookieConfig
    shortcut_field_order = ("name", "regexp")


class HeaderPredicate(ShortcutConfigurable):
    name = "Header"
    config_class = HeaderConfig
    shortcut_field_order = ("header", "regexp")


class QueryPredicate(ShortcutConfigurable):
    name = "Query"
    config_class = QueryConfig
    shortcut_field_order = ("param", "regexp")


class MethodPredicate(ShortcutConfigurable):
    name = "Method"
    config_class = MethodConfig
    shortcut_type = ShortcutType.GATHER_LIST
    shortcut_field_order = ("methods",)


class HostPredicate(ShortcutConfigurable):
    name = "Host"
    config_class = HostConfig
    shortcut_type = ShortcutType.GATHER_LIST
    shortcut_field_order = ("patterns",)


class PathPredicate(ShortcutConfigurable):
    name = "Path"
    config_class = PathConfig
    shortcut_type = ShortcutType.GATHER_LIST_TAIL_FLAG
    shortcut_field_order = ("patterns", "matchTrailingSlash")


BUILTIN_PREDICATES: dict[str, ShortcutConfigurable] = {
    p.name: p()
    for p in (
        CookiePredicate,
        HeaderPredicate,
        QueryPredicate,
        MethodPredicate,
        HostPredicate,
        PathPredicate,
    )
}
