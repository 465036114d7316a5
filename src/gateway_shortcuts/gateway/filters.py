from __future__ import annotations

from .configurable import ShortcutConfigurable
from .models.filters import (
    NameValueConfig,
    PrefixPathConfig,
    RedisRateLimiterConfig,
    RewritePathConfig,
    SetStatusConfig,
    StripPrefixConfig,
)


class AddRequestHeaderFilter(ShortcutConfigurable):
    name = "AddRequestHeader"
    config_class = NameValueConfig
    shortcut_field_order = ("name", "value")


class AddResponseHeaderFilter(ShortcutConfigurable):
    name = "AddResponseHeader"
    config_class = NameValueConfig
    shortcut_field_order = ("name", "value")


class AddRequestParameterFilter(ShortcutConfigurable):
    name = "AddRequestParameter"
    config_class = NameValueConfig
    shortcut_field_order = ("name", "value")


class PrefixPathFilter(ShortcutConfigurable):
    name = "PrefixPath"
    config_class = PrefixPathConfig
    shortcut_field_order = ("prefix",)


class StripPrefixFilter(ShortcutConfigurable):
    name = "StripPrefix"
    config_class = StripPrefixConfig
    shortcut_field_order = ("parts",)


class SetStatusFilter(ShortcutConfigurable):
    name = "SetStatus"
    config_class = SetStatusConfig
    shortcut_field_order = ("status",)


class RewritePathFilter(ShortcutConfigurable):
    name = "RewritePath"
    config_class = RewritePathConfig
    shortcut_field_order = ("regexp", "replacement")


class RequestRateLimiterFilter(ShortcutConfigurable):
    name = "RequestRateLimiter"
    config_class = RedisRateLimiterConfig
    shortcut_field_prefix = "redis-rate-limiter"
    shortcut_field_order = (
        "redis-rate-limiter.replenishRate",
        "redis-rate-limiter.burstCapacity",
    )


BUILTIN_FILTERS: dict[str, ShortcutConfigurable] = {
    f.name: f()
    for f in (
        AddRequestHeaderFilter,
        AddResponseHeaderFilter,
        AddRequestParameterFilter,
        PrefixPathFilter,
        StripPrefixFilter,
        SetStatusFilter,
        RewritePathFilter,
        RequestRateLimiterFilter,
    )
}
