from __future__ import annotations

from .base import ShortcutConfig


class NameValueConfig(ShortcutConfig):
    """Config for filters that add a named value (header, query param)."""

    name: str
    value: str


class PrefixPathConfig(ShortcutConfig):
    prefix: str


class StripPrefixConfig(ShortcutConfig):
    parts: int = 1


class SetStatusConfig(ShortcutConfig):
    # Numeric code or status name, e.g. "404" or "BAD_REQUEST".
    status: str


class RewritePathConfig(ShortcutConfig):
    regexp: str
    replacement: str


class RedisRateLimiterConfig(ShortcutConfig):
    replenish_rate: int
    burst_capacity: int
    requested_tokens: int = 1
