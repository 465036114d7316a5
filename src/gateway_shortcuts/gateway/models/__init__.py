from __future__ import annotations

from .base import ShortcutConfig
from .filters import (
    NameValueConfig,
    PrefixPathConfig,
    RedisRateLimiterConfig,
    RewritePathConfig,
    SetStatusConfig,
    StripPrefixConfig,
)
from .http_method import HttpMethod
from .predicates import (
    CookieConfig,
    HeaderConfig,
    HostConfig,
    MethodConfig,
    PathConfig,
    QueryConfig,
)
from .route import BoundDefinition, Route

__all__ = [
    "BoundDefinition",
    "CookieConfig",
    "HeaderConfig",
    "HostConfig",
    "HttpMethod",
    "MethodConfig",
    "NameValueConfig",
    "PathConfig",
    "PrefixPathConfig",
    "QueryConfig",
    "RedisRateLimiterConfig",
    "RewritePathConfig",
    "Route",
    "SetStatusConfig",
    "ShortcutConfig",
    "StripPrefixConfig",
]
