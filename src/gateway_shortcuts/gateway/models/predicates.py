from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import ShortcutConfig
from .http_method import HttpMethod


class CookieConfig(ShortcutConfig):
    name: str
    regexp: str


class HeaderConfig(ShortcutConfig):
    header: str
    regexp: Optional[str] = None


class QueryConfig(ShortcutConfig):
    param: str
    regexp: Optional[str] = None


class MethodConfig(ShortcutConfig):
    methods: List[HttpMethod] = Field(default_factory=list)


class HostConfig(ShortcutConfig):
    patterns: List[str] = Field(default_factory=list)


class PathConfig(ShortcutConfig):
    patterns: List[str] = Field(default_factory=list)
    match_trailing_slash: bool = True
