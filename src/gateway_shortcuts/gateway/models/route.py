from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, SerializeAsAny

from .base import ShortcutConfig


class BoundDefinition(BaseModel):
    """A predicate/filter name with its validated config."""

    name: str
    config: SerializeAsAny[ShortcutConfig]


class Route(BaseModel):
    """Gateway route with bound predicate and filter configs."""

    id: str
    uri: str
    order: int = 0
    predicates: List[BoundDefinition] = Field(default_factory=list)
    filters: List[BoundDefinition] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
