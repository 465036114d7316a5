from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ShortcutDefinition(BaseModel):
    """One predicate or filter declaration: a config type name plus raw args.

    `args` keeps declaration order; unnamed shorthand args are keyed by
    generated placeholder names (`_genkey_0`, `_genkey_1`, ...).
    """

    name: str
    args: Dict[str, Optional[str]] = Field(default_factory=dict)


class RouteIR(BaseModel):
    """Frontend IR route: target uri gated by predicates, passed through filters."""

    id: str
    uri: str
    order: int = 0
    predicates: List[ShortcutDefinition] = Field(default_factory=list)
    filters: List[ShortcutDefinition] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
