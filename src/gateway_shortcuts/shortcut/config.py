from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field


class DefinitionConfig(BaseModel):
    """Expanded (non-shorthand) predicate/filter declaration."""

    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class RouteConfig(BaseModel):
    id: str
    uri: str
    order: int = 0
    predicates: List[Union[str, DefinitionConfig]] = Field(default_factory=list)
    filters: List[Union[str, DefinitionConfig]] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class Config(BaseModel):
    version: int | None = None
    description: str | None = None
    routes: List[RouteConfig] = Field(default_factory=list)
