from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ShortcutConfig(BaseModel):
    """Base for predicate/filter configs; fields bind from camelCase names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        # Expression results may be numbers; string fields accept them.
        coerce_numbers_to_str=True,
    )
