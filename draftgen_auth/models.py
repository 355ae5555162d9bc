"""Records owned by the identity and template stores.

Shapes follow the Supabase ``profiles`` and ``templates`` tables. The auth
flow never reads them; they are shared with the services that do.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Role(str, Enum):
    GENERATOR = "GENERATOR"
    CONSUMER = "CONSUMER"


class _Timestamped(BaseModel):
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _updated_not_before_created(self):
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class Profile(_Timestamped):
    id: str = Field(min_length=1)
    org_id: str | None = None
    role: Role = Role.CONSUMER
    display_name: str | None = None
    avatar_url: str | None = None


class Template(_Timestamped):
    id: str = Field(min_length=1)
    owner_id: str | None = None
    name: str = Field(min_length=1)
    description: str | None = None
    tags: frozenset[str] = frozenset()
    json_: Any = Field(alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_from_list(cls, v):
        return frozenset(v or ())

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
