"""Category Schemas."""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from taskflow.schemas.common import (
    CamelModel, reject_explicit_nulls, strip_required_text,
)

_NON_NULLABLE = frozenset({"name", "color", "icon", "is_default"})


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    color: str = Field("#6366f1", max_length=32)
    icon: str = Field("tag", max_length=64)
    is_default: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required_text(v, "name")


class CategoryUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    color: str | None = Field(None, max_length=32)
    icon: str | None = Field(None, max_length=64)
    is_default: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return strip_required_text(v, "name")

    @model_validator(mode="after")
    def validate_nulls(self):
        reject_explicit_nulls(self, _NON_NULLABLE)
        return self


class CategoryResponse(CamelModel):
    id: int
    name: str
    color: str
    icon: str
    is_default: bool
    created_at: datetime
