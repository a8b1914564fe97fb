"""Shared schema plumbing — camelCase wire format and field-update-set checks.

Invariants:
    - Every schema accepts both camelCase (wire) and snake_case (Python) input
    - Responses serialize by alias (FastAPI default), i.e. camelCase
    - An update model may omit any field but may not null a non-nullable column
    - `date` fields name a real calendar day, not just the YYYY-MM-DD shape
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases and ORM attribute loading."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_required_text(v: str, field_name: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


def reject_explicit_nulls(
    model: BaseModel, non_nullable: frozenset[str],
) -> None:
    """Raise if a non-nullable field was explicitly sent as null."""
    nulled = sorted(
        name for name in model.model_fields_set
        if name in non_nullable and getattr(model, name) is None
    )
    if nulled:
        raise ValueError(f"fields cannot be null: {', '.join(nulled)}")


def require_calendar_date(v: str) -> str:
    """Reject well-formed but impossible dates such as 2025-13-45."""
    try:
        date.fromisoformat(v)
    except ValueError:
        raise ValueError(f"{v} is not a valid calendar date") from None
    return v
