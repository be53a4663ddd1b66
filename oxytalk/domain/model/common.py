"""Shared pieces of the domain models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base; transitions return new instances via model_copy."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
