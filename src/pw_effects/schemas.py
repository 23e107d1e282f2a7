"""
Data shapes passed between sources and pipeline stages.

CatalogEntry validates upstream catalog records; the result tuples pair every
asynchronous lookup with the key it was issued for.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogEntry(BaseModel):
    """A catalogued substance with its canonical name and aliases."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Canonical substance name")
    aliases: tuple[str, ...] = Field(default=(), description="Alternative names, in catalog order")

    @field_validator("aliases", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return () if value is None else value


class MatchResult(NamedTuple):
    """Search outcome: the term the service echoed and the titles it matched."""

    term: str
    matches: Sequence[Any]


class EffectQueryResult(NamedTuple):
    """Relationship query outcome for one substance name."""

    name: str
    query: dict[str, Any]


# effect name -> canonical URL
EffectEntry = dict[str, str]

# substance name -> effects
EffectMap = dict[str, EffectEntry]
