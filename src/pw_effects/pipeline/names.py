"""
Candidate name extraction.

Flattens catalog entries into one ordered list of names: each canonical name
followed by its aliases, truncated to a fixed count.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from pw_effects.errors import InvalidCatalogError
from pw_effects.schemas import CatalogEntry

DEFAULT_NAME_LIMIT = 150


def _as_entry(item: Any) -> CatalogEntry:
    if isinstance(item, CatalogEntry):
        return item
    if isinstance(item, Mapping):
        try:
            return CatalogEntry.model_validate(item)
        except ValidationError as e:
            raise InvalidCatalogError(f"Malformed catalog entry: {e}") from e
    raise InvalidCatalogError(f"Catalog entries must be mappings, got {type(item).__name__}")


def extract_names(catalog: Sequence[CatalogEntry | Mapping[str, Any]], limit: int = DEFAULT_NAME_LIMIT) -> list[str]:
    """
    Flatten a catalog into candidate names.

    Args:
        catalog: Catalog entries in source order
        limit: Keep only the first `limit` names

    Returns:
        Names in entry order, each name followed by its aliases

    Raises:
        InvalidCatalogError: if the catalog is not a non-empty sequence of entries
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    if not isinstance(catalog, Sequence) or isinstance(catalog, (str, bytes)):
        raise InvalidCatalogError("Catalog should be a sequence of entries")
    if not catalog:
        raise InvalidCatalogError("Catalog should not be empty")

    names: list[str] = []
    for item in catalog:
        entry = _as_entry(item)
        names.append(entry.name)
        names.extend(entry.aliases)

    return names[:limit]
