"""
List-envelope extraction.

A paged response looks like::

    {"success": true, "data": {"<resourceKey>": [...], "pagination": {...}}}

The resource key differs per endpoint (vehicles, drivers, fuelLogs, ...),
so it is found rather than named.
"""

from typing import Any, NamedTuple, Optional

from pydantic import ValidationError as PydanticValidationError

from fleetconsole.shared.models import Pagination

from .exceptions import EnvelopeShapeError

PAGINATION_KEY = "pagination"


class PageContent(NamedTuple):
    records: list[Any]
    pagination: Pagination
    resource_key: Optional[str]


def extract_page(response: Any) -> Optional[PageContent]:
    """
    Pull the record list and pagination out of a list envelope.

    Returns:
        PageContent, or None when the response carries no ``data`` object
        (callers keep their previous state in that case)

    Raises:
        EnvelopeShapeError: If ``data`` has more than one non-pagination key,
                            that key does not hold a list, or the
                            pagination block has values of the wrong type
    """
    data = response.get("data") if isinstance(response, dict) else None
    if not isinstance(data, dict):
        return None

    keys = [k for k in data if k != PAGINATION_KEY]
    if len(keys) > 1:
        raise EnvelopeShapeError(
            f"Ambiguous list envelope, expected one record key but got: {', '.join(keys)}",
            keys,
        )

    records: list[Any] = []
    resource_key = keys[0] if keys else None
    if resource_key is not None:
        value = data[resource_key]
        if value is None:
            value = []
        if not isinstance(value, list):
            raise EnvelopeShapeError(
                f"Envelope key '{resource_key}' does not hold a list", keys
            )
        records = value

    pagination = _parse_pagination(data.get(PAGINATION_KEY), keys)
    return PageContent(records, pagination, resource_key)


def _parse_pagination(raw: Any, keys: list[str]) -> Pagination:
    if not isinstance(raw, dict):
        return Pagination()
    # Null fields fall back to their defaults
    present = {k: v for k, v in raw.items() if v is not None}
    try:
        return Pagination.model_validate(present)
    except PydanticValidationError as e:
        raise EnvelopeShapeError(
            f"Invalid pagination block: {e.error_count()} bad field(s)", keys
        ) from e
