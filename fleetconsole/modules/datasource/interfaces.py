"""
Data-source interface.

Views ask an IRecordSource for records and never know whether they came
from the backend or from the built-in samples. The composition root picks
the implementation.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import RecordPage


@runtime_checkable
class IRecordSource(Protocol):
    async def list_records(
        self, resource: str, params: Optional[dict[str, Any]] = None
    ) -> RecordPage:
        """
        List records of one resource collection.

        Args:
            resource: Collection path segment (e.g. "vehicles", "fuel")
            params: Query parameters (search, status, page, limit)

        Returns:
            RecordPage with the records and pagination
        """
        ...
