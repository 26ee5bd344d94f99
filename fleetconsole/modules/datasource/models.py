"""Data-source models."""

from typing import Any, Optional
from pydantic import BaseModel, Field

from fleetconsole.shared.models import Pagination


class RecordPage(BaseModel):
    """One page of records plus where they came from."""

    records: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
    is_demo: bool = Field(default=False, description="Records are sample data")
    notice: Optional[str] = Field(None, description="Banner text for the front end")
