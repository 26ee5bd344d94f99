"""
Data-source module.

Makes "show sample data when offline" an explicit strategy chosen at the
composition root instead of a side effect of failed requests.

Public API:
- IRecordSource: Interface views depend on
- LiveSource, DemoSource, FallbackSource: Implementations
- build_record_source: Factory keyed by settings.data_source
- RecordPage: Result model
"""

from .interfaces import IRecordSource
from .models import RecordPage
from .sources import (
    LiveSource,
    DemoSource,
    FallbackSource,
    build_record_source,
    DEMO_NOTICE,
)
from .exceptions import NoDemoDataError, UnknownSourceError

__all__ = [
    "IRecordSource",
    "RecordPage",
    "LiveSource",
    "DemoSource",
    "FallbackSource",
    "build_record_source",
    "DEMO_NOTICE",
    "NoDemoDataError",
    "UnknownSourceError",
]
