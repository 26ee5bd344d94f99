"""
Request-lifecycle helpers.

Public API:
- ApiCall: data/loading/error for one request function
- PaginatedApiCall: Page-at-a-time list fetching
- ApiSubmit: Form submission with a self-clearing success flag
- extract_page: List-envelope extraction
- EnvelopeShapeError: Raised for ambiguous list envelopes
"""

from .api_call import ApiCall
from .envelope import PageContent, extract_page
from .exceptions import EnvelopeShapeError
from .paginated import PaginatedApiCall
from .submit import ApiSubmit

__all__ = [
    "ApiCall",
    "PaginatedApiCall",
    "ApiSubmit",
    "PageContent",
    "extract_page",
    "EnvelopeShapeError",
]
