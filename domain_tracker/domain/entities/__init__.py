"""Domain entities - Objects with identity and lifecycle."""

from .categorized_view import CategorizedView
from .domain_overview import DomainEntry, DomainOverview
from .domain_record import DomainRecord
from .domain_status import NOT_AVAILABLE, DomainStatus

__all__ = [
    "NOT_AVAILABLE",
    "CategorizedView",
    "DomainEntry",
    "DomainOverview",
    "DomainRecord",
    "DomainStatus",
]
