"""Domain value objects - Immutable objects defined by their attributes."""

from .access_context import AccessContext
from .domain_name import normalize_domain
from .record_date import UNKNOWN, format_record_date, parse_record_date
from .severity import Severity
from .thresholds import ExpirationThresholds

__all__ = [
    "UNKNOWN",
    "AccessContext",
    "ExpirationThresholds",
    "Severity",
    "format_record_date",
    "normalize_domain",
    "parse_record_date",
]
