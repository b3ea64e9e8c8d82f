"""Domain services - Stateless operations on domain objects."""

from .access_gate import AccessGate
from .classifier import classify, is_top_level
from .expiration_calculator import ExpirationCalculator, compute_status

__all__ = [
    "AccessGate",
    "ExpirationCalculator",
    "classify",
    "compute_status",
    "is_top_level",
]
