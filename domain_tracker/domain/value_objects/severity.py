"""Severity value object."""

from enum import StrEnum, auto


class Severity(StrEnum):
    """Status tier of a domain based on days remaining until expiration."""

    EXPIRED = auto()
    CRITICAL = auto()
    WARNING = auto()
    HEALTHY = auto()
    UNKNOWN = auto()

    @property
    def requires_attention(self) -> bool:
        """Check if this severity requires attention."""
        return self in {Severity.EXPIRED, Severity.CRITICAL, Severity.WARNING}

    @property
    def rank(self) -> int:
        """Sort key, most urgent first."""
        return list(Severity).index(self)

    @property
    def color_hex(self) -> str:
        """Get hex color code for the status indicator."""
        match self:
            case Severity.EXPIRED | Severity.CRITICAL:
                return "#e74c3c"
            case Severity.WARNING:
                return "#f1c40f"
            case Severity.HEALTHY:
                return "#27ae60"
            case Severity.UNKNOWN:
                return "#95a5a6"

    def __str__(self) -> str:
        return self.value
