"""Access context value object."""

from enum import StrEnum, auto


class AccessContext(StrEnum):
    """Per-request access level derived from the submitted secret."""

    ANONYMOUS = auto()
    VIEWER = auto()
    ADMINISTRATOR = auto()

    @property
    def can_read(self) -> bool:
        """Check if this context may read the record set."""
        return self in {AccessContext.VIEWER, AccessContext.ADMINISTRATOR}

    @property
    def can_mutate(self) -> bool:
        """Check if this context may create, update or delete records."""
        return self is AccessContext.ADMINISTRATOR

    def __str__(self) -> str:
        return self.value
