"""Domain service deciding what a request may do."""

import hmac

from ..exceptions import AuthorizationError
from ..value_objects import AccessContext


class AccessGate:
    """
    Maps a submitted secret to an access context.

    Holds the viewer and administrator secrets only; no session state is kept
    between calls, so every mutating request re-proves administrator identity.
    """

    def __init__(self, viewer_secret: str, admin_secret: str) -> None:
        """Initialize the gate with both secrets."""
        if not admin_secret:
            msg = "Administrator secret must not be empty"
            raise ValueError(msg)
        self._viewer_secret = viewer_secret
        self._admin_secret = admin_secret

    @property
    def is_public(self) -> bool:
        """Check if anonymous callers get viewer access."""
        return not self._viewer_secret

    def authorize(self, submitted: str | None) -> AccessContext:
        """
        Derive the access context for a submitted secret.

        Args:
            submitted: Secret supplied by the caller, if any.

        Returns:
            The highest access context the secret proves.
        """
        if submitted and _matches(submitted, self._admin_secret):
            return AccessContext.ADMINISTRATOR
        if self.is_public:
            return AccessContext.VIEWER
        if submitted and _matches(submitted, self._viewer_secret):
            return AccessContext.VIEWER
        return AccessContext.ANONYMOUS

    def require_read(self, context: AccessContext) -> None:
        """Raise AuthorizationError unless the context may read."""
        if not context.can_read:
            msg = "Access password required"
            raise AuthorizationError(msg)

    def require_admin(self, context: AccessContext) -> None:
        """Raise AuthorizationError unless the context is an administrator."""
        if not context.can_mutate:
            msg = "Administrator password required"
            raise AuthorizationError(msg)


def _matches(submitted: str, secret: str) -> bool:
    return hmac.compare_digest(submitted.encode("utf-8"), secret.encode("utf-8"))
