"""Domain name normalization."""

import re

import idna

from ..exceptions import ValidationError

MAX_DOMAIN_LENGTH = 253
_LABEL_PATTERN = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")


def normalize_domain(raw: str | None) -> str:
    """
    Normalize a domain name to its canonical store key.

    The canonical form is lower-case ASCII, with Unicode labels IDNA-encoded
    and any trailing dot removed.

    Raises:
        ValidationError: If the name is empty or malformed.
    """
    if raw is None or not raw.strip():
        raise ValidationError("domain", "domain name is required")

    candidate = raw.strip().rstrip(".").lower()
    if not candidate.isascii():
        try:
            candidate = idna.encode(candidate, uts46=True).decode("ascii")
        except idna.IDNAError as e:
            raise ValidationError("domain", f"invalid internationalized name {raw!r}") from e

    if len(candidate) > MAX_DOMAIN_LENGTH:
        raise ValidationError("domain", f"name exceeds {MAX_DOMAIN_LENGTH} characters")

    labels = candidate.split(".")
    if len(labels) < 2:
        raise ValidationError("domain", f"{raw!r} is not a fully-qualified name")

    for label in labels:
        if not _LABEL_PATTERN.match(label):
            raise ValidationError("domain", f"invalid label {label!r} in {raw!r}")

    return candidate
