"""Application use cases."""

from .mutate_domain import MutateDomain, MutationAction, MutationRequest, MutationResult
from .sync_domains import DiscoverZones, DiscoveryResult, SyncDomain, SyncOutcome
from .view_domains import GetDomain, ViewDomains

__all__ = [
    "DiscoverZones",
    "DiscoveryResult",
    "GetDomain",
    "MutateDomain",
    "MutationAction",
    "MutationRequest",
    "MutationResult",
    "SyncDomain",
    "SyncOutcome",
    "ViewDomains",
]
