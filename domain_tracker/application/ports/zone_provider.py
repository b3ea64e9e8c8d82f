"""Port for DNS provider zone discovery - driven/secondary port."""

from typing import Protocol


class ZoneProvider(Protocol):
    """Port for listing zones managed by the DNS provider account."""

    provider_tag: str

    async def list_zones(self) -> list[str]:
        """
        List zone names currently managed by the provider.

        Raises:
            LookupFailedError: If the provider cannot be queried.
        """
        ...
