"""Cloudflare API client for zone discovery."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from ....application.exceptions import LookupFailedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CloudflareConfig:
    """Configuration for the Cloudflare API client."""

    api_token: str = ""
    base_url: str = "https://api.cloudflare.com/client/v4"
    provider_tag: str = "Cloudflare"
    timeout: float = 10.0


class CloudflareZoneProvider:
    """
    Zone provider listing the zones of a Cloudflare account.

    Implements the ZoneProvider port. Authenticates with a bearer API token
    and walks every page of ``GET /zones``.
    """

    PAGE_SIZE: ClassVar[int] = 50

    def __init__(
        self,
        config: CloudflareConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            config: API token, base URL and provenance tag.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        self._config = config
        self._transport = transport

    @property
    def provider_tag(self) -> str:
        return self._config.provider_tag

    def is_configured(self) -> bool:
        """Check if an API token is set."""
        return bool(self._config.api_token)

    async def list_zones(self) -> list[str]:
        """
        Retrieve the names of all zones in the account.

        Raises:
            LookupFailedError: If the token is missing or any page fails.
        """
        if not self.is_configured():
            msg = "Cloudflare API token is not configured"
            raise LookupFailedError(msg)

        logger.info("Fetching zones from Cloudflare...")
        try:
            zones = await self._get_all_pages("/zones")
        except httpx.HTTPStatusError as e:
            msg = f"Cloudflare zone listing returned HTTP {e.response.status_code}"
            logger.exception(msg)
            raise LookupFailedError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            msg = f"Cloudflare zone listing failed: {e}"
            logger.exception(msg)
            raise LookupFailedError(msg) from e

        names = [zone["name"] for zone in zones if isinstance(zone, dict) and zone.get("name")]
        logger.info("Found %d zones", len(names))
        return names

    async def _get_all_pages(self, endpoint: str) -> list[dict[str, Any]]:
        """
        Retrieve all pages from a paginated Cloudflare endpoint.

        Raises:
            ValueError: If a page is not a successful Cloudflare envelope.
        """
        results: list[dict[str, Any]] = []
        headers = {
            "Authorization": f"Bearer {self._config.api_token}",
            "Content-Type": "application/json",
        }
        url = f"{self._config.base_url.rstrip('/')}{endpoint}"
        page = 1

        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            while True:
                response = await client.get(
                    url, headers=headers, params={"page": page, "per_page": self.PAGE_SIZE}
                )
                response.raise_for_status()
                data = response.json()

                if not isinstance(data, dict) or not data.get("success"):
                    errors = data.get("errors") if isinstance(data, dict) else None
                    msg = f"unsuccessful response on page {page}: {errors}"
                    raise ValueError(msg)

                results.extend(data.get("result") or [])
                total_pages = int((data.get("result_info") or {}).get("total_pages") or 1)
                if page >= total_pages:
                    break
                page += 1

        return results
