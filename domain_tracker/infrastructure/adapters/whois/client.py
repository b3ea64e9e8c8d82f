"""WHOIS proxy client for registration and expiration dates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from ....application.ports import RegistrationData
from ....domain.exceptions import ValidationError
from ....domain.value_objects import parse_record_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WhoisProxyConfig:
    """Configuration for the WHOIS proxy service."""

    base_url: str = ""
    timeout: float = 10.0


class WhoisProxyLookup:
    """
    Registration lookup against a self-hosted WHOIS proxy.

    Implements the RegistrationLookup port. Issues
    ``GET {base_url}/whois/{domain}`` and reads the dates from the JSON body.
    Every failure is logged and downgraded to unknown dates.
    """

    REGISTRATION_KEYS: ClassVar[tuple[str, ...]] = ("creationDate", "registrationDate", "created")
    EXPIRATION_KEYS: ClassVar[tuple[str, ...]] = ("expirationDate", "expiryDate", "expires")

    def __init__(
        self,
        config: WhoisProxyConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the lookup.

        Args:
            config: Proxy base URL and timeout.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if a proxy URL is set."""
        return bool(self._config.base_url)

    async def lookup(self, domain: str) -> RegistrationData:
        """Look up one domain; never raises."""
        if not self.is_configured():
            logger.debug("WHOIS proxy not configured; %s stays Unknown", domain)
            return RegistrationData.unknown()

        url = f"{self._config.base_url.rstrip('/')}/whois/{domain}"
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("WHOIS lookup for %s returned HTTP %d", domain, e.response.status_code)
            return RegistrationData.unknown()
        except httpx.HTTPError as e:
            logger.warning("WHOIS lookup for %s failed: %s", domain, e)
            return RegistrationData.unknown()
        except ValueError:
            logger.warning("WHOIS lookup for %s returned a non-JSON body", domain)
            return RegistrationData.unknown()

        return self._parse(domain, payload)

    def _parse(self, domain: str, payload: Any) -> RegistrationData:
        if not isinstance(payload, dict):
            logger.warning("WHOIS lookup for %s returned an unexpected body", domain)
            return RegistrationData.unknown()

        try:
            registration = parse_record_date(_first(payload, self.REGISTRATION_KEYS))
            expiration = parse_record_date(_first(payload, self.EXPIRATION_KEYS))
        except ValidationError:
            logger.warning("WHOIS lookup for %s returned unparseable dates", domain)
            return RegistrationData.unknown()

        if registration is None or expiration is None or expiration < registration:
            logger.warning("WHOIS lookup for %s returned incomplete dates", domain)
            return RegistrationData.unknown()

        registrar = payload.get("registrar")
        return RegistrationData(
            registration_date=registration,
            expiration_date=expiration,
            registrar=(registrar.strip() or None) if isinstance(registrar, str) else None,
        )


def _first(payload: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value:
            # Some WHOIS servers report several dates; the first is authoritative.
            return value[0] if isinstance(value, list) else value
    return None
