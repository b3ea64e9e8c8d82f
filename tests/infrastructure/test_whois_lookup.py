"""Tests for the WHOIS proxy lookup adapter."""

from __future__ import annotations

import asyncio
from datetime import date

import httpx
import pytest

from domain_tracker.application.ports import RegistrationData
from domain_tracker.infrastructure.adapters import WhoisProxyConfig, WhoisProxyLookup

BASE_URL = "https://whois.example.test/api"


def _lookup(handler) -> WhoisProxyLookup:
    return WhoisProxyLookup(WhoisProxyConfig(base_url=BASE_URL), transport=httpx.MockTransport(handler))


class TestWhoisProxyConfig:
    """Tests for WhoisProxyConfig."""

    def test_default_config_is_unconfigured(self) -> None:
        assert WhoisProxyLookup(WhoisProxyConfig()).is_configured() is False

    def test_config_is_frozen(self) -> None:
        config = WhoisProxyConfig(base_url=BASE_URL)
        with pytest.raises(AttributeError):
            config.base_url = ""  # type: ignore[misc]


class TestWhoisProxyLookup:
    """Tests for WhoisProxyLookup.lookup."""

    def test_parses_dates_and_registrar(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={
                    "domainName": "example.com",
                    "registrar": " Example Registrar ",
                    "creationDate": "1995-08-14T04:00:00Z",
                    "expirationDate": "2026-08-13T04:00:00Z",
                },
            )

        data = asyncio.run(_lookup(handler).lookup("example.com"))

        assert data == RegistrationData(
            registration_date=date(1995, 8, 14),
            expiration_date=date(2026, 8, 13),
            registrar="Example Registrar",
        )
        assert str(requests[0].url) == f"{BASE_URL}/whois/example.com"

    def test_alternate_keys_and_lists(self) -> None:
        """Registries differ in key names and may report several dates."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "created": ["2001-02-03", "2001-02-04"],
                    "expiryDate": "2027-02-03",
                },
            )

        data = asyncio.run(_lookup(handler).lookup("example.org"))

        assert data.registration_date == date(2001, 2, 3)
        assert data.expiration_date == date(2027, 2, 3)
        assert data.registrar is None

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(404, json={"error": "not found"}),
            httpx.Response(500, text="boom"),
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json=["unexpected"]),
            httpx.Response(200, json={"creationDate": "2020-01-01"}),
            httpx.Response(200, json={"creationDate": "someday", "expirationDate": "2030-01-01"}),
            httpx.Response(200, json={"creationDate": "2030-01-01", "expirationDate": "2020-01-01"}),
        ],
    )
    def test_failures_become_unknown(self, response: httpx.Response) -> None:
        data = asyncio.run(_lookup(lambda request: response).lookup("example.com"))
        assert data == RegistrationData.unknown()
        assert data.is_known is False

    def test_network_error_becomes_unknown(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        data = asyncio.run(_lookup(handler).lookup("example.com"))
        assert data.is_known is False

    def test_unconfigured_lookup_makes_no_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            pytest.fail("no request expected")

        lookup = WhoisProxyLookup(WhoisProxyConfig(), transport=httpx.MockTransport(handler))
        assert asyncio.run(lookup.lookup("example.com")).is_known is False
