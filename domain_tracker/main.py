#!/usr/bin/env python3
"""
Domain Tracker

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from croniter import croniter

from . import __version__
from .application.use_cases import (
    DiscoverZones,
    GetDomain,
    MutateDomain,
    SyncDomain,
    ViewDomains,
)
from .domain.services import AccessGate, ExpirationCalculator
from .infrastructure.adapters import (
    CloudflareZoneProvider,
    InMemoryRecordStore,
    JsonFileRecordStore,
    RedisRecordStore,
    WhoisProxyLookup,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import RecordStore
    from .application.use_cases import DiscoveryResult
    from .infrastructure.adapters.api import ApiServices

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components. The
    record store is created once and shared by every use case.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._store: RecordStore | None = None

    @property
    def store(self) -> RecordStore:
        """The shared record store adapter."""
        if self._store is None:
            self._store = self.create_record_store()
        return self._store

    def create_record_store(self) -> RecordStore:
        """Create the record store adapter for the configured backend."""
        backend = self._settings.store_backend.lower()
        logger.info("Using %s record store", backend)
        match backend:
            case "memory":
                return InMemoryRecordStore()
            case "redis":
                return RedisRecordStore.from_url(self._settings.redis_url, self._settings.redis_key)
            case _:
                return JsonFileRecordStore(self._settings.store_directory)

    async def close(self) -> None:
        """Close the shared record store if it was created."""
        if self._store is not None:
            await self._store.close()
            self._store = None

    def create_access_gate(self) -> AccessGate:
        """Create the access gate from the configured secrets."""
        return AccessGate(
            viewer_secret=self._settings.access_password,
            admin_secret=self._settings.admin_password,
        )

    def create_registration_lookup(self) -> WhoisProxyLookup:
        """Create the WHOIS proxy lookup adapter."""
        lookup = WhoisProxyLookup(self._settings.whois_config)
        if not lookup.is_configured():
            logger.warning("WHOIS_PROXY_URL not set; new domains keep Unknown dates")
        return lookup

    def create_zone_provider(self) -> CloudflareZoneProvider:
        """Create the DNS provider zone adapter."""
        return CloudflareZoneProvider(self._settings.cloudflare_config)

    def create_discover_use_case(self, gate: AccessGate | None = None) -> DiscoverZones:
        """Create the zone discovery use case."""
        return DiscoverZones(
            store=self.store,
            lookup=self.create_registration_lookup(),
            zones=self.create_zone_provider(),
            gate=gate or self.create_access_gate(),
        )

    def create_api_services(self) -> ApiServices:
        """Create every use case the HTTP adapter needs."""
        from .infrastructure.adapters.api import ApiServices

        gate = self.create_access_gate()
        lookup = self.create_registration_lookup()
        calculator = ExpirationCalculator(self._settings.thresholds)
        custom_tag = self._settings.custom_system_tag

        return ApiServices(
            gate=gate,
            thresholds=self._settings.thresholds,
            view_domains=ViewDomains(
                self.store, gate, calculator, provider_tag=self._settings.dns_provider_tag
            ),
            get_domain=GetDomain(self.store, gate, calculator),
            mutate_domain=MutateDomain(self.store, lookup, gate, custom_tag=custom_tag),
            sync_domain=SyncDomain(self.store, lookup, gate, custom_tag=custom_tag),
            discover_zones=self.create_discover_use_case(gate),
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (API server, single discovery pass, or scheduled
    discovery passes) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> DiscoveryResult:
        """Execute a single zone discovery pass."""
        use_case = self._container.create_discover_use_case()
        return await use_case.run_unattended()

    async def run_scheduled(self) -> None:
        """Trigger discovery passes on a cron expression."""
        logger.info("Starting scheduled mode with cron: %s", self._settings.cron_schedule)

        cron = croniter(self._settings.cron_schedule, datetime.now(UTC))

        while True:
            next_run = cron.get_next(datetime)
            now = datetime.now(UTC)

            # Handle timezone-naive datetime from croniter
            if next_run.tzinfo is None:
                next_run = next_run.replace(tzinfo=UTC)

            sleep_seconds = (next_run - now).total_seconds()

            if sleep_seconds > 0:
                logger.info("Next discovery scheduled for %s", next_run.isoformat())
                await asyncio.sleep(sleep_seconds)

            logger.info("Running scheduled discovery...")
            try:
                await self.run_once()
            except Exception:
                # A failed pass must not stop later triggers
                logger.exception("Scheduled discovery failed")

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            self._container.create_api_services(),
            version=__version__,
            title=self._settings.app_title,
            on_shutdown=self._container.close,
        )

        uvicorn.run(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        try:
            match self._settings.run_mode.lower():
                case "once":
                    logger.info("Running a single discovery pass")
                    await self.run_once()
                    return 0

                case "scheduled":
                    await self.run_scheduled()
                    return 0  # Never reached in scheduled mode

                case _:
                    logger.error("Invalid RUN_MODE: %s", self._settings.run_mode)
                    return 1
        finally:
            await self._container.close()


async def async_main(settings: Settings) -> int:
    """Async entry point for the non-server run modes."""
    try:
        return await Application(settings).run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    logger.info("Domain Tracker %s starting...", __version__)

    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())

    # uvicorn runs its own event loop
    if settings.run_mode.lower() == "api":
        Application(settings).run_api()
        sys.exit(0)

    sys.exit(asyncio.run(async_main(settings)))


if __name__ == "__main__":
    main()
