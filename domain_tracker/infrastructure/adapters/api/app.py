"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.exceptions import HTTPException as StarletteHTTPException

from ....application.exceptions import (
    LookupFailedError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from ....application.use_cases import (
    DiscoverZones,
    GetDomain,
    MutateDomain,
    MutationRequest,
    SyncDomain,
    ViewDomains,
)
from ....domain.entities import DomainEntry, DomainOverview, DomainRecord
from ....domain.exceptions import AuthorizationError, ValidationError
from ....domain.services import AccessGate
from ....domain.value_objects import AccessContext, ExpirationThresholds
from .models import (
    DiscoveryResponse,
    DomainEntryResponse,
    ErrorResponse,
    HealthResponse,
    MutationResponse,
    OverviewResponse,
    RecordResponse,
    StatusResponse,
    SyncResponse,
    ThresholdsResponse,
    UpdateRequest,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(auto_error=False, description="Password field carries the access secret")


@dataclass(frozen=True, slots=True)
class ApiServices:
    """Use cases and collaborators the HTTP endpoints delegate to."""

    gate: AccessGate
    thresholds: ExpirationThresholds
    view_domains: ViewDomains
    get_domain: GetDomain
    mutate_domain: MutateDomain
    sync_domain: SyncDomain
    discover_zones: DiscoverZones


def _record_to_response(record: DomainRecord) -> RecordResponse:
    return RecordResponse.model_validate(record.to_dict())


def _entry_to_response(entry: DomainEntry) -> DomainEntryResponse:
    entry_status = entry.status
    return DomainEntryResponse(
        record=_record_to_response(entry.record),
        status=StatusResponse(
            remaining_days=entry_status.remaining_days_display,
            total_days=entry_status.total_days_display,
            progress_percent=entry_status.progress_percent,
            severity=entry_status.severity.value,
            color=entry_status.severity.color_hex,
        ),
    )


def _overview_to_response(
    overview: DomainOverview, thresholds: ExpirationThresholds
) -> OverviewResponse:
    return OverviewResponse(
        generated_at=overview.generated_at,
        access=overview.access.value,
        is_admin=overview.is_admin_view,
        summary=overview.get_summary(),
        counts=overview.get_counts(),
        by_urgency=[e.record.domain for e in overview.get_entries_sorted_by_urgency()],
        thresholds=ThresholdsResponse(
            critical_days=thresholds.critical,
            warning_days=thresholds.warning,
        ),
        top_level=[_entry_to_response(e) for e in overview.top_level],
        second_level_and_custom=[_entry_to_response(e) for e in overview.second_level_and_custom],
    )


def _error(status_code: int, error: str, detail: str, **extra: str | None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    services: ApiServices,
    version: str = "1.0.0",
    title: str = "Domain Tracker",
    on_shutdown: Callable[[], Awaitable[None]] | None = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        services: Use cases backing the endpoints.
        version: Application version string.
        title: Title shown in the OpenAPI document.
        on_shutdown: Coroutine releasing shared resources when the server stops.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")
        if on_shutdown is not None:
            await on_shutdown()

    app = FastAPI(
        title=f"{title} API",
        description="Track registration and expiration dates of domain names. "
        "Reads require the access password when one is configured; "
        "every mutation requires the administrator password.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    def access_context(
        credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    ) -> AccessContext:
        return services.gate.authorize(credentials.password if credentials else None)

    # Resolved before the request body is validated.
    def admin_context(context: AccessContext = Depends(access_context)) -> AccessContext:
        services.gate.require_admin(context)
        return context

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", version=version, timestamp=datetime.now(UTC))

    @app.get(
        "/api/v1/domains",
        response_model=OverviewResponse,
        tags=["Domains"],
        summary="List tracked domains",
        description="Categorized view of every tracked domain with its expiration status.",
        responses={401: {"model": ErrorResponse, "description": "Access password required"}},
    )
    async def list_domains(context: AccessContext = Depends(access_context)) -> OverviewResponse:
        overview = await services.view_domains.execute(context)
        return _overview_to_response(overview, services.thresholds)

    @app.get(
        "/api/v1/admin/domains",
        response_model=OverviewResponse,
        tags=["Domains"],
        summary="List tracked domains (administrator)",
        responses={401: {"model": ErrorResponse, "description": "Administrator password required"}},
    )
    async def list_domains_admin(
        context: AccessContext = Depends(admin_context),
    ) -> OverviewResponse:
        overview = await services.view_domains.execute(context)
        return _overview_to_response(overview, services.thresholds)

    @app.get(
        "/api/v1/domains/{domain}",
        response_model=DomainEntryResponse,
        tags=["Domains"],
        summary="Get one tracked domain",
        responses={404: {"model": ErrorResponse, "description": "Domain not tracked"}},
    )
    async def get_domain(
        domain: str, context: AccessContext = Depends(access_context)
    ) -> DomainEntryResponse:
        entry = await services.get_domain.execute(domain, context)
        return _entry_to_response(entry)

    @app.post(
        "/api/v1/update",
        response_model=MutationResponse,
        tags=["Operations"],
        summary="Create, update or delete a domain",
        description="`update` upserts the supplied fields and looks up missing dates; "
        "`delete` removes the record.",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid request"},
            401: {"model": ErrorResponse, "description": "Administrator password required"},
        },
    )
    async def update_domain(
        body: UpdateRequest, context: AccessContext = Depends(admin_context)
    ) -> MutationResponse:
        result = await services.mutate_domain.execute(
            MutationRequest(
                action=body.action,
                domain=body.domain,
                registrar=body.registrar,
                registration_date=body.registration_date,
                expiration_date=body.expiration_date,
                system=body.system,
            ),
            context,
        )
        return MutationResponse(
            success=True,
            action=result.action.value,
            domain=result.domain,
            record=_record_to_response(result.record) if result.record else None,
            created=result.created,
            lookup_attempted=result.lookup_attempted,
        )

    @app.post(
        "/api/v1/domains/{domain}/sync",
        response_model=SyncResponse,
        tags=["Operations"],
        summary="Refresh one domain from WHOIS",
    )
    async def sync_domain(
        domain: str, context: AccessContext = Depends(admin_context)
    ) -> SyncResponse:
        outcome = await services.sync_domain.execute(domain, context)
        return SyncResponse(
            record=_record_to_response(outcome.record),
            lookup_succeeded=outcome.lookup_succeeded,
            created=outcome.created,
        )

    @app.post(
        "/api/v1/discover",
        response_model=DiscoveryResponse,
        tags=["Operations"],
        summary="Seed domains from the DNS provider's zones",
        responses={502: {"model": ErrorResponse, "description": "Zone listing failed"}},
    )
    async def discover(context: AccessContext = Depends(admin_context)) -> DiscoveryResponse:
        result = await services.discover_zones.execute(context)
        return DiscoveryResponse(
            summary=result.get_summary(),
            zones=result.zones,
            created=result.created,
            refreshed=result.refreshed,
            unchanged=result.unchanged,
            lookup_failures=result.lookup_failures,
            skipped=result.skipped,
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:  # noqa: ARG001
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request", exc.message, field=exc.field)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,  # noqa: ARG001
        exc: RequestValidationError,
    ) -> JSONResponse:
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request",
            first.get("msg", "Malformed request body"),
            field=field or None,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,  # noqa: ARG001
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        response = _error(exc.status_code, HTTPStatus(exc.status_code).phrase, str(exc.detail))
        response.headers.update(exc.headers or {})
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            response.headers.setdefault("WWW-Authenticate", "Basic")
        return response

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:  # noqa: ARG001
        response = _error(status.HTTP_401_UNAUTHORIZED, "Unauthorized", str(exc))
        response.headers["WWW-Authenticate"] = "Basic"
        return response

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:  # noqa: ARG001
        return _error(status.HTTP_404_NOT_FOUND, "Not found", str(exc))

    @app.exception_handler(LookupFailedError)
    async def lookup_failed_handler(request: Request, exc: LookupFailedError) -> JSONResponse:  # noqa: ARG001
        return _error(status.HTTP_502_BAD_GATEWAY, "Lookup failed", str(exc))

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:  # noqa: ARG001
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Record store unavailable", str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc))

    return app
