"""Application entry point and composition root."""

import falcon
import falcon.asgi

from perioscan import __version__
from perioscan.application.services.signature_engine import SignatureEngine
from perioscan.application.use_cases.document.finalize_document import FinalizeDocumentUseCase
from perioscan.application.use_cases.document.get_document import GetDocumentUseCase
from perioscan.application.use_cases.document.sign_document import SignDocumentUseCase
from perioscan.application.use_cases.document.update_document import UpdateDocumentUseCase
from perioscan.application.use_cases.document.verification_link import (
    GetVerificationLinkUseCase,
)
from perioscan.application.use_cases.document.verify_by_hash import VerifyDocumentByHashUseCase
from perioscan.application.use_cases.document.verify_signature import (
    VerifyDocumentSignatureUseCase,
)
from perioscan.config import Settings, get_settings
from perioscan.domain.value_objects import DocumentKind
from perioscan.infrastructure.auth.keycloak_provider import KeycloakProvider
from perioscan.infrastructure.permission.permission_checker import RolePermissionChecker
from perioscan.infrastructure.persistence.postgres.connection import create_pool
from perioscan.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from perioscan.infrastructure.qr.qrcode_renderer import QRCodePNGRenderer
from perioscan.infrastructure.signing.jwt_signer import JWTTokenSigner
from perioscan.interfaces.api.app import DOCUMENT_PREFIXES, add_document_routes, add_health_routes
from perioscan.interfaces.api.middleware.auth import AuthMiddleware
from perioscan.interfaces.api.middleware.cors import CORSMiddleware
from perioscan.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from perioscan.interfaces.api.resources.documents import (
    DocumentResource,
    FinalizeResource,
    PublicVerifyResource,
    SignResource,
    VerificationLinkResource,
    VerifyResource,
)
from perioscan.interfaces.api.resources.health import HealthResource
from perioscan.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"PerioScan v{__version__}")


def build_signature_engine(settings: Settings) -> SignatureEngine:
    """Signature engine bound to the process-wide signing secret."""
    return SignatureEngine(
        JWTTokenSigner(settings.signing_secret, validity_years=settings.signature_validity_years)
    )


def create_perioscan_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies.

    Settings are resolved here so a missing signing secret stops the
    process at startup rather than on the first sign request.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("keycloak_disabled", reason="no client secret configured")

    permission_checker = RolePermissionChecker()
    engine = build_signature_engine(settings)
    qr_renderer = QRCodePNGRenderer()

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("unhandled_error", path=req.path, method=req.method)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    add_health_routes(app, HealthResource())

    for kind in DocumentKind:
        base_url = settings.public_base_url.rstrip("/") + DOCUMENT_PREFIXES[kind]
        add_document_routes(
            app,
            kind,
            document_resource=DocumentResource(
                GetDocumentUseCase(uow_factory, permission_checker, kind),
                UpdateDocumentUseCase(uow_factory, permission_checker, kind),
            ),
            finalize_resource=FinalizeResource(
                FinalizeDocumentUseCase(uow_factory, permission_checker, kind)
            ),
            sign_resource=SignResource(
                SignDocumentUseCase(uow_factory, permission_checker, engine, kind)
            ),
            verify_resource=VerifyResource(
                VerifyDocumentSignatureUseCase(uow_factory, permission_checker, engine, kind)
            ),
            public_verify_resource=PublicVerifyResource(
                VerifyDocumentByHashUseCase(uow_factory, engine, kind)
            ),
            verification_link_resource=VerificationLinkResource(
                GetVerificationLinkUseCase(
                    uow_factory, permission_checker, qr_renderer, base_url, kind
                )
            ),
        )

    logger.info("app_created", version=__version__, environment=settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_perioscan_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
