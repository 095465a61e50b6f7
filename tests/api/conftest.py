"""Fixtures for API tests."""

from unittest.mock import Mock

import falcon.asgi
import pytest

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
from perioscan.domain.value_objects import DocumentKind
from perioscan.infrastructure.permission.permission_checker import RolePermissionChecker
from perioscan.interfaces.api.app import DOCUMENT_PREFIXES, add_document_routes, add_health_routes
from perioscan.interfaces.api.middleware.auth import RequestUser
from perioscan.interfaces.api.resources.documents import (
    DocumentResource,
    FinalizeResource,
    PublicVerifyResource,
    SignResource,
    VerificationLinkResource,
    VerifyResource,
)
from perioscan.interfaces.api.resources.health import HealthResource

PUBLIC_BASE_URL = "https://perioscan.test"
FAKE_PNG = b"\x89PNG\r\n\x1a\nfake"


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing.

    X-Test-User / X-Test-Role pick the caller; X-Test-User: anonymous
    leaves the request unauthenticated.
    """

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User") or "u1"
        if user_id == "anonymous":
            req.context.user = None
            return
        req.context.user = RequestUser(
            user_id=user_id,
            role=req.get_header("X-Test-Role") or "perito",
            name="Dr. X",
            email="x@y.com",
        )


@pytest.fixture
def qr_renderer():
    renderer = Mock()
    renderer.render_png.return_value = FAKE_PNG
    return renderer


@pytest.fixture
def app(uow_factory, engine, qr_renderer):
    """Falcon ASGI app with document routes for both kinds."""
    permission_checker = RolePermissionChecker()
    app = falcon.asgi.App(middleware=[AuthBypassMiddleware()])
    add_health_routes(app, HealthResource())
    for kind in DocumentKind:
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
                    uow_factory,
                    permission_checker,
                    qr_renderer,
                    PUBLIC_BASE_URL + DOCUMENT_PREFIXES[kind],
                    kind,
                )
            ),
        )
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
