"""Falcon ASGI route wiring."""

from falcon.asgi import App

from perioscan.domain.value_objects import DocumentKind
from perioscan.interfaces.api.resources.documents import (
    DocumentResource,
    FinalizeResource,
    PublicVerifyResource,
    SignResource,
    VerificationLinkResource,
    VerifyResource,
)
from perioscan.interfaces.api.resources.health import HealthResource

# URL prefix per document kind
DOCUMENT_PREFIXES = {
    DocumentKind.REPORT: "/v1/reports",
    DocumentKind.EVIDENCE_REPORT: "/v1/evidence-reports",
}


def add_health_routes(app: App, health_resource: HealthResource) -> None:
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")


def add_document_routes(
    app: App,
    kind: DocumentKind,
    document_resource: DocumentResource,
    finalize_resource: FinalizeResource,
    sign_resource: SignResource,
    verify_resource: VerifyResource,
    public_verify_resource: PublicVerifyResource,
    verification_link_resource: VerificationLinkResource,
) -> None:
    """Register the signable-document routes of one kind."""
    prefix = DOCUMENT_PREFIXES[kind]
    # Public route; literal "verify" segment wins over {document_id}.
    app.add_route(f"{prefix}/verify/{{document_id}}", public_verify_resource)
    app.add_route(f"{prefix}/{{document_id}}", document_resource)
    app.add_route(f"{prefix}/{{document_id}}/finalize", finalize_resource)
    app.add_route(f"{prefix}/{{document_id}}/sign", sign_resource)
    app.add_route(f"{prefix}/{{document_id}}/verify", verify_resource)
    app.add_route(f"{prefix}/{{document_id}}/verification-link", verification_link_resource)
    app.add_route(
        f"{prefix}/{{document_id}}/verification-qr", verification_link_resource, suffix="qr"
    )
