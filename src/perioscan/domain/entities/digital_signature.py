"""Digital signature embedded into a signed document."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DigitalSignature:
    """Signed assertion over a document plus its public verification code.

    Created once by the signature engine; never rewritten. A changed
    document is reported as a mismatch, not re-signed.
    """

    signed_by: str
    signature_date: datetime
    signature_data: str
    content_hash: str
    verification_code: str
