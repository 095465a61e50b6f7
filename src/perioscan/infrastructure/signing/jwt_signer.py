"""HS256 JWT token signer for signing assertions."""

import base64
import binascii
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from perioscan.domain.exceptions import InvalidToken

_DAYS_PER_YEAR = 365.25


def _is_canonical_segment(segment: str) -> bool:
    """True if the base64url segment re-encodes to itself.

    The unused low bits of the last character are ignored when decoding,
    so several spellings of one segment would otherwise verify.
    """
    try:
        raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError):
        return False
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii") == segment


class JWTTokenSigner:
    """Signs claims as a JWT with a long validity window.

    Forensic signatures must stay verifiable for decades, hence the
    default of 100 years.
    """

    algorithm = "HS256"

    def __init__(self, secret: str, validity_years: int = 100) -> None:
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._secret = secret
        self._validity = timedelta(days=_DAYS_PER_YEAR * validity_years)

    def encode(self, claims: dict[str, Any]) -> str:
        """Sign claims, adding iat/exp."""
        issued_at = datetime.now(UTC)
        payload = {**claims, "iat": issued_at, "exp": issued_at + self._validity}
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify encoding, signature and expiry; raise InvalidToken on any failure."""
        segments = token.split(".") if isinstance(token, str) else []
        if len(segments) != 3 or not all(_is_canonical_segment(s) for s in segments):
            raise InvalidToken("Token is not in canonical compact form")
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken(str(e)) from e
