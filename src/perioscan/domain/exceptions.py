"""Domain exceptions."""


class PerioScanError(Exception):
    """Base exception for PerioScan."""

    pass


class InvalidInput(PerioScanError):
    """Malformed document or signer passed to an operation."""

    pass


class PermissionDenied(PerioScanError):
    """User does not have permission for the requested action."""

    pass


class NotFound(PerioScanError):
    """Requested resource was not found."""

    pass


class InvalidStatus(PerioScanError):
    """Document is not in a status that allows the requested transition."""

    pass


class DocumentAlreadySigned(PerioScanError):
    """Document already carries a digital signature and is immutable."""

    pass


class InvalidToken(PerioScanError):
    """Signature token failed cryptographic verification."""

    pass
