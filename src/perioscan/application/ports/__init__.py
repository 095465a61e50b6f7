"""Application ports - interfaces for external adapters."""

from perioscan.application.ports.permission_checker import PermissionChecker
from perioscan.application.ports.qr_renderer import QRCodeRenderer
from perioscan.application.ports.token_signer import TokenSigner
from perioscan.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "QRCodeRenderer",
    "TokenSigner",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
