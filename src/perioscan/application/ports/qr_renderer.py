"""QR code renderer port."""

from typing import Protocol


class QRCodeRenderer(Protocol):
    """Port for rendering a payload (verification URL) to a PNG image."""

    def render_png(self, data: str) -> bytes: ...
