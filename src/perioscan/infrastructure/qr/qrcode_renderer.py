"""QR code rendering for verification links."""

import io

import qrcode
import qrcode.constants


class QRCodePNGRenderer:
    """Render a payload as a PNG QR code."""

    def __init__(self, box_size: int = 6, border: int = 2) -> None:
        self._box_size = box_size
        self._border = border

    def render_png(self, data: str) -> bytes:
        """Encode data and return PNG bytes."""
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self._box_size,
            border=self._border,
        )
        qr.add_data(data)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()
