"""Unit tests for QRCodePNGRenderer."""

import io

from PIL import Image

from perioscan.application.services.verification_url import build_verification_url
from perioscan.infrastructure.qr.qrcode_renderer import QRCodePNGRenderer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _url() -> str:
    return build_verification_url(
        "https://perioscan.example/v1/reports",
        "0b7a5c1e-2f4d-4e8a-9c3b-6d1f2a3b4c5d",
        "a" * 64,
        "ABCD2345",
    )


def test_renders_png() -> None:
    png = QRCodePNGRenderer().render_png(_url())

    assert png.startswith(PNG_SIGNATURE)
    image = Image.open(io.BytesIO(png))
    assert image.format == "PNG"
    assert image.width == image.height


def test_box_size_scales_image() -> None:
    small = Image.open(io.BytesIO(QRCodePNGRenderer(box_size=2).render_png(_url())))
    large = Image.open(io.BytesIO(QRCodePNGRenderer(box_size=4).render_png(_url())))
    assert large.width > small.width


def test_longer_payload_needs_larger_symbol() -> None:
    renderer = QRCodePNGRenderer(box_size=1, border=0)
    short = Image.open(io.BytesIO(renderer.render_png("x")))
    long = Image.open(io.BytesIO(renderer.render_png(_url())))
    assert long.width > short.width
