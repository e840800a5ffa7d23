from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from typing import Optional

import qrcode
from PIL import Image

from ..core.constants import DEFAULT_QR_DARK, DEFAULT_QR_LIGHT, DEFAULT_QR_MARGIN, DEFAULT_QR_SIZE


@dataclass(frozen=True)
class RenderOptions:
    size: int = DEFAULT_QR_SIZE
    margin: int = DEFAULT_QR_MARGIN
    dark: str = DEFAULT_QR_DARK
    light: str = DEFAULT_QR_LIGHT


class QRRenderer:
    """Renders payload strings as PNG QR codes."""

    def __init__(self, default_options: Optional[RenderOptions] = None):
        self._defaults = default_options or RenderOptions()

    def render(self, payload: str, options: Optional[RenderOptions] = None) -> bytes:
        opts = options or self._defaults

        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=opts.margin,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        img = qr.make_image(fill_color=opts.dark, back_color=opts.light).get_image()
        img = img.convert("RGB")
        if opts.size and img.size != (opts.size, opts.size):
            # Nearest keeps module edges sharp for decoders.
            img = img.resize((opts.size, opts.size), Image.NEAREST)

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    def data_url(self, payload: str, options: Optional[RenderOptions] = None) -> str:
        png = self.render(payload, options)
        return "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    @staticmethod
    def download_filename(session_id: str) -> str:
        return f"attendance-qr-{session_id}.png"
