from __future__ import annotations

import io
import logging
from typing import Optional, Union

from PIL import Image
from pyzbar.pyzbar import ZBarSymbol
from pyzbar.pyzbar import decode as pyzbar_decode

logger = logging.getLogger(__name__)

Frame = Union[Image.Image, bytes]


def decode_frame(frame: Frame) -> Optional[str]:
    """Return the text of the first QR code in a frame, or None if there is none.

    A frame without a recognizable code is not an error.
    """

    if isinstance(frame, (bytes, bytearray)):
        frame = Image.open(io.BytesIO(frame))

    img = frame.convert("RGB")
    decoded = pyzbar_decode(img, symbols=[ZBarSymbol.QRCODE])
    if not decoded:
        return None

    try:
        return decoded[0].data.decode("utf-8").strip()
    except UnicodeDecodeError:
        logger.debug("QR code with non UTF-8 content ignored")
        return None
