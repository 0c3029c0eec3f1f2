"""Image payloads exchanged as base64 data URIs."""

import base64
import binascii
from dataclasses import dataclass

from reimagine.domain.errors import InvalidImageError

_DATA_PREFIX = "data:"
_BASE64_MARKER = ";base64"


@dataclass(frozen=True)
class ImagePayload:
    """Image bytes with their MIME type."""

    mime_type: str
    data: bytes

    @classmethod
    def from_data_url(cls, data_url: str) -> "ImagePayload":
        """Split a ``data:<mime>;base64,<bytes>`` URI into its parts."""
        if not data_url.startswith(_DATA_PREFIX) or "," not in data_url:
            raise InvalidImageError("Image must be a data URI")
        header, encoded = data_url[len(_DATA_PREFIX) :].split(",", 1)
        if not header.endswith(_BASE64_MARKER):
            raise InvalidImageError("Image data URI must be base64 encoded")
        mime_type = header[: -len(_BASE64_MARKER)].split(";", 1)[0].strip()
        if not mime_type:
            raise InvalidImageError("Image data URI has no MIME type")
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidImageError("Image data URI has invalid base64") from exc
        if not data:
            raise InvalidImageError("Image data URI is empty")
        return cls(mime_type=mime_type, data=data)

    @classmethod
    def from_bytes(cls, image_bytes: bytes) -> "ImagePayload":
        """Wrap raw bytes, sniffing the MIME type from the file signature."""
        return cls(mime_type=detect_mime_type(image_bytes), data=image_bytes)

    @property
    def extension(self) -> str:
        subtype = self.mime_type.split("/", 1)[-1]
        return "jpg" if subtype == "jpeg" else subtype

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"


def png_data_url(encoded: str) -> str:
    """Wrap provider base64 output as a PNG data URI."""
    return f"data:image/png;base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
