"""Helpers for encoded image payloads."""

import base64
import binascii


def decode_image_payload(value: str) -> bytes:
    """Decode a data URL or a bare base64 string into image bytes."""
    encoded = value.strip()
    if encoded.startswith("data:"):
        header, separator, encoded = encoded.partition(",")
        if not separator or not header.endswith(";base64"):
            raise ValueError("Image data URL must be base64 encoded")
    try:
        image_bytes = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise ValueError("Image payload is not valid base64") from exc
    if not image_bytes:
        raise ValueError("Image payload is empty")
    return image_bytes


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def file_extension(mime_type: str) -> str:
    return {"image/png": "png", "image/webp": "webp"}.get(mime_type, "jpg")
