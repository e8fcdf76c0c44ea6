"""
Utility functions for the Pet Battle API.
"""

import base64
import binascii
from typing import Optional, Tuple

DEFAULT_MIME_TYPE = "image/jpeg"


def split_data_uri(value: str) -> Tuple[Optional[str], str]:
    """
    Split a data URI into its MIME type and base64 payload.

    Args:
        value: "data:image/png;base64,iVBOR..." or a bare base64 string

    Returns:
        (mime_type, payload). mime_type is None for a bare base64 string.
    """
    value = (value or "").strip()
    if not value.startswith("data:"):
        return None, value

    header, sep, payload = value.partition(",")
    if not sep:
        raise ValueError("Data URI has no payload")

    mime_type = header[len("data:"):].split(";", 1)[0] or None
    return mime_type, payload


def to_data_uri(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    """Encode raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_data_uri(value: str) -> bytes:
    """
    Decode a data URI (or bare base64 string) into raw bytes.

    Raises:
        ValueError: if the payload is empty or not valid base64
    """
    _, payload = split_data_uri(value)
    if not payload:
        raise ValueError("Image payload is empty")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Image payload is not valid base64: {e}") from e
