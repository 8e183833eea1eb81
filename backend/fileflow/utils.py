# backend/fileflow/utils.py
import base64
import binascii
from typing import Tuple


def bytes_to_data_uri(content: bytes, mime_type: str) -> str:
    """
    Returns a base64 data URI (data:<mimetype>;base64,<payload>) for the given bytes.
    """
    b64 = base64.b64encode(content).decode("utf-8")
    return f"data:{mime_type};base64,{b64}"


def decode_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """
    Split a data URI into (mime_type, raw bytes).
    Raises ValueError if the string is not a base64 data URI.
    """
    header, sep, payload = data_uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Expected a data URI of the form data:<mimetype>;base64,<payload>")

    mime_type = header[len("data:"):-len(";base64")] or "application/octet-stream"
    try:
        raw = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Data URI payload is not valid base64: {e}")
    return mime_type, raw
