import json
import re
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from .config import get_settings
from .logging_config import GEMINI_CALLS, count, log
from .utils import decode_data_uri


class GeminiError(Exception):
    """Raised when Gemini cannot produce a usable JSON answer."""


_client: Optional[genai.Client] = None


def get_client() -> genai.Client:
    global _client
    if _client is None:
        api_key = get_settings().gemini_api_key
        if not api_key:
            raise GeminiError("Missing GOOGLE_API_KEY or GEMINI_API_KEY environment variable.")
        _client = genai.Client(api_key=api_key)
    return _client


# --- Helpers ---

def _extract_json(text: str) -> Dict[str, Any]:
    """
    Try to find and parse a JSON object in Gemini text output.
    Returns {} if parsing fails.
    """
    if not text:
        return {}
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = re.search(r"(\{[\s\S]*\})", text)
        if not match:
            return {}
        try:
            parsed = json.loads(match.group(1))
        except json.JSONDecodeError:
            return {}
    return parsed if isinstance(parsed, dict) else {}


# --- File + prompt Gemini call ---

def generate_json_from_data_uri(
    prompt: str,
    file_data_uri: str,
    model: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Send the prompt plus the file (decoded from its data URI) to Gemini
    and return the JSON object it answers with.

    Raises GeminiError on an empty or non-JSON answer; SDK errors propagate.
    """
    mime_type, raw = decode_data_uri(file_data_uri)
    model_name = model or get_settings().gemini_model

    contents = [
        prompt,
        types.Part.from_bytes(data=raw, mime_type=mime_type),
    ]

    count(GEMINI_CALLS)
    resp = get_client().models.generate_content(
        model=model_name,
        contents=contents,
        config=types.GenerateContentConfig(response_mime_type="application/json"),
    )

    text = getattr(resp, "text", None)
    if not text:
        raise GeminiError("Empty Gemini response")

    parsed = _extract_json(text)
    if not parsed:
        log.warning("Gemini returned text that was not a JSON object: %s", text[:200])
        raise GeminiError("Gemini returned unstructured text")
    return parsed
