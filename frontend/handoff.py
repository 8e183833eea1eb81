# frontend/handoff.py

import json
from typing import Any, Dict, Optional, Tuple

from .scratch import ScratchFullError, SessionScratch

RESULT_KEY = "jewelryGradeResult"
PREVIEW_KEY = "jewelryPreviewUrl"

STORAGE_FULL_MESSAGE = "Could not save the analysis result. Session storage may be full."


class HandoffError(Exception):
    pass


def store_grade(scratch: SessionScratch, result: Dict[str, Any], preview_url: str) -> None:
    """
    Write the grade and its preview so the grading page can pick them up.

    On a failed write both keys are removed and HandoffError is raised;
    the caller must not navigate in that case.
    """
    try:
        scratch.set(RESULT_KEY, json.dumps(result))
        scratch.set(PREVIEW_KEY, preview_url)
    except ScratchFullError:
        clear_grade(scratch)
        raise HandoffError(STORAGE_FULL_MESSAGE)


def load_grade(scratch: SessionScratch) -> Optional[Tuple[Dict[str, Any], str]]:
    """Returns (result, preview_url), or None when there is nothing usable to show."""
    stored_result = scratch.get(RESULT_KEY)
    stored_preview = scratch.get(PREVIEW_KEY)
    if not stored_result or not stored_preview:
        return None

    try:
        result = json.loads(stored_result)
    except json.JSONDecodeError:
        return None
    if not isinstance(result, dict):
        return None
    return result, stored_preview


def clear_grade(scratch: SessionScratch) -> None:
    scratch.remove(RESULT_KEY)
    scratch.remove(PREVIEW_KEY)
