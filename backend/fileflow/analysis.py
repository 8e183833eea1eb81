# backend/fileflow/analysis.py

from typing import Callable, Dict, Optional, Type

from pydantic import BaseModel

from .config import AnalysisMode
from .gemini_client import generate_json_from_data_uri
from .logging_config import (
    ANALYSES_FAILED,
    ANALYSES_REJECTED,
    ANALYSES_STARTED,
    ANALYSES_SUCCEEDED,
    count,
    log,
    timed_analysis,
)
from .models import (
    ActionResult,
    AnalysisRequest,
    AnalysisResult,
    JewelryGrade,
    MetadataSuggestion,
)
from .prompts import build_prompt

INVALID_INPUT_MESSAGE = "Invalid input. File data and name are required."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

# The analysis capability: validated request in, validated result out, raises on any failure.
Capability = Callable[[AnalysisRequest], AnalysisResult]

RESULT_MODELS: Dict[AnalysisMode, Type[BaseModel]] = {
    AnalysisMode.JEWELRY: JewelryGrade,
    AnalysisMode.METADATA: MetadataSuggestion,
}


def gemini_capability(mode: AnalysisMode, model: Optional[str] = None) -> Capability:
    """
    Build the Gemini-backed capability for one deployment mode.

    The result model is fixed here, so a single deployment never mixes
    jewelry grades and metadata suggestions.
    """
    result_model = RESULT_MODELS[mode]

    def run(request: AnalysisRequest) -> AnalysisResult:
        prompt = build_prompt(mode, request.file_name)
        raw = generate_json_from_data_uri(prompt, request.file_data_uri, model=model)
        return result_model.model_validate(raw)

    return run


def analyze(file_data_uri: str, file_name: str, capability: Capability) -> ActionResult:
    """
    Run one analysis attempt.

    Every failure is reduced to a single message string on ActionResult.error.
    No retry and no caching: identical files are analyzed again.
    """
    if not file_data_uri or not file_name:
        count(ANALYSES_REJECTED)
        log.warning("Rejected analysis request with missing file data or name")
        return ActionResult(error=INVALID_INPUT_MESSAGE)

    count(ANALYSES_STARTED)
    try:
        request = AnalysisRequest(file_data_uri=file_data_uri, file_name=file_name)
        with timed_analysis(file_name):
            result = capability(request)
    except Exception as e:
        count(ANALYSES_FAILED)
        log.error(f"❌ Analysis of {file_name!r} failed: {e}")
        message = str(e) or UNKNOWN_ERROR_MESSAGE
        return ActionResult(error=f"AI analysis failed: {message}")

    count(ANALYSES_SUCCEEDED)
    return ActionResult(data=result)
