# backend/fileflow/main.py

import asyncio
from typing import Any, Dict

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from .analysis import INVALID_INPUT_MESSAGE, Capability, analyze, gemini_capability
from .config import get_settings
from .logging_config import metrics_snapshot, log
from .models import AnalyzePayload
from .utils import bytes_to_data_uri

app = FastAPI(title="FileFlow Jewelry Grader", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_capability() -> Capability:
    settings = get_settings()
    return gemini_capability(settings.analysis_mode, settings.gemini_model)


async def _run_analysis(
    file_data_uri: str, file_name: str, capability: Capability
) -> Dict[str, Any]:
    # Gemini's client is blocking, keep it off the event loop.
    outcome = await asyncio.to_thread(analyze, file_data_uri, file_name, capability)

    if outcome.error == INVALID_INPUT_MESSAGE:
        raise HTTPException(status_code=400, detail=outcome.error)
    if not outcome.ok:
        raise HTTPException(status_code=502, detail=outcome.error)

    log.info(f"🏁 Analysis complete for {file_name!r}")
    return outcome.data.to_wire()


# ==========================================================
#                    ANALYSIS ENDPOINTS
# ==========================================================


@app.post("/api/v1/analyze")
async def analyze_file(
    payload: AnalyzePayload,
    capability: Capability = Depends(get_capability),
):
    """
    Analyze a file sent as a data URI.

    200 -> result JSON (camelCase keys)
    400 -> missing file data or name
    502 -> the analysis itself failed
    """
    log.info(f"🚀 Analysis requested for {payload.file_name!r}")
    return await _run_analysis(payload.file_data_uri, payload.file_name, capability)


@app.post("/api/v1/analyze/upload")
async def analyze_upload(
    file: UploadFile = File(...),
    capability: Capability = Depends(get_capability),
):
    """
    Multipart variant: the data URI is built here from the uploaded bytes.
    """
    content = await file.read()
    limit = get_settings().max_upload_bytes
    if len(content) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"File is larger than {limit / 1024 / 1024:.0f} MB.",
        )

    file_data_uri = ""
    if content:
        file_data_uri = bytes_to_data_uri(content, file.content_type or "application/octet-stream")

    log.info(f"🚀 Upload analysis requested for {file.filename!r} ({len(content)} bytes)")
    return await _run_analysis(file_data_uri, file.filename or "", capability)


# ==========================================================
#                     METRICS + HEALTH
# ==========================================================


@app.get("/metrics")
async def metrics():
    return metrics_snapshot()


@app.get("/health")
async def health():
    return {"status": "ok", "mode": get_settings().analysis_mode.value}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.fileflow.main:app", host="127.0.0.1", port=8000, reload=True)
