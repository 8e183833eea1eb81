# frontend/api_client.py

import os

import requests
from dotenv import load_dotenv

from .capture import AnalysisOutcome

load_dotenv()

API_BASE = os.getenv("FILEFLOW_API_BASE", "http://127.0.0.1:8000")
API_ANALYZE = f"{API_BASE}/api/v1/analyze"

ANALYSIS_MODE = (os.getenv("ANALYSIS_MODE") or "jewelry").strip().lower()


def _error_detail(r: requests.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text or f"HTTP {r.status_code}"
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    return r.text or f"HTTP {r.status_code}"


def request_analysis(file_data_uri: str, file_name: str, url: str = API_ANALYZE) -> AnalysisOutcome:
    """
    POST the file to the backend. Never raises: every failure becomes outcome.error.
    No timeout; the call waits as long as the analysis takes.
    """
    payload = {"fileDataUri": file_data_uri, "fileName": file_name}
    try:
        r = requests.post(url, json=payload, timeout=None)
    except requests.exceptions.RequestException as e:
        return AnalysisOutcome(error=f"Could not reach backend: {e}")

    if not r.ok:
        return AnalysisOutcome(error=_error_detail(r))

    try:
        return AnalysisOutcome(data=r.json())
    except ValueError:
        return AnalysisOutcome(error="Backend returned a response that was not JSON.")
