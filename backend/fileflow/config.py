# backend/fileflow/config.py

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Loads .env automatically

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class AnalysisMode(str, Enum):
    JEWELRY = "jewelry"
    METADATA = "metadata"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    gemini_model: str = DEFAULT_MODEL
    analysis_mode: AnalysisMode = AnalysisMode.JEWELRY
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    @classmethod
    def from_env(cls) -> "Settings":
        raw_mode = (os.getenv("ANALYSIS_MODE") or AnalysisMode.JEWELRY.value).strip().lower()
        try:
            mode = AnalysisMode(raw_mode)
        except ValueError:
            raise ValueError(
                f"Unknown ANALYSIS_MODE {raw_mode!r}; expected 'jewelry' or 'metadata'."
            )

        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY"),
            gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            analysis_mode=mode,
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES") or DEFAULT_MAX_UPLOAD_BYTES),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
