"""Shared pytest fixtures for the FileFlow backend and frontend tests.

Fixtures included:
- Results: scenario_a_grade, full_grade, metadata_suggestion
- Files: png_bytes
- Capability fakes: make_capability
- Metrics: reset before every test
"""

import io

import pytest
from PIL import Image

from backend.fileflow.logging_config import reset_metrics

RING_DATA_URI = "data:image/png;base64,AAAA"


# =============================================================================
# Helper Functions
# =============================================================================


def create_test_png(width: int = 8, height: int = 8, color: str = "red") -> bytes:
    """Helper to create a small, real PNG image in memory."""
    img = Image.new("RGB", (width, height), color=color)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


class FakeCapability:
    """Stands in for Gemini: records every request, then returns or raises."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def png_bytes() -> bytes:
    return create_test_png()


@pytest.fixture
def make_capability():
    """Factory fixture: make_capability(result=..., error=...)."""
    return FakeCapability


@pytest.fixture
def scenario_a_grade() -> dict:
    """The minimal gold ring grade: no stones, no similar products."""
    return {
        "material": "Gold",
        "purity": "18k",
        "qualityScore": 87,
        "analysis": "A cleanly cast band with even polish and crisp edges.",
        "gemstones": [],
        "similarProducts": [],
    }


@pytest.fixture
def full_grade() -> dict:
    """A grade using every optional field, with one stone missing its cut."""
    return {
        "material": "Platinum",
        "purity": "950",
        "gemstones": [
            {"type": "Diamond", "cut": "Round", "clarity": "VS1"},
            {"type": "Sapphire", "clarity": "VVS2"},
        ],
        "qualityScore": 92.5,
        "analysis": "Precise prong work and a well-matched pair of stones.",
        "similarProducts": [
            {
                "name": "Platinum Solitaire",
                "url": "https://shop.example.com/p/solitaire",
                "price": "$4,200",
                "imageUrl": "https://images.unsplash.com/photo-1",
            },
            {
                "name": "Sapphire Halo Ring",
                "url": "https://shop.example.com/p/halo",
                "price": "$3,150",
                "imageUrl": "https://images.unsplash.com/photo-2",
            },
            {
                "name": "Two-Stone Ring",
                "url": "https://shop.example.com/p/two-stone",
                "price": "$5,000",
                "imageUrl": "https://images.unsplash.com/photo-3",
            },
        ],
    }


@pytest.fixture
def metadata_suggestion() -> dict:
    return {
        "description": "A quarterly sales report with regional breakdowns.",
        "tags": ["finance", "report", "q3"],
    }
