"""Tests for frontend.api_client. requests.post is always mocked."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from frontend.api_client import request_analysis

URL = "http://backend.test/api/v1/analyze"
RING_DATA_URI = "data:image/png;base64,AAAA"


def _response(status_code, json_body=None, text=""):
    r = MagicMock()
    r.status_code = status_code
    r.ok = status_code < 400
    r.text = text
    if json_body is None:
        r.json.side_effect = ValueError("no json")
    else:
        r.json.return_value = json_body
    return r


@pytest.fixture
def mock_post():
    with patch("frontend.api_client.requests.post") as post:
        yield post


def test_success(mock_post, scenario_a_grade):
    mock_post.return_value = _response(200, scenario_a_grade)

    outcome = request_analysis(RING_DATA_URI, "ring.png", url=URL)

    assert outcome.data == scenario_a_grade
    assert outcome.error is None
    mock_post.assert_called_once_with(
        URL,
        json={"fileDataUri": RING_DATA_URI, "fileName": "ring.png"},
        timeout=None,
    )


def test_backend_detail_becomes_error(mock_post):
    mock_post.return_value = _response(502, {"detail": "AI analysis failed: rate limited"})

    outcome = request_analysis(RING_DATA_URI, "ring.png", url=URL)

    assert outcome.data is None
    assert outcome.error == "AI analysis failed: rate limited"


def test_non_json_error_uses_text(mock_post):
    mock_post.return_value = _response(500, text="Internal Server Error")

    outcome = request_analysis(RING_DATA_URI, "ring.png", url=URL)

    assert outcome.error == "Internal Server Error"


def test_unreachable_backend(mock_post):
    mock_post.side_effect = requests.exceptions.ConnectionError("connection refused")

    outcome = request_analysis(RING_DATA_URI, "ring.png", url=URL)

    assert outcome.error.startswith("Could not reach backend:")
    assert "connection refused" in outcome.error


def test_success_body_not_json(mock_post):
    mock_post.return_value = _response(200, text="<html>")

    outcome = request_analysis(RING_DATA_URI, "ring.png", url=URL)

    assert outcome.data is None
    assert "not JSON" in outcome.error
