"""Tests for backend.fileflow.models — the request and result contracts."""

import pytest
from pydantic import ValidationError

from backend.fileflow.models import (
    ActionResult,
    AnalysisRequest,
    AnalyzePayload,
    JewelryGrade,
    MetadataSuggestion,
)


class TestAnalysisRequest:
    def test_accepts_camel_case_wire_names(self):
        request = AnalysisRequest.model_validate(
            {"fileDataUri": "data:image/png;base64,AAAA", "fileName": "ring.png"}
        )
        assert request.file_data_uri == "data:image/png;base64,AAAA"
        assert request.file_name == "ring.png"

    @pytest.mark.parametrize(
        "uri",
        ["AAAA", "data:image/png,AAAA", "data:image/png;base64,", "http://x/ring.png"],
    )
    def test_rejects_non_data_uris(self, uri):
        with pytest.raises(ValidationError):
            AnalysisRequest(file_data_uri=uri, file_name="ring.png")

    def test_is_immutable(self):
        request = AnalysisRequest(file_data_uri="data:image/png;base64,AAAA", file_name="ring.png")
        with pytest.raises(ValidationError):
            request.file_name = "other.png"

    def test_payload_defaults_to_empty(self):
        payload = AnalyzePayload.model_validate({})
        assert payload.file_data_uri == ""
        assert payload.file_name == ""


class TestJewelryGrade:
    @pytest.mark.parametrize("score", [0, 0.5, 87, 100])
    def test_score_in_range(self, scenario_a_grade, score):
        scenario_a_grade["qualityScore"] = score
        assert JewelryGrade.model_validate(scenario_a_grade).quality_score == score

    @pytest.mark.parametrize("score", [-1, 100.01, 150])
    def test_score_out_of_range(self, scenario_a_grade, score):
        scenario_a_grade["qualityScore"] = score
        with pytest.raises(ValidationError):
            JewelryGrade.model_validate(scenario_a_grade)

    def test_optional_fields_may_be_absent(self):
        grade = JewelryGrade.model_validate(
            {"material": "Silver", "qualityScore": 40, "analysis": "Tarnished."}
        )
        assert grade.purity is None
        assert grade.gemstones is None
        assert grade.similar_products is None

    def test_gemstone_requires_type(self, scenario_a_grade):
        scenario_a_grade["gemstones"] = [{"cut": "Oval"}]
        with pytest.raises(ValidationError):
            JewelryGrade.model_validate(scenario_a_grade)

    def test_similar_product_urls_must_be_urls(self, full_grade):
        full_grade["similarProducts"][0]["imageUrl"] = "not a url"
        with pytest.raises(ValidationError):
            JewelryGrade.model_validate(full_grade)

    def test_wire_format_is_camel_case_without_absent_fields(self):
        grade = JewelryGrade.model_validate(
            {
                "material": "Gold",
                "qualityScore": 70,
                "analysis": "Fine.",
                "gemstones": [{"type": "Ruby"}],
            }
        )
        wire = grade.to_wire()

        assert wire == {
            "material": "Gold",
            "qualityScore": 70.0,
            "analysis": "Fine.",
            "gemstones": [{"type": "Ruby"}],
        }

    def test_wire_format_keeps_product_urls(self, full_grade):
        wire = JewelryGrade.model_validate(full_grade).to_wire()
        product = wire["similarProducts"][1]
        assert product["url"] == "https://shop.example.com/p/halo"
        assert product["imageUrl"] == "https://images.unsplash.com/photo-2"


class TestMetadataSuggestion:
    def test_tags_keep_order(self, metadata_suggestion):
        suggestion = MetadataSuggestion.model_validate(metadata_suggestion)
        assert suggestion.tags == ["finance", "report", "q3"]

    def test_tags_may_be_empty(self):
        assert MetadataSuggestion(description="Blank page.").tags == []

    def test_description_required(self):
        with pytest.raises(ValidationError):
            MetadataSuggestion.model_validate({"tags": ["x"]})


def test_action_result_ok():
    assert not ActionResult(error="boom").ok
    assert ActionResult(data=MetadataSuggestion(description="d")).ok
