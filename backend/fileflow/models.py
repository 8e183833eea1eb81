# backend/fileflow/models.py

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel

DATA_URI_PATTERN = r"^data:[^;,]+;base64,.+$"


class WireModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnalyzePayload(WireModel):
    # Empty defaults so missing fields reach the invalid-input check instead of a 422.
    file_data_uri: str = ""
    file_name: str = ""


class AnalysisRequest(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    file_data_uri: str = Field(..., pattern=DATA_URI_PATTERN)
    file_name: str = Field(..., min_length=1)


# ---------------- metadata variant ----------------


class MetadataSuggestion(WireModel):
    tags: List[str] = Field(default_factory=list)
    description: str


# ---------------- jewelry variant ----------------


class Gemstone(WireModel):
    type: str
    cut: Optional[str] = None
    clarity: Optional[str] = None


class SimilarProduct(WireModel):
    name: str
    url: HttpUrl
    price: str
    image_url: HttpUrl


class JewelryGrade(WireModel):
    material: str
    purity: Optional[str] = None
    gemstones: Optional[List[Gemstone]] = None
    quality_score: float = Field(..., ge=0, le=100)
    analysis: str
    similar_products: Optional[List[SimilarProduct]] = None


AnalysisResult = Union[JewelryGrade, MetadataSuggestion]


class ActionResult(BaseModel):
    data: Optional[Union[JewelryGrade, MetadataSuggestion]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None
