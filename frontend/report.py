# frontend/report.py
"""
Turns analysis results (camelCase dicts, as the backend sends them) into the
exact rows and texts the pages draw. Kept free of Streamlit so it can be tested.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

NOT_AVAILABLE = "N/A"
CAROUSEL_PAGE_SIZE = 3
# Wraparound only kicks in above this many products.
CAROUSEL_LOOP_MIN = 3
# Session key holding the first visible carousel card.
CAROUSEL_START_KEY = "carousel_start"


class ReportContractError(Exception):
    """The result does not honour the analysis contract; shown, never patched up."""


def format_score(score: float) -> str:
    return f"{score:g} / 100"


@dataclass(frozen=True)
class ProductCard:
    name: str
    url: str
    price: str
    image_url: str


@dataclass(frozen=True)
class Carousel:
    items: List[ProductCard]
    loop: bool
    page_size: int = CAROUSEL_PAGE_SIZE

    def visible(self, start: int) -> List[ProductCard]:
        n = len(self.items)
        if self.loop:
            return [self.items[(start + i) % n] for i in range(min(self.page_size, n))]
        return self.items[start:start + self.page_size]

    def step(self, start: int, delta: int) -> int:
        n = len(self.items)
        if self.loop:
            return (start + delta) % n
        last_start = max(0, n - self.page_size)
        return max(0, min(start + delta, last_start))


@dataclass(frozen=True)
class GradeReport:
    score: float
    score_text: str
    material_rows: List[Tuple[str, str]]
    analysis: str
    gemstone_rows: Optional[List[Dict[str, str]]] = None
    carousel: Optional[Carousel] = None

    @property
    def score_fraction(self) -> float:
        return self.score / 100


@dataclass(frozen=True)
class MetadataView:
    description: str
    tags: List[str] = field(default_factory=list)


def _require_str(result: Dict[str, Any], key: str) -> str:
    value = result.get(key)
    if not isinstance(value, str):
        raise ReportContractError(f"Result is missing required field {key!r}.")
    return value


def build_grade_report(result: Dict[str, Any]) -> GradeReport:
    material = _require_str(result, "material")
    analysis = _require_str(result, "analysis")

    score = result.get("qualityScore")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ReportContractError("Result is missing required field 'qualityScore'.")
    if not 0 <= score <= 100:
        raise ReportContractError(f"Quality score {score} is outside the 0-100 range.")

    material_rows = [("Material", material)]
    if result.get("purity"):
        material_rows.append(("Purity", result["purity"]))

    gemstone_rows = None
    gemstones = result.get("gemstones") or []
    for gem in gemstones:
        if not isinstance(gem, dict) or not isinstance(gem.get("type"), str) or not gem["type"]:
            raise ReportContractError("Gemstone is missing required field 'type'.")
    if gemstones:
        gemstone_rows = [
            {
                "Type": gem["type"],
                "Cut": gem.get("cut") or NOT_AVAILABLE,
                "Clarity": gem.get("clarity") or NOT_AVAILABLE,
            }
            for gem in gemstones
        ]

    carousel = None
    products = result.get("similarProducts") or []
    if products:
        cards = [
            ProductCard(
                name=p.get("name", ""),
                url=p.get("url", ""),
                price=p.get("price", ""),
                image_url=p.get("imageUrl", ""),
            )
            for p in products
        ]
        carousel = Carousel(items=cards, loop=len(cards) >= CAROUSEL_LOOP_MIN)

    return GradeReport(
        score=score,
        score_text=format_score(score),
        material_rows=material_rows,
        analysis=analysis,
        gemstone_rows=gemstone_rows,
        carousel=carousel,
    )


def build_metadata_view(result: Dict[str, Any]) -> MetadataView:
    description = _require_str(result, "description")
    tags = result.get("tags") or []
    return MetadataView(description=description, tags=[str(t) for t in tags])
