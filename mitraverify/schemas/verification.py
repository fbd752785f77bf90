from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class Probabilities(BaseModel):
    reliable: float = 0.0
    misinformation: float = 0.0


class TextAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    prediction: str
    confidence: float
    probabilities: Probabilities = Field(default_factory=Probabilities)
    explanation: str = ""
    language: str = ""    # ISO code detected by the backend, e.g. "en", "hi"


class SimilarityMatch(BaseModel):
    filename: str
    similarity: float


class ImageAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    is_manipulated: bool
    confidence: float
    manipulation_type: str = ""
    similarity_matches: List[SimilarityMatch] = Field(default_factory=list)
    explanation: str = ""


class EvidenceItem(BaseModel):
    source: str         # Publisher or fact-check outlet
    credibility: float  # 0.0 - 1.0
    excerpt: str = ""
    url: str = ""


class VerificationResult(BaseModel):
    """Unified outcome of any /verify call. Extra backend keys are kept."""

    model_config = ConfigDict(extra="allow")

    overall_verdict: str
    confidence: float = Field(description="Confidence score between 0.0 and 1.0")
    text_analysis: Optional[TextAnalysis] = None
    image_analysis: Optional[ImageAnalysis] = None
    evidence: List[EvidenceItem] = Field(default_factory=list)
    explanation: str = ""
    processing_time: float = Field(0.0, description="Backend processing time in seconds")


class ApiError(BaseModel):
    detail: str
    status_code: int
