from mitraverify.schemas.verification import (
    ApiError,
    EvidenceItem,
    ImageAnalysis,
    Probabilities,
    SimilarityMatch,
    TextAnalysis,
    VerificationResult,
)
from mitraverify.schemas.system import HealthStatus, ModelInfo, SystemStats
from mitraverify.schemas.upload import ImageUpload

__all__ = [
    "ApiError",
    "EvidenceItem",
    "ImageAnalysis",
    "Probabilities",
    "SimilarityMatch",
    "TextAnalysis",
    "VerificationResult",
    "HealthStatus",
    "ModelInfo",
    "SystemStats",
    "ImageUpload",
]
