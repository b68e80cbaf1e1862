from app.api.v1.schemas.diff import (
    ClassificationResponse,
    ClassifiedFileResponse,
    DiffStatsResponse,
    PreprocessRequest,
    PreprocessResponse,
)
from app.api.v1.schemas.generate import GenerateRequest, GenerateResponse

__all__ = [
    "PreprocessRequest",
    "PreprocessResponse",
    "ClassificationResponse",
    "ClassifiedFileResponse",
    "DiffStatsResponse",
    "GenerateRequest",
    "GenerateResponse",
]
