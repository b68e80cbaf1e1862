from app.core.config import settings
from app.core.exceptions import ValidationError


def ensure_input_length(text: str) -> None:
    """입력 길이 제한 검사"""
    if len(text) > settings.max_input_length:
        raise ValidationError(
            detail=f"입력이 너무 깁니다: {len(text)}자 (최대 {settings.max_input_length}자)"
        )
