from fastapi import APIRouter

from app.api.v1.guards import ensure_input_length
from app.api.v1.schemas import PreprocessRequest, PreprocessResponse
from app.core.logging import get_logger
from app.domain.diff.service import preprocess_diff

router = APIRouter(prefix="/diff", tags=["diff"])
logger = get_logger(__name__)


@router.post("/preprocess", response_model=PreprocessResponse)
async def preprocess(request: PreprocessRequest) -> PreprocessResponse:
    """diff를 구조화 프롬프트로 변환 - LLM 호출 없음"""
    ensure_input_length(request.input)

    result = preprocess_diff(request.input, request.rules)
    logger.info(
        "diff 전처리 요청 처리",
        structured=result.is_structured,
        custom_rules=request.rules is not None,
    )
    return PreprocessResponse.from_result(result)
