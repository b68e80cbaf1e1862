from fastapi import APIRouter

from app.api.v1.guards import ensure_input_length
from app.api.v1.schemas import GenerateRequest, GenerateResponse
from app.core.context import get_request_id
from app.core.logging import get_logger
from app.domain.generation.service import generate

router = APIRouter(prefix="/generate", tags=["generate"])
logger = get_logger(__name__)


@router.post("", response_model=GenerateResponse)
async def generate_message(request: GenerateRequest) -> GenerateResponse:
    """커밋 메시지, PR 제목/본문, PR 의도 요약 생성"""
    ensure_input_length(request.input)

    response = await generate(
        request.input,
        request.target,
        guide=request.guide,
        session_id=get_request_id(),
    )
    logger.info(
        "생성 완료",
        target=request.target,
        model=response.model,
        input_tokens=response.input_tokens,
        output_tokens=response.output_tokens,
    )
    return GenerateResponse(**response.model_dump())
