import re

from app.core.context import set_target
from app.core.exceptions import GenerationError
from app.core.logging import get_logger
from app.domain.diff.service import preprocess_diff
from app.domain.generation.schemas import COMMIT_MESSAGE_TARGET, LLMResponse, Target
from app.infra.llm.client import generate_commit_message, generate_text

logger = get_logger(__name__)

FENCED_BLOCK_PATTERN = re.compile(r"^```[^\n\r]*\n([\s\S]*?)\n```$")
WHITESPACE_PATTERN = re.compile(r"\s+")


def trim_commit_message_wrappers(text: str) -> str:
    """코드 펜스나 백틱으로 감싼 응답에서 본문만 추출"""
    trimmed = text.strip()
    if trimmed.startswith("```") and trimmed.endswith("```"):
        fenced = FENCED_BLOCK_PATTERN.match(trimmed)
        if fenced:
            return fenced.group(1)
        if len(trimmed) > 6:
            return trimmed[3:-3]

    if trimmed.startswith("`") and trimmed.endswith("`") and len(trimmed) > 2:
        return trimmed[1:-1]

    return trimmed


def normalize_commit_message(text: str) -> str:
    """공백과 줄바꿈을 한 칸으로 합쳐 한 줄로 만듦"""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


async def generate(
    text: str,
    target: Target,
    guide: str | None = None,
    session_id: str | None = None,
) -> LLMResponse:
    """대상에 맞는 메시지 생성

    커밋 메시지는 diff 전처리 결과를 프롬프트로 사용하고,
    PR 대상은 입력을 그대로 전달한다.

    Args:
        text: diff 또는 git log 원문
        target: 생성 대상
        guide: 작성자 추가 지침
        session_id: Langfuse 세션 ID

    Returns:
        LLMResponse

    Raises:
        LLMError: LLM 호출 실패
        GenerationError: 정리 후 커밋 메시지가 비어 있는 경우
        RuleConfigError: 분류 규칙 설정 오류
    """
    set_target(target)

    if target != COMMIT_MESSAGE_TARGET:
        return await generate_text(target, text, guide=guide, session_id=session_id)

    preprocessed = preprocess_diff(text)
    if preprocessed.is_structured and preprocessed.classification:
        logger.info(
            "diff 구조화 적용",
            primary=[f.path for f in preprocessed.classification.primary],
            input_length=len(text),
            prompt_length=len(preprocessed.prompt),
        )

    response = await generate_commit_message(
        preprocessed.prompt, guide=guide, session_id=session_id
    )
    message = normalize_commit_message(trim_commit_message_wrappers(response.content))
    if not message:
        raise GenerationError(detail="Failed to generate commit message.")

    return response.model_copy(update={"content": message})
