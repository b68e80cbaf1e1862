import os
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.exceptions import LLMError
from app.core.logging import get_logger
from app.domain.generation.prompts import build_system_prompt
from app.domain.generation.schemas import (
    COMMIT_MESSAGE_TARGET,
    CommitMessageOutput,
    LLMResponse,
    Target,
)
from app.infra.llm.factory import get_generator_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def _build_run_config(target: Target, session_id: str | None) -> dict:
    langfuse_handler = get_langfuse_handler()
    return {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": ["generate", target],
        },
    }


def extract_text(content: Any) -> str:
    """AIMessage.content를 문자열로 변환 - 블록 리스트 형태도 처리"""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


def extract_usage(message: BaseMessage | None) -> tuple[int, int]:
    """입력/출력 토큰 수 추출, 제공되지 않으면 0"""
    usage = getattr(message, "usage_metadata", None) or {}
    return usage.get("input_tokens", 0), usage.get("output_tokens", 0)


async def generate_commit_message(
    prompt: str,
    guide: str | None = None,
    session_id: str | None = None,
) -> LLMResponse:
    """전처리된 diff 프롬프트로 한 줄 커밋 메시지 생성"""
    client = get_generator_client()
    logger.debug("커밋 메시지 생성 요청", prompt_length=len(prompt), model=client.get_model_name())

    llm = client.with_structured_output(CommitMessageOutput, include_raw=True)
    messages = [
        SystemMessage(content=build_system_prompt(COMMIT_MESSAGE_TARGET, guide)),
        HumanMessage(content=prompt),
    ]

    try:
        result = await llm.ainvoke(
            messages, config=_build_run_config(COMMIT_MESSAGE_TARGET, session_id)
        )
    except Exception as e:
        logger.error("커밋 메시지 생성 실패", error=str(e), exc_info=True)
        raise LLMError(detail=str(e)) from e

    parsed = result.get("parsed")
    if not isinstance(parsed, CommitMessageOutput):
        logger.warning("구조화 출력 파싱 실패", error=str(result.get("parsing_error")))
        raise LLMError(detail="Failed to generate commit message.")

    input_tokens, output_tokens = extract_usage(result.get("raw"))
    logger.debug("커밋 메시지 생성 완료", input_tokens=input_tokens, output_tokens=output_tokens)
    return LLMResponse(
        content=parsed.commit_message,
        vendor=client.vendor,
        model=client.get_model_name(),
        input_tokens=input_tokens,
        output_tokens=output_tokens,
    )


async def generate_text(
    target: Target,
    prompt: str,
    guide: str | None = None,
    session_id: str | None = None,
) -> LLMResponse:
    """PR 제목/본문, PR 의도 요약 등 자유 형식 텍스트 생성"""
    client = get_generator_client()
    logger.debug("텍스트 생성 요청", prompt_length=len(prompt), model=client.get_model_name())

    messages = [
        SystemMessage(content=build_system_prompt(target, guide)),
        HumanMessage(content=prompt),
    ]

    try:
        message = await client.get_chat_model().ainvoke(
            messages, config=_build_run_config(target, session_id)
        )
    except Exception as e:
        logger.error("텍스트 생성 실패", error=str(e), exc_info=True)
        raise LLMError(detail=str(e)) from e

    content = extract_text(message.content).strip()
    if not content:
        raise LLMError(detail="LLM 응답이 비어 있습니다")

    input_tokens, output_tokens = extract_usage(message)
    return LLMResponse(
        content=content,
        vendor=client.vendor,
        model=client.get_model_name(),
        input_tokens=input_tokens,
        output_tokens=output_tokens,
    )
