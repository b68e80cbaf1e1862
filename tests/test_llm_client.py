"""LLM 클라이언트 테스트"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage

from app.core.exceptions import LLMError
from app.domain.generation.schemas import CommitMessageOutput
from app.infra.llm import factory
from app.infra.llm.client import (
    extract_text,
    extract_usage,
    generate_commit_message,
    generate_text,
)


def _ai_message(content, input_tokens: int = 0, output_tokens: int = 0) -> AIMessage:
    return AIMessage(
        content=content,
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": input_tokens + output_tokens,
        },
    )


class TestExtractText:
    """extract_text 함수 테스트"""

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("plain text", "plain text"),
            ([{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}], "Hello world"),
            (["a", {"type": "image_url", "image_url": "x"}, "b"], "ab"),
            (None, ""),
        ],
        ids=["string", "text_blocks", "mixed_blocks", "none"],
    )
    def test_extract_text(self, content, expected):
        """문자열/블록 리스트 모두 문자열로 변환"""
        assert extract_text(content) == expected


class TestExtractUsage:
    """extract_usage 함수 테스트"""

    def test_usage_metadata(self):
        """usage_metadata에서 토큰 수 추출"""
        assert extract_usage(_ai_message("x", 30, 7)) == (30, 7)

    def test_missing_usage(self):
        """사용량 정보가 없으면 0"""
        assert extract_usage(AIMessage(content="x")) == (0, 0)
        assert extract_usage(None) == (0, 0)


class TestGenerateCommitMessage:
    """generate_commit_message 함수 테스트"""

    @pytest.mark.asyncio
    async def test_returns_parsed_message_with_usage(self, mock_generator_client):
        """구조화 출력 결과와 토큰 사용량 반환"""
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(
            return_value={
                "raw": _ai_message("", 250, 14),
                "parsed": CommitMessageOutput(commit_message="feat: add parser"),
                "parsing_error": None,
            }
        )
        mock_generator_client.with_structured_output.return_value = mock_llm

        result = await generate_commit_message("## Primary Changes (a.py)", guide="use scope")

        assert result.content == "feat: add parser"
        assert result.vendor == "openai"
        assert result.model == "gpt-4o-mini"
        assert (result.input_tokens, result.output_tokens) == (250, 14)
        mock_generator_client.with_structured_output.assert_called_once_with(
            CommitMessageOutput, include_raw=True
        )

        messages = mock_llm.ainvoke.call_args.args[0]
        assert "use scope" in messages[0].content
        assert messages[1].content == "## Primary Changes (a.py)"

    @pytest.mark.asyncio
    async def test_session_id_is_forwarded_as_metadata(self, mock_generator_client):
        """세션 ID를 Langfuse 메타데이터로 전달"""
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(
            return_value={
                "raw": _ai_message(""),
                "parsed": CommitMessageOutput(commit_message="fix: typo"),
                "parsing_error": None,
            }
        )
        mock_generator_client.with_structured_output.return_value = mock_llm

        await generate_commit_message("diff", session_id="abc12345")

        config = mock_llm.ainvoke.call_args.kwargs["config"]
        assert config["metadata"]["langfuse_session_id"] == "abc12345"
        assert config["metadata"]["langfuse_tags"] == ["generate", "vcs-commit-message"]

    @pytest.mark.asyncio
    async def test_parse_failure_raises_llm_error(self, mock_generator_client):
        """파싱 실패 시 LLMError"""
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(
            return_value={
                "raw": _ai_message("not json"),
                "parsed": None,
                "parsing_error": ValueError("bad output"),
            }
        )
        mock_generator_client.with_structured_output.return_value = mock_llm

        with pytest.raises(LLMError) as exc_info:
            await generate_commit_message("diff")

        assert exc_info.value.detail == "Failed to generate commit message."

    @pytest.mark.asyncio
    async def test_llm_exception_raises_llm_error(self, mock_generator_client):
        """LLM 호출 예외는 LLMError로 변환"""
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(side_effect=TimeoutError("timed out"))
        mock_generator_client.with_structured_output.return_value = mock_llm

        with pytest.raises(LLMError) as exc_info:
            await generate_commit_message("diff")

        assert exc_info.value.status_code == 502
        assert "timed out" in exc_info.value.detail


class TestGenerateText:
    """generate_text 함수 테스트"""

    @pytest.mark.asyncio
    async def test_returns_text_with_usage(self, mock_generator_client):
        """자유 형식 텍스트와 토큰 사용량 반환"""
        mock_model = MagicMock()
        mock_model.ainvoke = AsyncMock(return_value=_ai_message("  Title: Add parser\n\nBody  ", 40, 9))
        mock_generator_client.get_chat_model.return_value = mock_model

        result = await generate_text("pr-title-body", "git log -p output")

        assert result.content == "Title: Add parser\n\nBody"
        assert (result.input_tokens, result.output_tokens) == (40, 9)
        messages = mock_model.ainvoke.call_args.args[0]
        assert "PR titles" in messages[0].content
        assert messages[1].content == "git log -p output"

    @pytest.mark.asyncio
    async def test_empty_response_raises_llm_error(self, mock_generator_client):
        """빈 응답이면 LLMError"""
        mock_model = MagicMock()
        mock_model.ainvoke = AsyncMock(return_value=_ai_message("   "))
        mock_generator_client.get_chat_model.return_value = mock_model

        with pytest.raises(LLMError):
            await generate_text("pr-intent", "diff")


class TestGeneratorClientFactory:
    """get_generator_client 함수 테스트"""

    @pytest.fixture(autouse=True)
    def reset(self):
        factory.reset_clients()
        yield
        factory.reset_clients()

    def test_creates_configured_provider_once(self):
        """설정된 프로바이더 클라이언트를 한 번만 생성"""
        fake_class = MagicMock()
        fake_class.return_value.get_model_name.return_value = "qwen"

        with (
            patch("app.infra.llm.factory.settings") as mock_settings,
            patch.dict(factory._PROVIDERS, {"vllm": fake_class}),
        ):
            mock_settings.llm_provider = "VLLM"
            first = factory.get_generator_client()
            second = factory.get_generator_client()

        assert first is second
        fake_class.assert_called_once_with()

    def test_unsupported_provider_raises(self):
        """지원하지 않는 프로바이더면 ValueError"""
        with patch("app.infra.llm.factory.settings") as mock_settings:
            mock_settings.llm_provider = "anthropic"

            with pytest.raises(ValueError, match="anthropic"):
                factory.get_generator_client()
