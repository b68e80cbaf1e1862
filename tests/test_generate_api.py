"""메시지 생성 API 테스트"""

from unittest.mock import AsyncMock, patch

import pytest

from app.core.exceptions import LLMError
from app.domain.generation.schemas import LLMResponse


class TestGenerateEndpoint:
    """POST /api/v1/generate 테스트"""

    @pytest.mark.asyncio
    async def test_generate_commit_message(self, async_client, sample_diff):
        """생성 결과와 토큰 사용량을 camelCase로 반환"""
        with patch(
            "app.api.v1.generate.generate",
            new_callable=AsyncMock,
            return_value=LLMResponse(
                content="feat: add index",
                vendor="openai",
                model="gpt-4o-mini",
                input_tokens=300,
                output_tokens=10,
            ),
        ) as mock_generate:
            async with async_client as client:
                response = await client.post(
                    "/api/v1/generate",
                    json={"input": sample_diff, "guide": "use scope"},
                    headers={"X-Request-ID": "req-1234"},
                )

        assert response.status_code == 200
        assert response.json() == {
            "content": "feat: add index",
            "vendor": "openai",
            "model": "gpt-4o-mini",
            "inputTokens": 300,
            "outputTokens": 10,
        }
        assert response.headers["X-Request-ID"] == "req-1234"
        mock_generate.assert_awaited_once_with(
            sample_diff, "vcs-commit-message", guide="use scope", session_id="req-1234"
        )

    @pytest.mark.asyncio
    async def test_unknown_target_is_rejected(self, async_client):
        """지원하지 않는 target은 422"""
        async with async_client as client:
            response = await client.post(
                "/api/v1/generate", json={"input": "diff", "target": "release-notes"}
            )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_llm_error_returns_502(self, async_client):
        """LLM 실패는 502 LLM_ERROR"""
        with patch(
            "app.api.v1.generate.generate",
            new_callable=AsyncMock,
            side_effect=LLMError(detail="Failed to generate commit message."),
        ):
            async with async_client as client:
                response = await client.post("/api/v1/generate", json={"input": "diff"})

        assert response.status_code == 502
        data = response.json()
        assert data["error_code"] == "LLM_ERROR"
        assert data["detail"] == "Failed to generate commit message."
