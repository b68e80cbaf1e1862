"""테스트 공통 fixture"""

from unittest.mock import MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.diff.schemas import ClassifiedFile, DiffRulesConfig, FileChange
from app.main import app


@pytest.fixture
def make_file_diff():
    """파일 한 개 분량의 unified diff 텍스트 생성 helper"""

    def _create(
        path: str,
        additions: int = 1,
        deletions: int = 0,
        old_path: str | None = None,
        markers: tuple[str, ...] = (),
    ) -> str:
        old = old_path or path
        lines = [
            f"diff --git a/{old} b/{path}",
            *markers,
            "index 1111111..2222222 100644",
            f"--- a/{old}",
            f"+++ b/{path}",
            f"@@ -1,{deletions + 1} +1,{additions + 1} @@",
            " unchanged context",
        ]
        lines += [f"-removed line {i}" for i in range(deletions)]
        lines += [f"+added line {i}" for i in range(additions)]
        return "\n".join(lines)

    return _create


@pytest.fixture
def make_file_change():
    """FileChange 생성 helper"""

    def _create(
        path: str,
        additions: int = 0,
        deletions: int = 0,
        change_type: str = "modify",
        content: str | None = None,
    ) -> FileChange:
        return FileChange(
            path=path,
            change_type=change_type,
            content=content if content is not None else f"diff --git a/{path} b/{path}",
            additions=additions,
            deletions=deletions,
        )

    return _create


@pytest.fixture
def make_classified_file():
    """ClassifiedFile 생성 helper"""

    def _create(
        path: str,
        label: str = "Source",
        role: str = "related",
        omit: bool = False,
        is_primary: bool = False,
        additions: int = 1,
        deletions: int = 0,
        change_type: str = "modify",
    ) -> ClassifiedFile:
        return ClassifiedFile(
            path=path,
            change_type=change_type,
            content=f"FULL CONTENT OF {path}",
            additions=additions,
            deletions=deletions,
            rule_id=None,
            label=label,
            role=role,
            omit=omit,
            is_primary=is_primary,
        )

    return _create


@pytest.fixture
def source_and_docs_rules() -> DiffRulesConfig:
    """소스 / 문서 규칙 설정"""
    return DiffRulesConfig.model_validate(
        {
            "version": 1,
            "rules": [
                {
                    "id": "primary-source",
                    "label": "Source",
                    "match": {"pathGlobs": ["src/**"]},
                    "behavior": {"role": "primary", "priorityBoost": 3},
                },
                {
                    "id": "docs",
                    "label": "Documentation",
                    "match": {"pathGlobs": ["**/*.md"]},
                    "behavior": {"role": "related", "omit": True},
                },
            ],
        }
    )


@pytest.fixture
def sample_diff(make_file_diff) -> str:
    """src/index.ts(+10 -2), README.md(+1 -1) 변경 diff"""
    return "\n".join(
        [
            make_file_diff("src/index.ts", additions=10, deletions=2),
            make_file_diff("README.md", additions=1, deletions=1),
        ]
    )


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_generator_client():
    """메시지 생성용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_generator_client") as mock_get:
        mock_client = MagicMock()
        mock_client.vendor = "openai"
        mock_client.get_model_name.return_value = "gpt-4o-mini"
        mock_get.return_value = mock_client
        yield mock_client
