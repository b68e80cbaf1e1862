from typing import Literal

from pydantic import BaseModel, Field

Target = Literal["vcs-commit-message", "pr-title-body", "pr-intent"]

COMMIT_MESSAGE_TARGET: Target = "vcs-commit-message"


class CommitMessageOutput(BaseModel):
    """커밋 메시지 LLM 구조화 출력"""

    commit_message: str = Field(
        description=(
            "A single-line commit message following conventional commits format "
            "(e.g., 'feat:', 'fix:', 'refactor:') that captures all changes in one concise sentence"
        )
    )


class LLMResponse(BaseModel):
    """LLM 생성 결과"""

    content: str
    vendor: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
