"""메시지 생성 API 스키마."""

from pydantic import BaseModel, Field

from app.domain.generation.schemas import Target


class GenerateRequest(BaseModel):
    """메시지 생성 요청."""

    input: str = Field(min_length=1)
    target: Target = "vcs-commit-message"
    guide: str | None = Field(default=None, max_length=2000)


class GenerateResponse(BaseModel):
    """메시지 생성 응답."""

    content: str
    vendor: str
    model: str
    input_tokens: int = Field(alias="inputTokens")
    output_tokens: int = Field(alias="outputTokens")

    class Config:
        populate_by_name = True
