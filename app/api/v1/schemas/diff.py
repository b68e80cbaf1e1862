"""diff 전처리 API 스키마."""

from pydantic import BaseModel, Field

from app.domain.diff.schemas import (
    ChangeType,
    ClassifiedFile,
    DiffRulesConfig,
    PreprocessResult,
    RuleRole,
)
from app.domain.diff.stats import format_diff_stats


class PreprocessRequest(BaseModel):
    """diff 전처리 요청."""

    input: str = Field(min_length=1)
    rules: DiffRulesConfig | None = None


class ClassifiedFileResponse(BaseModel):
    """분류된 파일 요약. diff 원문은 prompt에만 포함한다."""

    path: str
    old_path: str | None = Field(default=None, alias="oldPath")
    change_type: ChangeType = Field(alias="changeType")
    additions: int
    deletions: int
    rule_id: str | None = Field(default=None, alias="ruleId")
    label: str
    role: RuleRole
    omit: bool
    is_primary: bool = Field(alias="isPrimary")

    class Config:
        populate_by_name = True

    @classmethod
    def from_file(cls, file: ClassifiedFile) -> "ClassifiedFileResponse":
        return cls(**file.model_dump(exclude={"content"}))


class ClassificationResponse(BaseModel):
    """역할별 분류 결과."""

    primary: list[ClassifiedFileResponse]
    related: dict[str, list[ClassifiedFileResponse]]
    noise: list[ClassifiedFileResponse]


class DiffStatsResponse(BaseModel):
    """변경 통계."""

    files: int
    insertions: int
    deletions: int
    summary: str


class PreprocessResponse(BaseModel):
    """diff 전처리 응답."""

    is_structured: bool = Field(alias="isStructured")
    prompt: str
    classification: ClassificationResponse | None = None
    stats: DiffStatsResponse | None = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: PreprocessResult) -> "PreprocessResponse":
        classification = None
        if result.classification is not None:
            classification = ClassificationResponse(
                primary=[ClassifiedFileResponse.from_file(f) for f in result.classification.primary],
                related={
                    label: [ClassifiedFileResponse.from_file(f) for f in files]
                    for label, files in result.classification.related.items()
                },
                noise=[ClassifiedFileResponse.from_file(f) for f in result.classification.noise],
            )

        stats = None
        if result.stats is not None:
            stats = DiffStatsResponse(
                **result.stats.model_dump(),
                summary=format_diff_stats(result.stats),
            )

        return cls(
            is_structured=result.is_structured,
            prompt=result.prompt,
            classification=classification,
            stats=stats,
        )
