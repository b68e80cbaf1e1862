from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

RuleRole = Literal["primary", "related", "noise"]
PrimaryMetric = Literal["changedLines", "addedLines", "fileCount"]


class RuleMatch(BaseModel):
    """규칙 매칭 조건 - 경로 glob 또는 내용 정규식"""

    path_globs: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("pathGlobs", "path", "path_globs"),
    )
    content_pattern: str | None = Field(
        default=None,
        validation_alias=AliasChoices("contentPattern", "content", "content_pattern"),
    )


class RuleBehavior(BaseModel):
    """매칭된 파일에 적용할 동작"""

    role: RuleRole
    omit: bool = False
    priority_boost: int = Field(
        default=0,
        validation_alias=AliasChoices("priorityBoost", "priority_boost"),
    )


class DiffRule(BaseModel):
    """분류 규칙 한 건"""

    id: str
    label: str
    match: RuleMatch
    behavior: RuleBehavior


class PrimaryDetectionConfig(BaseModel):
    """primary 선정 설정"""

    exclude_roles: list[RuleRole] = Field(
        default_factory=lambda: ["noise"],
        validation_alias=AliasChoices("excludeRoles", "exclude_roles"),
    )
    metric: PrimaryMetric = "changedLines"


class DiffRulesConfig(BaseModel):
    """분류 규칙 설정 문서"""

    version: int
    rules: list[DiffRule]
    primary_detection: PrimaryDetectionConfig | None = Field(
        default=None,
        validation_alias=AliasChoices("primaryDetection", "primary_detection"),
    )
