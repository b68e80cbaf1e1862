from typing import Literal

from pydantic import BaseModel, Field

from app.domain.diff.schemas.rules import RuleRole

ChangeType = Literal["add", "modify", "delete", "rename"]


class FileChange(BaseModel):
    """diff에 포함된 파일 한 개의 변경 내역"""

    path: str
    old_path: str | None = None
    change_type: ChangeType = "modify"
    content: str
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)


class ClassifiedFile(FileChange):
    """규칙이 적용된 파일"""

    rule_id: str | None = None
    label: str
    role: RuleRole
    omit: bool = False
    is_primary: bool = False
    score: int = Field(default=0, exclude=True)


class ClassificationResult(BaseModel):
    """역할별로 분리된 분류 결과

    related는 라벨이 처음 등장한 순서를 유지한다.
    """

    primary: list[ClassifiedFile] = Field(default_factory=list)
    related: dict[str, list[ClassifiedFile]] = Field(default_factory=dict)
    noise: list[ClassifiedFile] = Field(default_factory=list)


class DiffStats(BaseModel):
    """diff 전체 변경 통계"""

    files: int = 0
    insertions: int = 0
    deletions: int = 0


class PreprocessResult(BaseModel):
    """diff 전처리 결과"""

    is_structured: bool
    prompt: str
    classification: ClassificationResult | None = None
    stats: DiffStats | None = None
