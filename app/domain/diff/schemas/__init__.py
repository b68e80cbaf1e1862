from app.domain.diff.schemas.base import (
    ChangeType,
    ClassificationResult,
    ClassifiedFile,
    DiffStats,
    FileChange,
    PreprocessResult,
)
from app.domain.diff.schemas.rules import (
    DiffRule,
    DiffRulesConfig,
    PrimaryDetectionConfig,
    PrimaryMetric,
    RuleBehavior,
    RuleMatch,
    RuleRole,
)

__all__ = [
    "ChangeType",
    "FileChange",
    "ClassifiedFile",
    "ClassificationResult",
    "DiffStats",
    "PreprocessResult",
    "RuleRole",
    "PrimaryMetric",
    "RuleMatch",
    "RuleBehavior",
    "DiffRule",
    "PrimaryDetectionConfig",
    "DiffRulesConfig",
]
