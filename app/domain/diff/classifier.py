import re
from functools import lru_cache

from app.core.exceptions import RuleConfigError
from app.core.logging import get_logger
from app.domain.diff.patterns import match_glob
from app.domain.diff.schemas import (
    ClassificationResult,
    ClassifiedFile,
    DiffRule,
    DiffRulesConfig,
    FileChange,
    PrimaryDetectionConfig,
    PrimaryMetric,
)

logger = get_logger(__name__)

DEFAULT_LABEL = "Source"
EXCLUDED_SCORE = -1


@lru_cache(maxsize=256)
def compile_content_pattern(pattern: str) -> re.Pattern[str]:
    """내용 매칭 정규식 컴파일 - 잘못된 정규식은 설정 오류로 전파"""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RuleConfigError(detail=f"잘못된 contentPattern {pattern!r}: {e}") from e


def matches_rule(file: FileChange, rule: DiffRule) -> bool:
    """경로 glob이 먼저, 일치하지 않으면 내용 정규식으로 판단"""
    if rule.match.path_globs:
        if any(match_glob(file.path, pattern) for pattern in rule.match.path_globs):
            return True

    if rule.match.content_pattern:
        if compile_content_pattern(rule.match.content_pattern).search(file.content):
            return True

    return False


def find_matching_rule(file: FileChange, rules: list[DiffRule]) -> DiffRule | None:
    """목록 순서상 처음 일치하는 규칙 반환"""
    return next((rule for rule in rules if matches_rule(file, rule)), None)


def calculate_score(file: FileChange, metric: PrimaryMetric, boost: int) -> int:
    if metric == "changedLines":
        base = file.additions + file.deletions
    elif metric == "addedLines":
        base = file.additions
    else:
        base = 1
    return base + boost


def classify(files: list[FileChange], config: DiffRulesConfig) -> ClassificationResult:
    """규칙에 따라 파일을 primary / related / noise로 분류

    제외 역할이 아닌 파일 중 최고 점수인 파일은 모두 primary로 승격한다.
    동점자 간 추가 기준은 두지 않는다.

    Args:
        files: parse_diff 결과
        config: 분류 규칙 설정

    Returns:
        원래 파일 순서를 유지한 분류 결과

    Raises:
        RuleConfigError: contentPattern이 올바른 정규식이 아닌 경우
    """
    detection = config.primary_detection or PrimaryDetectionConfig()

    # 매칭 전에 모든 contentPattern을 컴파일한다.
    # 어떤 파일에도 도달하지 않는 규칙의 잘못된 정규식도 여기서 실패한다.
    for rule in config.rules:
        if rule.match.content_pattern:
            compile_content_pattern(rule.match.content_pattern)

    resolved: list[tuple[FileChange, DiffRule | None, int]] = []
    for file in files:
        rule = find_matching_rule(file, config.rules)
        role = rule.behavior.role if rule else "primary"
        boost = rule.behavior.priority_boost if rule else 0
        if role in detection.exclude_roles:
            score = EXCLUDED_SCORE
        else:
            score = calculate_score(file, detection.metric, boost)
        resolved.append((file, rule, score))

    eligible_scores = [score for _, _, score in resolved if score >= 0]
    max_score = max(eligible_scores) if eligible_scores else None

    result = ClassificationResult()
    for file, rule, score in resolved:
        is_primary = max_score is not None and score == max_score
        classified = ClassifiedFile(
            **file.model_dump(),
            rule_id=rule.id if rule else None,
            label=rule.label if rule else DEFAULT_LABEL,
            role="primary" if is_primary else (rule.behavior.role if rule else "primary"),
            omit=rule.behavior.omit if rule else False,
            is_primary=is_primary,
            score=score,
        )

        if classified.is_primary:
            result.primary.append(classified)
        elif classified.role == "noise":
            result.noise.append(classified)
        else:
            result.related.setdefault(classified.label, []).append(classified)

    logger.debug(
        "diff 분류 완료",
        files=len(files),
        primary=[f.path for f in result.primary],
        related=list(result.related),
        noise=len(result.noise),
    )
    return result
