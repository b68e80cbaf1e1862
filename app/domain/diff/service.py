from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import RuleConfigError
from app.core.logging import get_logger
from app.domain.diff.classifier import classify
from app.domain.diff.constants import DEFAULT_RULES
from app.domain.diff.parser import is_git_diff, parse_diff
from app.domain.diff.prompt_builder import build_structured_prompt
from app.domain.diff.schemas import DiffRulesConfig, PreprocessResult
from app.domain.diff.stats import summarize_changes

logger = get_logger(__name__)


def load_rules_config(path: str | Path) -> DiffRulesConfig:
    """JSON 규칙 문서를 읽어 검증

    Raises:
        RuleConfigError: 파일을 읽을 수 없거나 스키마가 맞지 않는 경우
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise RuleConfigError(detail=f"규칙 파일을 읽을 수 없습니다: {path}") from e

    try:
        config = DiffRulesConfig.model_validate_json(raw)
    except PydanticValidationError as e:
        raise RuleConfigError(detail=str(e)) from e

    logger.info("diff 규칙 로드", path=str(path), rules=len(config.rules))
    return config


@lru_cache(maxsize=1)
def get_rules_config() -> DiffRulesConfig:
    """설정된 규칙 파일 또는 기본 규칙 반환"""
    if settings.diff_rules_path:
        return load_rules_config(settings.diff_rules_path)
    return DiffRulesConfig.model_validate(DEFAULT_RULES)


def preprocess_diff(text: str, rules: DiffRulesConfig | None = None) -> PreprocessResult:
    """diff를 역할별 구조화 프롬프트로 변환

    unified diff가 아니면 입력을 그대로 프롬프트로 사용한다.

    Args:
        text: 원본 입력
        rules: 사용자 지정 규칙, 없으면 get_rules_config() 사용

    Returns:
        PreprocessResult
    """
    if not is_git_diff(text):
        logger.debug("unified diff 아님, 원문 그대로 사용", length=len(text))
        return PreprocessResult(is_structured=False, prompt=text)

    config = rules if rules is not None else get_rules_config()
    files = parse_diff(text)
    classification = classify(files, config)
    prompt = build_structured_prompt(classification)

    logger.debug(
        "diff 전처리 완료",
        primary=[f.path for f in classification.primary],
        prompt_length=len(prompt),
        input_length=len(text),
    )
    return PreprocessResult(
        is_structured=True,
        prompt=prompt,
        classification=classification,
        stats=summarize_changes(files),
    )
