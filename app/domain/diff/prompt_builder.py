from app.domain.diff.schemas import ClassificationResult, ClassifiedFile

PRIMARY_HEADER = "## Primary Changes ({paths})"
RELATED_HEADER = "\n## Related: {label}"
NOISE_HEADER = "\n## Auto-generated / Noise (summary only)"


def format_file_summary(file: ClassifiedFile) -> str:
    """'path (type, +N -M)' 한 줄 요약"""
    return f"{file.path} ({file.change_type}, +{file.additions} -{file.deletions})"


def _format_summaries(files: list[ClassifiedFile]) -> str:
    return "\n".join(f"  - {format_file_summary(f)}" for f in files)


def _format_contents(files: list[ClassifiedFile]) -> str:
    return "\n\n".join(f.content for f in files)


def build_structured_prompt(result: ClassificationResult) -> str:
    """분류 결과를 LLM 프롬프트로 조립

    primary 파일은 omit 여부와 관계없이 전체 diff를 포함한다.
    related는 라벨 단위로 판단하여 모든 파일이 omit일 때만 요약으로 대체한다.
    noise는 항상 요약만 포함한다.
    """
    sections: list[str] = []

    if result.primary:
        paths = ", ".join(f.path for f in result.primary)
        sections.append(PRIMARY_HEADER.format(paths=paths))
        sections.append(_format_contents(result.primary))

    for label, files in result.related.items():
        sections.append(RELATED_HEADER.format(label=label))
        if all(f.omit for f in files):
            sections.append(_format_summaries(files))
        else:
            sections.append(_format_contents(files))

    if result.noise:
        sections.append(NOISE_HEADER)
        sections.append(_format_summaries(result.noise))

    return "\n".join(sections)
