from app.domain.diff.schemas import DiffStats, FileChange


def summarize_changes(files: list[FileChange]) -> DiffStats:
    """파일별 변경 내역을 합산"""
    return DiffStats(
        files=len(files),
        insertions=sum(f.additions for f in files),
        deletions=sum(f.deletions for f in files),
    )


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_diff_stats(stats: DiffStats) -> str:
    """'3 files, 10 insertions, 1 deletion' 형식으로 변환"""
    return ", ".join(
        [
            _pluralize(stats.files, "file"),
            _pluralize(stats.insertions, "insertion"),
            _pluralize(stats.deletions, "deletion"),
        ]
    )
