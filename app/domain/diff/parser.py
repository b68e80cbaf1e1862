import re

from app.core.logging import get_logger
from app.domain.diff.schemas import ChangeType, FileChange

logger = get_logger(__name__)

DIFF_HEADER_PATTERN = re.compile(r"^diff --git a/(.+?) b/(.+?)$")
NEW_FILE_PATTERN = re.compile(r"^new file mode")
DELETED_FILE_PATTERN = re.compile(r"^deleted file mode")
RENAME_PATTERN = re.compile(r"^rename (?:from|to) .+$")
HUNK_HEADER_PATTERN = re.compile(r"^@@")
ADDITION_LINE_PATTERN = re.compile(r"^\+(?!\+\+)")
DELETION_LINE_PATTERN = re.compile(r"^-(?!--)")


def is_git_diff(text: str) -> bool:
    """unified diff 파일 헤더가 한 줄이라도 있는지 확인"""
    return any(DIFF_HEADER_PATTERN.match(line) for line in re.split(r"\r?\n", text))


class _FileAccumulator:
    """파싱 중인 파일 한 개의 상태"""

    def __init__(self, header_line: str, old_path: str, new_path: str):
        self.path = new_path
        self.old_path = old_path if old_path != new_path else None
        self.change_type: ChangeType = "modify"
        self.additions = 0
        self.deletions = 0
        self.in_hunk = False
        self.lines = [header_line]

    def feed(self, line: str) -> None:
        self.lines.append(line)
        marker = line.rstrip("\r")

        if NEW_FILE_PATTERN.match(marker):
            self.change_type = "add"
        elif DELETED_FILE_PATTERN.match(marker):
            self.change_type = "delete"
        elif RENAME_PATTERN.match(marker):
            self.change_type = "rename"
        elif HUNK_HEADER_PATTERN.match(marker):
            self.in_hunk = True
        elif self.in_hunk:
            if ADDITION_LINE_PATTERN.match(line):
                self.additions += 1
            elif DELETION_LINE_PATTERN.match(line):
                self.deletions += 1

    def build(self) -> FileChange:
        return FileChange(
            path=self.path,
            old_path=self.old_path,
            change_type=self.change_type,
            content="\n".join(self.lines),
            additions=self.additions,
            deletions=self.deletions,
        )


def parse_diff(text: str) -> list[FileChange]:
    """unified diff를 파일 단위 변경 내역으로 분리

    한 번의 순방향 스캔으로 처리하며, 파일 헤더 이전의 줄은 무시한다.
    change_type 마커는 나중에 나온 것이 우선한다.
    hunk 표시(@@)가 한 번 나오면 다음 파일 헤더까지 모든 줄을 집계 대상으로 본다.

    Args:
        text: git diff 출력 원문

    Returns:
        입력 순서를 유지한 FileChange 리스트
    """
    files: list[FileChange] = []
    current: _FileAccumulator | None = None

    for line in text.split("\n"):
        header = DIFF_HEADER_PATTERN.match(line.rstrip("\r"))
        if header:
            if current is not None and current.path:
                files.append(current.build())
            old_path, new_path = header.groups()
            current = _FileAccumulator(line, old_path, new_path)
            continue

        if current is None:
            continue

        current.feed(line)

    if current is not None and current.path:
        files.append(current.build())

    logger.debug("diff 파싱 완료", files=len(files))
    return files
