"""
경로 glob 매칭

규칙의 pathGlobs는 minimatch(matchBase) 문법을 따른다.

- '**': 0개 이상의 디렉터리
- '/'가 없는 패턴은 파일 이름(basename)에 매칭
- '{a,b}', '{1..3}': 대안/범위 펼치기
- '+(a|b)' 등 extglob, 앞의 '!'는 제외 패턴
- 와일드카드는 '.'으로 시작하는 세그먼트에 매칭되지 않음
"""

from wcmatch import glob

GLOB_FLAGS = (
    glob.GLOBSTAR
    | glob.MATCHBASE
    | glob.BRACE
    | glob.EXTGLOB
    | glob.NEGATE
    | glob.NEGATEALL
    | glob.FORCEUNIX
)


def match_glob(path: str, pattern: str) -> bool:
    """경로가 glob 패턴과 일치하는지 확인"""
    return glob.globmatch(path, pattern, flags=GLOB_FLAGS)
