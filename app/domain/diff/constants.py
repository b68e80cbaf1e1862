"""diff 분류 기본 규칙

settings.diff_rules_path가 비어 있을 때 사용하는 규칙 문서.
규칙은 위에서부터 평가되며 처음 일치한 규칙이 적용된다.
"""

LOCK_FILE_NAMES = [
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lock",
    "bun.lockb",
    "poetry.lock",
    "uv.lock",
    "Pipfile.lock",
    "composer.lock",
    "Gemfile.lock",
    "Cargo.lock",
    "go.sum",
]

GENERATED_PATH_GLOBS = [
    "dist/**",
    "build/**",
    "**/*.min.js",
    "**/*.min.css",
    "**/*.map",
    "**/__snapshots__/**",
    "**/*.snap",
    "**/*.generated.*",
    "**/*_pb2.py",
]

GENERATED_CONTENT_PATTERN = r"@generated|DO NOT EDIT"

DOCUMENTATION_PATH_GLOBS = [
    "**/*.md",
    "**/*.mdx",
    "**/*.rst",
    "docs/**",
]

TEST_PATH_GLOBS = [
    "**/*.{test,spec}.*",
    "**/test_*.py",
    "**/*_test.{py,go}",
    "tests/**",
    "**/__tests__/**",
]

CONFIG_PATH_GLOBS = [
    ".github/**",
    ".vscode/**",
    ".idea/**",
    "**/*.iml",
    "**/.editorconfig",
    "**/.*rc",
    "**/.*rc.{json,js,cjs,yaml,yml}",
    "**/tsconfig*.json",
]

DEFAULT_RULES = {
    "version": 1,
    "rules": [
        {
            "id": "lockfiles",
            "label": "Lock files",
            "match": {"pathGlobs": LOCK_FILE_NAMES},
            "behavior": {"role": "noise", "omit": True},
        },
        {
            "id": "generated",
            "label": "Generated",
            "match": {
                "pathGlobs": GENERATED_PATH_GLOBS,
                "contentPattern": GENERATED_CONTENT_PATTERN,
            },
            "behavior": {"role": "noise", "omit": True},
        },
        {
            "id": "docs",
            "label": "Documentation",
            "match": {"pathGlobs": DOCUMENTATION_PATH_GLOBS},
            "behavior": {"role": "related", "omit": True},
        },
        {
            "id": "tests",
            "label": "Tests",
            "match": {"pathGlobs": TEST_PATH_GLOBS},
            "behavior": {"role": "related"},
        },
        {
            "id": "config",
            "label": "Configuration",
            "match": {"pathGlobs": CONFIG_PATH_GLOBS},
            "behavior": {"role": "related", "omit": True},
        },
    ],
    "primaryDetection": {
        "excludeRoles": ["noise"],
        "metric": "changedLines",
    },
}
