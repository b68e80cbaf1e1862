from app.domain.generation.schemas import Target

COMMIT_MESSAGE_SYSTEM = """You are an expert software engineer that writes high-quality git commit messages.
Given a unified diff, produce a single-line commit message.

The diff may be preprocessed into sections:
- "Primary Changes" holds the full diff of the change under discussion. Base the message on it.
- "Related" sections hold supporting files, sometimes as one-line summaries only.
- "Auto-generated / Noise" lists generated or lock files. Never describe them unless nothing else changed.

Output requirements:
- Output plain text only: one line, nothing else (no markdown, no code fences, no body).
- Use Conventional Commits format: <type>(<scope>): <subject>
  - type: feat|fix|refactor|perf|docs|test|build|ci|chore|style
  - scope: optional; infer from file paths or package/module name (e.g. core, cli, web)
  - subject: imperative mood, present tense, no trailing period, <= 72 characters
- Do NOT include a body or additional lines. Output exactly one line.

Quality rules:
- Do not claim changes not supported by the diff. If intent is unclear, keep it neutral and factual.
- If the diff is mostly formatting, use type "style" and describe what was formatted."""

PR_TITLE_BODY_SYSTEM = """You are a helpful assistant that generates PR titles and descriptions.
Given git log output with patches, write a clear PR title and body.
Format:
Title: <concise title>

<body describing what changed and why>

Only output the title and body, nothing else."""

PR_INTENT_SYSTEM = """You are a helpful assistant that summarizes PR intent.
Given a PR diff, explain the purpose and key changes in 2-3 sentences.
Focus on the "why" not just the "what".
Only output the summary, nothing else."""

GUIDE_SUFFIX = """

Additional guidance from the author (follow it unless it conflicts with the output requirements):
{guide}"""

PROMPTS: dict[Target, str] = {
    "vcs-commit-message": COMMIT_MESSAGE_SYSTEM,
    "pr-title-body": PR_TITLE_BODY_SYSTEM,
    "pr-intent": PR_INTENT_SYSTEM,
}


def build_system_prompt(target: Target, guide: str | None = None) -> str:
    """대상별 시스템 프롬프트에 작성자 가이드를 덧붙임"""
    system = PROMPTS[target]
    if guide and guide.strip():
        system += GUIDE_SUFFIX.format(guide=guide.strip())
    return system
