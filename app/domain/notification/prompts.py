from app.domain.notification.schemas import Commit, Repository

PUSH_SUMMARY_SYSTEM = (
    "You are a technical writer that converts commits into clear, factual, "
    "user-impact announcements. Be direct, concise, and describe only what "
    "actually changed and how it affects users."
)

PUSH_SUMMARY_HUMAN = """Analyze this git diff and create a structured update summary for end users.

Repository: {repo_name}

Git Diff:
{diff}

Evidence rules:
- Every bullet point MUST be traceable to a change that is visible in the diff above
- If the diff does not show evidence for a change, do NOT write a bullet for it
- Never guess intent from file names or commit titles alone

Which changes qualify:
- ONLY changes an end user can notice (features, fixes, behavior, wording, layout, speed they can feel)
- Purely internal or technical changes (refactors, tests, build, CI, dependencies, formatting) NEVER produce a bullet
- If nothing in the diff is user-facing, return an empty "changes" array

Requirements for bullet points:
- Explain improvements in user terms (what users will notice)
- Use simple, clear language that non-technical users understand
- Each bullet point should be concise but meaningful
- NO file names, function names, variable names, or other code identifiers
- NO developer jargon or technical details
- NO fluff, opinions, or marketing language
- NO emojis or visual elements

Examples of good bullet points:
- "Fixed lesson buttons on mobile devices and improved error handling when content is unavailable"
- "Fixed login issue - users can now sign in without errors"
- "Added dark mode toggle in settings"
- "Updated user dashboard layout for better navigation"
- "Added progress tracking for completed lessons"

Examples of BAD bullet points (avoid these):
- "Updated login.js and auth.ts files"
- "Refactored component structure"
- "Renamed handleSubmit to onSubmit"
- "Updated dependencies and packages"
- "Improved code quality"
- "Revolutionary new experience you will love"
- "Fixed bugs"

Output format - respond with a single JSON object only, no prose and no code fences:
{{
  "summary": "Brief overall summary without emojis",
  "changes": [
    "First specific user-facing change",
    "Second specific user-facing change"
  ]
}}

"summary" is a string. "changes" is an array of strings and may be empty ([]) when no user-facing change is visible."""


def build_push_prompt(commits: list[Commit], repository: Repository, windowed_diff: str) -> str:
    """푸시 요약 프롬프트 생성 - 같은 입력이면 항상 같은 문자열"""
    return PUSH_SUMMARY_HUMAN.format(repo_name=repository.name, diff=windowed_diff)
