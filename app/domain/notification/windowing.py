import re

from app.domain.notification.schemas import DiffStats

NO_DIFF_PLACEHOLDER = "No diff available"

HEADER_PATTERN = re.compile(r"^(diff --git |index |---|\+\+\+|@@)")
FILE_PAIR_PATTERN = re.compile(r"^diff --git a/(.+) b/(.+)$")


def _is_header(line: str) -> bool:
    return bool(HEADER_PATTERN.match(line))


def _is_change(line: str) -> bool:
    return line.startswith(("+", "-")) and not line.startswith(("+++", "---"))


def _is_context(line: str) -> bool:
    return not _is_header(line) and not _is_change(line)


def window_diff(diff: str | None) -> str:
    """diff를 변경 라인과 앞뒤 한 줄 컨텍스트로 축소

    헤더 라인은 그대로 유지하고, 각 원본 라인은 최대 한 번만 출력한다.
    출력 순서는 원본 순서를 따른다.
    """
    if not diff:
        return NO_DIFF_PLACEHOLDER

    lines = diff.split("\n")
    seen: set[int] = set()
    output: list[str] = []

    def emit(index: int) -> None:
        if index not in seen:
            seen.add(index)
            output.append(lines[index])

    for i, line in enumerate(lines):
        if _is_header(line):
            emit(i)
            continue

        if not _is_change(line):
            continue

        if i > 0 and _is_context(lines[i - 1]):
            emit(i - 1)
        emit(i)
        if i + 1 < len(lines) and _is_context(lines[i + 1]):
            emit(i + 1)

    return "\n".join(output)


def summarize_diff(diff: str | None) -> DiffStats:
    """diff에서 파일/라인 변경 통계 추출"""
    stats = DiffStats()
    if not diff:
        return stats

    current_file = ""
    for line in diff.split("\n"):
        match = FILE_PAIR_PATTERN.match(line)
        if match:
            current_file = match.group(2)
        elif line.startswith("new file mode"):
            stats.added.append(current_file)
        elif line.startswith("deleted file mode"):
            stats.removed.append(current_file)
        elif line.startswith("index "):
            if current_file not in stats.added and current_file not in stats.removed:
                stats.modified.append(current_file)
        elif _is_change(line):
            if line.startswith("+"):
                stats.added_lines += 1
            else:
                stats.removed_lines += 1

    total_files = len(stats.added) + len(stats.removed) + len(stats.modified)
    if total_files > 0:
        parts = [f"{total_files} file{'s' if total_files > 1 else ''} changed"]
        if stats.added_lines:
            parts.append(f"{stats.added_lines} addition{'s' if stats.added_lines > 1 else ''}")
        if stats.removed_lines:
            parts.append(
                f"{stats.removed_lines} deletion{'s' if stats.removed_lines > 1 else ''}"
            )
        stats.summary = ", ".join(parts)

    return stats
