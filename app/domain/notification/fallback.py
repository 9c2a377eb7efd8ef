from app.domain.notification.schemas import Commit, Repository


def generate_fallback_message(commits: list[Commit], repository: Repository) -> str:
    """LLM 실패 시 커밋 제목만으로 메시지 생성 - 네트워크 호출 없음"""
    title = commits[0].title if commits else ""
    if not title.strip():
        title = f"New changes pushed to {repository.full_name}"

    if len(commits) <= 1:
        return title
    return f"{title} (+{len(commits) - 1} more)"
