from app.core.logging import get_logger
from app.domain.notification.embed import build_embed
from app.domain.notification.fallback import generate_fallback_message
from app.domain.notification.formatter import normalize_response
from app.domain.notification.schemas import Commit, NotificationResult, Repository
from app.infra.llm.client import generate_summary_text
from app.infra.llm.factory import LLMProvider

logger = get_logger(__name__)


async def generate_user_friendly_message(
    commits: list[Commit],
    provider: str | LLMProvider,
    api_key: str,
    repository: Repository,
    diff: str | None,
) -> str:
    """커밋과 diff로 사용자용 업데이트 메시지 생성

    어떤 단계에서 예외가 나도 커밋 제목 기반 fallback 메시지를 반환하며,
    이 함수는 예외를 던지지 않는다.
    """
    try:
        raw_response = await generate_summary_text(commits, provider, api_key, repository, diff)
        return normalize_response(raw_response)
    except Exception as e:
        logger.error(
            "요약 생성 실패, fallback 사용 provider=%s repo=%s error=%s",
            getattr(provider, "value", provider),
            repository.full_name,
            type(e).__name__,
            exc_info=True,
        )
        return generate_fallback_message(commits, repository)


async def generate_notification(
    commits: list[Commit],
    provider: str | LLMProvider,
    api_key: str,
    repository: Repository,
    diff: str | None,
    compare_url: str,
    hide_links: bool = False,
) -> NotificationResult:
    """메시지 생성 후 임베드까지 구성"""
    message = await generate_user_friendly_message(commits, provider, api_key, repository, diff)
    embed = build_embed(message, repository, compare_url, hide_links=hide_links)
    return NotificationResult(message=message, embed=embed)
