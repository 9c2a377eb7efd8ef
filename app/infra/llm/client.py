from app.core.exceptions import LLMError
from app.core.logging import get_logger, schedule_chunked_log
from app.domain.notification.prompts import PUSH_SUMMARY_SYSTEM, build_push_prompt
from app.domain.notification.schemas import Commit, Repository
from app.domain.notification.windowing import summarize_diff, window_diff
from app.infra.llm.factory import LLMProvider, create_client, resolve_provider

logger = get_logger(__name__)


async def generate_summary_text(
    commits: list[Commit],
    provider: str | LLMProvider,
    api_key: str,
    repository: Repository,
    diff: str | None,
) -> str:
    """diff 축소 → 프롬프트 생성 → 선택된 프로바이더 1회 호출, 원본 텍스트 반환

    실패는 그대로 전파되며 fallback은 호출자가 처리한다.
    """
    resolved = resolve_provider(provider)
    logger.info(
        "요약 생성 요청 provider=%s commits=%d repo=%s has_api_key=%s",
        resolved.value,
        len(commits),
        repository.full_name,
        bool(api_key),
    )

    stats = summarize_diff(diff)
    if stats.summary:
        logger.info("diff 통계 repo=%s %s", repository.full_name, stats.summary)

    windowed = window_diff(diff)
    prompt = build_push_prompt(commits, repository, windowed)
    logger.debug(
        "프롬프트 생성 완료 diff_length=%d windowed_length=%d prompt_length=%d",
        len(diff or ""),
        len(windowed),
        len(prompt),
    )
    schedule_chunked_log(logger, "LLM 프롬프트", prompt)

    client = create_client(resolved, api_key)
    text = await client.generate(prompt, PUSH_SUMMARY_SYSTEM)
    if not text.strip():
        raise LLMError(f"{resolved.value} 응답이 비어 있습니다")

    schedule_chunked_log(logger, "LLM 원본 응답", text)
    logger.info("요약 생성 완료 provider=%s length=%d", resolved.value, len(text))
    return text
