import re

from pydantic import ValidationError

from app.core.logging import get_logger
from app.domain.notification.schemas import ParsedSummary

logger = get_logger(__name__)

SUMMARY_PREFIX = "Update summary: "
BULLET = "• "

LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
TRAILING_FENCE = re.compile(r"\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """앞뒤 ``` 코드 펜스 제거 - 언어 태그 유무 무관"""
    cleaned = text.strip()
    cleaned = LEADING_FENCE.sub("", cleaned)
    cleaned = TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def render_summary(parsed: ParsedSummary) -> str:
    """ParsedSummary를 최종 메시지 텍스트로 변환"""
    message = f"{SUMMARY_PREFIX}{parsed.summary}"
    if parsed.changes:
        bullets = "\n".join(f"{BULLET}{change}" for change in parsed.changes)
        message = f"{message}\n\n{bullets}"
    return message


def normalize_response(raw_response: str) -> str:
    """LLM 응답을 파싱해 메시지로 변환

    JSON 형식이 아니면 예외 없이 원본 응답을 그대로 반환한다.
    """
    cleaned = strip_code_fences(raw_response)
    try:
        parsed = ParsedSummary.model_validate_json(cleaned)
    except ValidationError as e:
        logger.warning("LLM 응답 JSON 파싱 실패", error_count=e.error_count())
        logger.debug("LLM 원본 응답", raw_response=raw_response)
        return raw_response

    return render_summary(parsed)
