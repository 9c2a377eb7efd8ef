"""
structlog 기반 로깅 설정

- 개발 환경: 컬러풀한 콘솔 출력
- 프로덕션 환경: JSON 형식 출력
- 컨텍스트 자동 주입: request_id, delivery_id
- 긴 텍스트(프롬프트, LLM 응답)는 백그라운드 태스크에서 청크 단위로 출력
"""

import asyncio
import logging
import re
import sys

import structlog

from app.core.config import settings
from app.core.context import get_delivery_id, get_request_id

SENSITIVE_PATTERNS = [
    (re.compile(r"(token=)[^&\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(Bearer\s+)[^\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(api[_-]?key=)[^&\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"\b(sk-[a-z]*-?)[A-Za-z0-9_-]{8,}", re.IGNORECASE), r"\1***"),
]

_background_tasks: set[asyncio.Task] = set()


def _mask_sensitive_data(value: str) -> str:
    """민감한 정보 마스킹"""
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def add_context_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """request_id와 delivery_id를 로그에 자동 주입"""
    request_id = get_request_id()
    delivery_id = get_delivery_id()

    if request_id:
        event_dict["request_id"] = request_id
    if delivery_id:
        event_dict["delivery_id"] = delivery_id

    return event_dict


def mask_sensitive_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """프로덕션에서 민감한 정보 마스킹"""
    if not settings.is_production:
        return event_dict

    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _mask_sensitive_data(value)

    return event_dict


def setup_logging(level: str | None = None) -> None:
    """structlog 설정 초기화"""
    if level is None:
        level = settings.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_processor,
        mask_sensitive_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        logging.getLogger(logger_name).handlers.clear()

    noisy_loggers = [
        "httpcore",
        "httpx",
        "urllib3",
        "langfuse",
        "langchain",
        "openai",
        "google_genai",
        "anyio",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog 로거 반환"""
    return structlog.get_logger(name)


async def log_in_chunks(
    logger: structlog.stdlib.BoundLogger,
    label: str,
    text: str,
    chunk_lines: int | None = None,
    delay: float | None = None,
) -> None:
    """긴 텍스트를 줄 단위 청크로 나누어 출력

    로그 수집기의 라인 속도 제한을 피하기 위해 청크 사이에 짧게 대기한다.
    """
    if chunk_lines is None:
        chunk_lines = settings.log_chunk_lines
    if delay is None:
        delay = settings.log_chunk_delay

    lines = text.split("\n")
    total = (len(lines) + chunk_lines - 1) // chunk_lines

    for index, start in enumerate(range(0, len(lines), chunk_lines), start=1):
        chunk = "\n".join(lines[start : start + chunk_lines])
        logger.debug(label, chunk=chunk, part=index, parts=total)
        if start + chunk_lines < len(lines):
            await asyncio.sleep(delay)


def _discard_task(task: asyncio.Task) -> None:
    _background_tasks.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logging.getLogger(__name__).warning("청크 로깅 실패: %r", task.exception())


def schedule_chunked_log(
    logger: structlog.stdlib.BoundLogger, label: str, text: str
) -> asyncio.Task:
    """청크 로깅을 백그라운드 태스크로 실행 - 호출자는 기다리지 않음"""
    task = asyncio.create_task(log_in_chunks(logger, label, text))
    _background_tasks.add(task)
    task.add_done_callback(_discard_task)
    return task
