from enum import Enum

from app.core.exceptions import UnsupportedProviderError
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.openrouter_client import OpenRouterClient

logger = get_logger(__name__)


class LLMProvider(str, Enum):
    """지원하는 LLM 프로바이더"""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    GEMINI = "gemini"


_CLIENTS: dict[LLMProvider, type[BaseLLMClient]] = {
    LLMProvider.OPENAI: OpenAIClient,
    LLMProvider.OPENROUTER: OpenRouterClient,
    LLMProvider.GEMINI: GeminiClient,
}


def resolve_provider(provider: str | LLMProvider) -> LLMProvider:
    """프로바이더 이름 검증

    Raises:
        UnsupportedProviderError: 알 수 없는 프로바이더인 경우
    """
    try:
        return LLMProvider(provider)
    except ValueError:
        raise UnsupportedProviderError(str(provider)) from None


def create_client(provider: str | LLMProvider, api_key: str) -> BaseLLMClient:
    """요청별 LLM 클라이언트 생성 - 키가 요청마다 달라 캐시하지 않음"""
    resolved = resolve_provider(provider)
    client = _CLIENTS[resolved](api_key)
    logger.info("%s 클라이언트 생성 model=%s", resolved.value, client.get_model_name())
    return client
