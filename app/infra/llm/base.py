import os
from abc import ABC, abstractmethod

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.exceptions import ProviderError
from app.core.logging import get_logger

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def message_text(message: BaseMessage) -> str:
    """LangChain 메시지에서 텍스트만 추출"""
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class BaseLLMClient(ABC):
    """LLM 클라이언트 추상 클래스"""

    provider: str

    @abstractmethod
    async def generate(self, prompt: str, system_instruction: str) -> str:
        """시스템 지시문과 사용자 프롬프트로 한 번 호출해 텍스트 반환"""

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""


class LangChainLLMClient(BaseLLMClient):
    """LangChain 채팅 모델 기반 클라이언트"""

    _model: BaseChatModel

    def get_chat_model(self) -> BaseChatModel:
        """LangChain 호환 채팅 모델 반환"""
        return self._model

    async def generate(self, prompt: str, system_instruction: str) -> str:
        langfuse_handler = get_langfuse_handler()
        config = {
            "callbacks": [langfuse_handler] if langfuse_handler else [],
            "metadata": {"langfuse_tags": ["notification", self.provider]},
        }
        messages = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=prompt),
        ]

        try:
            response = await self.get_chat_model().ainvoke(messages, config=config)
        except Exception as e:
            logger.error(
                "LLM API 호출 실패 provider=%s error=%s",
                self.provider,
                type(e).__name__,
            )
            raise ProviderError(
                self.provider,
                upstream_status=getattr(e, "status_code", None),
                detail=str(e),
            ) from e

        return message_text(response).strip()
