from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.infra.llm.base import LangChainLLMClient


class OpenAIClient(LangChainLLMClient):
    """OpenAI Chat Completions 클라이언트"""

    provider = "openai"

    def __init__(self, api_key: str):
        if not api_key:
            raise ValidationError("OpenAI API 키가 없습니다")

        self._model = ChatOpenAI(
            model=settings.openai_model,
            api_key=api_key,
            max_tokens=settings.openai_max_tokens,
            temperature=settings.openai_temperature,
            timeout=settings.openai_timeout,
            max_retries=0,
        )

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return settings.openai_model
