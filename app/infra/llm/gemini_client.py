from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.infra.llm.base import LangChainLLMClient


class GeminiClient(LangChainLLMClient):
    """Gemini 클라이언트 - 단발성 생성 호출"""

    provider = "gemini"

    def __init__(self, api_key: str):
        if not api_key:
            raise ValidationError("Gemini API 키가 없습니다")

        self._model = ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=api_key,
            timeout=settings.gemini_timeout,
            max_retries=0,
        )

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return settings.gemini_model
