import httpx

from app.core.config import settings
from app.core.exceptions import LLMError, ProviderError, ValidationError
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient

logger = get_logger(__name__)


class OpenRouterClient(BaseLLMClient):
    """OpenRouter 클라이언트 - Chat Completions HTTP API 직접 호출"""

    provider = "openrouter"

    def __init__(self, api_key: str):
        if not api_key:
            raise ValidationError("OpenRouter API 키가 없습니다")

        self._api_key = api_key

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return settings.openrouter_model

    def _get_headers(self) -> dict[str, str]:
        """OpenRouter 요청 헤더 생성"""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": settings.openrouter_referer,
            "X-Title": settings.openrouter_title,
        }

    def _build_payload(self, prompt: str, system_instruction: str) -> dict:
        """요청 본문 생성"""
        return {
            "model": settings.openrouter_model,
            "messages": [
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": settings.openrouter_max_tokens,
            "temperature": settings.openrouter_temperature,
        }

    async def generate(self, prompt: str, system_instruction: str) -> str:
        payload = self._build_payload(prompt, system_instruction)
        logger.debug("OpenRouter 요청 model=%s", payload["model"])

        try:
            async with httpx.AsyncClient(timeout=settings.openrouter_timeout) as client:
                response = await client.post(
                    settings.openrouter_api_url,
                    headers=self._get_headers(),
                    json=payload,
                )
        except httpx.RequestError as e:
            logger.error("OpenRouter 요청 실패 error=%s", type(e).__name__)
            raise ProviderError(self.provider, detail=type(e).__name__) from e

        logger.info("OpenRouter 응답 status_code=%d", response.status_code)

        if not response.is_success:
            error_body = response.text
            logger.error(
                "OpenRouter API 오류",
                status_code=response.status_code,
                reason=response.reason_phrase,
                error_body=error_body,
            )
            raise ProviderError(
                self.provider,
                upstream_status=response.status_code,
                detail=error_body,
            )

        data = response.json()
        choices = data.get("choices") or []
        if not choices:
            raise LLMError("OpenRouter 응답에 choices가 없습니다")

        content = choices[0]["message"]["content"] or ""
        logger.info("OpenRouter 호출 성공 length=%d", len(content))

        return content.strip()
