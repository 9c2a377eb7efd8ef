from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    UNSUPPORTED_PROVIDER = "UNSUPPORTED_PROVIDER"
    LLM_API_ERROR = "LLM_API_ERROR"
    LLM_ERROR = "LLM_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class UnsupportedProviderError(CustomException):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            status_code=400,
            error_code=ErrorCode.UNSUPPORTED_PROVIDER,
            message=f"Unsupported provider: {provider}",
        )


class ProviderError(CustomException):
    """LLM 백엔드 호출 실패 - 네트워크 오류 또는 2xx 이외 응답"""

    def __init__(
        self,
        provider: str,
        upstream_status: int | None = None,
        detail: str | None = None,
    ):
        self.provider = provider
        self.upstream_status = upstream_status
        message = f"{provider} API error"
        if upstream_status is not None:
            message = f"{message}: {upstream_status}"
        super().__init__(
            status_code=502,
            error_code=ErrorCode.LLM_API_ERROR,
            message=message,
            detail=detail,
        )


class LLMError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.LLM_ERROR,
            message="LLM 호출에 실패했습니다",
            detail=detail,
        )


class ValidationError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_INPUT,
            message="입력값이 올바르지 않습니다",
            detail=detail,
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
        )
