"""알림 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.notification.schemas import Commit, Repository


class GenerateNotificationRequest(BaseModel):
    """알림 생성 요청."""

    model_config = ConfigDict(populate_by_name=True)

    commits: list[Commit]
    repository: Repository
    diff: str | None = None
    compare_url: str = Field(alias="compareUrl")
    provider: str
    api_key: str = Field(alias="apiKey", min_length=1)
    hide_links: bool = Field(default=False, alias="hideLinks")

    @field_validator("commits")
    @classmethod
    def validate_commits(cls, v: list[Commit]) -> list[Commit]:
        if not v:
            raise ValueError("최소 1개의 커밋이 필요합니다")
        return v

    @field_validator("compare_url")
    @classmethod
    def validate_compare_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("compare_url은 http:// 또는 https://로 시작해야 합니다")
        return v


class GenerateNotificationResponse(BaseModel):
    """알림 생성 응답."""

    message: str
    embed: dict
