from pydantic import BaseModel, ConfigDict, Field, field_validator


class Commit(BaseModel):
    """푸시에 포함된 커밋 - message만 파이프라인에서 사용"""

    model_config = ConfigDict(extra="ignore")

    message: str
    id: str | None = None
    url: str | None = None

    @property
    def title(self) -> str:
        """커밋 메시지 첫 줄"""
        return self.message.split("\n")[0]


class Repository(BaseModel):
    """레포지토리 메타데이터"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    full_name: str
    html_url: str


class ParsedSummary(BaseModel):
    """LLM JSON 출력 - {summary, changes[]}"""

    summary: str
    changes: list[str] = Field(default_factory=list)

    @field_validator("changes", mode="before")
    @classmethod
    def drop_blank_changes(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [
                c.strip() if isinstance(c, str) else c
                for c in v
                if not isinstance(c, str) or c.strip()
            ]
        return v


class DiffStats(BaseModel):
    """diff 변경 통계"""

    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)
    added_lines: int = 0
    removed_lines: int = 0
    summary: str = ""


class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = True


class EmbedFooter(BaseModel):
    text: str
    icon_url: str | None = None


class Embed(BaseModel):
    """채팅 메시지 임베드"""

    color: int
    description: str
    timestamp: str
    footer: EmbedFooter
    fields: list[EmbedField] | None = None

    def to_payload(self) -> dict:
        """플랫폼 전송용 dict - fields가 없으면 키 자체를 생략"""
        return self.model_dump(exclude_none=True)


class NotificationResult(BaseModel):
    """알림 생성 결과"""

    message: str
    embed: Embed
