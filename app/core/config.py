from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # OpenAI 설정
    openai_model: str = "gpt-3.5-turbo"
    openai_max_tokens: int = 2000
    openai_temperature: float = 0.7
    openai_timeout: float | None = None

    # OpenRouter 설정 - HTTP API 직접 호출
    openrouter_api_url: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "deepseek/deepseek-chat-v3.1:free"
    openrouter_max_tokens: int = 2000
    openrouter_temperature: float = 0.7
    openrouter_referer: str = "https://commit-digest.app"
    openrouter_title: str = "Commit Digest"
    openrouter_timeout: float | None = None

    # Gemini 설정
    gemini_model: str = "gemini-2.5-pro"
    gemini_timeout: float | None = None

    # 프롬프트/응답 청크 로깅
    log_chunk_lines: int = 50
    log_chunk_delay: float = 0.01

    # 임베드 설정
    embed_color: int = 0x28A745
    embed_footer_text: str = "Commit Digest • AI-Powered Updates"
    embed_footer_icon_url: str = (
        "https://github.githubassets.com/images/modules/logos_page/GitHub-Mark.png"
    )

    # 로깅 설정
    log_level: str = "INFO"

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
