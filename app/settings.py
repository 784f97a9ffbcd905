from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Static server holding the raw markdown sources (`/{slug}.md`)
    CONTENT_BASE_URL: str = "http://localhost:3000"
    FETCH_TIMEOUT_SECONDS: float = 10.0

    # Rendering
    HIGHLIGHT_LANG_PREFIX: str = "hlhjs language-"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_base_url(self) -> str:
        return self.CONTENT_BASE_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
