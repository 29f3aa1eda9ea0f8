from pathlib import Path
from typing import Optional

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

    # Content
    CONTENT_DIR: str = "_posts"
    CONTENT_EXTENSION: str = ".md"
    COLLECT_ERRORS: bool = False
    MAX_WORKERS: Optional[int] = None

    # Static export (passed through, only BASE_PATH touches records)
    BASE_PATH: str = "/imra_code_blog"
    OUTPUT_DIR: str = "out"
    OUTPUT_MODE: str = "export"
    IMAGES_UNOPTIMIZED: bool = True
    MANIFEST_FILENAME: str = "posts.json"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    @property
    def manifest_path(self) -> Path:
        return self.output_path / self.MANIFEST_FILENAME


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
