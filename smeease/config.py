# smeease/config.py
import re
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    # Base path of the REST API; relative paths are served behind API_HOST
    API_URL: str = "/api"
    API_HOST: str = "http://localhost:4000"

    DATABASE_URL: str = "sqlite:///./smeease.db"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(env_path), env_prefix="SMEEASE_", extra="ignore"
    )

    @property
    def api_base_url(self) -> str:
        # Normalize: remove trailing slashes to avoid double slashes when joining paths
        base = re.sub(r"/+$", "", self.API_URL)
        if base.startswith(("http://", "https://")):
            return base
        host = self.API_HOST.rstrip("/")
        if base and not base.startswith("/"):
            base = "/" + base
        return host + base

    @property
    def database_url(self) -> str:
        # SQLAlchemy wants postgresql://, hosted providers still hand out postgres://
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url


settings = Settings()
