"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps paths, cache durations and downstream knobs tunable without code changes.
"""

from typing import List
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    # CORS (TV/mobile clients send preflights without a fixed origin)
    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Value(s) returned in Access-Control-Allow-Origin"
    )

    # --- Search config ---
    # JSON file with {"cache_time": ..., "api_site": {key: {...}}}
    config_file: Path = Field(
        default=Path("./config.json"),
        description="Resource site list and optional cache_time override."
    )
    cache_time: int = Field(default=7200, ge=0, description="Seconds for Cache-Control / CDN headers")
    search_timeout_seconds: float = Field(default=8.0, description="Per-request timeout for resource sites")
    search_max_pages: int = Field(default=5, ge=1, description="Max result pages fetched per site")

    # ---- User settings storage ----
    storage_type: str = Field(default="memory")    # "memory" | "file"
    storage_file: Path = Field(default=Path("./data/user_settings.json"))

    # ---- Logging ----
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")        # "text" | "json"

settings = Settings()
