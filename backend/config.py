import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    data_path: Path = _BACKEND_DIR / "data" / "countries.json"
    default_language: str = "English"
    flags_base_url: str = "flags"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    rate_limit: str = "120/minute"
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("flags_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    model_config = {
        "env_file": str(_BACKEND_DIR.parent / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
