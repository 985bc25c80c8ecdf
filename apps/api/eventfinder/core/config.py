import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


def _csv(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [v.strip() for v in val.split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    env: str = os.getenv("ENV", "local")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _int(os.getenv("PORT"), 5000)

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    # JSON lines by default; set LOG_JSON=false for human-readable local output
    log_json: bool = _bool(os.getenv("LOG_JSON"), default=True)

    # Only the in-process store exists; data does not survive a restart
    event_store_backend: str = os.getenv("EVENT_STORE_BACKEND", "memory")

    cors_allow_origins: list[str] = field(
        default_factory=lambda: _csv(
            os.getenv("CORS_ALLOW_ORIGINS"),
            default=["http://localhost:3000"],
        )
    )

    metrics_enabled: bool = _bool(os.getenv("METRICS_ENABLED"), default=True)


settings = Settings()
