import logging

from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional


class Settings(BaseSettings):
    # Environment
    ENV: str = "development"
    CONFIG_STRICT: bool = False
    LOG_LEVEL: str = "INFO"

    # enotaris-services backend
    API_URL: str = "http://localhost:8080"
    HTTP_TIMEOUT_S: Optional[float] = None  # None = no timeout

    # Local session cache (CLI)
    SESSION_FILE: str = "~/.enotaris/session.json"

    # BFF list proxies
    LIST_PAGE_SIZE_DEFAULT: int = 20
    LIST_PAGE_SIZE_MAX: int = 100
    PENDING_REVIEW_CASE_LIMIT: int = 50
    CORS_ALLOWED_ORIGINS: str = "*"  # comma-separated

    # Tracing
    OTEL_ENABLED: bool = False
    OTEL_EXPORTER: str = "console"  # console | memory

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def api_base_url(self) -> str:
        return (self.API_URL or "").rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()


def validate_config(strict: Optional[bool] = None, settings_obj: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Validate required configuration.

    In strict mode raise RuntimeError; otherwise emit warnings only.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger("enotaris")
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    required_keys = ["API_URL"]

    missing = [key for key in required_keys if not getattr(cfg, key, None)]
    if missing:
        message = f"Missing required configuration: {', '.join(missing)}"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)

    if cfg.LIST_PAGE_SIZE_DEFAULT > cfg.LIST_PAGE_SIZE_MAX:
        message = "LIST_PAGE_SIZE_DEFAULT exceeds LIST_PAGE_SIZE_MAX"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)

    return True
