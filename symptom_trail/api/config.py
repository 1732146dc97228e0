"""
SymptomTrail — API Configuration

Налаштування FastAPI сервера та шляхи до даних.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = True

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML конфігурація SymptomTrailConfig (None → за замовчуванням)
    config_path: Optional[str] = None

    # Зовнішній каталог симптомів (None → тільки вбудований)
    catalog_url: Optional[str] = None

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "SymptomTrail API"
    api_description: str = "Підказки симптомів та аналіз історії оцінок"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("SYMPTOM_TRAIL_HOST", "0.0.0.0"),
            port=int(os.getenv("SYMPTOM_TRAIL_PORT", "8000")),
            debug=os.getenv("SYMPTOM_TRAIL_DEBUG", "true").lower() == "true",
            config_path=os.getenv("SYMPTOM_TRAIL_CONFIG"),
            catalog_url=os.getenv("SYMPTOM_TRAIL_CATALOG_URL"),
            session_timeout_minutes=int(os.getenv("SYMPTOM_TRAIL_SESSION_TIMEOUT", "60")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
