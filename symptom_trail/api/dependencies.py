"""
SymptomTrail — API Dependencies

Dependency Injection для FastAPI.
Завантаження каталогу та контенту рекомендацій, зберігання сесій опитування.
"""

from typing import Dict, Optional
from datetime import datetime, timedelta
import threading

import yaml
from fastapi import HTTPException

from symptom_trail.advisory import AdvisoryEngine
from symptom_trail.catalog import RemoteCatalogProvider, SymptomCatalog, load_catalog
from symptom_trail.config import SymptomTrailConfig, get_default_config, load_config
from symptom_trail.intake import IntakeSession, SuggestionEngine

from .config import config


class ResourcesManager:
    """
    Менеджер ресурсів — завантажує каталог та рекомендації один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.settings: SymptomTrailConfig = get_default_config()
        self.catalog: Optional[SymptomCatalog] = None
        self.engine: Optional[SuggestionEngine] = None
        self.advisory: Optional[AdvisoryEngine] = None
        self.error = None

    def load(self) -> bool:
        """Завантажити каталог та контент рекомендацій"""
        if self.is_loaded:
            return True

        try:
            print("📦 Завантаження ресурсів...")

            if config.config_path:
                self.settings = load_config(config.config_path)
                print(f"   ✅ Config: {config.config_path}")

            provider = None
            if config.catalog_url:
                catalog_settings = self.settings.catalog
                catalog_settings.base_url = config.catalog_url
                provider = RemoteCatalogProvider.from_config(catalog_settings)

            self.catalog = load_catalog(provider, self.settings.catalog)
            print(f"   ✅ Catalog: {len(self.catalog)} symptoms")

            self.engine = SuggestionEngine.from_config(self.settings.suggestion)

            self.advisory = AdvisoryEngine.from_config(self.settings)
            print(f"   ✅ Advisory: {len(self.advisory.selector.lookup)} conditions")

            self.is_loaded = True
            print("📦 Всі ресурси завантажено!")
            return True

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            self.error = str(e)
            print(f"❌ Помилка завантаження: {e}")
            return False

    def reset(self) -> None:
        """Скинути завантажені ресурси (для тестів)"""
        self.is_loaded = False
        self.settings = get_default_config()
        self.catalog = None
        self.engine = None
        self.advisory = None
        self.error = None


class IntakeSessionManager:
    """
    Менеджер сесій опитування.
    Зберігає активні сесії в пам'яті.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, IntakeSession] = {}
        self.lock = threading.Lock()

    def create_session(self, resources: "ResourcesManager") -> IntakeSession:
        """Створити нову сесію"""
        session = IntakeSession(
            resources.catalog,
            config=resources.settings.suggestion,
        )

        with self.lock:
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                del self.sessions[oldest.session_id]

            self.sessions[session.session_id] = session

        return session

    def get_session(self, session_id: str) -> Optional[IntakeSession]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію"""
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]


# Глобальні менеджери
resources_manager = ResourcesManager()
session_manager = IntakeSessionManager()


# Dependency functions для FastAPI
def get_resources() -> ResourcesManager:
    """Dependency: отримати менеджер ресурсів"""
    if not resources_manager.is_loaded:
        resources_manager.load()
    return resources_manager


def require_resources() -> ResourcesManager:
    """Dependency: ресурси, без яких endpoint не працює (503 якщо не завантажено)"""
    resources = get_resources()
    if not resources.is_loaded:
        raise HTTPException(
            status_code=503,
            detail=f"Resources not loaded: {resources.error}"
        )
    return resources


def get_sessions() -> IntakeSessionManager:
    """Dependency: отримати менеджер сесій"""
    return session_manager
