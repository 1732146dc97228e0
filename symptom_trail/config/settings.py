"""
SymptomTrail — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.suggestion.limit
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================

class Severity(str, Enum):
    """Шкала тяжкості (порядок має значення — від найлегшої до найтяжчої)"""
    LOW = "low"
    MILD = "mild"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"
    CRITICAL = "critical"


class AdvisoryTier(str, Enum):
    """Рівень рекомендацій за кількістю попередніх випадків"""
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


# =============================================================================
# SUGGESTION CONFIGURATION
# =============================================================================

@dataclass
class SuggestionConfig:
    """Параметри підказок симптомів"""

    limit: int = 8                  # максимум підказок у списку
    blur_grace_ms: int = 150        # затримка закриття після blur

    # Ранжування: (startsWith ? 0 : 1) * prefix_weight + index
    prefix_weight: int = 10


# =============================================================================
# CATALOG CONFIGURATION
# =============================================================================

@dataclass
class CatalogConfig:
    """Параметри завантаження каталогу симптомів"""

    base_url: Optional[str] = "http://localhost:8000"
    timeout_seconds: float = 5.0

    # None → вбудований data/default_catalog.yaml
    default_catalog_path: Optional[str] = None


# =============================================================================
# ADVISORY CONFIGURATION
# =============================================================================

@dataclass
class AdvisoryConfig:
    """Параметри рекомендацій та аналізу трендів"""

    fallback_condition: str = "Analysis"

    severity_order: List[str] = field(default_factory=lambda: [
        s.value for s in Severity
    ])
    default_severity_index: int = 2   # "moderate"

    # None → вбудований data/advisory.yaml
    content_path: Optional[str] = None


@dataclass
class CareConfig:
    """Параметри порад щодо догляду"""
    remedy_limit: int = 3

    # None → вбудований data/remedies.yaml
    remedies_path: Optional[str] = None


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class SymptomTrailConfig:
    """
    Головна конфігурація SymptomTrail

    Об'єднує всі параметри системи в одному місці.

    Приклад використання:
        config = SymptomTrailConfig()
        print(config.suggestion.limit)  # 8
        print(config.advisory.fallback_condition)  # Analysis
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "SymptomTrail"

    # Компоненти
    suggestion: SuggestionConfig = field(default_factory=SuggestionConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    advisory: AdvisoryConfig = field(default_factory=AdvisoryConfig)
    care: CareConfig = field(default_factory=CareConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "SymptomTrailConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        data = dict(data or {})
        return cls(
            version=data.get("version", cls.version),
            project_name=data.get("project_name", cls.project_name),
            suggestion=SuggestionConfig(**(data.get("suggestion") or {})),
            catalog=CatalogConfig(**(data.get("catalog") or {})),
            advisory=AdvisoryConfig(**(data.get("advisory") or {})),
            care=CareConfig(**(data.get("care") or {})),
        )


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> SymptomTrailConfig:
    """Отримати конфігурацію за замовчуванням"""
    return SymptomTrailConfig()
