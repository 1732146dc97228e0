"""SymptomTrail — Модуль конфігурації"""
from .settings import (
    SymptomTrailConfig,
    get_default_config,
    SuggestionConfig,
    CatalogConfig,
    AdvisoryConfig,
    CareConfig,
    Severity,
    AdvisoryTier,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "SymptomTrailConfig",
    "get_default_config",
    "SuggestionConfig",
    "CatalogConfig",
    "AdvisoryConfig",
    "CareConfig",
    "Severity",
    "AdvisoryTier",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
