"""
SymptomTrail — Журнал симптомів з рекомендаціями

Модулі:
- config: Конфігурація системи
- nlp: Нормалізація тексту
- catalog: Каталог симптомів та його завантаження
- intake: Підказки, поле вводу, покрокове опитування
- schemas: Pydantic моделі історії
- advisory: Повторюваність, рекомендації, тренди, поради
- api: Backend API
"""

__version__ = "0.1.0"
__author__ = "SymptomTrail Team"

from .config import SymptomTrailConfig, get_default_config
