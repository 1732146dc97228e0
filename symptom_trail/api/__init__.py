"""
SymptomTrail — REST API

FastAPI оболонка над підказками симптомів, опитуванням та аналізом історії.

Запуск:
    uvicorn symptom_trail.api.app:app --reload
"""

from .config import APIConfig, config

__all__ = [
    'APIConfig',
    'config',
]
