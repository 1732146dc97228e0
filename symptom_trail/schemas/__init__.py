"""
SymptomTrail — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних історії.

Приклад використання:
    from symptom_trail.schemas import HistoryRecord, Outcome

    record = HistoryRecord.model_validate({
        "id": "r1",
        "created_at": "2026-01-05T10:00:00",
        "symptoms": ["fever", {"name": "cough"}],
        "result": {"severity": "high", "topCondition": "Influenza"},
    })
    print(record.result.top_condition)   # Influenza
"""

from .history import (
    AccuracyLevel,
    Outcome,
    HistoryRecord,
)


__all__ = [
    "AccuracyLevel",
    "Outcome",
    "HistoryRecord",
]
