"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
Або демо: python tests/test_schemas.py
"""

import pytest


def test_outcome_aliases():
    """Тест моделі Outcome з camelCase полями"""
    from symptom_trail.schemas import Outcome

    outcome = Outcome.model_validate({
        "severity": "high",
        "topCondition": "Influenza",
        "conditionDetails": "Viral infection",
        "accuracyLevel": "High",
        "generalAdvice": "Rest",
    })

    assert outcome.top_condition == "Influenza"
    assert outcome.condition_details == "Viral infection"
    assert outcome.accuracy_level == "High"

    mapping = outcome.as_mapping()
    assert mapping["topCondition"] == "Influenza"
    assert mapping["generalAdvice"] == "Rest"
    assert "condition" not in mapping

    print(f"✓ Outcome: {mapping}")


def test_history_record_forms():
    """Тест різних форм запису історії"""
    from symptom_trail.schemas import HistoryRecord, Outcome

    structured = HistoryRecord.model_validate({
        "id": 7,
        "created_at": "2026-01-05T10:00:00",
        "symptoms": ["fever", {"name": "cough", "code": "R05"}],
        "result": {"severity": "low", "condition": "Common Cold"},
    })

    assert structured.id == "7"
    assert structured.created_at.year == 2026
    assert isinstance(structured.result, Outcome)
    assert structured.symptoms[1]["code"] == "R05"

    text = HistoryRecord(id="r2", symptoms="fever", result="Migraine")
    assert text.symptoms == ["fever"]
    assert text.result == "Migraine"

    empty = HistoryRecord(id="r3", symptoms=None)
    assert empty.symptoms == []
    assert empty.result is None

    print("✓ HistoryRecord: structured / text / empty")


def test_history_record_requires_id():
    from pydantic import ValidationError
    from symptom_trail.schemas import HistoryRecord

    with pytest.raises(ValidationError):
        HistoryRecord.model_validate({"symptoms": ["fever"]})

    print("✓ id required")


if __name__ == "__main__":
    test_outcome_aliases()
    test_history_record_forms()
    print("\n✅ Всі тести пройдено!")
