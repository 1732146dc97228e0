"""
SymptomTrail — Розв'язання полів результату

Результат аналізу буває рядком, структурою з полями-синонімами або
відсутній. Кожне значення визначається впорядкованим списком резолверів:
перший непорожній результат перемагає.

    condition  → topCondition → conditions[0] (рядок або {name}) → "Analysis"
    details    → description  → conditionDetails
    treatment  → treatmentOption → recommendation
    advice     → generalAdvice → nextSteps
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from symptom_trail.schemas import HistoryRecord, Outcome


FALLBACK_CONDITION = "Analysis"
FALLBACK_SYMPTOM_LABEL = "symptom"

OutcomeLike = Union[Outcome, Mapping[str, Any], str, None]
Resolver = Callable[[Mapping[str, Any]], Optional[str]]


# =============================================================================
# Резолвери
# =============================================================================

def field_resolver(name: str) -> Resolver:
    """Резолвер одного поля: непорожнє значення або None"""
    def resolve(data: Mapping[str, Any]) -> Optional[str]:
        value = data.get(name)
        if value is None or isinstance(value, (dict, list)):
            return None
        text = str(value)
        return text if text.strip() else None

    resolve.__name__ = f"resolve_{name}"
    return resolve


def first_condition(data: Mapping[str, Any]) -> Optional[str]:
    """Перший елемент списку conditions: рядок або об'єкт з name"""
    conditions = data.get("conditions")
    if not isinstance(conditions, (list, tuple)) or not conditions:
        return None

    head = conditions[0]
    if isinstance(head, Mapping):
        head = head.get("name")
    if isinstance(head, str) and head.strip():
        return head
    return None


CONDITION_RESOLVERS: List[Resolver] = [
    field_resolver("condition"),
    field_resolver("topCondition"),
    first_condition,
]

DETAILS_RESOLVERS: List[Resolver] = [
    field_resolver("details"),
    field_resolver("description"),
    field_resolver("conditionDetails"),
]

TREATMENT_RESOLVERS: List[Resolver] = [
    field_resolver("treatment"),
    field_resolver("treatmentOption"),
    field_resolver("recommendation"),
]

ADVICE_RESOLVERS: List[Resolver] = [
    field_resolver("advice"),
    field_resolver("generalAdvice"),
    field_resolver("nextSteps"),
]


def as_mapping(outcome: OutcomeLike) -> Optional[Mapping[str, Any]]:
    """Структурований результат як словник (None для рядка та відсутнього)"""
    if isinstance(outcome, Outcome):
        return outcome.as_mapping()
    if isinstance(outcome, Mapping):
        return outcome
    return None


def resolve_first(
    outcome: OutcomeLike,
    resolvers: Sequence[Resolver],
    fallback: str = ""
) -> str:
    """Застосувати резолвери по черзі; перший непорожній перемагає"""
    data = as_mapping(outcome)
    if data is None:
        return fallback

    for resolver in resolvers:
        value = resolver(data)
        if value:
            return value
    return fallback


# =============================================================================
# Стан (condition)
# =============================================================================

def resolve_condition(outcome: OutcomeLike, fallback: str = FALLBACK_CONDITION) -> str:
    """
    Назва стану для результату.

    Рядковий результат — сам є назвою; відсутній результат → fallback.
    """
    if isinstance(outcome, str):
        return outcome if outcome.strip() else fallback
    return resolve_first(outcome, CONDITION_RESOLVERS, fallback)


def condition_key(outcome: OutcomeLike, fallback: str = FALLBACK_CONDITION) -> str:
    """Ключ стану для групування: lowercase назва"""
    return resolve_condition(outcome, fallback).strip().lower()


def record_condition_key(record: HistoryRecord, fallback: str = FALLBACK_CONDITION) -> str:
    return condition_key(record.result, fallback)


def resolve_details(outcome: OutcomeLike) -> str:
    return resolve_first(outcome, DETAILS_RESOLVERS)


def resolve_treatment(outcome: OutcomeLike) -> str:
    return resolve_first(outcome, TREATMENT_RESOLVERS)


def resolve_advice(outcome: OutcomeLike) -> str:
    return resolve_first(outcome, ADVICE_RESOLVERS)


def resolve_severity(outcome: OutcomeLike) -> Optional[str]:
    data = as_mapping(outcome)
    if data is None:
        return None
    value = data.get("severity")
    return str(value) if value is not None else None


# =============================================================================
# Симптоми запису
# =============================================================================

def symptom_label(symptom: Union[str, Dict[str, Any], None]) -> str:
    """Назва симптому: рядок, або name / code об'єкта"""
    if isinstance(symptom, str):
        return symptom
    if isinstance(symptom, Mapping):
        return str(symptom.get("name") or symptom.get("code") or FALLBACK_SYMPTOM_LABEL)
    return FALLBACK_SYMPTOM_LABEL


def symptom_labels(symptoms: Any) -> List[str]:
    if not symptoms:
        return []
    if isinstance(symptoms, (str, Mapping)):
        symptoms = [symptoms]
    return [symptom_label(s) for s in symptoms]


def display_symptoms(symptoms: Any) -> str:
    """Симптоми запису одним рядком"""
    return ", ".join(symptom_labels(symptoms))
