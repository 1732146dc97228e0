"""
SymptomTrail — Поради щодо догляду

- Поради для полегшення окремих симптомів запису
- Загальні поради за тяжкістю результату
- Пояснення рівня точності аналізу
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .conditions import symptom_labels


DEFAULT_REMEDIES_PATH = Path(__file__).parent.parent / "data" / "remedies.yaml"

GENERIC_REMEDY = "Rest, hydrate, and monitor symptoms. Consult a clinician if they worsen."

CARE_TIPS = {
    "high": "If symptoms are severe or worsening, call emergency services immediately.",
    "medium": "Rest, hydrate, consider OTC relief, and consult a clinician if symptoms persist.",
}
DEFAULT_CARE_TIP = "Maintain hydration, rest, and reassess if new symptoms appear."

CONFIDENCE_MESSAGES = {
    "high": "Strong match found in our training set.",
    "moderate": "Symptoms align with the condition, but consider medical confirmation.",
    "low": "Symptoms are broad; treat this result as a starting point.",
}


@dataclass(frozen=True)
class RemedySuggestion:
    """Порада для одного симптому"""
    label: str
    remedy: str


class RemedyBook:
    """
    Довідник порад за симптомами.

    Приклад:
        book = RemedyBook.from_yaml()
        book.suggestions_for(["Fever", {"name": "cough"}])
        # [RemedySuggestion("Fever", "Hydrate frequently, ..."), ...]
    """

    def __init__(
        self,
        remedies: Optional[Mapping[str, str]] = None,
        fallback: str = GENERIC_REMEDY,
        limit: int = 3
    ):
        self.remedies: Dict[str, str] = {
            k.strip().lower(): v for k, v in (remedies or {}).items()
        }
        self.fallback = fallback
        self.limit = limit

    @classmethod
    def from_yaml(cls, path: Optional[str] = None, limit: int = 3) -> "RemedyBook":
        """
        Args:
            path: Шлях до YAML (None → вбудований data/remedies.yaml)
            limit: Скільки перших симптомів запису розглядати
        """
        path = Path(path) if path else DEFAULT_REMEDIES_PATH

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            remedies=data.get("remedies") or {},
            fallback=data.get("fallback") or GENERIC_REMEDY,
            limit=limit,
        )

    def remedy_for(self, symptom: str) -> str:
        return self.remedies.get(symptom.strip().lower()) or self.fallback

    def suggestions_for(self, symptoms: Any) -> List[RemedySuggestion]:
        """Поради для перших limit симптомів запису"""
        return [
            RemedySuggestion(label=label, remedy=self.remedy_for(label))
            for label in symptom_labels(symptoms)[:self.limit]
        ]


def care_tips(severity: Optional[str]) -> str:
    """Загальна порада за тяжкістю результату"""
    return CARE_TIPS.get((severity or "").strip().lower(), DEFAULT_CARE_TIP)


def confidence_message(accuracy_level: Optional[str]) -> str:
    """
    Пояснення рівня точності (High / Moderate / Low).

    Returns:
        Порожній рядок, якщо рівень не вказано
    """
    if not accuracy_level:
        return ""
    return CONFIDENCE_MESSAGES.get(accuracy_level.strip().lower(), CONFIDENCE_MESSAGES["low"])
