"""
SymptomTrail — Аналіз історії

AdvisoryEngine об'єднує компоненти аналізу історії:
- RecurrenceAnalyzer: попередні випадки стану
- AdvisoryTierSelector: рекомендації за рівнями
- TrendAnalyzer: тренд відносно попередньої оцінки
- RemedyBook: поради для симптомів

Всі методи чисті: історія — знімок, який передає викликач.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from symptom_trail.config import SymptomTrailConfig, get_default_config
from symptom_trail.schemas import HistoryRecord
from .care import RemedyBook, RemedySuggestion, care_tips, confidence_message
from .conditions import (
    display_symptoms,
    resolve_advice,
    resolve_condition,
    resolve_details,
    resolve_severity,
    resolve_treatment,
)
from .content import AdvisoryLookup
from .recurrence import RecurrenceAnalyzer
from .tiers import AdvisoryTierSelector, tier_for
from .trend import TrendAnalyzer


NO_VALUE = "—"


@dataclass
class RecordInsights:
    """Все, що показується для одного запису історії"""
    record_id: str
    condition: str
    prior_occurrences: int
    tier: Optional[str]
    advisory: str
    trend: str
    symptoms: str
    details: str = ""
    treatment: str = ""
    advice: str = ""
    care_tip: str = ""
    confidence: str = ""
    remedies: List[RemedySuggestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HistorySummary:
    """Підсумок історії користувача"""
    total_checks: int
    last_condition: str
    last_when: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_checks": self.total_checks,
            "last_condition": self.last_condition,
            "last_when": self.last_when.isoformat() if self.last_when else None,
        }


class AdvisoryEngine:
    """
    Аналіз історії оцінок.

    Приклад:
        engine = AdvisoryEngine.from_config(get_default_config())

        insights = engine.insights_for(history, "r1")
        print(insights.advisory)
        print(insights.trend)

        print(engine.summarize(history).total_checks)
    """

    def __init__(
        self,
        selector: Optional[AdvisoryTierSelector] = None,
        trend: Optional[TrendAnalyzer] = None,
        remedies: Optional[RemedyBook] = None
    ):
        self.selector = selector or AdvisoryTierSelector()
        self.recurrence = self.selector.recurrence
        self.trend = trend or TrendAnalyzer(fallback_condition=self.recurrence.fallback_condition)
        self.remedies = remedies or RemedyBook.from_yaml()

    @classmethod
    def from_config(
        cls,
        config: Optional[SymptomTrailConfig] = None,
        lookup: Optional[AdvisoryLookup] = None
    ) -> "AdvisoryEngine":
        """
        Створити з конфігурації.

        Args:
            config: Конфігурація (None → за замовчуванням)
            lookup: Власний контент рекомендацій (замість YAML з конфігурації)
        """
        config = config or get_default_config()
        advisory = config.advisory

        recurrence = RecurrenceAnalyzer(fallback_condition=advisory.fallback_condition)
        selector = AdvisoryTierSelector(
            lookup=lookup if lookup is not None else AdvisoryLookup.from_yaml(advisory.content_path),
            recurrence=recurrence,
        )
        trend = TrendAnalyzer(
            severity_order=advisory.severity_order,
            default_index=advisory.default_severity_index,
            fallback_condition=advisory.fallback_condition,
        )
        remedies = RemedyBook.from_yaml(config.care.remedies_path, limit=config.care.remedy_limit)

        return cls(selector=selector, trend=trend, remedies=remedies)

    def find(self, history: Sequence[HistoryRecord], record_id: str) -> HistoryRecord:
        """
        Raises:
            ValueError: запису з таким id немає
        """
        for record in history:
            if record.id == record_id:
                return record
        raise ValueError(f"Record '{record_id}' is not part of the supplied history")

    def insights_for(self, history: Sequence[HistoryRecord], record_id: str) -> RecordInsights:
        """Рекомендації, тренд та поради для запису"""
        target = self.find(history, record_id)
        outcome = target.result
        occurrences = self.recurrence.prior_occurrences(history, target)

        return RecordInsights(
            record_id=target.id,
            condition=resolve_condition(outcome, self.recurrence.fallback_condition),
            prior_occurrences=occurrences,
            tier=tier_for(occurrences).value if outcome is not None else None,
            advisory=self.selector.advisory_for_record(history, target),
            trend=self.trend.trend_for(history, target),
            symptoms=display_symptoms(target.symptoms),
            details=resolve_details(outcome),
            treatment=resolve_treatment(outcome),
            advice=resolve_advice(outcome),
            care_tip=care_tips(resolve_severity(outcome)),
            confidence=confidence_message(getattr(outcome, "accuracy_level", None)),
            remedies=self.remedies.suggestions_for(target.symptoms),
        )

    def insights_for_all(self, history: Sequence[HistoryRecord]) -> List[RecordInsights]:
        return [self.insights_for(history, record.id) for record in history]

    def summarize(self, history: Sequence[HistoryRecord]) -> HistorySummary:
        """Кількість оцінок та останній стан"""
        if not history:
            return HistorySummary(total_checks=0, last_condition=NO_VALUE, last_when=None)

        last = history[0]
        return HistorySummary(
            total_checks=len(history),
            last_condition=resolve_condition(last.result, self.recurrence.fallback_condition),
            last_when=last.created_at,
        )
