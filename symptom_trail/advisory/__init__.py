"""
SymptomTrail — Аналіз історії оцінок

Компоненти:
- RecurrenceAnalyzer: попередні випадки того самого стану
- AdvisoryTierSelector: рекомендації first / second / third
- TrendAnalyzer: тренд тяжкості та стану
- RemedyBook: поради для симптомів
- AdvisoryEngine: фасад над усім переліченим

Приклад використання:
    from symptom_trail.advisory import AdvisoryEngine

    engine = AdvisoryEngine.from_config()
    insights = engine.insights_for(history, "r1")
    print(insights.advisory)
"""

from .conditions import (
    FALLBACK_CONDITION,
    resolve_condition,
    condition_key,
    resolve_details,
    resolve_treatment,
    resolve_advice,
    resolve_severity,
    symptom_labels,
    display_symptoms,
)
from .content import AdvisoryContent, AdvisoryLookup
from .recurrence import RecurrenceAnalyzer, index_of
from .tiers import AdvisoryTierSelector, tier_for
from .trend import TrendAnalyzer, TrendDirection, INITIAL_MESSAGE, INSUFFICIENT_MESSAGE
from .care import RemedyBook, RemedySuggestion, care_tips, confidence_message
from .engine import AdvisoryEngine, RecordInsights, HistorySummary


__all__ = [
    'FALLBACK_CONDITION',
    'resolve_condition',
    'condition_key',
    'resolve_details',
    'resolve_treatment',
    'resolve_advice',
    'resolve_severity',
    'symptom_labels',
    'display_symptoms',
    'AdvisoryContent',
    'AdvisoryLookup',
    'RecurrenceAnalyzer',
    'index_of',
    'AdvisoryTierSelector',
    'tier_for',
    'TrendAnalyzer',
    'TrendDirection',
    'INITIAL_MESSAGE',
    'INSUFFICIENT_MESSAGE',
    'RemedyBook',
    'RemedySuggestion',
    'care_tips',
    'confidence_message',
    'AdvisoryEngine',
    'RecordInsights',
    'HistorySummary',
]
