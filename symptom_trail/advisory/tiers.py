"""
SymptomTrail — Рівні рекомендацій

Рівень за кількістю попередніх випадків:
    0  → first
    1  → second
    2+ → third

Рамки (фіксовані шаблони, підставляються тільки стан та номер випадку):
    first          — "First recorded ...; focus on prevention: ..."
    second         — попередження про ескалацію
    third (2)      — термінова профілактика + обов'язкова консультація
    third (3+)     — критична рамка з номером випадку + консультація
"""

from typing import Optional, Sequence

from symptom_trail.config import AdvisoryTier
from symptom_trail.schemas import HistoryRecord
from .content import AdvisoryLookup
from .recurrence import RecurrenceAnalyzer


FIRST_TEMPLATE = "First recorded {condition}; focus on prevention: {content}"

SECOND_TEMPLATE = "⚠️ 2nd occurrence of {condition}. Escalated Prevention Plan:\n\n{content}"

THIRD_TEMPLATE = (
    "🚨 3rd occurrence of {condition}. Intensive Prevention Required:\n\n{content}\n\n"
    "⚕️ IMPORTANT: Schedule medical consultation immediately to identify and address "
    "underlying causes. This pattern requires professional evaluation and personalized "
    "treatment plan."
)

FREQUENT_TEMPLATE = (
    "🆘 Frequent {condition} (occurrence {occurrence}). URGENT MEDICAL ATTENTION NEEDED:"
    "\n\n{content}\n\n"
    "⚕️ CRITICAL: This recurring pattern indicates a chronic condition requiring immediate "
    "professional diagnosis and comprehensive treatment. Do not delay medical consultation."
)


def tier_for(prior_occurrences: int) -> AdvisoryTier:
    """Рівень рекомендацій за кількістю попередніх випадків"""
    if prior_occurrences < 0:
        raise ValueError(f"prior_occurrences must be non-negative, got {prior_occurrences}")
    if prior_occurrences == 0:
        return AdvisoryTier.FIRST
    if prior_occurrences == 1:
        return AdvisoryTier.SECOND
    return AdvisoryTier.THIRD


class AdvisoryTierSelector:
    """
    Вибір та оформлення рекомендацій.

    Приклад:
        selector = AdvisoryTierSelector(AdvisoryLookup.from_yaml())

        selector.advisory_for("influenza", 0)
        # "First recorded influenza; focus on prevention: Get annual flu vaccine, ..."

        selector.advisory_for("influenza", 3)
        # "🆘 Frequent influenza (occurrence 4). URGENT MEDICAL ATTENTION NEEDED: ..."
    """

    def __init__(
        self,
        lookup: Optional[AdvisoryLookup] = None,
        recurrence: Optional[RecurrenceAnalyzer] = None
    ):
        self.lookup = lookup if lookup is not None else AdvisoryLookup.from_yaml()
        self.recurrence = recurrence or RecurrenceAnalyzer()

    def advisory_for(self, condition_key: str, prior_occurrences: int) -> str:
        """
        Оформлена рекомендація.

        Args:
            condition_key: Ключ стану (приводиться до lowercase)
            prior_occurrences: Кількість попередніх випадків (>= 0)
        """
        tier = tier_for(prior_occurrences)
        condition = condition_key.strip().lower()
        content = self.lookup.content_for(condition, tier)

        if tier is AdvisoryTier.FIRST:
            return FIRST_TEMPLATE.format(condition=condition, content=content)

        if tier is AdvisoryTier.SECOND:
            return SECOND_TEMPLATE.format(condition=condition, content=content)

        if prior_occurrences == 2:
            return THIRD_TEMPLATE.format(condition=condition, content=content)

        return FREQUENT_TEMPLATE.format(
            condition=condition,
            content=content,
            occurrence=prior_occurrences + 1,
        )

    def advisory_for_record(
        self,
        history: Sequence[HistoryRecord],
        target: HistoryRecord
    ) -> str:
        """
        Рекомендація для запису історії.

        Returns:
            Порожній рядок, якщо в записі немає результату
        """
        if target.result is None:
            return ""

        occurrences = self.recurrence.prior_occurrences(history, target)
        return self.advisory_for(self.recurrence.condition_key(target), occurrences)
