"""
SymptomTrail — Тренд між оцінками

Порівняння запису з попереднім за часом (наступним у списку новими першими):
- тяжкість: stable / up / down за фіксованою шкалою low … critical
- стан: persists / shift
"""

from enum import Enum
from typing import List, Optional, Sequence

from symptom_trail.config import Severity
from symptom_trail.schemas import HistoryRecord
from .conditions import FALLBACK_CONDITION, condition_key, resolve_condition, resolve_severity
from .recurrence import index_of


INITIAL_MESSAGE = "Initial assessment; no prior data."
INSUFFICIENT_MESSAGE = "Insufficient data from prior assessment."


class TrendDirection(Enum):
    """Напрям зміни тяжкості"""
    STABLE = "severity appears stable"
    UP = "severity trending up"
    DOWN = "severity trending down"


class TrendAnalyzer:
    """
    Аналіз тренду відносно попередньої оцінки.

    Приклад:
        analyzer = TrendAnalyzer()
        analyzer.trend_for(history, history[0])
        # "condition persists (Influenza); severity trending up."
    """

    def __init__(
        self,
        severity_order: Optional[List[str]] = None,
        default_index: int = 2,
        fallback_condition: str = FALLBACK_CONDITION
    ):
        """
        Args:
            severity_order: Шкала тяжкості від найлегшої
            default_index: Ранг для невідомої тяжкості ("moderate")
            fallback_condition: Назва стану за відсутності даних
        """
        order = severity_order or [s.value for s in Severity]
        self.severity_order = [s.lower() for s in order]
        self.default_index = default_index
        self.fallback_condition = fallback_condition

    def severity_rank(self, severity: Optional[str]) -> int:
        """Ранг тяжкості; невідома або відсутня → default_index"""
        if not severity:
            return self.default_index
        try:
            return self.severity_order.index(severity.strip().lower())
        except ValueError:
            return self.default_index

    def previous_of(
        self,
        history: Sequence[HistoryRecord],
        target: HistoryRecord
    ) -> Optional[HistoryRecord]:
        """Попередній за часом запис (None для найстарішого)"""
        idx = index_of(history, target)
        return history[idx + 1] if idx + 1 < len(history) else None

    def direction_for(self, current: HistoryRecord, previous: HistoryRecord) -> TrendDirection:
        curr_rank = self.severity_rank(resolve_severity(current.result))
        prev_rank = self.severity_rank(resolve_severity(previous.result))

        if curr_rank == prev_rank:
            return TrendDirection.STABLE
        if curr_rank > prev_rank:
            return TrendDirection.UP
        return TrendDirection.DOWN

    def condition_note(self, current: HistoryRecord, previous: HistoryRecord) -> str:
        curr = resolve_condition(current.result, self.fallback_condition)
        prev = resolve_condition(previous.result, self.fallback_condition)

        if condition_key(curr, self.fallback_condition) == condition_key(prev, self.fallback_condition):
            return f"condition persists ({curr})"
        return f"shift from {prev} to {curr}"

    def trend_for(
        self,
        history: Sequence[HistoryRecord],
        target: HistoryRecord
    ) -> str:
        """
        Речення про тренд для запису.

        Args:
            history: Історія новими першими (має містити target)
            target: Цільовий запис
        """
        idx = index_of(history, target)
        current = history[idx]
        previous = self.previous_of(history, current)

        if previous is None:
            return INITIAL_MESSAGE
        if current.result is None or previous.result is None:
            return INSUFFICIENT_MESSAGE

        note = self.condition_note(current, previous)
        direction = self.direction_for(current, previous)
        return f"{note}; {direction.value}."
