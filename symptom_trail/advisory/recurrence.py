"""
SymptomTrail — Аналіз повторюваності

Скільки разів стан цільового запису вже траплявся раніше.

Історія — новими першими: індекс 0 — найновіший, більший індекс —
строго старший запис. Порядок історії задає той, хто її передає;
записи з однаковим created_at розрізняються лише позицією в послідовності.
"""

from typing import List, Sequence

from symptom_trail.schemas import HistoryRecord
from .conditions import FALLBACK_CONDITION, record_condition_key


def index_of(history: Sequence[HistoryRecord], target: HistoryRecord) -> int:
    """
    Позиція цільового запису в історії (за id, перший збіг).

    Raises:
        ValueError: запису немає в історії
    """
    for i, record in enumerate(history):
        if record.id == target.id:
            return i
    raise ValueError(f"Record '{target.id}' is not part of the supplied history")


class RecurrenceAnalyzer:
    """
    Підрахунок попередніх випадків того самого стану.

    Приклад:
        analyzer = RecurrenceAnalyzer()

        # [A:flu, B:cold, C:flu, D:flu]
        analyzer.prior_occurrences(history, history[0])   # 2
    """

    def __init__(self, fallback_condition: str = FALLBACK_CONDITION):
        self.fallback_condition = fallback_condition

    def condition_key(self, record: HistoryRecord) -> str:
        return record_condition_key(record, self.fallback_condition)

    def prior_records(
        self,
        history: Sequence[HistoryRecord],
        target: HistoryRecord
    ) -> List[HistoryRecord]:
        """Старші записи з тим самим ключем стану (новими першими)"""
        idx = index_of(history, target)
        key = self.condition_key(history[idx])

        return [
            record for record in history[idx + 1:]
            if self.condition_key(record) == key
        ]

    def prior_occurrences(
        self,
        history: Sequence[HistoryRecord],
        target: HistoryRecord
    ) -> int:
        """
        Кількість попередніх випадків стану цільового запису.

        Args:
            history: Історія новими першими (має містити target)
            target: Цільовий запис

        Returns:
            0 якщо старших записів з тим самим станом немає
        """
        return len(self.prior_records(history, target))
