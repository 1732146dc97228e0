"""
SymptomTrail — Підказки симптомів

Фільтрація та ранжування каталогу за введеним текстом.

Ранжування:
    sort_key = (0 якщо назва починається з запиту, інакше 1) * 10 + позиція підрядка

Менший sort_key — краще співпадіння. Префіксні збіги завжди вище
внутрішніх; серед внутрішніх раніший збіг вище. Рівні ключі зберігають
порядок каталогу.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from symptom_trail.config import SuggestionConfig
from symptom_trail.nlp import normalize


@dataclass(frozen=True)
class Suggestion:
    """Кандидат у списку підказок"""
    name: str
    sort_key: int


@dataclass
class SuggestionResult:
    """Результат пошуку підказок"""
    query: str                                   # нормалізований запит
    suggestions: List[Suggestion] = field(default_factory=list)

    @property
    def has_query(self) -> bool:
        """Чи є що шукати (порожній запит приховує список)"""
        return bool(self.query)

    @property
    def no_results(self) -> bool:
        """Запит є, але нічого не знайдено"""
        return self.has_query and not self.suggestions

    @property
    def names(self) -> List[str]:
        return [s.name for s in self.suggestions]


class SuggestionEngine:
    """
    Генератор підказок.

    Приклад:
        engine = SuggestionEngine()
        engine.suggest("throat", ["sore throat", "throat pain"])
        # [Suggestion("throat pain", 0), Suggestion("sore throat", 15)]
    """

    def __init__(self, limit: int = 8, prefix_weight: int = 10):
        """
        Args:
            limit: Максимальна кількість підказок
            prefix_weight: Штраф за не-префіксний збіг
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self.limit = limit
        self.prefix_weight = prefix_weight

    @classmethod
    def from_config(cls, config: SuggestionConfig) -> "SuggestionEngine":
        return cls(limit=config.limit, prefix_weight=config.prefix_weight)

    def suggest(
        self,
        query: str,
        catalog: Iterable[str],
        excluded: Iterable[str] = ()
    ) -> List[Suggestion]:
        """
        Відранжовані підказки для запиту.

        Args:
            query: Сирий текст з поля вводу
            catalog: Канонічні назви симптомів
            excluded: Вже обрані симптоми (не пропонуються)

        Returns:
            Не більше limit підказок; порожній список якщо запит порожній
            або нічого не знайдено
        """
        return self.search(query, catalog, excluded).suggestions

    def search(
        self,
        query: str,
        catalog: Iterable[str],
        excluded: Iterable[str] = ()
    ) -> SuggestionResult:
        """Як suggest(), але з ознаками has_query / no_results"""
        normalized = normalize(query)
        if not normalized:
            return SuggestionResult(query="")

        skip = {normalize(name) for name in excluded}
        scored = []

        for name in catalog:
            key = normalize(name)
            if key in skip:
                continue

            index = key.find(normalized)
            if index < 0:
                continue

            starts_with = 0 if index == 0 else 1
            scored.append(Suggestion(name=name, sort_key=starts_with * self.prefix_weight + index))

        # sorted() стабільний — рівні ключі лишаються в порядку каталогу
        scored = sorted(scored, key=lambda s: s.sort_key)

        return SuggestionResult(query=normalized, suggestions=scored[:self.limit])
