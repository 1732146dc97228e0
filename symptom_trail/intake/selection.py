"""
SymptomTrail — Вибрані симптоми

Впорядкована множина симптомів, обраних користувачем у поточній сесії.
Порядок = порядок додавання; дублікати (без урахування регістру) неможливі.
"""

from typing import Iterator, List, Optional

from symptom_trail.catalog import SymptomCatalog
from symptom_trail.nlp import normalize


class SelectionSet:
    """
    Вибрані симптоми.

    Приклад:
        selection = SelectionSet(catalog)
        selection.add("Fever")       # "fever"
        selection.add("FEVER")       # None — вже є
        selection.remove_last()      # "fever"
    """

    def __init__(self, catalog: SymptomCatalog):
        self.catalog = catalog
        self._items: List[str] = []

    def add(self, name: str) -> Optional[str]:
        """
        Додати симптом у канонічному написанні з каталогу.

        Returns:
            Додана назва, або None якщо симптом вже обрано чи його немає в каталозі
        """
        canonical = self.catalog.resolve(name)
        if canonical is None or self.contains(canonical):
            return None
        self._items.append(canonical)
        return canonical

    def remove(self, index: int) -> Optional[str]:
        """Видалити за позицією; неіснуюча позиція ігнорується"""
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def remove_last(self) -> Optional[str]:
        """Видалити останній доданий симптом"""
        if not self._items:
            return None
        return self._items.pop()

    def discard(self, name: str) -> Optional[str]:
        """Видалити за назвою"""
        key = normalize(name)
        for i, item in enumerate(self._items):
            if normalize(item) == key:
                return self._items.pop(i)
        return None

    def toggle(self, name: str) -> bool:
        """
        Перемкнути симптом (швидкий вибір).

        Returns:
            True якщо після виклику симптом обрано
        """
        if self.discard(name) is not None:
            return False
        return self.add(name) is not None

    def clear(self) -> None:
        self._items = []

    def contains(self, name: str) -> bool:
        key = normalize(name)
        return any(normalize(item) == key for item in self._items)

    def as_list(self) -> List[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __repr__(self) -> str:
        return f"SelectionSet({self._items!r})"
