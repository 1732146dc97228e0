"""
SymptomTrail — Каталог симптомів

Контрольований словник назв симптомів.
Назви унікальні без урахування регістру; пошук — за нормалізованою формою.
"""

import yaml
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from symptom_trail.nlp import normalize


DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "default_catalog.yaml"


class SymptomCatalog:
    """
    Каталог симптомів: normalized name → canonical name

    Приклад використання:
        catalog = SymptomCatalog(["headache", "Sore Throat"])

        catalog.resolve("  sore   throat")  # "Sore Throat"
        "HEADACHE" in catalog               # True
        len(catalog)                        # 2
    """

    def __init__(
        self,
        names: Iterable[str] = (),
        popular: Iterable[str] = ()
    ):
        """
        Args:
            names: Канонічні назви (порядок зберігається)
            popular: Симптоми для швидкого вибору (мають бути в каталозі)
        """
        self._by_key: Dict[str, str] = {}

        for name in names:
            self.add(name)

        self.popular: List[str] = [
            self._by_key[normalize(p)] for p in popular
            if normalize(p) in self._by_key
        ]

    @classmethod
    def from_remote(cls, names: Iterable[str], popular: Iterable[str] = ()) -> "SymptomCatalog":
        """
        Створити каталог зі списку від зовнішнього провайдера.

        Назви приводяться до lowercase, дублікати відкидаються,
        результат сортується.
        """
        unique = {str(n).lower() for n in names if n is not None and str(n).strip()}
        return cls(sorted(unique), popular=popular)

    @classmethod
    def from_yaml(cls, path: Optional[str] = None) -> "SymptomCatalog":
        """
        Завантажити каталог з YAML файлу.

        Args:
            path: Шлях до файлу (None → вбудований каталог)
        """
        path = Path(path) if path else DEFAULT_CATALOG_PATH

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(data.get("symptoms", []), popular=data.get("popular", []))

    @classmethod
    def default(cls) -> "SymptomCatalog":
        """Вбудований каталог поширених симптомів"""
        return cls.from_yaml()

    def add(self, name: str) -> Optional[str]:
        """
        Додати назву до каталогу.

        Returns:
            Канонічна назва (вже існуюча, якщо ключ збігся) або None для порожньої назви
        """
        key = normalize(name)
        if not key:
            return None
        return self._by_key.setdefault(key, name.strip())

    def resolve(self, name: str) -> Optional[str]:
        """
        Знайти канонічну назву за точним співпадінням без урахування регістру.

        Returns:
            Канонічна назва або None
        """
        return self._by_key.get(normalize(name))

    @property
    def names(self) -> List[str]:
        """Всі канонічні назви (в порядку додавання)"""
        return list(self._by_key.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __repr__(self) -> str:
        return f"SymptomCatalog(size={len(self)}, popular={len(self.popular)})"
