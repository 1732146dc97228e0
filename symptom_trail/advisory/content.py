"""
SymptomTrail — Контент рекомендацій

Таблиці рекомендацій не зашиті в алгоритм: AdvisoryLookup — це
підставне сховище "ключ стану → рекомендації за рівнями", яке можна
замінити або локалізувати.

Джерела контенту (в порядку перевірки):
1. detailed: рекомендації first / second / third для стану
2. prevention_tips: одна порада (тільки для рівня first)
3. fallback: загальне речення для будь-якого стану
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from symptom_trail.config import AdvisoryTier


DEFAULT_CONTENT_PATH = Path(__file__).parent.parent / "data" / "advisory.yaml"

GENERIC_FALLBACK = (
    "Maintain healthy sleep, nutrition, hydration, hygiene, and early "
    "management of new symptoms to reduce recurrence."
)


@dataclass(frozen=True)
class AdvisoryContent:
    """Рекомендації для одного стану за рівнями"""
    first: str = ""
    second: str = ""
    third: str = ""

    def for_tier(self, tier: AdvisoryTier) -> str:
        return getattr(self, AdvisoryTier(tier).value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AdvisoryContent":
        return cls(
            first=data.get("first") or "",
            second=data.get("second") or "",
            third=data.get("third") or "",
        )


class AdvisoryLookup:
    """
    Сховище рекомендацій.

    Приклад:
        lookup = AdvisoryLookup.from_yaml()
        lookup.content_for("influenza", AdvisoryTier.SECOND)

        custom = AdvisoryLookup(
            detailed={"flu": AdvisoryContent(first="...", second="...", third="...")},
            fallback="See a clinician."
        )
    """

    def __init__(
        self,
        detailed: Optional[Mapping[str, AdvisoryContent]] = None,
        prevention_tips: Optional[Mapping[str, str]] = None,
        fallback: str = GENERIC_FALLBACK
    ):
        """
        Args:
            detailed: Ключ стану (lowercase) → AdvisoryContent
            prevention_tips: Ключ стану → одна порада для рівня first
            fallback: Загальна порада
        """
        self.detailed: Dict[str, AdvisoryContent] = {
            k.strip().lower(): v for k, v in (detailed or {}).items()
        }
        self.prevention_tips: Dict[str, str] = {
            k.strip().lower(): v for k, v in (prevention_tips or {}).items()
        }
        self.fallback = fallback

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AdvisoryLookup":
        detailed = {
            key: AdvisoryContent.from_dict(tiers or {})
            for key, tiers in (data.get("detailed") or {}).items()
        }
        return cls(
            detailed=detailed,
            prevention_tips=data.get("prevention_tips") or {},
            fallback=data.get("fallback") or GENERIC_FALLBACK,
        )

    @classmethod
    def from_yaml(cls, path: Optional[str] = None) -> "AdvisoryLookup":
        """
        Завантажити контент з YAML.

        Args:
            path: Шлях до файлу (None → вбудований data/advisory.yaml)
        """
        path = Path(path) if path else DEFAULT_CONTENT_PATH

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    def content_for(self, condition_key: str, tier: AdvisoryTier) -> str:
        """
        Текст рекомендації для стану та рівня (ланцюжок fallback).
        """
        tier = AdvisoryTier(tier)
        key = condition_key.strip().lower()

        detailed = self.detailed.get(key)
        if detailed is not None and detailed.for_tier(tier):
            return detailed.for_tier(tier)

        if tier is AdvisoryTier.FIRST and self.prevention_tips.get(key):
            return self.prevention_tips[key]

        return self.fallback

    def __contains__(self, condition_key: str) -> bool:
        key = condition_key.strip().lower()
        return key in self.detailed or key in self.prevention_tips

    def __len__(self) -> int:
        return len(set(self.detailed) | set(self.prevention_tips))

    def __repr__(self) -> str:
        return (
            f"AdvisoryLookup(detailed={len(self.detailed)}, "
            f"tips={len(self.prevention_tips)})"
        )
