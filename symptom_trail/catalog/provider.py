"""
SymptomTrail — Провайдер каталогу

Отримання списку симптомів від зовнішнього сервісу.
При будь-якій помилці або порожній відповіді — вбудований каталог.
"""

from typing import List, Optional

import requests

from symptom_trail.config import CatalogConfig
from .symptom_catalog import SymptomCatalog


class CatalogFetchError(Exception):
    """Не вдалося отримати каталог від провайдера"""


class RemoteCatalogProvider:
    """
    HTTP провайдер каталогу: GET {base_url}/symptoms → {"symptoms": [...]}

    Приклад:
        provider = RemoteCatalogProvider("http://localhost:8000")
        names = provider.fetch()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: CatalogConfig) -> "RemoteCatalogProvider":
        return cls(config.base_url, timeout=config.timeout_seconds)

    def fetch(self) -> List[str]:
        """
        Завантажити назви симптомів.

        Raises:
            CatalogFetchError: мережева помилка, не-2xx статус або некоректний JSON
        """
        url = f"{self.base_url}/symptoms"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise CatalogFetchError(f"{url}: {e}") from e

        symptoms = payload.get("symptoms") if isinstance(payload, dict) else None
        if not isinstance(symptoms, list):
            return []
        return [str(s) for s in symptoms]


def load_catalog(
    provider: Optional[RemoteCatalogProvider] = None,
    config: Optional[CatalogConfig] = None
) -> SymptomCatalog:
    """
    Завантажити каталог з деградацією до вбудованого.

    Args:
        provider: Зовнішній провайдер (None → тільки вбудований каталог)
        config: Налаштування (шлях до власного каталогу за замовчуванням)

    Returns:
        SymptomCatalog — ніколи не порожній
    """
    config = config or CatalogConfig()
    fallback = SymptomCatalog.from_yaml(config.default_catalog_path)

    if provider is None:
        return fallback

    try:
        names = provider.fetch()
    except CatalogFetchError as e:
        print(f"⚠️ Каталог недоступний, використовуємо вбудований: {e}")
        return fallback

    if not names:
        print("⚠️ Провайдер повернув порожній каталог, використовуємо вбудований")
        return fallback

    catalog = SymptomCatalog.from_remote(names, popular=fallback.popular)
    print(f"✅ Каталог: {len(catalog)} симптомів")
    return catalog
