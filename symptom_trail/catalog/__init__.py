"""
SymptomTrail — Каталог симптомів

Компоненти:
- SymptomCatalog: контрольований словник назв
- RemoteCatalogProvider: HTTP провайдер каталогу
- load_catalog: завантаження з деградацією до вбудованого каталогу

Приклад використання:
    from symptom_trail.catalog import RemoteCatalogProvider, load_catalog

    catalog = load_catalog(RemoteCatalogProvider("http://localhost:8000"))
    print(catalog.resolve("Sore Throat"))  # "sore throat"
"""

from .symptom_catalog import SymptomCatalog, DEFAULT_CATALOG_PATH
from .provider import RemoteCatalogProvider, CatalogFetchError, load_catalog


__all__ = [
    'SymptomCatalog',
    'DEFAULT_CATALOG_PATH',
    'RemoteCatalogProvider',
    'CatalogFetchError',
    'load_catalog',
]
