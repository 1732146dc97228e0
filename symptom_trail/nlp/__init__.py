"""
SymptomTrail — NLP модуль

Нормалізація тексту для підказок та співставлення симптомів.
"""

from .normalizer import normalize, same_name


__all__ = [
    'normalize',
    'same_name',
]
