"""
SymptomTrail — Нормалізація тексту

Єдина форма рядка для всіх порівнянь симптомів:
- обрізання пробілів по краях
- lowercase
- послідовності пробільних символів → один пробіл

normalize(normalize(x)) == normalize(x)
"""

import re


WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize(text: str) -> str:
    """
    Нормалізувати запит або назву симптому.

    Приклад:
        normalize("  Sore   THROAT ")  # "sore throat"
    """
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(' ', text.strip().lower())


def same_name(a: str, b: str) -> bool:
    """Порівняння назв без урахування регістру та пробілів"""
    return normalize(a) == normalize(b)
