"""
SymptomTrail — Опитування та підказки

Компоненти:
- SelectionSet: впорядкована множина обраних симптомів
- SuggestionEngine: ранжування каталогу за введеним текстом
- SuggestionSession: автомат поля вводу (фокус, навігація, commit, blur)
- IntakeSession: покрокове опитування

Приклад використання:
    from symptom_trail.catalog import SymptomCatalog
    from symptom_trail.intake import IntakeSession, Key

    session = IntakeSession(SymptomCatalog.default())
    session.input.type_text("thro")
    session.input.key_down(Key.ENTER)
    print(session.symptoms)   # ['sore throat']
"""

from .selection import SelectionSet
from .suggestion import Suggestion, SuggestionResult, SuggestionEngine
from .input_session import (
    InputState,
    Key,
    CommitResult,
    KeyResult,
    SuggestionSession,
    NO_MATCH_MESSAGE,
    EMPTY_INPUT_MESSAGE,
)
from .wizard import (
    IntakeStep,
    Gender,
    IntakeSession,
    NEED_SYMPTOM_MESSAGE,
)


__all__ = [
    'SelectionSet',
    'Suggestion',
    'SuggestionResult',
    'SuggestionEngine',
    'InputState',
    'Key',
    'CommitResult',
    'KeyResult',
    'SuggestionSession',
    'NO_MATCH_MESSAGE',
    'EMPTY_INPUT_MESSAGE',
    'IntakeStep',
    'Gender',
    'IntakeSession',
    'NEED_SYMPTOM_MESSAGE',
]
