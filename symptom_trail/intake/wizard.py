"""
SymptomTrail — Сесія опитування

IntakeSession зберігає стан опитування користувача:
- Вибрані симптоми та поле вводу з підказками
- Додаткові дані (вік, стать)
- Поточний крок (симптоми → деталі → перевірка → результат)
- Результат аналізу
"""

import time
import uuid
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, List, Optional, Union

from symptom_trail.catalog import SymptomCatalog
from symptom_trail.config import SuggestionConfig
from symptom_trail.schemas import Outcome
from .input_session import SuggestionSession
from .selection import SelectionSet


NEED_SYMPTOM_MESSAGE = "Add at least one symptom to continue."


class IntakeStep(IntEnum):
    """Крок опитування"""
    SYMPTOMS = 1
    DETAILS = 2
    REVIEW = 3
    RESULTS = 4


class Gender(str, Enum):
    """Стать (необов'язково)"""
    UNSET = ""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


GENDER_LABELS = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
    Gender.OTHER: "Other",
    Gender.UNSET: "Prefer not to say",
}


class IntakeSession:
    """
    Сесія опитування.

    Приклад:
        session = IntakeSession(catalog)

        session.input.type_text("fev")
        session.next_step()          # commit "fever", крок 2
        session.set_age(34)
        session.next_step()          # крок 3

        payload = session.payload()  # {"symptoms": ["fever"], "age": 34}
    """

    def __init__(
        self,
        catalog: SymptomCatalog,
        config: Optional[SuggestionConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        session_id: Optional[str] = None
    ):
        self.session_id = session_id or str(uuid.uuid4())[:8]
        self.catalog = catalog
        self.selection = SelectionSet(catalog)
        self.input = SuggestionSession(
            catalog,
            self.selection,
            config=config,
            clock=clock,
        )

        self.step = IntakeStep.SYMPTOMS
        self.age: Optional[int] = None
        self.gender = Gender.UNSET
        self.result: Optional[Outcome] = None
        self.error = ""

        self.created_at = datetime.now()
        self.updated_at = self.created_at

    # =========================================================================
    # Симптоми
    # =========================================================================

    @property
    def symptoms(self) -> List[str]:
        return self.selection.as_list()

    @property
    def popular(self) -> List[str]:
        return list(self.catalog.popular)

    def toggle_symptom(self, name: str) -> bool:
        """Швидкий вибір: додати або прибрати симптом"""
        self._touch()
        selected = self.selection.toggle(name)
        self.input.close()
        return selected

    def remove_symptom(self, index: int) -> Optional[str]:
        self._touch()
        return self.selection.remove(index)

    def clear_symptoms(self) -> None:
        self._touch()
        self.selection.clear()
        self.error = ""

    # =========================================================================
    # Кроки
    # =========================================================================

    def next_step(self) -> bool:
        """
        Перейти до наступного кроку.

        На першому кроці незавершений ввід спершу додається як симптом;
        потрібен хоча б один симптом.

        Returns:
            True якщо крок змінено
        """
        self._touch()
        self.error = ""

        if self.step is IntakeStep.SYMPTOMS:
            if self.input.input_text.strip():
                commit = self.input.commit()
                if not commit.ok:
                    self.error = commit.error
                    return False

            if not self.selection:
                self.error = NEED_SYMPTOM_MESSAGE
                return False

            self.step = IntakeStep.DETAILS
            return True

        if self.step is IntakeStep.DETAILS:
            self.step = IntakeStep.REVIEW
            return True

        return False

    def back(self) -> IntakeStep:
        self._touch()
        if self.step > IntakeStep.SYMPTOMS:
            self.step = IntakeStep(self.step - 1)
        return self.step

    # =========================================================================
    # Деталі
    # =========================================================================

    def set_age(self, value: Optional[Union[int, str]]) -> None:
        """Вік; порожнє значення очищає поле"""
        self._touch()
        if value is None or value == "":
            self.age = None
            return

        age = int(value)
        if age < 0:
            raise ValueError(f"age must be non-negative, got {age}")
        self.age = age

    def set_gender(self, value: Union[Gender, str, None]) -> None:
        self._touch()
        self.gender = Gender(value or "")

    def gender_label(self) -> str:
        return GENDER_LABELS[self.gender]

    # =========================================================================
    # Результат
    # =========================================================================

    def payload(self) -> Dict[str, Any]:
        """Тіло запиту до віддаленого аналізатора"""
        payload: Dict[str, Any] = {"symptoms": self.symptoms}
        if self.age is not None:
            payload["age"] = self.age
        if self.gender is not Gender.UNSET:
            payload["gender"] = self.gender.value
        return payload

    def record_result(self, outcome: Union[Outcome, Dict[str, Any]]) -> None:
        """Зберегти результат аналізу та перейти до останнього кроку"""
        self._touch()
        if not isinstance(outcome, Outcome):
            outcome = Outcome.model_validate(outcome)
        self.result = outcome
        self.step = IntakeStep.RESULTS

    def history_payload(self) -> Dict[str, Any]:
        """Дані для збереження в історії"""
        return {
            "symptoms": self.symptoms,
            "result": self.result.as_mapping() if self.result else None,
        }

    def start_new(self) -> None:
        """Почати опитування спочатку"""
        self._touch()
        self.input.reset()
        self.selection.clear()
        self.step = IntakeStep.SYMPTOMS
        self.age = None
        self.gender = Gender.UNSET
        self.result = None
        self.error = ""

    def summary(self) -> Dict[str, Any]:
        """Підсумок стану сесії"""
        return {
            "session_id": self.session_id,
            "step": int(self.step),
            "symptoms": self.symptoms,
            "input_text": self.input.input_text,
            "suggestions": [s.name for s in self.input.suggestions],
            "suggestions_open": self.input.is_open,
            "active_index": self.input.active_index,
            "no_results": self.input.no_results,
            "age": self.age,
            "gender": self.gender.value,
            "gender_label": self.gender_label(),
            "error": self.error or self.input.error,
        }

    def _touch(self) -> None:
        self.updated_at = datetime.now()
