"""
SymptomTrail — Поле вводу симптомів

Скінченний автомат поля вводу з підказками:

    IDLE ──focus / введення (є підказки)──▶ OPEN
    OPEN ──Escape / blur (+затримка) / commit──▶ IDLE

Клавіші:
- ArrowDown / ArrowUp: рух по списку з переходом через край
- Enter / Tab: commit активної підказки (або точного збігу введеного тексту)
- Escape: закрити список, текст і вибір не змінюються
- Backspace на порожньому полі: видалити останній обраний симптом

Blur закриває список не одразу, а після короткої затримки, щоб клік по
підказці встиг спрацювати. Будь-яка нова подія до завершення затримки
скасовує відкладене закриття.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from symptom_trail.catalog import SymptomCatalog
from symptom_trail.config import SuggestionConfig
from symptom_trail.nlp import normalize
from .selection import SelectionSet
from .suggestion import Suggestion, SuggestionEngine


NO_MATCH_MESSAGE = "No matching symptom found."
EMPTY_INPUT_MESSAGE = "Select from the list or use the quick options."


class InputState(Enum):
    """Стан списку підказок"""
    IDLE = "idle"
    OPEN = "open"


class Key(str, Enum):
    """Клавіші, які обробляє поле вводу"""
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    TAB = "Tab"
    ESCAPE = "Escape"
    BACKSPACE = "Backspace"


KEY_VALUES = {k.value for k in Key}


@dataclass
class CommitResult:
    """Результат спроби додати симптом"""
    committed: Optional[str] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.committed is not None


@dataclass
class KeyResult:
    """Результат обробки клавіші"""
    handled: bool = False                 # подію поглинуто (preventDefault)
    commit: Optional[CommitResult] = None


class SuggestionSession:
    """
    Стан поля вводу для однієї сесії.

    Приклад:
        session = SuggestionSession(catalog, SelectionSet(catalog))

        session.type_text("thr")
        session.key_down(Key.ARROW_DOWN)
        result = session.key_down(Key.ENTER)

        print(result.commit.committed)   # "sore throat"
        print(session.selection.as_list())
    """

    def __init__(
        self,
        catalog: SymptomCatalog,
        selection: Optional[SelectionSet] = None,
        engine: Optional[SuggestionEngine] = None,
        config: Optional[SuggestionConfig] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Args:
            catalog: Каталог симптомів
            selection: Вибрані симптоми (спільні з рештою сесії)
            engine: Генератор підказок
            config: Налаштування (ліміт, затримка blur)
            clock: Монотонний годинник у секундах
        """
        config = config or SuggestionConfig()

        self.catalog = catalog
        self.selection = selection if selection is not None else SelectionSet(catalog)
        self.engine = engine or SuggestionEngine.from_config(config)
        self.grace_seconds = config.blur_grace_ms / 1000.0
        self.clock = clock

        self.input_text = ""
        self.suggestions: List[Suggestion] = []
        self.active_index = -1
        self.no_results = False
        self.error = ""

        self._state = InputState.IDLE
        self._close_at: Optional[float] = None

    # =========================================================================
    # Стан
    # =========================================================================

    @property
    def state(self) -> InputState:
        self._apply_pending_close()
        return self._state

    @property
    def is_open(self) -> bool:
        return self.state is InputState.OPEN

    @property
    def close_pending(self) -> bool:
        """Чи є відкладене закриття після blur"""
        self._apply_pending_close()
        return self._close_at is not None

    @property
    def active_suggestion(self) -> Optional[Suggestion]:
        if 0 <= self.active_index < len(self.suggestions):
            return self.suggestions[self.active_index]
        return None

    def poll(self) -> InputState:
        """Застосувати відкладене закриття, якщо час вийшов"""
        return self.state

    # =========================================================================
    # Події
    # =========================================================================

    def focus(self) -> InputState:
        self._touch()
        self._recompute()
        self._state = InputState.OPEN if self.suggestions else InputState.IDLE
        return self._state

    def type_text(self, value: str) -> InputState:
        """Нове значення поля вводу"""
        self._touch()
        self.input_text = value
        self.error = ""
        self.no_results = False
        self._recompute()
        self._state = InputState.OPEN if self.suggestions else InputState.IDLE
        return self._state

    def key_down(self, key: Key) -> KeyResult:
        """Обробити клавішу; інші клавіші лише скасовують відкладене закриття"""
        self._touch()

        value = key.value if isinstance(key, Key) else key
        if value not in KEY_VALUES:
            return KeyResult()
        key = Key(value)

        if key is Key.ARROW_DOWN:
            if not self.suggestions:
                return KeyResult()
            self._state = InputState.OPEN
            self.active_index = (self.active_index + 1) % len(self.suggestions)
            return KeyResult(handled=True)

        if key is Key.ARROW_UP:
            if not self.suggestions or self._state is not InputState.OPEN:
                return KeyResult()
            count = len(self.suggestions)
            self.active_index = (self.active_index - 1 + count) % count
            return KeyResult(handled=True)

        if key in (Key.ENTER, Key.TAB):
            commit = self.commit()
            return KeyResult(handled=commit.ok, commit=commit)

        if key is Key.ESCAPE:
            self.close()
            return KeyResult()

        if key is Key.BACKSPACE:
            if not self.input_text.strip() and self.selection:
                self.selection.remove_last()
                return KeyResult(handled=True)
            return KeyResult()

        return KeyResult()

    def blur(self) -> None:
        """Відкласти закриття списку на grace_seconds"""
        self._apply_pending_close()
        self._close_at = self.clock() + self.grace_seconds

    def select_suggestion(self, name: str) -> CommitResult:
        """Клік по підказці"""
        self._touch()
        return self._commit_candidate(name)

    def close(self) -> None:
        self._state = InputState.IDLE
        self.active_index = -1
        self._close_at = None

    def reset(self) -> None:
        """Очистити поле вводу та список"""
        self.input_text = ""
        self.suggestions = []
        self.active_index = -1
        self.no_results = False
        self.error = ""
        self._state = InputState.IDLE
        self._close_at = None

    # =========================================================================
    # Commit
    # =========================================================================

    def commit(self) -> CommitResult:
        """
        Додати активну підказку (перша, якщо жодна не активна),
        або — без підказок — точний збіг введеного тексту.
        """
        if self.suggestions:
            index = self.active_index if self.active_index >= 0 else 0
            candidate = self.suggestions[index].name
        else:
            candidate = normalize(self.input_text)

        if not candidate:
            self.error = EMPTY_INPUT_MESSAGE
            return CommitResult(error=self.error)

        return self._commit_candidate(candidate)

    def _commit_candidate(self, name: str) -> CommitResult:
        canonical = self.catalog.resolve(name)
        if canonical is None:
            self.error = NO_MATCH_MESSAGE
            self.no_results = True
            return CommitResult(error=self.error)

        self.selection.add(canonical)
        self.reset()
        return CommitResult(committed=canonical)

    # =========================================================================
    # Внутрішнє
    # =========================================================================

    def _recompute(self) -> None:
        result = self.engine.search(self.input_text, self.catalog, self.selection)
        self.suggestions = result.suggestions
        self.no_results = result.no_results
        self.active_index = 0 if self.suggestions else -1

    def _touch(self) -> None:
        """Нова подія: прострочене закриття застосовується, інше скасовується"""
        self._apply_pending_close()
        self._close_at = None

    def _apply_pending_close(self) -> None:
        if self._close_at is not None and self.clock() >= self._close_at:
            self.close()
