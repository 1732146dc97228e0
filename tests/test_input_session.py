"""
Тести для SuggestionSession (поле вводу з підказками)

Запуск: pytest tests/test_input_session.py -v
"""


class FakeClock:
    """Керований монотонний годинник"""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def _session(names=None, clock=None):
    from symptom_trail.catalog import SymptomCatalog
    from symptom_trail.intake import SuggestionSession

    catalog = SymptomCatalog(names or ["sore throat", "throat pain", "headache", "fever"])
    return SuggestionSession(catalog, clock=clock or FakeClock())


def test_typing_opens_list():
    """Введення з підказками відкриває список, перша підказка активна"""
    from symptom_trail.intake import InputState

    session = _session()

    assert session.type_text("throat") is InputState.OPEN
    assert [s.name for s in session.suggestions] == ["throat pain", "sore throat"]
    assert session.active_index == 0
    assert session.active_suggestion.name == "throat pain"

    assert session.type_text("") is InputState.IDLE
    assert session.suggestions == []

    print("✓ Typing opens list")


def test_navigation_wraps():
    """ArrowDown / ArrowUp з переходом через край"""
    from symptom_trail.intake import Key

    session = _session()
    session.type_text("throat")

    assert session.key_down(Key.ARROW_DOWN).handled
    assert session.active_index == 1

    session.key_down(Key.ARROW_DOWN)
    assert session.active_index == 0

    session.key_down(Key.ARROW_UP)
    assert session.active_index == 1

    print("✓ Navigation wraps")


def test_enter_commits_active():
    """Enter додає активну підказку та очищує поле"""
    from symptom_trail.intake import Key, InputState

    session = _session()
    session.type_text("throat")
    session.key_down(Key.ARROW_DOWN)

    result = session.key_down(Key.ENTER)

    assert result.handled
    assert result.commit.committed == "sore throat"
    assert session.selection.as_list() == ["sore throat"]
    assert session.input_text == ""
    assert session.state is InputState.IDLE

    print(f"✓ Committed: {result.commit.committed}")


def test_tab_commits_and_excludes():
    """Tab теж додає; обраний симптом зникає з підказок"""
    from symptom_trail.intake import Key

    session = _session()
    session.type_text("throat")
    session.key_down(Key.TAB)

    assert session.selection.as_list() == ["throat pain"]

    session.type_text("throat")
    assert [s.name for s in session.suggestions] == ["sore throat"]

    print("✓ Tab commit")


def test_exact_match_without_suggestions():
    """Без підказок — додається точний збіг введеного тексту"""
    from symptom_trail.intake import Key

    session = _session()
    session.selection.add("fever")

    session.type_text("Fever")
    assert session.suggestions == []

    result = session.key_down(Key.ENTER)

    assert result.commit.committed == "fever"
    assert session.selection.as_list() == ["fever"]
    assert session.input_text == ""

    print("✓ Exact match commit")


def test_no_match():
    """Невідомий текст — помилка, вибір не змінюється"""
    from symptom_trail.intake import Key, NO_MATCH_MESSAGE

    session = _session()
    session.type_text("xyz")

    assert session.no_results

    result = session.key_down(Key.ENTER)

    assert not result.handled
    assert result.commit.committed is None
    assert result.commit.error == NO_MATCH_MESSAGE
    assert session.selection.as_list() == []
    assert session.input_text == "xyz"

    print(f"✓ No match: {result.commit.error}")


def test_empty_commit():
    from symptom_trail.intake import EMPTY_INPUT_MESSAGE

    session = _session()
    result = session.commit()

    assert not result.ok
    assert result.error == EMPTY_INPUT_MESSAGE

    print("✓ Empty commit")


def test_escape_closes():
    """Escape закриває список, текст та вибір не змінюються"""
    from symptom_trail.intake import Key, InputState

    session = _session()
    session.type_text("head")

    result = session.key_down(Key.ESCAPE)

    assert not result.handled
    assert session.state is InputState.IDLE
    assert session.input_text == "head"
    assert session.selection.as_list() == []

    # ArrowUp працює тільки з відкритим списком, ArrowDown відкриває знову
    assert not session.key_down(Key.ARROW_UP).handled
    assert session.key_down(Key.ARROW_DOWN).handled
    assert session.state is InputState.OPEN

    print("✓ Escape")


def test_backspace_removes_last():
    """Backspace на порожньому полі видаляє останній симптом"""
    from symptom_trail.intake import Key

    session = _session()
    session.selection.add("fever")
    session.selection.add("headache")

    assert session.key_down(Key.BACKSPACE).handled
    assert session.selection.as_list() == ["fever"]

    session.type_text("hea")
    assert not session.key_down(Key.BACKSPACE).handled
    assert session.selection.as_list() == ["fever"]

    print("✓ Backspace")


def test_unknown_key_ignored():
    """Невідома клавіша не змінює стан"""
    session = _session()
    session.type_text("throat")

    result = session.key_down("PageDown")

    assert not result.handled
    assert result.commit is None
    assert session.active_index == 0
    assert session.is_open

    print("✓ Unknown key")


def test_blur_grace_delay():
    """Blur закриває список тільки після затримки"""
    from symptom_trail.intake import InputState

    clock = FakeClock()
    session = _session(clock=clock)
    session.type_text("throat")

    session.blur()
    assert session.close_pending

    clock.advance(0.1)
    assert session.state is InputState.OPEN

    clock.advance(0.1)
    assert session.state is InputState.IDLE
    assert not session.close_pending

    print("✓ Blur grace delay")


def test_click_during_grace():
    """Клік по підказці в межах затримки встигає спрацювати"""
    clock = FakeClock()
    session = _session(clock=clock)
    session.type_text("throat")

    session.blur()
    clock.advance(0.05)

    result = session.select_suggestion("sore throat")

    assert result.committed == "sore throat"
    assert session.selection.as_list() == ["sore throat"]

    print("✓ Click during grace period")


def test_event_cancels_pending_close():
    """Нова подія до завершення затримки скасовує закриття"""
    from symptom_trail.intake import Key, InputState

    clock = FakeClock()
    session = _session(clock=clock)
    session.type_text("throat")

    session.blur()
    clock.advance(0.05)
    session.key_down(Key.ARROW_DOWN)

    clock.advance(1.0)
    assert session.state is InputState.OPEN
    assert session.active_index == 1

    print("✓ Pending close cancelled")


if __name__ == "__main__":
    test_typing_opens_list()
    test_navigation_wraps()
    test_enter_commits_active()
    test_no_match()
    test_escape_closes()
    test_backspace_removes_last()
    test_blur_grace_delay()
    print("\n✅ Всі тести пройдено!")
