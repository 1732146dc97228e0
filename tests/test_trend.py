"""
Тести для TrendAnalyzer

Запуск: pytest tests/test_trend.py -v
"""


def test_initial_assessment(make_history):
    """Найстаріший запис — без попередніх даних"""
    from symptom_trail.advisory import TrendAnalyzer, INITIAL_MESSAGE

    history = make_history(("A", "flu", "high"), ("B", "flu", "low"))

    assert TrendAnalyzer().trend_for(history, history[1]) == INITIAL_MESSAGE

    print(f"✓ {INITIAL_MESSAGE}")


def test_trending_up(make_history):
    from symptom_trail.advisory import TrendAnalyzer

    history = make_history(("A", "Influenza", "high"), ("B", "influenza", "moderate"))

    trend = TrendAnalyzer().trend_for(history, history[0])

    assert trend == "condition persists (Influenza); severity trending up."

    print(f"✓ {trend}")


def test_stable(make_history):
    from symptom_trail.advisory import TrendAnalyzer

    history = make_history(("A", "flu", "Moderate"), ("B", "flu", "moderate"))

    assert TrendAnalyzer().trend_for(history, history[0]) == (
        "condition persists (flu); severity appears stable."
    )

    print("✓ Stable")


def test_trending_down_with_shift(make_history):
    from symptom_trail.advisory import TrendAnalyzer

    history = make_history(("A", "common cold", "low"), ("B", "influenza", "severe"))

    assert TrendAnalyzer().trend_for(history, history[0]) == (
        "shift from influenza to common cold; severity trending down."
    )

    print("✓ Down + shift")


def test_unknown_severity_is_moderate(make_history):
    """Невідома або відсутня тяжкість має ранг moderate"""
    from symptom_trail.advisory import TrendAnalyzer

    analyzer = TrendAnalyzer()
    history = make_history(("A", "flu", "weird"), ("B", "flu", "moderate"), ("C", "flu"))

    assert analyzer.severity_rank("weird") == 2
    assert analyzer.severity_rank(None) == 2
    assert analyzer.severity_rank("CRITICAL") == 5

    assert analyzer.trend_for(history, history[0]).endswith("severity appears stable.")
    assert analyzer.trend_for(history, history[1]).endswith("severity appears stable.")

    print("✓ Unknown severity → moderate")


def test_insufficient_data(make_history):
    """Відсутній результат у записі або попередньому"""
    from symptom_trail.advisory import TrendAnalyzer, TrendDirection, INSUFFICIENT_MESSAGE

    history = make_history(("A", "flu", "high"), ("B", None), ("C", "flu", "low"))
    analyzer = TrendAnalyzer()

    assert analyzer.trend_for(history, history[0]) == INSUFFICIENT_MESSAGE
    assert analyzer.trend_for(history, history[1]) == INSUFFICIENT_MESSAGE

    assert analyzer.direction_for(history[0], history[2]) is TrendDirection.UP

    print(f"✓ {INSUFFICIENT_MESSAGE}")
