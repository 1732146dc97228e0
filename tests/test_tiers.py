"""
Тести для AdvisoryTierSelector

Запуск: pytest tests/test_tiers.py -v
"""

import pytest


def test_tier_boundaries():
    """0 → first, 1 → second, 2+ → third"""
    from symptom_trail.advisory import tier_for
    from symptom_trail.config import AdvisoryTier

    assert tier_for(0) is AdvisoryTier.FIRST
    assert tier_for(1) is AdvisoryTier.SECOND
    assert tier_for(2) is AdvisoryTier.THIRD
    assert tier_for(3) is AdvisoryTier.THIRD
    assert tier_for(10) is AdvisoryTier.THIRD

    with pytest.raises(ValueError):
        tier_for(-1)

    print("✓ Tier boundaries")


def test_framing_by_occurrence():
    """Рамки рекомендацій для 0 / 1 / 2 / 3+ попередніх випадків"""
    from symptom_trail.advisory import AdvisoryTierSelector, AdvisoryLookup

    lookup = AdvisoryLookup.from_yaml()
    selector = AdvisoryTierSelector(lookup)
    detailed = lookup.detailed["influenza"]

    first = selector.advisory_for("Influenza", 0)
    assert first == f"First recorded influenza; focus on prevention: {detailed.first}"

    second = selector.advisory_for("influenza", 1)
    assert second.startswith("⚠️ 2nd occurrence of influenza. Escalated Prevention Plan:")
    assert detailed.second in second

    third = selector.advisory_for("influenza", 2)
    assert third.startswith("🚨 3rd occurrence of influenza.")
    assert detailed.third in third
    assert "IMPORTANT: Schedule medical consultation immediately" in third

    frequent = selector.advisory_for("influenza", 3)
    assert frequent.startswith("🆘 Frequent influenza (occurrence 4).")
    assert detailed.third in frequent
    assert "CRITICAL" in frequent

    assert "(occurrence 8)" in selector.advisory_for("influenza", 7)

    print(f"✓ {first[:60]}...")


def test_fallback_chain():
    """detailed → prevention_tips (тільки first) → загальна порада"""
    from symptom_trail.advisory import AdvisoryTierSelector, AdvisoryLookup, AdvisoryContent
    from symptom_trail.config import AdvisoryTier

    lookup = AdvisoryLookup(
        detailed={"flu": AdvisoryContent(first="F1", second="F2", third="")},
        prevention_tips={"cough": "Avoid smoke"},
        fallback="Generic tip",
    )

    assert lookup.content_for("FLU", AdvisoryTier.FIRST) == "F1"
    assert lookup.content_for("flu", AdvisoryTier.SECOND) == "F2"
    assert lookup.content_for("flu", AdvisoryTier.THIRD) == "Generic tip"
    assert lookup.content_for("cough", AdvisoryTier.FIRST) == "Avoid smoke"
    assert lookup.content_for("cough", AdvisoryTier.SECOND) == "Generic tip"
    assert lookup.content_for("unknown", AdvisoryTier.FIRST) == "Generic tip"

    selector = AdvisoryTierSelector(lookup)
    assert selector.advisory_for("mystery", 0) == (
        "First recorded mystery; focus on prevention: Generic tip"
    )

    print("✓ Fallback chain")


def test_advisory_for_record(make_history):
    """Рекомендація для запису історії"""
    from symptom_trail.advisory import AdvisoryTierSelector

    history = make_history(("A", "Influenza"), ("B", "cold"), ("C", "influenza"), ("D", None))
    selector = AdvisoryTierSelector()

    assert selector.advisory_for_record(history, history[0]).startswith("⚠️ 2nd occurrence of influenza")
    assert selector.advisory_for_record(history, history[1]).startswith("First recorded cold")
    assert selector.advisory_for_record(history, history[3]) == ""

    print("✓ advisory_for_record")


def test_negative_occurrences():
    from symptom_trail.advisory import AdvisoryTierSelector

    with pytest.raises(ValueError):
        AdvisoryTierSelector().advisory_for("flu", -1)
