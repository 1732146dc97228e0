"""Спільні фікстури для тестів"""

from datetime import datetime, timedelta

import pytest


def build_history(*entries):
    """
    Історія новими першими з кортежів (id, condition[, severity]).

    condition=None → запис без результату.
    """
    from symptom_trail.schemas import HistoryRecord

    start = datetime(2026, 6, 1, 9, 0)
    records = []

    for i, entry in enumerate(entries):
        record_id, condition = entry[0], entry[1]
        severity = entry[2] if len(entry) > 2 else None

        result = None
        if condition is not None:
            result = {"condition": condition}
            if severity is not None:
                result["severity"] = severity

        records.append(HistoryRecord(
            id=record_id,
            created_at=start - timedelta(days=i),
            symptoms=["fever"],
            result=result,
        ))

    return records


@pytest.fixture
def make_history():
    return build_history
