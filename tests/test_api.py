"""
Тести для модуля api

Запуск: pytest tests/test_api.py -v
"""

import time

import pytest


@pytest.fixture(scope="module")
def client():
    from fastapi.testclient import TestClient
    from symptom_trail.api.app import app

    with TestClient(app) as c:
        yield c


def _start(client, symptoms=None):
    response = client.post("/api/intake/start", json={"symptoms": symptoms or []})
    assert response.status_code == 200
    return response.json()


def test_root_and_health(client):
    """Тест кореневого endpoint та health check"""
    data = client.get("/").json()
    assert data["name"] == "SymptomTrail API"

    response = client.get("/health")
    assert response.status_code == 200

    health = response.json()
    assert health["status"] == "ok"
    assert health["resources_loaded"] is True
    assert health["catalog_symptoms"] > 0
    assert health["advisory_conditions"] > 0

    print(f"✓ Health: {health}")


def test_symptoms_list(client):
    """Тест списку симптомів та популярних"""
    symptoms = client.get("/api/symptoms", params={"limit": 5}).json()
    assert len(symptoms) == 5
    assert all("name" in s for s in symptoms)

    popular = client.get("/api/symptoms/popular").json()
    assert {"name": "fever"} in popular

    print(f"✓ {len(symptoms)} symptoms, {len(popular)} popular")


def test_suggest(client):
    """Тест підказок з виключенням обраних"""
    data = client.get("/api/symptoms/suggest", params={"q": "pain"}).json()
    names = [s["name"] for s in data["suggestions"]]

    assert names[:3] == ["back pain", "chest pain", "muscle pain"]
    assert not data["no_results"]

    data = client.get(
        "/api/symptoms/suggest",
        params=[("q", "pain"), ("exclude", "back pain"), ("exclude", "chest pain")]
    ).json()
    names = [s["name"] for s in data["suggestions"]]
    assert "back pain" not in names
    assert "chest pain" not in names

    missing = client.get("/api/symptoms/suggest", params={"q": "xyz"}).json()
    assert missing["suggestions"] == []
    assert missing["no_results"] is True

    print(f"✓ Suggest: {names}")


def test_intake_flow(client):
    """Повний цикл опитування"""
    state = _start(client, ["Fever", "banana"])
    session_id = state["session_id"]
    assert state["symptoms"] == ["fever"]
    assert state["step"] == 1

    state = client.post(f"/api/intake/{session_id}/input", json={"text": "thro"}).json()
    assert state["suggestions"] == ["sore throat"]
    assert state["suggestions_open"] is True

    data = client.post(f"/api/intake/{session_id}/key", json={"key": "Enter"}).json()
    assert data["handled"] is True
    assert data["committed"] == "sore throat"
    assert data["state"]["symptoms"] == ["fever", "sore throat"]

    data = client.post(f"/api/intake/{session_id}/key", json={"key": "Backspace"}).json()
    assert data["state"]["symptoms"] == ["fever"]

    data = client.post(f"/api/intake/{session_id}/next").json()
    assert data["advanced"] is True
    assert data["state"]["step"] == 2

    state = client.post(
        f"/api/intake/{session_id}/details",
        json={"age": 30, "gender": "male"}
    ).json()
    assert state["age"] == 30
    assert state["gender_label"] == "Male"

    data = client.post(f"/api/intake/{session_id}/next").json()
    assert data["state"]["step"] == 3
    assert data["payload"] == {"symptoms": ["fever"], "age": 30, "gender": "male"}

    state = client.post(
        f"/api/intake/{session_id}/result",
        json={"outcome": {"severity": "moderate", "topCondition": "Influenza"}}
    ).json()
    assert state["step"] == 4

    assert client.delete(f"/api/intake/{session_id}").status_code == 200
    assert client.get(f"/api/intake/{session_id}").status_code == 404

    print("✓ Intake flow")


def test_intake_errors(client):
    """Невідомий текст, невідома клавіша, невідома сесія"""
    session_id = _start(client)["session_id"]

    data = client.post(f"/api/intake/{session_id}/next").json()
    assert data["advanced"] is False
    assert data["state"]["error"] == "Add at least one symptom to continue."

    client.post(f"/api/intake/{session_id}/input", json={"text": "xyz"})
    data = client.post(f"/api/intake/{session_id}/key", json={"key": "Enter"}).json()
    assert data["committed"] is None
    assert data["error"] == "No matching symptom found."

    data = client.post(f"/api/intake/{session_id}/key", json={"key": "F5"}).json()
    assert data["handled"] is False

    data = client.post(f"/api/intake/{session_id}/select", json={"name": "cough"}).json()
    assert data["committed"] == "cough"

    response = client.post(f"/api/intake/{session_id}/details", json={"age": -3})
    assert response.status_code == 422

    assert client.post("/api/intake/nope/input", json={"text": "a"}).status_code == 404
    assert client.delete("/api/intake/nope").status_code == 404

    print("✓ Intake errors")


def test_blur_closes_after_delay(client):
    session_id = _start(client)["session_id"]

    client.post(f"/api/intake/{session_id}/input", json={"text": "head"})
    assert client.post(f"/api/intake/{session_id}/blur").status_code == 200

    time.sleep(0.2)

    state = client.get(f"/api/intake/{session_id}").json()
    assert state["suggestions_open"] is False

    print("✓ Blur")


HISTORY = [
    {"id": "A", "created_at": "2026-03-01T09:00:00", "symptoms": ["fever"],
     "result": {"severity": "high", "condition": "Influenza", "accuracyLevel": "High"}},
    {"id": "B", "created_at": "2026-02-01T09:00:00", "symptoms": [{"name": "cough"}],
     "result": {"severity": "low", "topCondition": "common cold"}},
    {"id": "C", "created_at": "2026-01-01T09:00:00", "symptoms": "fever",
     "result": {"severity": "moderate", "conditions": [{"name": "influenza"}]}},
]


def test_history_insights(client):
    """Рекомендації для запису історії"""
    response = client.post("/api/history/insights", json={"history": HISTORY, "target_id": "A"})
    assert response.status_code == 200

    data = response.json()
    assert data["prior_occurrences"] == 1
    assert data["tier"] == "second"
    assert data["advisory"].startswith("⚠️ 2nd occurrence of influenza")
    assert data["trend"] == "shift from common cold to Influenza; severity trending up."
    assert data["confidence"].startswith("Strong match")
    assert data["remedies"][0]["label"] == "fever"

    missing = client.post("/api/history/insights", json={"history": HISTORY, "target_id": "Z"})
    assert missing.status_code == 404

    invalid = client.post("/api/history/insights", json={"history": [{"symptoms": []}], "target_id": "A"})
    assert invalid.status_code == 422

    print(f"✓ Insights: {data['trend']}")


def test_history_summary(client):
    data = client.post("/api/history/summary", json={"history": HISTORY}).json()

    assert data["total_checks"] == 3
    assert data["last_condition"] == "Influenza"
    assert data["last_when"].startswith("2026-03-01T09:00:00")

    empty = client.post("/api/history/summary", json={"history": []}).json()
    assert empty["total_checks"] == 0
    assert empty["last_condition"] == "—"
    assert empty["last_when"] is None

    print(f"✓ Summary: {data}")


def test_history_insights_numeric_code(client):
    """Об'єкт симптому з числовим code не ламає відповідь"""
    history = [{"id": "n", "symptoms": [{"code": 101}], "result": {"condition": "flu"}}]

    response = client.post("/api/history/insights", json={"history": history, "target_id": "n"})
    assert response.status_code == 200

    data = response.json()
    assert data["symptoms"] == "101"
    assert data["remedies"][0]["label"] == "101"

    print(f"✓ Numeric code: {data['symptoms']}")
