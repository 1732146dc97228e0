"""
SymptomTrail API — Pydantic Models

Моделі для запитів та відповідей REST API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from symptom_trail.intake import Gender
from symptom_trail.schemas import HistoryRecord


# === Request Models ===

class StartIntakeRequest(BaseModel):
    """Запит на початок опитування"""
    symptoms: List[str] = Field(
        default_factory=list,
        description="Симптоми, обрані одразу (назви з каталогу)",
        examples=[["fever", "cough"]]
    )


class InputRequest(BaseModel):
    """Новий текст поля вводу"""
    text: str = Field(..., max_length=200, description="Поточний текст поля")


class KeyRequest(BaseModel):
    """Натискання клавіші в полі вводу"""
    key: str = Field(
        ...,
        description="ArrowDown / ArrowUp / Enter / Tab / Escape / Backspace",
        examples=["Enter"]
    )


class SelectRequest(BaseModel):
    """Вибір симптому (клік по підказці або швидкий вибір)"""
    name: str = Field(..., min_length=1, description="Назва симптому")


class DetailsRequest(BaseModel):
    """Додаткові дані опитування"""
    age: Optional[int] = Field(default=None, ge=0, le=150, description="Вік")
    gender: Gender = Field(default=Gender.UNSET, description="male / female / other / ''")


class ResultRequest(BaseModel):
    """Результат віддаленого аналізу для сесії"""
    outcome: Dict[str, Any] = Field(
        ...,
        examples=[{"severity": "moderate", "topCondition": "Influenza"}]
    )


class HistoryRequest(BaseModel):
    """Історія користувача (новими першими)"""
    history: List[HistoryRecord] = Field(default_factory=list)


class InsightsRequest(HistoryRequest):
    """Запит рекомендацій для одного запису історії"""
    target_id: str = Field(..., description="id цільового запису")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "target_id": "r1",
                "history": [
                    {"id": "r1", "created_at": "2026-03-01T09:00:00",
                     "symptoms": ["fever"], "result": {"severity": "high", "condition": "Influenza"}},
                    {"id": "r2", "created_at": "2026-01-10T09:00:00",
                     "symptoms": ["fever", "cough"], "result": {"severity": "moderate", "condition": "Influenza"}},
                ],
            }
        }
    )


# === Response Models ===

class SymptomInfo(BaseModel):
    """Симптом каталогу"""
    name: str


class SuggestionInfo(BaseModel):
    """Одна підказка"""
    name: str
    sort_key: int


class SuggestResponse(BaseModel):
    """Результат пошуку підказок"""
    query: str
    suggestions: List[SuggestionInfo] = Field(default_factory=list)
    no_results: bool = False


class IntakeState(BaseModel):
    """Стан сесії опитування"""
    session_id: str
    step: int = Field(..., ge=1, le=4)
    symptoms: List[str] = Field(default_factory=list)
    input_text: str = ""
    suggestions: List[str] = Field(default_factory=list)
    suggestions_open: bool = False
    active_index: int = -1
    no_results: bool = False
    age: Optional[int] = None
    gender: str = ""
    gender_label: str = ""
    error: str = ""


class CommitResponse(BaseModel):
    """Результат спроби додати симптом"""
    committed: Optional[str] = None
    error: str = ""
    state: IntakeState


class KeyResponse(BaseModel):
    """Результат обробки клавіші"""
    handled: bool = False
    committed: Optional[str] = None
    error: str = ""
    state: IntakeState


class StepResponse(BaseModel):
    """Результат переходу між кроками"""
    advanced: bool
    payload: Dict[str, Any] = Field(default_factory=dict)
    state: IntakeState


class RemedyInfo(BaseModel):
    label: str
    remedy: str


class InsightsResponse(BaseModel):
    """Рекомендації, тренд та поради для запису"""
    record_id: str
    condition: str
    prior_occurrences: int = Field(..., ge=0)
    tier: Optional[str] = None
    advisory: str = ""
    trend: str = ""
    symptoms: str = ""
    details: str = ""
    treatment: str = ""
    advice: str = ""
    care_tip: str = ""
    confidence: str = ""
    remedies: List[RemedyInfo] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    """Підсумок історії"""
    total_checks: int
    last_condition: str
    last_when: Optional[datetime] = None


class HealthResponse(BaseModel):
    """Стан сервера"""
    status: str
    version: str
    resources_loaded: bool
    catalog_symptoms: int = 0
    advisory_conditions: int = 0
    active_sessions: int = 0
