"""
SymptomTrail — Схеми історії оцінок

Pydantic моделі для:
- Outcome: результат аналізу симптомів (структурований)
- HistoryRecord: один запис історії користувача
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AccuracyLevel(str, Enum):
    """Рівень точності аналізу"""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class Outcome(BaseModel):
    """
    Результат віддаленого аналізу.

    Поля-синоніми (condition / topCondition / conditions, advice / generalAdvice
    / nextSteps, ...) зберігаються як є — їх розв'язання виконує
    symptom_trail.advisory.conditions. Невідомі поля дозволені.

    Приклад:
        outcome = Outcome(severity="high", topCondition="Influenza")
    """
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "severity": "moderate",
                "insights": ["Symptoms match a viral infection"],
                "advice": "Rest and hydrate",
                "topCondition": "Influenza",
                "accuracyLevel": "Moderate",
            }
        },
    )

    severity: Optional[str] = Field(default=None, description="Тяжкість (low … critical)")
    insights: List[str] = Field(default_factory=list)
    advice: Optional[str] = None

    condition: Optional[str] = None
    top_condition: Optional[str] = Field(default=None, alias="topCondition")
    conditions: Optional[List[Union[str, Dict[str, Any]]]] = None
    condition_details: Optional[str] = Field(default=None, alias="conditionDetails")

    treatment: Optional[str] = None
    remedy: Optional[str] = None
    accuracy_level: Optional[str] = Field(default=None, alias="accuracyLevel")
    probabilities: Optional[Dict[str, float]] = None
    red_flags: List[str] = Field(default_factory=list, alias="redFlags")

    def as_mapping(self) -> Dict[str, Any]:
        """Словник з оригінальними (camelCase) назвами полів"""
        return self.model_dump(by_alias=True, exclude_none=True)


class HistoryRecord(BaseModel):
    """
    Один запис історії (одна минула оцінка).

    Історія передається новими першими: індекс 0 — найновіший запис.
    """
    id: str = Field(..., description="Ідентифікатор запису")
    user_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    # Рядки або об'єкти {name, code}
    symptoms: List[Union[str, Dict[str, Any]]] = Field(default_factory=list)

    # None, вільний текст або структурований результат
    result: Optional[Union[Outcome, str]] = None
    notes: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator('symptoms', mode='before')
    @classmethod
    def coerce_symptoms(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (str, dict)):
            return [v]
        return v
