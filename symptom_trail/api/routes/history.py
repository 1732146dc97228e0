"""
SymptomTrail — History Routes

Endpoints для аналізу історії оцінок:
- Рекомендації та тренд для запису
- Підсумок історії

Історію передає клієнт (новими першими); сервер її не зберігає.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import require_resources, ResourcesManager
from ..models import (
    HistoryRequest,
    InsightsRequest,
    InsightsResponse,
    RemedyInfo,
    SummaryResponse,
)

router = APIRouter(prefix="/history", tags=["History"])


@router.post("/insights", response_model=InsightsResponse)
async def record_insights(
    request: InsightsRequest,
    resources: ResourcesManager = Depends(require_resources)
) -> InsightsResponse:
    """
    Рекомендації для запису історії.

    - Кількість попередніх випадків того самого стану
    - Рекомендація відповідного рівня (first / second / third)
    - Тренд тяжкості відносно попередньої оцінки
    - Поради для перших симптомів запису
    """
    try:
        insights = resources.advisory.insights_for(request.history, request.target_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    data = insights.to_dict()
    data["remedies"] = [RemedyInfo(**r) for r in data["remedies"]]

    return InsightsResponse(**data)


@router.post("/summary", response_model=SummaryResponse)
async def history_summary(
    request: HistoryRequest,
    resources: ResourcesManager = Depends(require_resources)
) -> SummaryResponse:
    """Кількість оцінок, останній стан та час останньої оцінки"""
    summary = resources.advisory.summarize(request.history)

    return SummaryResponse(
        total_checks=summary.total_checks,
        last_condition=summary.last_condition,
        last_when=summary.last_when
    )
