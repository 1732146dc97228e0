"""
SymptomTrail — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from symptom_trail import __version__
from ..dependencies import get_resources, get_sessions, ResourcesManager, IntakeSessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    resources: ResourcesManager = Depends(get_resources),
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Чи завантажені каталог та рекомендації
    - Кількість активних сесій опитування
    """
    return HealthResponse(
        status="ok" if resources.is_loaded else "degraded",
        version=__version__,
        resources_loaded=resources.is_loaded,
        catalog_symptoms=len(resources.catalog) if resources.catalog else 0,
        advisory_conditions=len(resources.advisory.selector.lookup) if resources.advisory else 0,
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "SymptomTrail API",
        "version": __version__,
        "description": "Підказки симптомів та аналіз історії оцінок",
        "docs": "/docs",
        "health": "/health",
    }
