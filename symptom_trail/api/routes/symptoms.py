"""
SymptomTrail — Symptoms Routes

Endpoints для роботи з каталогом симптомів:
- Список всіх симптомів
- Популярні симптоми (швидкий вибір)
- Підказки за введеним текстом
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from ..dependencies import require_resources, ResourcesManager
from ..models import SymptomInfo, SuggestionInfo, SuggestResponse

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("", response_model=List[SymptomInfo])
async def list_symptoms(
    resources: ResourcesManager = Depends(require_resources),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0)
) -> List[SymptomInfo]:
    """
    Отримати список всіх симптомів.

    - **limit**: Максимальна кількість (1-1000)
    - **offset**: Зсув для пагінації
    """
    symptoms = resources.catalog.names[offset:offset + limit]

    return [
        SymptomInfo(name=s)
        for s in symptoms
    ]


@router.get("/popular", response_model=List[SymptomInfo])
async def popular_symptoms(
    resources: ResourcesManager = Depends(require_resources)
) -> List[SymptomInfo]:
    """Симптоми для швидкого вибору"""
    return [SymptomInfo(name=s) for s in resources.catalog.popular]


@router.get("/suggest", response_model=SuggestResponse)
async def suggest_symptoms(
    q: str = Query(default="", max_length=100),
    exclude: List[str] = Query(default=[]),
    resources: ResourcesManager = Depends(require_resources)
) -> SuggestResponse:
    """
    Підказки симптомів за текстом.

    - **q**: Введений текст
    - **exclude**: Вже обрані симптоми (не підказуються)

    Спершу симптоми, що починаються з тексту, далі — ті, що містять його.
    """
    result = resources.engine.search(q, resources.catalog, exclude)

    return SuggestResponse(
        query=result.query,
        suggestions=[
            SuggestionInfo(name=s.name, sort_key=s.sort_key)
            for s in result.suggestions
        ],
        no_results=result.no_results
    )
