"""
SymptomTrail — Intake Routes

Endpoints для сесій опитування:
- Створення сесії
- Поле вводу: текст, клавіші, вибір підказки, blur
- Деталі, кроки, результат
- Закриття сесії
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from symptom_trail.intake import IntakeSession
from ..dependencies import (
    require_resources, get_sessions,
    ResourcesManager, IntakeSessionManager
)
from ..models import (
    StartIntakeRequest,
    InputRequest,
    KeyRequest,
    SelectRequest,
    DetailsRequest,
    ResultRequest,
    IntakeState,
    CommitResponse,
    KeyResponse,
    StepResponse,
)

router = APIRouter(prefix="/intake", tags=["Intake"])


def session_to_response(session: IntakeSession) -> IntakeState:
    """Конвертувати сесію в Pydantic модель"""
    return IntakeState(**session.summary())


def get_session_or_404(session_id: str, sessions: IntakeSessionManager) -> IntakeSession:
    session = sessions.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail=f"Session '{session_id}' not found"
        )
    return session


@router.post("/start", response_model=IntakeState)
async def start_intake(
    request: StartIntakeRequest,
    resources: ResourcesManager = Depends(require_resources),
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """
    Почати нове опитування.

    Симптоми з запиту, яких немає в каталозі, ігноруються.
    """
    session = sessions.create_session(resources)

    for name in request.symptoms:
        session.selection.add(name)

    return session_to_response(session)


@router.get("/{session_id}", response_model=IntakeState)
async def get_intake(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Отримати поточний стан сесії"""
    session = get_session_or_404(session_id, sessions)
    session.input.poll()
    return session_to_response(session)


@router.post("/{session_id}/input", response_model=IntakeState)
async def type_text(
    session_id: str,
    request: InputRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Новий текст поля вводу — перераховує підказки"""
    session = get_session_or_404(session_id, sessions)
    session.input.type_text(request.text)
    return session_to_response(session)


@router.post("/{session_id}/focus", response_model=IntakeState)
async def focus_input(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Фокус на полі вводу — відкриває список, якщо є підказки"""
    session = get_session_or_404(session_id, sessions)
    session.input.focus()
    return session_to_response(session)


@router.post("/{session_id}/key", response_model=KeyResponse)
async def key_down(
    session_id: str,
    request: KeyRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> KeyResponse:
    """
    Натискання клавіші в полі вводу.

    Невідомі клавіші не змінюють стан (handled = false).
    """
    session = get_session_or_404(session_id, sessions)

    result = session.input.key_down(request.key)
    commit = result.commit

    return KeyResponse(
        handled=result.handled,
        committed=commit.committed if commit else None,
        error=commit.error if commit else "",
        state=session_to_response(session)
    )


@router.post("/{session_id}/select", response_model=CommitResponse)
async def select_suggestion(
    session_id: str,
    request: SelectRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> CommitResponse:
    """Клік по підказці"""
    session = get_session_or_404(session_id, sessions)

    commit = session.input.select_suggestion(request.name)

    return CommitResponse(
        committed=commit.committed,
        error=commit.error,
        state=session_to_response(session)
    )


@router.post("/{session_id}/toggle", response_model=IntakeState)
async def toggle_symptom(
    session_id: str,
    request: SelectRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Швидкий вибір: додати або прибрати симптом"""
    session = get_session_or_404(session_id, sessions)
    session.toggle_symptom(request.name)
    return session_to_response(session)


@router.delete("/{session_id}/symptoms/{index}", response_model=IntakeState)
async def remove_symptom(
    session_id: str,
    index: int,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Прибрати обраний симптом за позицією (неіснуюча позиція — без змін)"""
    session = get_session_or_404(session_id, sessions)
    session.remove_symptom(index)
    return session_to_response(session)


@router.post("/{session_id}/blur", response_model=IntakeState)
async def blur_input(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Поле втратило фокус — список закриється після короткої затримки"""
    session = get_session_or_404(session_id, sessions)
    session.input.blur()
    return session_to_response(session)


@router.post("/{session_id}/details", response_model=IntakeState)
async def set_details(
    session_id: str,
    request: DetailsRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Вік та стать (необов'язково)"""
    session = get_session_or_404(session_id, sessions)
    session.set_age(request.age)
    session.set_gender(request.gender)
    return session_to_response(session)


@router.post("/{session_id}/next", response_model=StepResponse)
async def next_step(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> StepResponse:
    """
    Наступний крок опитування.

    На кроці симптомів незавершений текст спершу додається як симптом.
    """
    session = get_session_or_404(session_id, sessions)

    advanced = session.next_step()

    return StepResponse(
        advanced=advanced,
        payload=session.payload(),
        state=session_to_response(session)
    )


@router.post("/{session_id}/back", response_model=IntakeState)
async def previous_step(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    session = get_session_or_404(session_id, sessions)
    session.back()
    return session_to_response(session)


@router.post("/{session_id}/result", response_model=IntakeState)
async def record_result(
    session_id: str,
    request: ResultRequest,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> IntakeState:
    """Зберегти результат віддаленого аналізу (крок 4)"""
    session = get_session_or_404(session_id, sessions)

    try:
        session.record_result(request.outcome)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return session_to_response(session)


@router.delete("/{session_id}")
async def delete_intake(
    session_id: str,
    sessions: IntakeSessionManager = Depends(get_sessions)
) -> dict:
    """Закрити сесію"""
    if not sessions.delete_session(session_id):
        raise HTTPException(
            status_code=404,
            detail=f"Session '{session_id}' not found"
        )

    return {"session_id": session_id, "deleted": True}
