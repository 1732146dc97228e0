"""
SymptomTrail — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .symptoms import router as symptoms_router
from .intake import router as intake_router
from .history import router as history_router

__all__ = [
    'health_router',
    'symptoms_router',
    'intake_router',
    'history_router',
]
