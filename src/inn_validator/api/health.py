"""
inn_validator/api/health.py — Health check эндпоинт.

GET /api/v1/health — валидатор не имеет внешних зависимостей, поэтому
проверка сводится к отметке о живости и версии.
"""

from fastapi import APIRouter

from inn_validator import __version__

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check валидатора")
def health():
    """Проверка живости сервиса."""
    return {
        "status": "healthy",
        "service": "inn-validator",
        "version": __version__,
    }
