"""
═══════════════════════════════════════════════════════════════════════════════
inn_validator — HTTP-точка входа (Application Entry Point)
═══════════════════════════════════════════════════════════════════════════════

Фабрика приложения (Application Factory Pattern): тонкий HTTP-слой над
чистыми функциями валидатора. Состояния не хранит, внешних сервисов не
вызывает.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inn_validator import __version__
from inn_validator.api.health import router as health_router
from inn_validator.api.validation import router as validation_router
from inn_validator.config import get_settings
from inn_validator.exceptions import InnValidatorError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Настраивает корневой логгер: stdout, единый формат."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Фабрика приложения
# ═══════════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Создаёт и конфигурирует FastAPI-приложение валидатора."""
    settings = get_settings()

    _is_production = settings.app_env == "production"

    app = FastAPI(
        redirect_slashes=False,
        title="INN Validator",
        description=(
            "Validation of Russian tax identifiers: INN (10/12 digits) "
            "and KPP (9 characters). Checksums, region codes, "
            "tax-registration cause codes."
        ),
        version=__version__,
        docs_url=None if _is_production else "/docs",
        redoc_url=None if _is_production else "/redoc",
        openapi_url=None if _is_production else "/api/v1/openapi.json",
    )

    # ── CORS middleware ──────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "X-Request-ID"],
    )

    # ── Подключение API-роутеров ─────────────────────────────────────────
    v1_router = APIRouter(prefix="/api/v1")
    v1_router.include_router(validation_router)
    v1_router.include_router(health_router)
    app.include_router(v1_router)

    # ── Глобальный обработчик InnValidatorError ──────────────────────────
    @app.exception_handler(InnValidatorError)
    async def validator_error_handler(request: Request, exc: InnValidatorError) -> JSONResponse:
        """Маппинг кодов ошибок на HTTP-статусы."""
        status_map = {
            "INN_VALIDATION_ERROR": 422,
            "KPP_VALIDATION_ERROR": 422,
        }
        status_code = status_map.get(exc.code, 500)
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                }
            },
        )

    # ── Корневой эндпоинт ────────────────────────────────────────────────
    @app.get("/")
    async def root():
        return {
            "name": "INN Validator",
            "version": __version__,
            "docs": "/docs",
            "api": {
                "v1": {
                    "health": "/api/v1/health",
                    "inn": "/api/v1/inn/validate",
                    "kpp": "/api/v1/kpp/validate",
                    "innWithKpp": "/api/v1/inn-kpp/validate",
                    "errorCodes": "/api/v1/error-codes",
                },
            },
        }

    return app


def main() -> None:
    """Запускает сервис валидатора через Uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting INN Validator v{__version__} on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "inn_validator.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
