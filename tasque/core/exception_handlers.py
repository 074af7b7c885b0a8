from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasque.core.exceptions import TasqueError, Unauthenticated
from tasque.core.logging_config import extract_user_data, get_loggers


def register_exception_handlers(app: FastAPI):
    """Enregistre les gestionnaires d'exceptions globaux pour standardiser les réponses."""

    @app.exception_handler(TasqueError)
    async def tasque_exception_handler(request: Request, exc: TasqueError):
        """Gestionnaire pour les erreurs métier typées."""
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_body(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Gestionnaire pour les erreurs de validation Pydantic (corps non JSON, champ requis manquant)."""
        messages = [
            f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content={"error": "; ".join(messages) or "Validation failed"},
        )

    # Gestionnaire pour les exceptions non capturées
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Gestionnaire pour les exceptions non capturées."""
        _, error_logger = get_loggers()
        error_logger.exception(
            "Unhandled error on %s %s %s", request.method, request.url.path, extract_user_data(request=request),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )
