from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from tasque.core.health_checks import check_mongodb
from tasque.core.settings import get_settings
from tasque.core.utils import utcnow
from tasque.db.mongodb import get_database
from tasque.models.health import HealthCheck

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheck,
    summary="Health check de l'API",
    description="Retourne le statut de l'API et de ses dépendances (MongoDB)",
)
async def health(db=Depends(get_database)) -> JSONResponse:
    """
    Health check endpoint standard

    Returns:
        200 si tout OK, 503 si un service est down
    """
    checks = {
        "database": await check_mongodb(db),
    }

    has_errors = any(check != "ok" for check in checks.values())
    overall_status = "degraded" if has_errors else "ok"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if has_errors else status.HTTP_200_OK

    response = HealthCheck(
        status=overall_status,
        timestamp=utcnow(),
        version=get_settings().api_version,
        checks=checks,
    )

    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
