# tasque/api/routes/base.py
# Routes de base (bannière, ping).

from fastapi import APIRouter

router = APIRouter()

BANNER = "Tasque is here for you! Are you ready?"


@router.get("/", summary="Bannière de l’API")
async def root():
    return BANNER


@router.get(
    "/ping",
    tags=["Health"],
    summary="Vérification de santé de l’API",
    description="Retourne un message 'pong' permettant de tester que l’API répond.",
)
async def ping():
    """Health-check API.

    Description:
        Route basique permettant de vérifier la disponibilité de l’API.

    Returns:
        dict: Statut et message de réponse.
    """
    return {"status": "ok", "message": "pong"}
