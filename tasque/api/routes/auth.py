# tasque/api/routes/auth.py
# Émission de jeton et inscription (routes publiques).

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from tasque.api.deps import UserServiceDep
from tasque.core.security import create_access_token
from tasque.models.user import TokenResponse, UserIn

router = APIRouter(tags=["auth"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    summary="Émettre un jeton d’accès",
    description="Signe les claims reçus (HS256) avec une expiration d’une heure.",
)
async def issue_token(claims: dict[str, Any] = Body(..., description="Claims à signer (ex. email).")):
    """Émettre un jeton.

    Description:
        Aucun contrôle d'identité : le client obtient un jeton pour les claims qu'il envoie.

    Args:
        claims (dict): Claims libres.

    Returns:
        TokenResponse: `{token}`.
    """
    return {"token": create_access_token(claims)}


@router.post(
    "/users",
    summary="Inscription d’un utilisateur",
    description=(
        "Enregistre l’utilisateur si son email est inconnu.\n\n"
        "- Retourne `{acknowledged, insertedId}` à la création\n"
        "- Retourne `{message: \"User already exists!\", insertedId: null}` sinon"
    ),
)
async def create_user(
    service: UserServiceDep,
    payload: UserIn = Body(..., description="Email et champs libres."),
):
    result = await service.create_user(payload)
    return result.model_dump(mode="json", exclude_unset=True)
