# tasque/core/security.py
# Génération/validation JWT et dépendance FastAPI `get_current_claims`.

import datetime as dt
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from tasque.core.exceptions import Unauthenticated
from tasque.core.settings import get_settings
from tasque.core.utils import utcnow

# auto_error=False : l'absence d'en-tête doit produire notre 401, pas le 403 de FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: dt.timedelta | None = None) -> str:
    """Crée un access token JWT.

    Description:
        Encode un JWT signé contenant `data` (claims libres, ex. `{"email": ...}`) et une
        date d’expiration. L’expiration par défaut vient de `jwt_expiration_minutes` (1h).

    Args:
        data (dict): Claims à inclure.
        expires_delta (datetime.timedelta | None): Durée de validité.

    Returns:
        str: Jeton JWT signé.
    """
    settings = get_settings()
    to_encode = data.copy()
    expire = utcnow() + (expires_delta or dt.timedelta(minutes=settings.jwt_expiration_minutes))
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Décode et vérifie un access token.

    Raises:
        Unauthenticated: Jeton mal formé, expiré ou signé avec un autre secret.
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise Unauthenticated() from e


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    """Dépendance FastAPI: claims du jeton Bearer courant.

    Description:
        - Lit l'en-tête `Authorization: Bearer <token>`
        - Vérifie la signature et l'expiration
        - Lève 401 si l'en-tête est absent ou le jeton invalide

    Args:
        credentials (HTTPAuthorizationCredentials | None): En-tête Bearer (injection via `bearer_scheme`).

    Returns:
        dict: Claims décodés.

    Raises:
        Unauthenticated: 401 si jeton absent ou invalide.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    return decode_access_token(credentials.credentials)


# Type alias pour faciliter l'usage
CurrentClaims = Annotated[dict[str, Any], Depends(get_current_claims)]
