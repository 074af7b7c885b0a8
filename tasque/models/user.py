# tasque/models/user.py
# Schémas utilisateur : payload d’inscription, résultat d’insertion et jeton.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tasque.core.bson_utils import PyObjectId


class UserIn(BaseModel):
    """Entrée d’inscription.

    Attributes:
        email (str): Identifiant unique de l'utilisateur. Les autres champs sont stockés tels quels.
    """

    email: str

    model_config = ConfigDict(extra="allow")


class UserCreateResult(BaseModel):
    """Résultat d'inscription.

    Attributes:
        acknowledged (bool | None): Présent si l'insertion a eu lieu.
        insertedId (PyObjectId | None): Id créé, None si l'utilisateur existait déjà.
        message (str | None): « User already exists! » le cas échéant.
    """

    acknowledged: bool | None = None
    insertedId: PyObjectId | None = None
    message: str | None = None


class TokenResponse(BaseModel):
    token: str
