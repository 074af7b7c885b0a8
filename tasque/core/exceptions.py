# tasque/core/exceptions.py
# Erreurs métier typées, traduites en réponses JSON par `exception_handlers`.

from __future__ import annotations


class TasqueError(Exception):
    """Erreur de base de l'application.

    Attributes:
        status_code (int): Code HTTP renvoyé au client.
        body_key (str): Clé JSON portant le message (`error` ou `message`).
        message (str): Message lisible.
    """

    status_code: int = 500
    body_key: str = "error"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {self.body_key: self.message}


class Unauthenticated(TasqueError):
    """Jeton absent, mal formé, expiré ou signé avec un autre secret."""

    status_code = 401
    body_key = "message"
    default_message = "unauthorized access"


class Forbidden(TasqueError):
    """Ressource appartenant à un autre utilisateur."""

    status_code = 403
    body_key = "message"
    default_message = "forbidden access"


class InvalidArgument(TasqueError):
    status_code = 400
    default_message = "invalid argument"


class NotFound(TasqueError):
    status_code = 404
    default_message = "not found"


class InternalFailure(TasqueError):
    """Défaut du store (Mongo) pendant une opération."""

    status_code = 500
