# tasque/db/mongodb.py
# Client MongoDB unique (créé au premier usage) et dépendances FastAPI d’accès à la base.

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from tasque.core.settings import get_settings

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """Retourne le client MongoDB partagé par tout le processus.

    Description:
        Le client est créé au premier appel à partir de `settings.mongodb_uri`. Motor ne
        se connecte réellement qu'à la première opération.

    Returns:
        AsyncIOMotorClient: Client asynchrone.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(get_settings().mongodb_uri)
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_database() -> AsyncIOMotorDatabase:
    """Dépendance FastAPI: base de données applicative (`settings.mongodb_db`)."""
    return get_client()[get_settings().mongodb_db]


def get_collection(db: AsyncIOMotorDatabase, name: str) -> AsyncIOMotorCollection:
    """Retourne une collection MongoDB par son nom.

    Description:
        Accède à `db[name]` et renvoie l'objet collection. Si la collection n'existe pas
        encore côté serveur, MongoDB la créera à la première insertion.

    Args:
        db (AsyncIOMotorDatabase): Base cible.
        name (str): Nom de la collection (ex. "users", "tasks").

    Returns:
        AsyncIOMotorCollection: Instance de collection MongoDB asynchrone.
    """
    return db[name]
