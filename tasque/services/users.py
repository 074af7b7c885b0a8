# tasque/services/users.py
# Inscription : un utilisateur par email, sans authentification.

from __future__ import annotations

from pymongo.errors import DuplicateKeyError, PyMongoError

from tasque.core.exceptions import InternalFailure
from tasque.core.logging_config import get_loggers
from tasque.db.mongodb import get_collection
from tasque.models.user import UserCreateResult, UserIn

USER_EXISTS = "User already exists!"


class UserService:
    def __init__(self, db):
        self.coll = get_collection(db, "users")
        self.logger, self.error_logger = get_loggers()

    async def create_user(self, payload: UserIn) -> UserCreateResult:
        """Crée l'utilisateur s'il n'existe pas déjà.

        Description:
            Recherche par email ; si trouvé, renvoie le message historique avec
            `insertedId = None`. L'index unique sur `email` couvre la course entre deux
            inscriptions simultanées (DuplicateKeyError traité comme « existe déjà »).

        Args:
            payload (UserIn): Email et champs libres.

        Returns:
            UserCreateResult: Résultat d'insertion ou message d'existence.
        """
        document = payload.model_dump()
        try:
            existing = await self.coll.find_one({"email": payload.email}, projection={"_id": 1})
            if existing:
                return UserCreateResult(message=USER_EXISTS, insertedId=None)
            res = await self.coll.insert_one(document)
        except DuplicateKeyError:
            return UserCreateResult(message=USER_EXISTS, insertedId=None)
        except PyMongoError as e:
            self.error_logger.error("Failed to create user: %s", e, exc_info=e)
            raise InternalFailure("Failed to create user") from e

        self.logger.info("User %s created", payload.email)
        return UserCreateResult(acknowledged=True, insertedId=res.inserted_id)
