# tasque/services/tasks.py
# Service des tâches : création, liste par propriétaire, suppression, mise à jour et réordonnancement.

from __future__ import annotations

from typing import Any, Optional

from pymongo.errors import PyMongoError

from tasque.core.bson_utils import to_object_id
from tasque.core.exceptions import Forbidden, InternalFailure, InvalidArgument, NotFound
from tasque.core.logging_config import get_loggers
from tasque.models.task import (
    DeleteResult,
    InsertResult,
    ReorderResult,
    Task,
    TaskCreate,
    TaskUpdate,
    UpdateResult,
)
from tasque.services.task_store import TaskStore

REORDER_REQUIRED = "category and orderedTaskIds are required"
UPDATABLE_FIELDS = ("title", "description", "category", "order")


class TaskService:
    """Opérations de niveau requête sur les tâches.

    Description:
        Chaque opération attend un ou deux appels au store. Toute erreur Mongo est journalisée
        puis remontée en `InternalFailure` ; la traduction HTTP est faite par les gestionnaires
        d'exceptions.

    Args:
        store (TaskStore): Accès à la collection `tasks`.
        claims (dict): Claims du jeton de l'appelant.
        enforce_ownership (bool): Restreint les opérations aux tâches de `claims["email"]`.
    """

    def __init__(self, store: TaskStore, claims: dict[str, Any], enforce_ownership: bool = False):
        self.store = store
        self.claims = claims
        self.enforce_ownership = enforce_ownership
        self.logger, self.error_logger = get_loggers()

    @property
    def caller_email(self) -> Optional[str]:
        email = self.claims.get("email")
        return email if isinstance(email, str) else None

    def _owner_filter(self) -> Optional[str]:
        # Sans email dans le jeton, le filtre ne peut rien matcher : on filtre sur "" plutôt que rien
        if not self.enforce_ownership:
            return None
        return self.caller_email or ""

    def _fail(self, message: str, exc: Exception) -> InternalFailure:
        self.error_logger.error("%s: %s", message, exc, exc_info=exc)
        return InternalFailure(message)

    async def create(self, payload: TaskCreate) -> InsertResult:
        """Insère une tâche pour l'appelant.

        Description:
            Aucune vérification d'unicité ni de forme. Si le payload ne porte pas d'email,
            celui du jeton est utilisé. Avec le filtre de propriété actif, l'email du jeton
            remplace toujours celui du payload.
        """
        document = payload.model_dump(exclude_none=True)
        if self.enforce_ownership or "email" not in document:
            if self.caller_email is not None:
                document["email"] = self.caller_email

        try:
            inserted_id = await self.store.insert(document)
        except PyMongoError as e:
            raise self._fail("Failed to create task", e) from e

        self.logger.info("Task %s created for %s", inserted_id, document.get("email"))
        return InsertResult(insertedId=inserted_id)

    async def list_by_owner(self, email: str) -> list[Task]:
        """Liste les tâches d'un email, triées par catégorie puis ordre."""
        if self.enforce_ownership and email != self.caller_email:
            raise Forbidden()

        try:
            docs = await self.store.find_by_owner(email)
        except PyMongoError as e:
            raise self._fail("Failed to fetch tasks", e) from e

        return [Task.model_validate(doc) for doc in docs]

    async def delete_by_id(self, task_id: str) -> DeleteResult:
        """Supprime une tâche. Un id inconnu ou mal formé donne `deletedCount == 0`."""
        oid = to_object_id(task_id)
        if oid is None:
            return DeleteResult(deletedCount=0)

        try:
            deleted = await self.store.delete_by_id(oid, owner_email=self._owner_filter())
        except PyMongoError as e:
            raise self._fail("Failed to delete task", e) from e

        if deleted:
            self.logger.info("Task %s deleted", oid)
        return DeleteResult(deletedCount=deleted)

    async def update_by_id(self, task_id: str, payload: TaskUpdate) -> UpdateResult:
        """Remplace title/description/category/order d'une tâche.

        Raises:
            NotFound: Aucun document ne correspond à l'id.
            InternalFailure: Erreur Mongo.
        """
        oid = to_object_id(task_id)
        if oid is None:
            raise NotFound("task not found")

        fields = payload.model_dump(include=set(UPDATABLE_FIELDS))
        try:
            matched, modified = await self.store.update_fields(oid, fields, owner_email=self._owner_filter())
        except PyMongoError as e:
            raise self._fail("Failed to update task", e) from e

        if matched == 0:
            raise NotFound("task not found")

        self.logger.info("Task %s updated (modified=%s)", oid, modified)
        return UpdateResult(matchedCount=matched, modifiedCount=modified)

    async def reorder(self, category: Any, ordered_task_ids: Any) -> ReorderResult:
        """Réordonne les tâches d'une catégorie.

        Description:
            La position de chaque id dans `ordered_task_ids` devient son `order` (0, 1, 2...).
            Toutes les mises à jour partent en un seul bulk_write. Resoumettre la même liste
            donne le même état final (opération idempotente).
            L'appartenance des ids à `category` n'est pas vérifiée.

        Args:
            category (Any): Catégorie visée, chaîne non vide.
            ordered_task_ids (Any): Liste d'ids dans le nouvel ordre.

        Returns:
            ReorderResult: Compteurs matched/modified agrégés.

        Raises:
            InvalidArgument: Catégorie vide, liste absente ou id mal formé.
            InternalFailure: Erreur Mongo.
        """
        if not isinstance(category, str) or not category or not isinstance(ordered_task_ids, list):
            raise InvalidArgument(REORDER_REQUIRED)

        assignments = []
        for index, raw_id in enumerate(ordered_task_ids):
            oid = to_object_id(raw_id)
            if oid is None:
                raise InvalidArgument(f"invalid task id at index {index}")
            assignments.append((oid, index))

        try:
            matched, modified = await self.store.bulk_set_order(assignments, owner_email=self._owner_filter())
        except PyMongoError as e:
            raise self._fail("Failed to reorder tasks", e) from e

        self.logger.info(
            "Reordered %d task(s) in category %r (matched=%d, modified=%d)",
            len(assignments), category, matched, modified,
        )
        return ReorderResult(matchedCount=matched, modifiedCount=modified)
