# tasque/services/task_store.py
# Accès à la collection `tasks` : lecture par propriétaire, insertion, suppression,
# mise à jour de champs et réordonnancement en un seul bulk_write.

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, UpdateOne

from tasque.db.mongodb import get_collection

# Tri contractuel des listes : catégorie, puis ordre, puis _id pour départager
OWNER_SORT = [("category", ASCENDING), ("order", ASCENDING), ("_id", ASCENDING)]


class TaskStore:
    """Contrat de persistance consommé par `TaskService`.

    Description:
        Enveloppe fine autour de la collection Motor. `owner_email`, s'il est fourni,
        est ajouté à chaque filtre par id (filtre de propriété optionnel).

    Args:
        db (AsyncIOMotorDatabase): Base injectée par FastAPI.
        collection_name (str): Nom de la collection (défaut "tasks").
    """

    def __init__(self, db, collection_name: str = "tasks"):
        self.coll = get_collection(db, collection_name)

    @staticmethod
    def _id_filter(task_id: ObjectId, owner_email: Optional[str]) -> dict[str, Any]:
        flt: dict[str, Any] = {"_id": task_id}
        if owner_email is not None:
            flt["email"] = owner_email
        return flt

    async def find_by_owner(self, email: str) -> list[dict[str, Any]]:
        cursor = self.coll.find({"email": email}, sort=OWNER_SORT)
        return await cursor.to_list(length=None)

    async def insert(self, document: dict[str, Any]) -> ObjectId:
        res = await self.coll.insert_one(document)
        return res.inserted_id

    async def delete_by_id(self, task_id: ObjectId, owner_email: Optional[str] = None) -> int:
        res = await self.coll.delete_one(self._id_filter(task_id, owner_email))
        return res.deleted_count

    async def update_fields(
        self, task_id: ObjectId, fields: dict[str, Any], owner_email: Optional[str] = None
    ) -> Tuple[int, int]:
        """Applique `$set` sur `fields` et retourne (matched, modified)."""
        res = await self.coll.update_one(self._id_filter(task_id, owner_email), {"$set": fields})
        return res.matched_count, res.modified_count

    async def bulk_set_order(
        self, assignments: Iterable[Tuple[ObjectId, int]], owner_email: Optional[str] = None
    ) -> Tuple[int, int]:
        """Affecte `order` à chaque id en un seul aller-retour.

        Description:
            Construit un `UpdateOne` par couple (id, ordre) et les soumet ensemble via
            `bulk_write`. Pas d'atomicité multi-documents : chaque mise à jour est atomique
            individuellement, le lot est seulement envoyé d'un bloc.

        Args:
            assignments (Iterable[tuple[ObjectId, int]]): Couples (id, nouvel ordre).
            owner_email (str | None): Filtre de propriété optionnel.

        Returns:
            tuple[int, int]: (matched_count, modified_count) agrégés.
        """
        ops = [
            UpdateOne(self._id_filter(task_id, owner_email), {"$set": {"order": order}})
            for task_id, order in assignments
        ]
        if not ops:
            return 0, 0

        res = await self.coll.bulk_write(ops, ordered=True)
        return res.matched_count, res.modified_count
