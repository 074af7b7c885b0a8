# tasque/models/task.py
# Schémas des tâches : document Mongo, payloads de création/mise à jour et résultats.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tasque.core.bson_utils import MongoBaseModel, PyObjectId


class Task(MongoBaseModel):
    """Document Mongo « Task ».

    Description:
        Tâche d'un utilisateur, rangée dans une catégorie. `order` est dense et commence à 0
        à l'intérieur d'une catégorie ; il n'a pas de sens d'une catégorie à l'autre.
        Les valeurs sont renvoyées telles que stockées : un document écrit par un autre client
        (ex. `order: "2a"`) ne doit pas empêcher la liste.

    Attributes:
        email (Any): Propriétaire (clé de partition des listes).
        title (Any): Titre.
        description (Any): Description libre.
        category (Any): Catégorie (espace d'ordonnancement).
        order (Any): Position dans la catégorie (entier attendu).
    """

    email: Any = None
    title: Any = None
    description: Any = None
    category: Any = None
    order: Any = None


class TaskCreate(BaseModel):
    """Entrée de création. Aucune validation : les valeurs du client sont stockées telles quelles."""

    email: Any = None
    title: Any = None
    description: Any = None
    category: Any = None
    order: Any = None

    model_config = ConfigDict(extra="allow")


class TaskUpdate(BaseModel):
    """Entrée PATCH : remplace exactement ces quatre champs (absent = null), sans validation."""

    title: Any = None
    description: Any = None
    category: Any = None
    order: Any = None


# Résultats (mêmes clés que le driver Mongo côté client historique)

class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: PyObjectId | None = None


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: PyObjectId | None = None
    upsertedCount: int = 0


class ReorderResult(BaseModel):
    matchedCount: int = Field(0, description="Tâches trouvées parmi les ids soumis")
    modifiedCount: int = Field(0, description="Tâches dont l'ordre a réellement changé")
