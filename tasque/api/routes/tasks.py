# tasque/api/routes/tasks.py
# Routes des tâches (Bearer requis) : créer, lister par email, supprimer, modifier, réordonner.

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Path

from tasque.api.deps import TaskServiceDep
from tasque.core.exceptions import InvalidArgument
from tasque.models.task import (
    DeleteResult,
    InsertResult,
    ReorderResult,
    Task,
    TaskCreate,
    TaskUpdate,
    UpdateResult,
)
from tasque.services.tasks import REORDER_REQUIRED

router = APIRouter(tags=["tasks"])


@router.post(
    "/tasks",
    response_model=InsertResult,
    summary="Créer une tâche",
    description="Insère la tâche telle quelle (email du jeton si absent du payload).",
)
async def create_task(
    service: TaskServiceDep,
    payload: TaskCreate = Body(..., description="Champs de la tâche."),
):
    return await service.create(payload)


@router.get(
    "/tasks/{email}",
    response_model=list[Task],
    summary="Lister les tâches d’un utilisateur",
    description="Retourne les tâches de l’email, triées par **catégorie puis ordre**.",
)
async def list_tasks(
    service: TaskServiceDep,
    email: str = Path(..., description="Email du propriétaire."),
):
    """Lister les tâches d’un utilisateur.

    Args:
        service (TaskService): Service injecté (jeton vérifié).
        email (str): Email du propriétaire.

    Returns:
        list[Task]: Tâches ordonnées.
    """
    return await service.list_by_owner(email)


@router.delete(
    "/my-task/{task_id}",
    response_model=DeleteResult,
    summary="Supprimer une tâche",
    description="Un id inconnu renvoie `deletedCount: 0` (pas d’erreur).",
)
async def delete_task(
    service: TaskServiceDep,
    task_id: str = Path(..., description="Identifiant de la tâche."),
):
    return await service.delete_by_id(task_id)


@router.patch(
    "/my-task/{task_id}",
    response_model=UpdateResult,
    summary="Modifier une tâche",
    description=(
        "Remplace `title`, `description`, `category` et `order`.\n\n"
        "- 404 `{error: \"task not found\"}` si l’id n’existe pas\n"
        "- 500 en cas d’erreur base"
    ),
)
async def update_task(
    service: TaskServiceDep,
    task_id: str = Path(..., description="Identifiant de la tâche."),
    payload: TaskUpdate = Body(..., description="Nouvelles valeurs des quatre champs."),
):
    """Modifier une tâche.

    Args:
        service (TaskService): Service injecté.
        task_id (str): Identifiant de la tâche.
        payload (TaskUpdate): title, description, category, order.

    Returns:
        UpdateResult: Compteurs matched/modified.
    """
    return await service.update_by_id(task_id, payload)


@router.patch(
    "/reorder-tasks",
    response_model=ReorderResult,
    summary="Réordonner les tâches d’une catégorie",
    description=(
        "Reçoit `{category, orderedTaskIds}` : la position de chaque id devient son `order`.\n\n"
        "- Toutes les mises à jour partent en un seul bulk\n"
        "- 400 si `category` ou `orderedTaskIds` manque"
    ),
)
async def reorder_tasks(
    service: TaskServiceDep,
    payload: Any = Body(None, description="`{category, orderedTaskIds}`."),
):
    # Corps absent ou non-objet : même 400 que les champs manquants
    if not isinstance(payload, dict):
        raise InvalidArgument(REORDER_REQUIRED)
    return await service.reorder(payload.get("category"), payload.get("orderedTaskIds"))
