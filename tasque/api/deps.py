# tasque/api/deps.py
# Dépendances FastAPI : le handle de base est injecté dans chaque service (pas de capture globale).

from typing import Annotated

from fastapi import Depends

from tasque.core.security import CurrentClaims
from tasque.core.settings import get_settings
from tasque.db.mongodb import get_database
from tasque.services.task_store import TaskStore
from tasque.services.tasks import TaskService
from tasque.services.users import UserService


def get_task_store(db=Depends(get_database)) -> TaskStore:
    return TaskStore(db)


def get_task_service(
    claims: CurrentClaims,
    store: TaskStore = Depends(get_task_store),
) -> TaskService:
    """Service des tâches pour l'appelant authentifié (401 sinon)."""
    return TaskService(store, claims, enforce_ownership=get_settings().enforce_task_ownership)


def get_user_service(db=Depends(get_database)) -> UserService:
    return UserService(db)


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
