# tasque/api/routes/__init__.py

from .base import router as base_router
from .auth import router as auth_router
from .health import router as health_router
from .tasks import router as tasks_router

routers = [
    base_router,
    health_router,
    auth_router,
    tasks_router,
]
