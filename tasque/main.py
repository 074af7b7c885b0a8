# tasque/main.py

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasque.api.routes import routers
from tasque.core.exception_handlers import register_exception_handlers
from tasque.core.logging_config import get_loggers
from tasque.core.settings import get_settings
from tasque.db.mongodb import close_client, get_database
from tasque.db.seed_indexes import ensure_indexes

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    logger, _ = get_loggers()
    if settings.ensure_indexes_on_startup:
        names = await ensure_indexes(get_database())
        logger.info("Indexes ensured: %s", ", ".join(names))
    logger.info("%s API started (%s)", settings.app_name, settings.environment)

    yield  # l'app tourne ici

    # --- shutdown ---
    close_client()


app = FastAPI(title="Tasque API", version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

for r in routers:
    app.include_router(r)


def run() -> None:
    """Point d'entrée `tasque` : lance uvicorn sur `settings.host:settings.port`."""
    uvicorn.run("tasque.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
