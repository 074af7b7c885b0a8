from tasque.core.logging_config import get_loggers


async def check_mongodb(db) -> str:
    """
    Vérifie la connexion MongoDB

    Returns:
        "ok" si connecté, message d'erreur sinon
    """
    try:
        # Ping MongoDB
        await db.command("ping")
        return "ok"

    except Exception as e:
        _, error_logger = get_loggers()
        error_logger.error(f"MongoDB health check failed: {e}")
        return f"error: {str(e)}"
