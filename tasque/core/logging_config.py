"""Configuration du système de logging centralisé."""

import glob
import logging
import logging.handlers
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from rich.logging import RichHandler

from tasque.core.settings import get_settings


def setup_logging() -> tuple[logging.Logger, logging.Logger]:
    """Configure le système de logging avec rotation quotidienne.

    Returns:
        tuple: (logger_generic, logger_errors)
    """
    settings = get_settings()
    logs_dir = Path(settings.logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Nettoyage des logs anciens
    cleanup_old_logs(logs_dir, retention_days=settings.log_retention_days)

    # Format des logs
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Logger générique (INFO+)
    generic_logger = logging.getLogger("tasque.generic")
    generic_logger.setLevel(logging.INFO)

    if not generic_logger.handlers:  # Éviter les doublons
        generic_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "generic.log",
            when="midnight",
            interval=1,
            encoding="utf-8"
        )
        generic_handler.suffix = "%Y-%m-%d"
        generic_handler.setFormatter(formatter)
        generic_logger.addHandler(generic_handler)

        if settings.environment == "development":
            generic_logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))

    # Logger erreurs (ERROR+)
    error_logger = logging.getLogger("tasque.errors")
    error_logger.setLevel(logging.ERROR)

    if not error_logger.handlers:  # Éviter les doublons
        error_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "errors.log",
            when="midnight",
            interval=1,
            encoding="utf-8"
        )
        error_handler.suffix = "%Y-%m-%d"
        error_handler.setFormatter(formatter)
        error_logger.addHandler(error_handler)
        error_logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))

    return generic_logger, error_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> None:
    """Supprime les fichiers de rotation plus anciens que retention_days.

    Les fichiers tournés portent la date en suffixe (`generic.log.2026-01-31`).
    """
    cutoff_str = (datetime.now() - timedelta(days=retention_days)).strftime("%Y-%m-%d")

    patterns = [
        f"{logs_dir}/generic.log.*",
        f"{logs_dir}/errors.log.*",
    ]

    for pattern in patterns:
        for file_path in glob.glob(pattern):
            date_part = os.path.basename(file_path).rsplit(".", 1)[-1]
            try:
                datetime.strptime(date_part, "%Y-%m-%d")
            except ValueError:
                continue
            if date_part < cutoff_str:
                try:
                    os.remove(file_path)
                except OSError:
                    continue


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger]] = None


def get_loggers() -> tuple[logging.Logger, logging.Logger]:
    """Retourne les loggers configurés (singleton)."""
    global _loggers
    if _loggers is None:
        _loggers = setup_logging()
    return _loggers


def extract_user_data(claims: Optional[Dict[str, Any]] = None, request=None) -> Dict[str, Any]:
    """Extrait les données utilisateur pour le logging."""
    user_data = {}

    if claims and claims.get("email"):
        user_data["email"] = claims["email"]

    if request:
        # IP depuis FastAPI request
        if hasattr(request, 'client') and request.client:
            user_data["ip"] = request.client.host

        # User-Agent optionnel
        if hasattr(request, 'headers'):
            user_agent = request.headers.get("user-agent")
            if user_agent:
                user_data["user_agent"] = user_agent

    return user_data
