# tasque/core/settings.py
# Configuration de l'application (variables d'environnement / fichier .env).

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "Tasque"
    api_version: str = "0.1.0"
    environment: str = "development"  # or "production"

    # === MongoDB ===
    mongodb_user: str
    mongodb_password: str
    mongodb_uri_tpl: str
    mongodb_db: str = "TasqueDB"

    # === JWT ===
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60  # 1 hour

    # === HTTP ===
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # === LOGS ===
    logs_dir: str = "logs"
    log_retention_days: int = 30

    # === TASKS ===
    ensure_indexes_on_startup: bool = True
    # Filtre les requêtes sur l'email du token (désactivé = comportement historique)
    enforce_task_ownership: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def mongodb_uri(self) -> str:
        """Build the full MongoDB URI from template."""
        return self.mongodb_uri_tpl.replace("[[MONGODB_USER]]", self.mongodb_user)\
                                   .replace("[[MONGODB_PASSWORD]]", self.mongodb_password)


@lru_cache
def get_settings() -> Settings:
    """Retourne l'instance unique des settings (chargée au premier appel)."""
    return Settings()
