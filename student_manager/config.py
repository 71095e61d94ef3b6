"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (MySQL : les procédures stockées renvoient des jeux de résultats)
    DATABASE_URL: str = "mysql+mysqlconnector://root:@localhost:3306/test"

    # Délai max d'un appel au serveur, en secondes. None = pas de limite.
    DB_TIMEOUT_SECONDS: Optional[int] = None

    # Journalisation
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
