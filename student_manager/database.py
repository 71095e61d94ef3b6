"""
Configuration de la connexion à la base de données MySQL.
Le moteur et la session sont créés une seule fois au démarrage puis passés
explicitement aux composants (aucune connexion globale).
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from student_manager.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Crée le moteur SQLAlchemy. Le timeout optionnel est transmis au driver MySQL."""
    connect_args = {}
    if settings.DB_TIMEOUT_SECONDS:
        connect_args["connection_timeout"] = settings.DB_TIMEOUT_SECONDS
    return create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(db: Session) -> None:
    """Vérifie que le serveur répond. Laisse remonter l'erreur du driver sinon."""
    db.execute(text("SELECT 1"))
    logger.info("Connexion à la base de données établie.")
