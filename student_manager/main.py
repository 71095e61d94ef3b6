"""
Point d'entrée du gestionnaire d'élèves en console.
Démarrage : student-manager [--database-url URL] [--log-level LEVEL]
"""

import logging
import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from student_manager.cli.controller import MainController
from student_manager.cli.terminal import Terminal
from student_manager.config import Settings, settings
from student_manager.database import build_engine, build_session_factory, check_connection
from student_manager.services.record_store import RecordStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: Settings) -> None:
    """Journal vers LOG_FILE si défini, sinon vers stderr."""
    logging.basicConfig(
        level=cfg.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        filename=cfg.LOG_FILE,
        force=True,
    )


@click.command()
@click.option("--database-url", default=None, help="URL SQLAlchemy de la base (remplace DATABASE_URL).")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Niveau de journalisation (remplace LOG_LEVEL).",
)
def cli(database_url, log_level):
    """Gestion des élèves via les procédures stockées du serveur."""
    overrides = {}
    if database_url:
        overrides["DATABASE_URL"] = database_url
    if log_level:
        overrides["LOG_LEVEL"] = log_level
    cfg = settings.model_copy(update=overrides)
    configure_logging(cfg)

    engine = build_engine(cfg)
    db = build_session_factory(engine)()
    try:
        try:
            check_connection(db)
        except SQLAlchemyError as exc:
            logger.error("Connexion à la base impossible : %s", exc)
            click.echo(f"Database connection failed: {exc}", err=True)
            sys.exit(1)
        click.echo("Database Connected Successfully!")

        MainController(RecordStore(db), Terminal()).run()
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    cli()
