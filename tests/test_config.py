"""
Tests de la configuration par variables d'environnement.
"""

from student_manager.config import Settings


def test_cles_de_configuration():
    assert set(Settings.model_fields) == {"DATABASE_URL", "DB_TIMEOUT_SECONDS", "LOG_LEVEL", "LOG_FILE"}


def test_valeurs_par_defaut(monkeypatch):
    for key in ("DATABASE_URL", "DB_TIMEOUT_SECONDS", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.DATABASE_URL.startswith("mysql+mysqlconnector://")
    assert cfg.DB_TIMEOUT_SECONDS is None
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.LOG_FILE is None


def test_timeout_lu_depuis_l_environnement(monkeypatch):
    monkeypatch.setenv("DB_TIMEOUT_SECONDS", "10")
    assert Settings(_env_file=None).DB_TIMEOUT_SECONDS == 10
