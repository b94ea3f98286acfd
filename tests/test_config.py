from app.config import _env_bool, _env_int, _env_log_level, _resolve_database_url


def test_env_int_defaults_and_clamps(monkeypatch):
    monkeypatch.delenv("SEED_MAX_WORKERS", raising=False)
    assert _env_int("SEED_MAX_WORKERS", 8, 1) == 8

    monkeypatch.setenv("SEED_MAX_WORKERS", "not-a-number")
    assert _env_int("SEED_MAX_WORKERS", 8, 1) == 8

    monkeypatch.setenv("SEED_MAX_WORKERS", "0")
    assert _env_int("SEED_MAX_WORKERS", 8, 1) == 1

    monkeypatch.setenv("BCRYPT_ROUNDS", "99")
    assert _env_int("BCRYPT_ROUNDS", 10, 4, 31) == 31


def test_env_bool(monkeypatch):
    monkeypatch.setenv("DATABASE_ECHO", "yes")
    assert _env_bool("DATABASE_ECHO", False) is True

    monkeypatch.setenv("DATABASE_ECHO", "maybe")
    assert _env_bool("DATABASE_ECHO", False) is False


def test_database_url_prefers_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.sqlite")
    monkeypatch.setenv("POSTGRES_URL", "postgresql+psycopg://u:p@db/app")
    assert _resolve_database_url() == "sqlite:///other.sqlite"

    monkeypatch.delenv("DATABASE_URL")
    assert _resolve_database_url() == "postgresql+psycopg://u:p@db/app"

    monkeypatch.delenv("POSTGRES_URL")
    assert _resolve_database_url() == "sqlite:///db.sqlite"


def test_log_level_falls_back_on_unknown_names(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert _env_log_level("LOG_LEVEL", "INFO") == "DEBUG"

    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert _env_log_level("LOG_LEVEL", "INFO") == "INFO"

    monkeypatch.delenv("LOG_LEVEL")
    assert _env_log_level("LOG_LEVEL", "INFO") == "INFO"
