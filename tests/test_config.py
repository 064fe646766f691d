import pytest

from api.config import Settings

ENV_VARS = (
    "DATABASE_URL", "PGHOST", "PGPORT", "PGDATABASE", "PGUSER", "PGPASSWORD",
    "CORS_ORIGINS", "LOG_LEVEL", "APPLY_SCHEMA",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings(_env_file=None)
    assert s.database_url is None
    assert s.cors_origin_list == ["http://localhost:5173"]
    assert s.log_level == "INFO"
    assert s.apply_schema is False


def test_database_url_wins_over_pg_vars(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://me@db:5432/golf")
    monkeypatch.setenv("PGHOST", "elsewhere")
    assert Settings(_env_file=None).database_url == "postgresql://me@db:5432/golf"


def test_dsn_built_from_pg_vars(monkeypatch):
    monkeypatch.setenv("PGHOST", "db")
    monkeypatch.setenv("PGUSER", "golfer")
    monkeypatch.setenv("PGPASSWORD", "secret")
    monkeypatch.setenv("PGPORT", "5433")
    s = Settings(_env_file=None)
    assert s.database_url == "postgresql://golfer:secret@db:5433/quick_scorecard"


def test_env_parsing(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, https://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("APPLY_SCHEMA", "true")
    s = Settings(_env_file=None)
    assert s.cors_origin_list == ["http://a.test", "https://b.test"]
    assert s.log_level == "DEBUG"
    assert s.apply_schema is True


def test_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("DATABASE_URL=postgresql://file@db/golf\nUNRELATED=1\n")
    assert Settings(_env_file=env).database_url == "postgresql://file@db/golf"
