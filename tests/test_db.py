from sqlalchemy import text

from clarity.db import _normalize_database_url, build_engine


def test_sqlite_engine_enforces_foreign_keys():
    engine = build_engine("sqlite://")
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    engine.dispose()


def test_postgres_urls_use_psycopg_driver():
    assert _normalize_database_url("postgres://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
    assert _normalize_database_url("postgresql://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
    assert _normalize_database_url(" sqlite:///./clarity.db ") == "sqlite:///./clarity.db"
