import pytest

import main
from config import settings
from core.database import Database


class TestBuildDatabase:

    def test_sqlite_backend(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "STORAGE_BACKEND", "sqlite")
        monkeypatch.setattr(settings, "DB_PATH", str(tmp_path / "deals.db"))

        db = main.build_database()

        assert isinstance(db, Database)
        assert db.db_path == str(tmp_path / "deals.db")

    def test_supabase_backend_without_credentials(self, monkeypatch):
        monkeypatch.setattr(settings, "STORAGE_BACKEND", "supabase")
        monkeypatch.setattr(settings, "SUPABASE_URL", "")
        monkeypatch.setattr(settings, "SUPABASE_KEY", "")

        with pytest.raises(ValueError):
            main.build_database()

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setattr(settings, "STORAGE_BACKEND", "mongo")

        with pytest.raises(ValueError, match="Unknown STORAGE_BACKEND"):
            main.build_database()
