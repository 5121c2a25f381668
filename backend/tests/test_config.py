"""
Settings and commit timestamp tests
"""
import pytest
from datetime import datetime, timezone

from hopper.config import Settings
from hopper.exceptions import ConfigurationError
from hopper.models.types import SPANNER_PENDING_COMMIT_TIMESTAMP, commit_timestamp


class TestSettings:
    """Tests for Settings.sqlalchemy_url"""

    def test_url_from_spanner_coordinates(self):
        settings = Settings(
            spanner_project_id="test-project",
            spanner_instance="test-instance",
            spanner_database="test-db",
            pgadapter_host="pgadapter",
            pgadapter_port=5433,
        )
        assert settings.sqlalchemy_url == (
            "postgresql+psycopg2://pgadapter:5433/"
            "projects/test-project/instances/test-instance/databases/test-db"
        )

    def test_explicit_database_url_wins(self):
        settings = Settings(database_url="sqlite://", spanner_project_id="p")
        assert settings.sqlalchemy_url == "sqlite://"

    def test_missing_coordinates(self, monkeypatch):
        for name in ("SPANNER_PROJECT_ID", "SPANNER_INSTANCE", "SPANNER_DATABASE", "DATABASE_URL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(spanner_project_id="p", _env_file=None)

        with pytest.raises(ConfigurationError) as exc_info:
            settings.sqlalchemy_url
        assert "SPANNER_INSTANCE" in str(exc_info.value)
        assert "SPANNER_DATABASE" in str(exc_info.value)

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("SPANNER_PROJECT_ID", "env-project")
        monkeypatch.setenv("PORT", "9090")
        settings = Settings(_env_file=None)
        assert settings.spanner_project_id == "env-project"
        assert settings.port == 9090


class TestCommitTimestamp:
    """Tests for commit_timestamp()"""

    def test_spanner_source(self):
        value = commit_timestamp("spanner")
        assert str(value) == SPANNER_PENDING_COMMIT_TIMESTAMP

    def test_client_source(self):
        before = datetime.now(timezone.utc)
        value = commit_timestamp("client")
        assert before <= value <= datetime.now(timezone.utc)

    def test_unknown_source(self):
        with pytest.raises(ValueError):
            commit_timestamp("nope")
