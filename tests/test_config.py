"""Tests for settings: secret validation and derived values."""
import pytest

from catalog.core.config import Settings

STRONG_SECRET = "s" * 32


def _settings(**overrides):
    values = {"jwt_secret_key": STRONG_SECRET, "db_password": "hunter2-but-longer"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestValidateSecrets:
    def test_strong_secrets_pass(self):
        _settings().validate_secrets()

    def test_default_jwt_secret_rejected(self):
        with pytest.raises(ValueError, match="jwt_secret_key must be changed"):
            _settings(jwt_secret_key="CHANGE_ME").validate_secrets()

    def test_short_jwt_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 characters"):
            _settings(jwt_secret_key="s" * 31).validate_secrets()

    def test_default_db_password_rejected(self):
        with pytest.raises(ValueError, match="db_password must be changed"):
            _settings(db_password="CHANGE_ME").validate_secrets()


class TestDerivedValues:
    def test_database_url(self):
        s = _settings(db_user="u", db_password="p", db_host="h", db_port=5433, db_name="n")
        assert s.database_url == "postgresql+asyncpg://u:p@h:5433/n"

    def test_database_url_with_ssl(self):
        assert _settings(db_ssl=True).database_url.endswith("?ssl=require")

    def test_cors_origins_split_and_trimmed(self):
        s = _settings(cors_allowed_origins=" http://a.test , ,http://b.test")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_request_id_header_default(self):
        assert _settings().request_id_header == "X-Request-ID"
