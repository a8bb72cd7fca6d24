"""Unit tests for BasispoortSettings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from basispoort.sync.core import BasispoortSettings, Environment

ENV_VARS = [
    "IDENTITY_CERT_FILE",
    "ENVIRONMENT",
    "CONNECT_TIMEOUT",
    "TIMEOUT",
    "HOSTED_LICENSE_PROVIDER_IDENTITY_CODE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings variables from the process environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestBasispoortSettings:
    """Test settings loading."""

    def test_from_environment(self, monkeypatch):
        """Test settings are read from environment variables."""
        monkeypatch.setenv("IDENTITY_CERT_FILE", "/etc/basispoort/identity.pem")
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("HOSTED_LICENSE_PROVIDER_IDENTITY_CODE", "LIKA-1")

        settings = BasispoortSettings(_env_file=None)

        assert settings.identity_cert_file == Path("/etc/basispoort/identity.pem")
        assert settings.environment is Environment.STAGING
        assert settings.hosted_license_provider_identity_code == "LIKA-1"

    def test_defaults(self, monkeypatch):
        """Test timeout defaults."""
        monkeypatch.setenv("IDENTITY_CERT_FILE", "identity.pem")
        monkeypatch.setenv("ENVIRONMENT", "test")

        settings = BasispoortSettings(_env_file=None)

        assert settings.connect_timeout == 10.0
        assert settings.timeout == 30.0
        assert settings.hosted_license_provider_identity_code is None

    def test_from_env_file(self, tmp_path):
        """Test settings are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("IDENTITY_CERT_FILE=identity.pem\nENVIRONMENT=production\nTIMEOUT=5\n")

        settings = BasispoortSettings(_env_file=env_file)

        assert settings.environment is Environment.PRODUCTION
        assert settings.timeout == 5.0

    def test_environment_is_exact(self, monkeypatch):
        """Test environment tags are not case folded."""
        monkeypatch.setenv("IDENTITY_CERT_FILE", "identity.pem")
        monkeypatch.setenv("ENVIRONMENT", "Test")

        with pytest.raises(ValidationError, match="is not a valid environment string"):
            BasispoortSettings(_env_file=None)

    def test_missing_required(self):
        """Test certificate file and environment are required."""
        with pytest.raises(ValidationError):
            BasispoortSettings(_env_file=None)

    def test_timeouts_must_be_positive(self, monkeypatch):
        """Test non-positive timeouts are rejected."""
        monkeypatch.setenv("IDENTITY_CERT_FILE", "identity.pem")
        monkeypatch.setenv("ENVIRONMENT", "test")
        monkeypatch.setenv("CONNECT_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            BasispoortSettings(_env_file=None)

    def test_environment_instance_accepted(self):
        """Test Environment members pass through unchanged."""
        settings = BasispoortSettings(
            _env_file=None, identity_cert_file="identity.pem", environment=Environment.TEST
        )
        assert settings.environment is Environment.TEST
