"""
Unit tests for startup configuration checks.
"""

import pytest

from pharmalink.config.settings import Settings
from pharmalink.core.lifecycle import configuration_warnings


@pytest.mark.unit
class TestConfigurationWarnings:
    def test_missing_push_credentials(self):
        warnings = configuration_warnings(Settings(ENVIRONMENT="development", FCM_PROJECT_ID=None))

        assert any("push notifications disabled" in w for w in warnings)

    def test_default_jwt_secret_outside_development(self):
        settings = Settings(ENVIRONMENT="production", DEBUG=False, IDENTITY_JWT_SECRET="dev-only-secret")

        assert any("IDENTITY_JWT_SECRET" in w for w in configuration_warnings(settings))

    def test_clean_production_config(self):
        settings = Settings(
            ENVIRONMENT="production",
            DEBUG=False,
            IDENTITY_JWT_SECRET="a-real-secret",
            FCM_PROJECT_ID="pharmalink",
            FCM_ACCESS_TOKEN="token",
        )

        assert configuration_warnings(settings) == []
