"""
Pytest configuration and fixtures.
"""
from typing import Iterator

import pytest

from stripe_objects import Stripe
from stripe_objects.config import Settings, get_settings
from stripe_objects.testing import FakeStripeClient

TEST_WEBHOOK_SECRET = "whsec_test_fake_secret"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line("markers", "integration: tests spanning several components")


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep each test's environment from leaking through the cached settings."""
    for name in (
        "STRIPE_SECRET_KEY",
        "STRIPE_PUBLISHABLE_KEY",
        "STRIPE_WEBHOOK_SECRET",
        "STRIPE_API_VERSION",
        "LOG_LEVEL",
        "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        _env_file=None,
        stripe_secret_key="sk_test_fake_key_for_testing",
        stripe_publishable_key="pk_test_fake_key_for_testing",
        stripe_webhook_secret=TEST_WEBHOOK_SECRET,
        app_name="stripe-objects-test",
        app_env="test",
        log_level="DEBUG",
    )


@pytest.fixture
def fake_stripe() -> FakeStripeClient:
    """Fresh fake client with nothing registered."""
    return FakeStripeClient()


@pytest.fixture
def stripe_facade(fake_stripe: FakeStripeClient) -> Stripe:
    """Facade whose services all talk to ``fake_stripe``."""
    return Stripe(client=fake_stripe)
