import pytest


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's AKAMAI_* variables out of the tests."""
    for name in ("AKAMAI_HOST", "AKAMAI_ACCOUNT_KEY", "AKAMAI_CLIENT_TOKEN",
                 "AKAMAI_CLIENT_SECRET", "AKAMAI_ACCESS_TOKEN", "AKAMAI_MAX_BODY"):
        monkeypatch.delenv(name, raising=False)
