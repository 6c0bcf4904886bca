import pytest

from tests.app.helpers import make_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """
    Ensure each test starts without credentials leaking in from the shell.
    """
    for name in ("GOOGLE_SEARCH_API_KEY", "GOOGLE_CSE_ID", "PORT", "APP_ENV", "HOST"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def settings():
    return make_settings()
