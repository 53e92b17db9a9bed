import pytest

from stringcipher.cipher import reset_default_cipher
from stringcipher.config import KEY_ENV, MODE_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any .env file."""
    # setenv first so variables loaded from a .env during the test are
    # removed again on teardown; chdir keeps the .env lookup inside tmp_path
    for name in (KEY_ENV, MODE_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_default_cipher()
    yield
    reset_default_cipher()


@pytest.fixture
def key():
    return "0123456789abcdef0123456789abcdef"
