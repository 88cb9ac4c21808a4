import pytest

from wordle_game.core.env import KNOWN_KEYS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep a developer's .env and WORDLE_* variables out of the tests."""
    for key in KNOWN_KEYS + ["DOTENV_PATH"]:
        # setenv first so monkeypatch also undoes whatever load_dotenv writes
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
