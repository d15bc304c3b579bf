import pytest

from settings import Settings

_ENV_VARS = (
    "PAGEGEN_GEMINI_API_KEY",
    "PAGEGEN_OPENROUTER_API_KEY",
    "PAGEGEN_STRICT_BLOCK_TYPES",
    "PAGEGEN_DEFAULT_PROVIDER",
    "PAGEGEN_DEFAULT_MODEL",
    "PAGEGEN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer credentials out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with fake keys for both providers. No real API calls are made in unit tests."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key-not-used",
        openrouter_api_key="test-openrouter-key-not-used",
        output_dir=tmp_path / "output",
    )


@pytest.fixture
def unconfigured_settings(tmp_path) -> Settings:
    """Settings with no provider credentials at all."""
    return Settings(_env_file=None, output_dir=tmp_path / "output")
