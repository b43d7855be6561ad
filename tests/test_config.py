"""Configuration loading: flags over environment over .env over defaults."""

import pytest

from spreaker_cli.config import Config, load_config
from spreaker_cli.core.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from spreaker_cli.core.errors import ValidationError

pytestmark = pytest.mark.usefixtures("isolated_env")


def test_defaults():
    config = load_config()

    assert config.token == ""
    assert config.api_url == DEFAULT_BASE_URL
    assert config.api_version == "v2"
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.output_format is None
    assert config.default_show_id == 0


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("SPREAKER_TOKEN", "env-token")
    monkeypatch.setenv("SPREAKER_API_URL", "http://localhost:9000/")
    monkeypatch.setenv("SPREAKER_TIMEOUT", "5")
    monkeypatch.setenv("SPREAKER_OUTPUT", "JSON")
    monkeypatch.setenv("SPREAKER_DEFAULT_SHOW_ID", "42")

    config = load_config()

    assert config.token == "env-token"
    assert config.api_url == "http://localhost:9000"
    assert config.timeout == 5.0
    assert config.output_format == "json"
    assert config.default_show_id == 42


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("SPREAKER_TOKEN", "env-token")
    monkeypatch.setenv("SPREAKER_TIMEOUT", "5")

    config = load_config(token="flag-token", timeout=2.5, output_format="plain")

    assert config.token == "flag-token"
    assert config.timeout == 2.5
    assert config.output_format == "plain"


def test_dotenv_file_is_loaded(isolated_env):
    (isolated_env / ".env").write_text("SPREAKER_TOKEN=from-dotenv\nSPREAKER_DEFAULT_SHOW_ID=7\n")

    config = load_config()

    assert config.token == "from-dotenv"
    assert config.default_show_id == 7


def test_environment_wins_over_dotenv(monkeypatch, isolated_env):
    (isolated_env / ".env").write_text("SPREAKER_TOKEN=from-dotenv\n")
    monkeypatch.setenv("SPREAKER_TOKEN", "from-env")

    assert load_config().token == "from-env"


@pytest.mark.parametrize(
    ("name", "value"),
    [("SPREAKER_TIMEOUT", "soon"), ("SPREAKER_TIMEOUT", "0"), ("SPREAKER_DEFAULT_SHOW_ID", "abc"), ("SPREAKER_OUTPUT", "xml")],
)
def test_malformed_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        load_config()


def test_client_config_and_masking():
    config = Config(token="abcdef123456", api_url="http://localhost", timeout=3.0)

    client_config = config.client_config()

    assert client_config.bearer_token == "abcdef123456"
    assert client_config.base_url == "http://localhost"
    assert client_config.timeout == 3.0
    assert config.to_dict()["token"] == "********3456"
    assert Config(token="abc").masked_token() == "***"
