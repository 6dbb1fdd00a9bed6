import pytest

from binance_trader.env_setup import setup_environment
from binance_trader.errors import MissingCredentialsError
from binance_trader.helpers import DEFAULT_API_URL, MAINNET_API_URL


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    # run from an empty directory so no .env file is picked up
    monkeypatch.chdir(tmp_path)
    for name in (
        "ENVIRONMENT",
        "BINANCE_API_URL_TESTNET",
        "BINANCE_API_KEY_TESTNET",
        "BINANCE_API_SECRET_TESTNET",
        "BINANCE_API_URL_PRODUCTION",
        "BINANCE_API_KEY_PRODUCTION",
        "BINANCE_API_SECRET_PRODUCTION",
    ):
        # setting first makes monkeypatch undo whatever load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_testnet_is_default(monkeypatch):
    monkeypatch.setenv("BINANCE_API_KEY_TESTNET", "key")
    monkeypatch.setenv("BINANCE_API_SECRET_TESTNET", "secret")

    assert setup_environment() == (DEFAULT_API_URL, "key", "secret")


def test_production_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Production")
    monkeypatch.setenv("BINANCE_API_KEY_PRODUCTION", "prod-key")
    monkeypatch.setenv("BINANCE_API_SECRET_PRODUCTION", "prod-secret")

    assert setup_environment() == (MAINNET_API_URL, "prod-key", "prod-secret")


def test_api_url_override(monkeypatch):
    monkeypatch.setenv("BINANCE_API_URL_TESTNET", "http://localhost:8080")
    monkeypatch.setenv("BINANCE_API_KEY_TESTNET", "key")
    monkeypatch.setenv("BINANCE_API_SECRET_TESTNET", "secret")

    api_url, _, _ = setup_environment()

    assert api_url == "http://localhost:8080"


def test_dotenv_file_is_loaded(tmp_path):
    tmp_path.joinpath(".env").write_text(
        "BINANCE_API_KEY_TESTNET=file-key\nBINANCE_API_SECRET_TESTNET=file-secret\n"
    )

    _, api_key, api_secret = setup_environment()

    assert (api_key, api_secret) == ("file-key", "file-secret")


@pytest.mark.parametrize(
    "variables, missing",
    [
        ({}, "BINANCE_API_KEY_TESTNET"),
        ({"BINANCE_API_KEY_TESTNET": "key"}, "BINANCE_API_SECRET_TESTNET"),
    ],
)
def test_missing_credentials(monkeypatch, variables, missing):
    for name, value in variables.items():
        monkeypatch.setenv(name, value)

    with pytest.raises(MissingCredentialsError) as exc_info:
        setup_environment()

    assert missing in str(exc_info.value)
