import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Generator
from urllib.parse import parse_qsl, urlsplit

import orjson
import pytest

from binance_trader.client import ExchangeClient
from binance_trader.trading import TradingFacade
from tests.mock_executors import MockHttpExecutor, MockOutputNotExhausted

DATA_DIR = Path(__file__).parent.joinpath("data")

API_URL = "https://testnet.gaierror.xyz"
API_KEY = "FOO-API-KEY"
API_SECRET = "BAR-API-SECRET"
FIXED_TIMESTAMP = 1700000000000

log = logging.getLogger(__name__)


def query_params(url: str) -> list[tuple[str, str]]:
    """Return the ordered query parameters of a URL."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def url_path(url: str) -> str:
    return urlsplit(url).path


@pytest.fixture
def mock_http_client() -> Generator[tuple[ExchangeClient, MockHttpExecutor], None, None]:
    mock_http = MockHttpExecutor()
    client = ExchangeClient(
        api_key=API_KEY,
        api_secret=API_SECRET,
        # does not matter as it will not be used with the mock in place
        api_url=API_URL,
        # replace real network requests with our mock
        executor=mock_http,
        clock=lambda: FIXED_TIMESTAMP,
    )

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


@pytest.fixture
def mock_trader(
    mock_http_client: tuple[ExchangeClient, MockHttpExecutor],
) -> tuple[TradingFacade, MockHttpExecutor]:
    client, mock_http = mock_http_client
    return (TradingFacade(client), mock_http)


@lru_cache(maxsize=1)
def data_files() -> list[Path]:
    return list(DATA_DIR.iterdir())


@lru_cache(maxsize=None)
def json_data_files(name: str) -> list[Path]:
    return list(
        sorted(
            path
            for path in data_files()
            if path.match(f"*/{name}.*.json", case_sensitive=True)
        )
    )


def load_json(name: str, case: str | None = None) -> Any:
    case_part = f"{case}." if case else ""
    path = DATA_DIR / f"{name}.{case_part}json"
    with open(path, "rb") as fh:
        return orjson.loads(fh.read())


def load_json_all_cases(name: str) -> list[tuple[Any, Path]]:
    """Load all json payloads for a given base name (case0, case1, ...)."""
    results = []
    for path in json_data_files(name):
        with open(path, "rb") as fh:
            payload = orjson.loads(fh.read())
            results.append((payload, path))
    return results
