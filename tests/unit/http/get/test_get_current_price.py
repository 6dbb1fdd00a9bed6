from decimal import Decimal

import pytest

from binance_trader.errors import DeserializationError
from binance_trader.executors.interface import HttpResponse
from tests.mock_executors import MockSuccessfulOutput
from tests.unit.conftest import API_URL, load_json_all_cases


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.ticker_price"))
async def test_get_current_price(mock_http_client, test_data):
    payload, path = test_data
    client, mock_http = mock_http_client
    symbol = payload["symbol"]

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=HttpResponse(status=200, body=payload),
            call_validation=lambda call: call.function_name == "get"
            and call.arg_pack
            == (f"{API_URL}/fapi/v1/ticker/price?symbol={symbol}", {}),
        )
    )

    price = await client.get_current_price(symbol)

    assert price == Decimal(payload["price"])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"symbol": "BTCUSDT"},
        {"symbol": "BTCUSDT", "price": "not-a-price"},
        {"symbol": "BTCUSDT", "price": "NaN"},
        {"symbol": "BTCUSDT", "price": None},
        [],
    ],
)
async def test_get_current_price_invalid_payload(mock_http_client, body):
    client, mock_http = mock_http_client

    mock_http.stage_output(MockSuccessfulOutput(output=HttpResponse(status=200, body=body)))

    with pytest.raises(DeserializationError):
        await client.get_current_price("BTCUSDT")


@pytest.mark.asyncio
async def test_trader_get_current_price(mock_trader):
    trader, mock_http = mock_trader

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=HttpResponse(
                status=200, body={"symbol": "ETHUSDT", "price": "1834.27", "time": 1}
            ),
        )
    )

    assert await trader.get_current_price("ETHUSDT") == Decimal("1834.27")
    assert mock_http.call_log[0].arg_pack[0].endswith("symbol=ETHUSDT")
