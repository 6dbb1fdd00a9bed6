import hmac
from hashlib import sha256

import pytest

from binance_trader.signer import sign

# Example from the Binance API documentation for signed endpoints
DOC_SECRET = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
DOC_QUERY = (
    "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
    "&price=0.1&recvWindow=5000&timestamp=1499827319559"
)
DOC_SIGNATURE = "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"


def test_sign_matches_documented_vector():
    assert sign(DOC_SECRET, DOC_QUERY) == DOC_SIGNATURE


def test_sign_matches_rfc4231_vector():
    assert (
        sign("Jefe", "what do ya want for nothing?")
        == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_sign_is_deterministic():
    query = "symbol=BTCUSDT&timestamp=1700000000000"
    assert sign("secret", query) == sign("secret", query)


def test_sign_is_lowercase_hex_sha256():
    signature = sign("secret", "timestamp=1700000000000")
    assert len(signature) == 64
    assert signature == signature.lower()
    int(signature, 16)
    assert signature == hmac.new(b"secret", b"timestamp=1700000000000", sha256).hexdigest()


@pytest.mark.parametrize(
    "secret, query",
    [
        ("secreT", "symbol=BTCUSDT&timestamp=1700000000000"),
        ("secret", "symbol=BTCUSDT&timestamp=1700000000001"),
        ("secret", "symbol=BTCUSDC&timestamp=1700000000000"),
        ("secret", "timestamp=1700000000000&symbol=BTCUSDT"),
    ],
)
def test_sign_changes_with_any_input_change(secret, query):
    baseline = sign("secret", "symbol=BTCUSDT&timestamp=1700000000000")
    assert sign(secret, query) != baseline
