"""HMAC-SHA256 request signing."""

import hmac
from hashlib import sha256


def sign(secret: str, query_string: str) -> str:
    """Sign a canonical query string with the account secret.

    Args:
        secret: The API secret
        query_string: The exact ``key=value&...`` string sent to the exchange

    Returns:
        str: Lowercase hex-encoded HMAC-SHA256 digest

    """
    return hmac.new(secret.encode(), query_string.encode(), sha256).hexdigest()
