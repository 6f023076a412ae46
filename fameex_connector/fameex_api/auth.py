"""
Authentication utilities for the FameEX spot API
HMAC-SHA256 request signing and private header assembly
"""

import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional, Union

from fameex_connector.constants import SIGNATURE_METHOD, SIGNATURE_VERSION


def current_timestamp_ms() -> int:
    """Millisecond Unix timestamp used in the signature and Timestamp header"""
    return int(time.time() * 1000)


def serialize_body(data: Optional[Dict[str, Any]]) -> str:
    """
    Serialize a POST body exactly once

    The returned string is both signed and sent on the wire, so the two
    can never disagree on key order or whitespace.
    """
    return json.dumps(data if data is not None else {}, separators=(",", ":"))


def generate_signature(
    secret: str,
    timestamp: Union[int, str],
    method: str,
    request_path: str,
    payload: str = "",
) -> str:
    """
    Generate HMAC-SHA256 signature for a FameEX request

    https://fameex-docs.github.io/docs/api/spot/en/#signature

    Args:
        secret: API secret key
        timestamp: Unix timestamp in milliseconds
        method: HTTP method, upper-cased before signing
        request_path: Versioned endpoint path (e.g. "/v1/api/spot/orders")
        payload: Serialized JSON body for POST, empty for everything else

    Returns:
        Lowercase hex digest
    """
    message = f"{timestamp}{method.upper()}{request_path}{payload}"
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def build_auth_headers(api_key: str, secret_key: str, timestamp: Union[int, str], signature: str) -> Dict[str, str]:
    """
    Build headers for a private endpoint

    FameEX expects the secret key itself alongside the signature.
    """
    return {
        "Content-Type": "application/json",
        "AccessKey": api_key,
        "SecretKey": secret_key,
        "Timestamp": str(timestamp),
        "SignatureVersion": SIGNATURE_VERSION,
        "SignatureMethod": SIGNATURE_METHOD,
        "Signature": signature,
    }
