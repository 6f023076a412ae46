"""
FameEX API Constants

Centralized constants for endpoint paths, status codes and signing headers.
"""

from typing import Dict

DEFAULT_BASE_URL = "https://api.fameex.com"

# Fixed per-request timeout (seconds), no retry
REQUEST_TIMEOUT = 10.0

# API versioning prefixes
API_V1 = "/v1"
API_V2 = "/v2"

# Endpoint paths
WALLET_PATH = f"{API_V1}/api/account/wallet"
ORDER_DETAIL_PATH = f"{API_V1}/api/spot/orderdetail"
ORDERS_PATH = f"{API_V1}/api/spot/orders"
CANCEL_ORDERS_PATH = f"{API_V1}/api/spot/cancel_orders"
CANCEL_ALL_ORDERS_PATH = f"{API_V1}/api/spot/cancel_orders_all"
CURRENCIES_PATH = f"{API_V1}/common/currencys"
PUBLIC_ASSETS_PATH = f"{API_V2}/public/assets"

# Application-level success codes (body "code" field)
STATUS_OK = 200
STATUS_ZERO = "0"

# Signature headers
SIGNATURE_VERSION = "v1.0"
SIGNATURE_METHOD = "HmacSHA256"

# Field injected into a soft-failure body
ERROR_INFO_FIELD = "fameexErrorInfo"

NO_ERROR_CODE = "No error code"
UNKNOWN_ERROR = "Unknown error"
NO_PARAMETERS = "{ No parameters }"

# Order side
SIDE_BUY = 1
SIDE_SELL = 2

# Order types
ORDER_TYPE_LIMIT = 1
ORDER_TYPE_MARKET = 2
ORDER_TYPE_TAKE_PROFIT_STOP_LOSS = 3
ORDER_TYPE_TRACKING = 4
ORDER_TYPE_MAKER_ONLY = 5

# Known application error codes
# https://fameex-docs.github.io/docs/api/spot/en/#error-message
ERROR_CODE_DESCRIPTIONS: Dict[int, str] = {
    112002: "API single key traffic exceeds limit",
    112005: "API request frequency exceeded",
    112007: "API-Key creation failed",
    112008: "API-Key remark name already exists",
    112009: "The number of API-Key creation exceeds the limit (a single user can create up to 5 APIs)",
    112010: "API-Key is invalid (the time limit for a single Key is 60 natural days)",
    112011: "API request IP access is restricted (the bound IP is inconsistent with the request IP)",
    112015: "Signature error",
    112020: "Wrong signature",
    112021: "Wrong signature version",
    112022: "Signature timestamp error",
    112047: "The spot API interface is temporarily inaccessible",
    112048: "The futures API interface is temporarily inaccessible",
    230030: "Please operate after KYC certification",
}
