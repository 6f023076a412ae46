"""
Account operations for the FameEX API
"""

from typing import Any, Callable

from fameex_connector.constants import WALLET_PATH


async def get_balances(request_func: Callable) -> Any:
    """
    Get user assets balance

    https://fameex-docs.github.io/docs/api/spot/en/#get-wallet-info

    Args:
        request_func: Private (signed) request function
    """
    return await request_func("GET", WALLET_PATH, {})
