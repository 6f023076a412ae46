"""
Currency metadata for the FameEX API

currencies() goes through the signed endpoint, currencies_public() needs no
credentials and is what public-only clients use.
"""

from typing import Any, Callable, Dict

from fameex_connector.constants import CURRENCIES_PATH, PUBLIC_ASSETS_PATH


async def currencies(request_func: Callable) -> Dict[str, Any]:
    """All trading currencies supported by FameEX (private endpoint)"""
    return await request_func("GET", CURRENCIES_PATH, {})


async def currencies_public(request_func: Callable) -> Dict[str, Any]:
    """Detailed summary for each currency (public endpoint)"""
    return await request_func("GET", PUBLIC_ASSETS_PATH, {})
