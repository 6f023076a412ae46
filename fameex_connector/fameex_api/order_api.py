"""
Order operations for the FameEX API
Handles order placement, lookup and cancellation
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from fameex_connector.constants import (
    CANCEL_ALL_ORDERS_PATH,
    CANCEL_ORDERS_PATH,
    ORDER_DETAIL_PATH,
    ORDERS_PATH,
)

logger = logging.getLogger(__name__)


def _order_reference(symbol: str, order_id: Optional[str], client_oid: Optional[str]) -> Dict[str, Any]:
    """symbol plus whichever of orderId / clientOid was given"""
    data: Dict[str, Any] = {"symbol": symbol}

    if order_id:
        data["orderId"] = order_id

    if client_oid:
        data["clientOid"] = client_oid

    return data


async def get_order_details(
    request_func: Callable,
    symbol: str,
    order_id: Optional[str] = None,
    client_oid: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get order details

    https://fameex-docs.github.io/docs/api/spot/en/#get-order-details

    Args:
        request_func: Private (signed) request function
        symbol: Currency pair (e.g., "BTC-USDT")
        order_id: Exchange order ID
        client_oid: User-made order ID

    Note: Exactly one of order_id or client_oid is expected by the exchange
    """
    data = _order_reference(symbol, order_id, client_oid)
    return await request_func("POST", ORDER_DETAIL_PATH, data)


async def add_order(
    request_func: Callable,
    symbol: str,
    side: int,  # 1 buy, 2 sell
    order_type: int,  # 1 limit, 2 market, 3 TP/SL, 4 tracking, 5 maker only
    amount: Union[str, float],  # Quote amount when buying at market price
    client_oid: Optional[str] = None,
    price: Optional[Union[str, float]] = None,
    trigger_price: Optional[Union[str, float]] = None,
    back_ratio: Optional[Union[str, float]] = None,
) -> Dict[str, Any]:
    """
    Create order

    https://fameex-docs.github.io/docs/api/spot/en/#new-order

    Args:
        request_func: Private (signed) request function
        symbol: Currency pair (e.g., "BTC-USDT")
        side: Order direction, 1 buy or 2 sell
        order_type: 1 limit, 2 market, 3 take profit/stop loss, 4 tracking, 5 maker only
        amount: Entrusted quantity (trading amount when buying at market price)
        client_oid: User-made order ID
        price: Commission price
        trigger_price: Trigger price
        back_ratio: Tracking order callback percentage
    """
    data: Dict[str, Any] = {
        "symbol": symbol,
        "side": side,
        "orderType": order_type,
        "amount": amount,
    }

    if client_oid:
        data["clientOid"] = client_oid

    if price:
        data["price"] = price

    if trigger_price:
        data["triggerPrice"] = trigger_price

    if back_ratio:
        data["backRatio"] = back_ratio

    logger.debug(f"Placing order on {symbol}: side={side} type={order_type} amount={amount}")
    return await request_func("POST", ORDERS_PATH, data)


async def cancel_order(
    request_func: Callable,
    symbol: str,
    order_id: Optional[str] = None,
    client_oid: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Cancel order

    https://fameex-docs.github.io/docs/api/spot/en/#cancel-order
    """
    data = _order_reference(symbol, order_id, client_oid)
    return await request_func("POST", CANCEL_ORDERS_PATH, data)


async def cancel_all_orders(
    request_func: Callable,
    symbol: str,
    order_ids: Optional[List[str]] = None,
    client_oids: Optional[List[str]] = None,
) -> Any:
    """
    Cancel all orders for a symbol, optionally narrowed to given IDs

    Args:
        request_func: Private (signed) request function
        symbol: Currency pair (e.g., "BTC-USDT")
        order_ids: Exchange order IDs
        client_oids: User-made order IDs

    Empty lists are not sent.
    """
    data: Dict[str, Any] = {"symbol": symbol}

    if order_ids:
        data["orderIds"] = list(order_ids)

    if client_oids:
        data["clientOids"] = list(client_oids)

    return await request_func("POST", CANCEL_ALL_ORDERS_PATH, data)
