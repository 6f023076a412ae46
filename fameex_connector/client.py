"""
FameEX Spot REST API Client

Single client instance holding its own configuration (base URL, credentials,
logger). Every call is one independent HTTP exchange with a fixed timeout and
no retry; the outcome is classified into returned data or a raised
FameexRequestError.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from fameex_connector.config import FameexSettings
from fameex_connector.exceptions import ConfigurationError
from fameex_connector.fameex_api import account_api, currency_api, order_api
from fameex_connector.fameex_api.auth import (
    build_auth_headers,
    current_timestamp_ms,
    generate_signature,
    serialize_body,
)
from fameex_connector.fameex_api.response import (
    RawOutcome,
    classify_response,
    outcome_from_error,
    outcome_from_response,
    settle,
)
from fameex_connector.utils import get_params_string

logger = logging.getLogger(__name__)


class FameexClient:
    """
    FameEX spot API client

    Private endpoints are signed with HMAC-SHA256; public endpoints need no
    credentials. In public-only mode trading credentials are never stored.
    """

    def __init__(self, settings: Optional[FameexSettings] = None, log: Optional[Any] = None):
        """
        Initialize the client from settings

        Args:
            settings: Connector settings, read from FAMEEX_* env vars when omitted
            log: Logger exposing info()/warning(), defaults to this module's logger
        """
        settings = settings or FameexSettings()

        self.base_url = settings.base_url
        self.timeout = settings.request_timeout
        self.log = log or logger

        self.api_key = ""
        self.secret_key = ""
        self.trade_pwd = ""

        if settings.public_only:
            self.log.info("FameEX client in public-only mode (no trading credentials)")
        else:
            self.api_key = settings.api_key
            self.secret_key = settings.secret_key
            self.trade_pwd = settings.trade_pwd
            self.log.info("Using HMAC authentication (from settings)")

    def configure(
        self,
        api_server: Optional[str] = None,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        trade_pwd: Optional[str] = None,
        log: Optional[Any] = None,
        public_only: bool = False,
    ) -> None:
        """
        Reconfigure the client

        Args:
            api_server: Base URL override, kept when empty
            api_key: API key
            secret_key: API secret key
            trade_pwd: Trade password
            log: Logger exposing info()/warning(), kept when omitted
            public_only: Leave stored credentials untouched
        """
        if api_server:
            if not api_server.startswith(("http://", "https://")):
                raise ConfigurationError(f"api_server must be an http(s) URL, got {api_server!r}")
            self.base_url = api_server.rstrip("/")

        if log:
            self.log = log

        if not public_only:
            self.api_key = api_key or ""
            self.secret_key = secret_key or ""
            self.trade_pwd = trade_pwd or ""

    # ===== Dispatch =====

    async def _send(self, method: str, url: str, **kwargs) -> RawOutcome:
        """Perform one HTTP exchange and capture its outcome; any raised error becomes an HttpErrorOutcome"""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            return outcome_from_response(response)
        except Exception as e:
            return outcome_from_error(e)

    async def public_request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Request a public endpoint

        Args:
            method: HTTP method (GET, POST)
            path: Versioned endpoint path
            params: Query params for GET, JSON body for POST

        Raises:
            FameexRequestError: The request was rejected
        """
        url = f"{self.base_url}{path}"
        query_string = get_params_string(params)
        method = method.upper()

        kwargs: Dict[str, Any] = {}
        if method == "POST":
            kwargs["content"] = serialize_body(params)
            kwargs["headers"] = {"Content-Type": "application/json"}
        elif params:
            kwargs["params"] = params

        outcome = await self._send(method, url, **kwargs)
        return settle(classify_response(outcome, query_string, url, self.log))

    async def protected_request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Request a private (signed) endpoint

        The POST body is serialized once; that exact string is signed and sent.

        Args:
            method: HTTP method (GET, POST)
            path: Versioned endpoint path, signed without query string
            params: Query params for GET, JSON body for POST

        Raises:
            FameexRequestError: The request was rejected
        """
        url = f"{self.base_url}{path}"
        body_string = get_params_string(params)
        method = method.upper()

        timestamp = current_timestamp_ms()
        payload = serialize_body(params) if method == "POST" else ""
        signature = generate_signature(self.secret_key, timestamp, method, path, payload)
        headers = build_auth_headers(self.api_key, self.secret_key, timestamp, signature)

        kwargs: Dict[str, Any] = {"headers": headers}
        if method == "POST":
            kwargs["content"] = payload
        elif params:
            kwargs["params"] = params

        outcome = await self._send(method, url, **kwargs)
        return settle(classify_response(outcome, body_string, url, self.log))

    # ===== Account =====

    async def get_balances(self) -> Any:
        """Get user assets balance"""
        return await account_api.get_balances(self.protected_request)

    # ===== Orders =====

    async def get_order_details(
        self, symbol: str, order_id: Optional[str] = None, client_oid: Optional[str] = None
    ) -> Dict[str, Any]:
        """Get order details by order_id or client_oid"""
        return await order_api.get_order_details(self.protected_request, symbol, order_id, client_oid)

    async def add_order(
        self,
        symbol: str,
        side: int,
        order_type: int,
        amount: Union[str, float],
        client_oid: Optional[str] = None,
        price: Optional[Union[str, float]] = None,
        trigger_price: Optional[Union[str, float]] = None,
        back_ratio: Optional[Union[str, float]] = None,
    ) -> Dict[str, Any]:
        """Create order"""
        return await order_api.add_order(
            self.protected_request,
            symbol,
            side,
            order_type,
            amount,
            client_oid=client_oid,
            price=price,
            trigger_price=trigger_price,
            back_ratio=back_ratio,
        )

    async def cancel_order(
        self, symbol: str, order_id: Optional[str] = None, client_oid: Optional[str] = None
    ) -> Dict[str, Any]:
        """Cancel order by order_id or client_oid"""
        return await order_api.cancel_order(self.protected_request, symbol, order_id, client_oid)

    async def cancel_all_orders(
        self,
        symbol: str,
        order_ids: Optional[List[str]] = None,
        client_oids: Optional[List[str]] = None,
    ) -> Any:
        """Cancel all orders for a symbol"""
        return await order_api.cancel_all_orders(self.protected_request, symbol, order_ids, client_oids)

    # ===== Currencies =====

    async def currencies(self) -> Dict[str, Any]:
        """All trading currencies (private endpoint)"""
        return await currency_api.currencies(self.protected_request)

    async def currencies_public(self) -> Dict[str, Any]:
        """Currency summary (public endpoint)"""
        return await currency_api.currencies_public(self.public_request)
