"""
Tests for fameex_connector/fameex_api/account_api.py and currency_api.py
"""

import pytest
from unittest.mock import AsyncMock

from fameex_connector.fameex_api.account_api import get_balances
from fameex_connector.fameex_api.currency_api import currencies, currencies_public


class TestGetBalances:
    """Tests for get_balances()"""

    @pytest.mark.asyncio
    async def test_requests_wallet(self):
        wallet = [{"currency": "USDT", "available": "10"}]
        mock_request = AsyncMock(return_value=wallet)

        result = await get_balances(mock_request)

        assert result == wallet
        mock_request.assert_awaited_once_with("GET", "/v1/api/account/wallet", {})


class TestCurrencies:
    """Tests for currencies() / currencies_public()"""

    @pytest.mark.asyncio
    async def test_private_currency_list(self):
        mock_request = AsyncMock(return_value={"BTC": {}})

        result = await currencies(mock_request)

        assert result == {"BTC": {}}
        mock_request.assert_awaited_once_with("GET", "/v1/common/currencys", {})

    @pytest.mark.asyncio
    async def test_public_assets(self):
        mock_request = AsyncMock(return_value={"BTC": {"name": "Bitcoin"}})

        await currencies_public(mock_request)

        mock_request.assert_awaited_once_with("GET", "/v2/public/assets", {})
