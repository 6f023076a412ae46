#!/usr/bin/env python3
"""
Quick script to verify FameEX API connectivity and credentials
Run this before trading to ensure everything is configured correctly
"""

import asyncio
import logging
import sys
from typing import Optional

from fameex_connector.client import FameexClient
from fameex_connector.config import FameexSettings
from fameex_connector.constants import ERROR_INFO_FIELD
from fameex_connector.exceptions import FameexRequestError


async def check_connection(settings: Optional[FameexSettings] = None) -> bool:
    """Hit the public assets endpoint, then the signed wallet endpoint"""
    settings = settings or FameexSettings()

    print("=" * 60)
    print("FameEX Connector - Connection Check")
    print("=" * 60)
    print()

    client = FameexClient(settings)

    print(f"1. Fetching public currency list from {settings.base_url}...")
    try:
        assets = await client.currencies_public()
    except FameexRequestError as e:
        print(f"   ❌ ERROR: {e.reason}")
        return False
    print(f"   ✅ Received {len(assets) if assets else 0} currencies")
    print()

    if settings.public_only or not settings.api_key or not settings.secret_key:
        print("2. Skipping signed requests (no trading credentials)")
        print("   Add FAMEEX_API_KEY and FAMEEX_SECRET_KEY to .env to check them")
        return True

    print(f"2. Checking credentials (API Key: {settings.api_key[:8]}...)")
    try:
        balances = await client.get_balances()
    except FameexRequestError as e:
        print(f"   ❌ ERROR: {e.reason}")
        print()
        print("Common issues:")
        print("  - Invalid API credentials")
        print("  - Request IP not bound to the API key")
        print("  - Local clock drift (signature timestamp error)")
        return False

    if isinstance(balances, dict) and ERROR_INFO_FIELD in balances:
        print(f"   ❌ ERROR: {balances[ERROR_INFO_FIELD]}")
        return False

    print(f"   ✅ Wallet returned {len(balances) if balances else 0} entries")
    print()
    print("=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)
    return True


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ok = asyncio.run(check_connection())
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
