"""CosmWasm LCD client with endpoint fallback — read-only smart queries."""
import asyncio
import base64
import json
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ...config import ChainConfig

logger = logging.getLogger(__name__)


class LcdError(RuntimeError):
    """The LCD node rejected a query, or no endpoint could be reached."""


def encode_query(query_msg: dict[str, Any]) -> str:
    """Base64 of the compact JSON query, as the smart-query route expects."""
    raw = json.dumps(query_msg, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode()


class LcdClient:
    """Read-only CosmWasm client over the LCD REST API.

    Has no ``execute``, so mutating contract calls through it are refused.
    """

    def __init__(self, config: ChainConfig) -> None:
        self.endpoints = [e.rstrip("/") for e in config.rpc_endpoints]
        self.timeout = config.rpc_timeout
        self.current_rpc_index = 0

    async def lcd_get(self, path: str) -> dict[str, Any]:
        """GET ``path`` with fallback to alternative endpoints."""
        if not self.endpoints:
            raise LcdError("No LCD endpoints configured")

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            rpc_index = (self.current_rpc_index + attempt) % len(self.endpoints)
            base_url = self.endpoints[rpc_index]

            try:
                connector = aiohttp.TCPConnector(ssl=ssl_context)
                async with aiohttp.ClientSession(connector=connector) as session:
                    async with session.get(
                        f"{base_url}{path}",
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                    ) as response:
                        result = await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                last_error = e
                logger.warning("LCD endpoint %s failed: %s", base_url, e)
                if attempt < len(self.endpoints) - 1:
                    logger.info("Trying next endpoint...")
                continue

            # the node answered; a contract error is not retried elsewhere
            if not isinstance(result, dict):
                raise LcdError(f"Unexpected LCD response from {base_url}: {result!r}")
            if "code" in result and result.get("code") != 0:
                raise LcdError(f"LCD Error {result['code']}: {result.get('message', '')}")

            if rpc_index != self.current_rpc_index:
                logger.info("Switched to LCD endpoint: %s", base_url)
                self.current_rpc_index = rpc_index

            return result

        raise LcdError(f"All LCD endpoints failed. Last error: {last_error}")

    async def query_contract_smart(
        self, address: str, query_msg: dict[str, Any]
    ) -> Any:
        """Run a smart query and return the decoded ``data`` field."""
        result = await self.lcd_get(
            f"/cosmwasm/wasm/v1/contract/{address}/smart/{encode_query(query_msg)}"
        )
        if "data" not in result:
            raise LcdError(f"LCD smart query returned no data: {result!r}")
        return result["data"]
