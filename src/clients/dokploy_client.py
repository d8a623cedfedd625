"""Async client for the Dokploy REST API.

Every outbound call made by the server goes through DokployClient.request:
one HTTP call per invocation, no retries. Non-2xx responses become
UpstreamError (status + raw body); connectivity failures become
TransportError so callers can tell the two apart.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from config import DokployConfig
from core.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


class DokployClient:
    def __init__(
        self,
        config: DokployConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._headers = self._build_headers()

    @property
    def config(self) -> DokployConfig:
        return self._config

    def path_for_delete(self, resource: str) -> str:
        """Deletion path for resources whose verb changed across API versions."""
        return f"/{resource}.{self._config.delete_verb}"

    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send one request to `{base_url}/api{path}` and return parsed JSON (or text)."""
        method = method.upper()
        url = f"{self._config.api_url}{path}"
        query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}

        if self._config.debug:
            logger.debug("[Dokploy API] %s %s", method, url)

        try:
            async with self._create_client() as client:
                resp = await client.request(
                    method,
                    url,
                    params=query or None,
                    json=body if (method != "GET" and body is not None) else None,
                )
        except httpx.TransportError as e:
            err = TransportError(f"Failed to reach Dokploy at {self._config.base_url}: {e!r}")
            if self._config.debug:
                logger.debug("[Dokploy API Error] %s %s: %s", method, url, err)
            raise err from e

        if not resp.is_success:
            err = UpstreamError(resp.status_code, resp.text)
            if self._config.debug:
                logger.debug("[Dokploy API Error] %s %s: %s", method, url, err)
            raise err

        return _parse_body(resp)

    # --- HTTP helpers ---

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": "dokploy-mcp-server",
        }
        if self._config.auth_scheme == "bearer":
            headers["Authorization"] = f"Bearer {self._config.api_key}"
        else:
            headers["x-api-key"] = self._config.api_key
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self._headers,
            timeout=self._config.timeout,
            verify=self._config.verify,
            transport=self._transport,
        )


def _query_value(value: Any) -> Any:
    # httpx renders bools as "True"/"False"; the API expects JSON-style literals
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text
