# country_info/providers/http.py: shared upstream client plumbing
from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel, ValidationError

from country_info.errors import (
    UpstreamBadStatus,
    UpstreamMalformed,
    UpstreamUnreachable,
)

logger = logging.getLogger("country-info")

M = TypeVar("M", bound=BaseModel)

_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "country-info-service/1.0",
}


def _timeout(seconds: float) -> httpx.Timeout:
    return httpx.Timeout(
        timeout=seconds,
        connect=min(2.0, seconds),
        read=seconds,
        write=min(2.0, seconds),
        pool=min(2.0, seconds),
    )


def build_client(
    base_url: str,
    timeout: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """One pooled client per upstream, every call bounded by `timeout` seconds."""
    return httpx.Client(
        base_url=base_url,
        timeout=_timeout(timeout),
        headers=_HEADERS,
        follow_redirects=True,
        transport=transport,
    )


def _error_detail(resp: httpx.Response) -> str:
    # CountriesNow puts a reason in `msg` even on 4xx; surface it when present.
    try:
        body = resp.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        detail = body.get("msg") or body.get("message") or ""
        return str(detail)
    return ""


class UpstreamProvider:
    """
    Base for the two upstream clients. Subclasses set `name` and call
    `_get_json` / `_post_json`; every failure leaves here as one of the
    Upstream* errors, never as a raw httpx or JSON exception.
    """

    name: str = "upstream"

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def close(self) -> None:
        self._client.close()

    # --- requests -------------------------------------------------------------

    def _request_json(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        logger.info("[%s] %s %s%s params=%s body=%s", self.name, method, self.base_url, path, params, json)
        try:
            resp = self._client.request(method, path, params=params, json=json)
        except httpx.DecodingError as e:
            logger.warning("[%s] %s %s body could not be decoded: %s", self.name, method, path, e)
            raise UpstreamMalformed(self.name, "body could not be decoded") from e
        except httpx.RequestError as e:
            logger.warning("[%s] %s %s failed: %s: %s", self.name, method, path, type(e).__name__, e)
            raise UpstreamUnreachable(self.name, type(e).__name__) from e

        if not resp.is_success:
            logger.warning("[%s] %s %s -> %d", self.name, method, path, resp.status_code)
            raise UpstreamBadStatus(self.name, resp.status_code, _error_detail(resp))

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("[%s] %s %s returned a non-JSON body", self.name, method, path)
            raise UpstreamMalformed(self.name, "body is not valid JSON") from e

    def _get_json(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        return self._request_json("GET", path, params=params)

    def _post_json(self, path: str, body: Dict[str, Any]) -> Any:
        return self._request_json("POST", path, json=body)

    def _decode(self, model: Type[M], payload: Any) -> M:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning("[%s] could not decode %s: %s", self.name, model.__name__, e.errors()[:3])
            raise UpstreamMalformed(self.name, f"could not decode {model.__name__}") from e

    # --- liveness -------------------------------------------------------------

    def is_reachable(self) -> bool:
        """
        True if the upstream answered at all, whatever the status code.
        Only transport failures count as unreachable.
        """
        try:
            resp = self._client.get("")
        except httpx.TransportError as e:
            logger.warning("[%s] probe failed: %s: %s", self.name, type(e).__name__, e)
            return False
        except httpx.RequestError as e:
            # redirect loops and undecodable bodies still mean the host answered
            logger.info("[%s] probe answered but failed: %s", self.name, type(e).__name__)
            return True
        logger.info("[%s] probe -> %d", self.name, resp.status_code)
        return True
