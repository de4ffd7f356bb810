"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..client import PlaySignage


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "PlaySignage") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    @property
    def _node_name(self) -> str:
        return self._client.node_name

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        *,
        query: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        return self._client.request(method, path, body, query=query, timeout=timeout)

    def _get(
        self,
        path: str,
        *,
        query: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        return self._request("GET", path, {}, query=query, timeout=timeout)

    def _post(
        self,
        path: str,
        body: Optional[dict[str, Any]] = None,
        *,
        timeout: Optional[int] = None,
    ) -> Any:
        return self._request("POST", path, body if body is not None else {}, timeout=timeout)

    def _delete(
        self,
        path: str,
        *,
        timeout: Optional[int] = None,
    ) -> Any:
        return self._request("DELETE", path, {}, timeout=timeout)
