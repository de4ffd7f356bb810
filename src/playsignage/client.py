"""Core PlaySignage client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .credentials import PlaySignageCredentials
from .errors import PlaySignageApiError
from .resources.playlists import Playlists
from .resources.screens import Screens
from .resources.tags import Tags

DEFAULT_BASE_URL = os.environ.get("PLAYSIGNAGE_BASE_URL", "https://api.playsignage.com/v1/")
DEFAULT_NODE_NAME = "PlaySignage"
METHODS = ("GET", "POST", "DELETE")


class PlaySignage:
    """Resource-grouped client for the PlaySignage API.

    API docs: https://api.playsignage.com/docs
    """

    tags: Tags
    screens: Screens
    playlists: Playlists

    def __init__(
        self,
        credentials: PlaySignageCredentials | str,
        *,
        base_url: Optional[str] = None,
        default_timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
        node_name: str = DEFAULT_NODE_NAME,
    ) -> None:
        """Create a client bound to one API key.

        Parameters
        ----------
        credentials
            Credentials object, or the API key itself.
        base_url
            API root that relative paths are joined onto.
        default_timeout
            Request timeout in seconds. ``None`` keeps the transport default.
        session
            Optional requests session to reuse connections.
        node_name
            Name of the workflow step, attached to raised errors.
        """
        if isinstance(credentials, str):
            credentials = PlaySignageCredentials(api_key=credentials)
        self.credentials = credentials
        base_url = base_url or DEFAULT_BASE_URL
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.default_timeout = default_timeout
        self.node_name = node_name
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.tags = Tags(self)
        self.screens = Screens(self)
        self.playlists = Playlists(self)

    def build_url(self, path: str) -> str:
        """Join a relative endpoint path onto the base URL."""
        return self.base_url + path.lstrip("/")

    def request(
        self,
        method: str,
        path: str = "",
        body: Optional[dict[str, Any]] = None,
        *,
        query: Optional[dict[str, Any]] = None,
        uri: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """Send one request to the PlaySignage API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, DELETE).
        path
            Endpoint path relative to the base URL. Ignored when ``uri`` is set.
        body
            Payload, sent wrapped as ``{"data": body}``.
        query
            Query-string parameters.
        uri
            Absolute URL overriding ``path``.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        Any
            Decoded JSON payload, or ``None`` when the response body is empty.

        Raises
        ------
        PlaySignageApiError
            On any transport failure, non-2xx status or undecodable body.
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported method: {method}")
        url = uri or self.build_url(path)
        headers = {
            "Accept": "application/json",
            "Authorization": self.credentials.api_key,
        }
        payload = {"data": body if body is not None else {}}

        self._logger.debug("%s %s", method, url)
        requester = self._session or requests
        response = None
        try:
            response = requester.request(
                method,
                url,
                headers=headers,
                params=query,
                json=payload,
                timeout=timeout if timeout is not None else self.default_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            status_code = getattr(response, "status_code", None)
            description = _error_description(response) if response is not None else None
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            raise PlaySignageApiError(
                self.node_name,
                exc,
                status_code=status_code,
                description=description,
                method=method,
                url=url,
            ) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            raise PlaySignageApiError(
                self.node_name,
                exc,
                message="Response was not valid JSON",
                status_code=getattr(response, "status_code", None),
                method=method,
                url=url,
            ) from exc

    def ping(self, *, timeout: Optional[int] = None) -> Any:
        """Test the API connectivity."""
        return self.request("GET", "ping", {}, timeout=timeout)


def _error_description(response: Any) -> Optional[str]:
    """Pull a human-readable message out of an error response body."""
    try:
        error_body = response.json()
    except (ValueError, AttributeError):
        return None
    if not isinstance(error_body, dict):
        return None
    for key in ("message", "error", "detail"):
        if key in error_body:
            return str(error_body[key])
    return None


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_NODE_NAME", "METHODS", "PlaySignage"]
