"""Exceptions raised by the PlaySignage client and node."""

from __future__ import annotations

from typing import Optional


class PlaySignageError(Exception):
    """Base exception for the PlaySignage package."""


class CredentialsError(PlaySignageError):
    """No usable API key was supplied."""


class PlaySignageApiError(PlaySignageError):
    """A request to the PlaySignage API failed.

    Parameters
    ----------
    node_name
        Name of the workflow step that issued the request.
    cause
        Underlying exception, or ``None`` when the failure is not an exception
        (for example an empty response).
    message
        Optional message overriding the one derived from ``cause``.
    status_code
        HTTP status code when the server answered.
    description
        Error message extracted from the server's response body, if any.
    method
        HTTP method of the failed request.
    url
        URL of the failed request.
    """

    def __init__(
        self,
        node_name: str,
        cause: Optional[BaseException] = None,
        *,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        description: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.node_name = node_name
        self.cause = cause
        self.method = method
        self.url = url
        self.status_code = status_code
        self.description = description
        text = message or (str(cause) if cause is not None else "Request failed")
        if description:
            text = f"{text}\nServer message: {description}"
        super().__init__(f"{node_name}: {text}")


class NoDataReturnedError(PlaySignageApiError):
    """The API answered without the data an option list needs."""

    def __init__(self, node_name: str, *, message: str = "No data got returned") -> None:
        super().__init__(node_name, message=message)


class NodeOperationError(PlaySignageError):
    """The selected operation cannot be performed by the node."""

    def __init__(self, node_name: str, message: str) -> None:
        self.node_name = node_name
        super().__init__(f"{node_name}: {message}")


__all__ = [
    "CredentialsError",
    "NoDataReturnedError",
    "NodeOperationError",
    "PlaySignageApiError",
    "PlaySignageError",
]
