"""Public package surface for the PlaySignage client and workflow node."""

from .client import DEFAULT_BASE_URL, PlaySignage
from .credentials import CREDENTIAL_TYPE, PlaySignageCredentials
from .errors import (
    CredentialsError,
    NoDataReturnedError,
    NodeOperationError,
    PlaySignageApiError,
    PlaySignageError,
)
from .node import ExecutionContext, PlaySignageNode


__all__ = [
    "CREDENTIAL_TYPE",
    "CredentialsError",
    "DEFAULT_BASE_URL",
    "ExecutionContext",
    "NoDataReturnedError",
    "NodeOperationError",
    "PlaySignage",
    "PlaySignageApiError",
    "PlaySignageCredentials",
    "PlaySignageError",
    "PlaySignageNode",
]
