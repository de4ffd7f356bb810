"""Types for the screens resource."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class ScreenResponse(TypedDict, total=False):
    """Readonly screen dict returned by ``GET screens``."""
    id: ReadOnly[int]
    name: ReadOnly[str]

__all__ = ["ScreenResponse"]
