"""Types for the playlists resource."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class PlaylistResponse(TypedDict, total=False):
    """Readonly playlist dict returned by ``GET playlists``."""
    id: ReadOnly[int]
    name: ReadOnly[str]

__all__ = ["PlaylistResponse"]
