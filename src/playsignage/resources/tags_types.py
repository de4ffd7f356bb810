"""Types for the tags resource."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class TagResponse(TypedDict, total=False):
    """Readonly tag dict returned by tag endpoints."""
    uuid: ReadOnly[str]
    name: ReadOnly[str]
    active: ReadOnly[bool]
    duration: ReadOnly[int]
    screens: ReadOnly[list[int]]
    playlist: ReadOnly[int]


class ActivateTagBody(TypedDict):
    """Payload sent (inside the ``data`` envelope) when activating a tag."""
    duration: int

__all__ = ["ActivateTagBody", "TagResponse"]
