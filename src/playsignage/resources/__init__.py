"""Resource module exports."""

from .playlists import Playlists
from .screens import Screens
from .tags import Tags

__all__ = [
    "Playlists",
    "Screens",
    "Tags",
]
