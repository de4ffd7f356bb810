"""Playlist resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from ._common_types import OptionItem, ValidationMode, _project_options
from .playlists_types import PlaylistResponse


class Playlists(Resource):
    """Vendor-managed playlists."""

    def list(self, *, timeout: Optional[int] = None) -> list[PlaylistResponse] | None:
        """Fetch all playlists for the current API key."""
        return self._get("playlists", timeout=timeout)

    def options(
        self,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> list[OptionItem]:
        """Fetch playlists as selectable options.

        Same projection and validation rules as :meth:`Screens.options`.
        """
        response = self.list(timeout=timeout)
        return _project_options(response, node_name=self._node_name, validation=validation, logger=self._logger)
