"""Screen resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from ._common_types import OptionItem, ValidationMode, _project_options
from .screens_types import ScreenResponse


class Screens(Resource):
    """Registered display endpoints."""

    def list(self, *, timeout: Optional[int] = None) -> list[ScreenResponse] | None:
        """Fetch all screens for the current API key."""
        return self._get("screens", timeout=timeout)

    def options(
        self,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> list[OptionItem]:
        """Fetch screens as selectable options.

        Parameters
        ----------
        validation
            Validation mode: ``"off"`` projects records as-is, ``"warn"`` drops
            records missing ``id``/``name`` with warnings, and ``"strict"``
            raises on them.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[OptionItem]
            One ``{label, value, description}`` item per screen.

        Raises
        ------
        NoDataReturnedError
            If the API returned no data.
        """
        response = self.list(timeout=timeout)
        return _project_options(response, node_name=self._node_name, validation=validation, logger=self._logger)
