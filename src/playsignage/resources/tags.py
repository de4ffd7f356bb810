"""Tag resource wrapper."""

from __future__ import annotations

from typing import Any, Optional

from .base import Resource
from .tags_types import ActivateTagBody, TagResponse


class Tags(Resource):
    """Tag operations.

    Inputs are expected to be validated by the caller; paths are built from
    them as given.
    """

    def list(self, *, timeout: Optional[int] = None) -> list[TagResponse] | None:
        """Fetch all tags available to the API key."""
        return self._get("tags", timeout=timeout)

    def remove(self, tag_uuid: str, *, timeout: Optional[int] = None) -> Any:
        """Remove the tag binding screens and playlist."""
        return self._delete(f"tags/{tag_uuid}", timeout=timeout)

    def activate(self, tag_uuid: str, duration: int, *, timeout: Optional[int] = None) -> Any:
        """Activate a tag.

        Parameters
        ----------
        tag_uuid
            Tag UUID.
        duration
            Duration of the assigned playlist, in milliseconds.
        timeout
            Request timeout in seconds.
        """
        body: ActivateTagBody = {"duration": duration}
        return self._post(f"tags/{tag_uuid}/activate", dict(body), timeout=timeout)

    def deactivate(self, tag_uuid: str, *, timeout: Optional[int] = None) -> Any:
        """Deactivate a tag."""
        return self._post(f"tags/{tag_uuid}/deactivate", timeout=timeout)
