"""Workflow node exposing PlaySignage operations as a configurable step."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Sequence, TypedDict, Union, get_args

from .client import PlaySignage
from .credentials import PlaySignageCredentials
from .errors import NodeOperationError
from .resources._common_types import OptionItem, _normalize_duration, _normalize_tag_uuid

_logger = logging.getLogger(__name__)

# --- Operations --- #
Operation = Literal["ping", "get-tags", "create-tag", "remove-tag", "activate-tag", "deactivate-tag"]
OPERATIONS: tuple[Operation, ...] = get_args(Operation)
DEFAULT_OPERATION: Operation = "activate-tag"


# --- Node Description --- #
class PropertyOption(TypedDict, total=False):
    name: str
    value: str
    description: str


class NodeProperty(TypedDict, total=False):
    """One configurable parameter of the node."""
    displayName: str
    name: str
    type: str
    default: Any
    description: str
    options: list[PropertyOption]
    typeOptions: dict[str, str]
    displayOptions: dict[str, dict[str, list[str]]]


DESCRIPTION: dict[str, Any] = {
    "displayName": "Play Signage",
    "name": "playSignage",
    "icon": "file:playSignage.png",
    "group": ["transform"],
    "version": 1,
    "description": "Consume Play Signage API",
    "defaults": {"name": "PlaySignage", "color": "#387fbd"},
    "inputs": ["main"],
    "outputs": ["main"],
    "credentials": [{"name": "playSignageApi", "required": True}],
    "properties": [
        {
            "displayName": "Operation",
            "name": "operation",
            "type": "options",
            "options": [
                {"name": "Ping", "value": "ping", "description": "Test the API connectivity"},
                {"name": "Get all Tags", "value": "get-tags", "description": "Get a list of all available tags"},
                {
                    "name": "Create Tag",
                    "value": "create-tag",
                    "description": "Create a Tag to bind screens with a playlist",
                },
                {
                    "name": "Remove Tag",
                    "value": "remove-tag",
                    "description": "Remove Tag binding screens and playlist",
                },
                {"name": "Activate Tag", "value": "activate-tag", "description": "Activate a Tag"},
                {"name": "Deactivate Tag", "value": "deactivate-tag", "description": "Deactivate a Tag"},
            ],
            "default": DEFAULT_OPERATION,
            "description": "The operation to perform.",
        },
        {
            "displayName": "Tag UUID",
            "name": "tag-uuid",
            "type": "string",
            "default": "",
            "description": "The Tag UUID to use within the operation.",
            "displayOptions": {"show": {"operation": ["activate-tag", "deactivate-tag", "remove-tag"]}},
        },
        {
            "displayName": "Duration",
            "name": "duration",
            "type": "number",
            "default": 0,
            "description": "The duration of the assigned playlist (in milliseconds).",
            "displayOptions": {"show": {"operation": ["activate-tag"]}},
        },
        {
            "displayName": "Screens",
            "name": "screens",
            "type": "options",
            "typeOptions": {"loadOptionsMethod": "getScreens"},
            "default": "",
            "description": "The Screens to bind with the tag.",
            "displayOptions": {"show": {"operation": ["create-tag"]}},
        },
        {
            "displayName": "Playlist",
            "name": "playlist",
            "type": "options",
            "typeOptions": {"loadOptionsMethod": "getPlaylists"},
            "default": "",
            "description": "The Playlist to bind with the tag.",
            "displayOptions": {"show": {"operation": ["create-tag"]}},
        },
    ],
}

PROPERTIES: tuple[NodeProperty, ...] = tuple(DESCRIPTION["properties"])
_MISSING = object()


def visible_properties(operation: str) -> list[str]:
    """Return the names of the properties shown for ``operation``."""
    names = []
    for prop in PROPERTIES:
        shown_for = prop.get("displayOptions", {}).get("show", {}).get("operation")
        if shown_for is None or operation in shown_for:
            names.append(prop["name"])
    return names


def property_default(name: str) -> Any:
    """Return the declared default of a property, or raise ``KeyError``."""
    for prop in PROPERTIES:
        if prop["name"] == name:
            return prop.get("default")
    raise KeyError(name)


# --- Operation Requests --- #
@dataclass(frozen=True)
class Ping:
    pass


@dataclass(frozen=True)
class ListTags:
    pass


@dataclass(frozen=True)
class CreateTag:
    screen_id: Any
    playlist_id: Any


@dataclass(frozen=True)
class RemoveTag:
    tag_uuid: str


@dataclass(frozen=True)
class ActivateTag:
    tag_uuid: str
    duration: int


@dataclass(frozen=True)
class DeactivateTag:
    tag_uuid: str


OperationRequest = Union[Ping, ListTags, CreateTag, RemoveTag, ActivateTag, DeactivateTag]


# --- Host Surface --- #
class ExecutionContext:
    """Per-invocation input handed to the node by the workflow host.

    Parameters
    ----------
    items
        Input items the step iterates over.
    parameters
        Either one mapping shared by every item, or one mapping per item.
    """

    def __init__(
        self,
        items: Sequence[Any],
        parameters: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    ) -> None:
        self.items = list(items)
        self.parameters = parameters

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        """Resolve a parameter value for one item.

        Falls back to ``default``, then to the property's declared default.
        """
        if isinstance(self.parameters, Mapping):
            values = self.parameters
        else:
            values = self.parameters[item_index]
        if name in values:
            return values[name]
        if default is not _MISSING:
            return default
        return property_default(name)


# --- Node --- #
class PlaySignageNode:
    """Maps the selected operation to PlaySignage API calls."""

    description = DESCRIPTION

    def __init__(self, client: PlaySignage) -> None:
        self.client = client
        self.name = client.node_name
        self._logger = _logger
        self.load_options_methods: dict[str, Callable[[], list[OptionItem]]] = {
            "getScreens": self.get_screens,
            "getPlaylists": self.get_playlists,
        }

    @classmethod
    def from_credentials(
        cls,
        credentials: PlaySignageCredentials | Mapping[str, object],
        **client_kwargs: Any,
    ) -> "PlaySignageNode":
        """Build a node from credentials or a host credential entry."""
        if not isinstance(credentials, PlaySignageCredentials):
            credentials = PlaySignageCredentials.from_mapping(credentials)
        return cls(PlaySignage(credentials, **client_kwargs))

    # ------------------------------------------------------------------
    # Option loading
    # ------------------------------------------------------------------
    def get_screens(self) -> list[OptionItem]:
        """Get all the available screens for the current API key."""
        return self.client.screens.options()

    def get_playlists(self) -> list[OptionItem]:
        """Get all the available playlists for the current API key."""
        return self.client.playlists.options()

    def load_options(self, method_name: str) -> list[OptionItem]:
        """Run the option-loading method a property refers to."""
        try:
            method = self.load_options_methods[method_name]
        except KeyError:
            raise NodeOperationError(self.name, f"Unknown load options method: {method_name}") from None
        return method()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def build_request(self, context: ExecutionContext, operation: str, item_index: int) -> OperationRequest:
        """Build the typed request for one item.

        ``duration`` is read from item 0 for every item while ``tag-uuid`` is
        read per item, matching how the step has always resolved them.
        """
        if operation == "ping":
            return Ping()
        if operation == "get-tags":
            return ListTags()
        if operation == "create-tag":
            return CreateTag(
                screen_id=context.get_node_parameter("screens", item_index),
                playlist_id=context.get_node_parameter("playlist", item_index),
            )
        if operation in ("remove-tag", "activate-tag", "deactivate-tag"):
            tag_uuid = _normalize_tag_uuid(context.get_node_parameter("tag-uuid", item_index))
            if operation == "remove-tag":
                return RemoveTag(tag_uuid)
            if operation == "deactivate-tag":
                return DeactivateTag(tag_uuid)
            duration = _normalize_duration(context.get_node_parameter("duration", 0))
            return ActivateTag(tag_uuid, duration)
        raise ValueError(f"Unknown operation: {operation}")

    def dispatch(self, request: OperationRequest) -> Any:
        """Issue the single API call for a request."""
        self._logger.debug("Dispatching %s", request)
        if isinstance(request, Ping):
            return self.client.ping()
        if isinstance(request, ListTags):
            return self.client.tags.list()
        if isinstance(request, RemoveTag):
            return self.client.tags.remove(request.tag_uuid)
        if isinstance(request, ActivateTag):
            return self.client.tags.activate(request.tag_uuid, request.duration)
        if isinstance(request, DeactivateTag):
            return self.client.tags.deactivate(request.tag_uuid)
        if isinstance(request, CreateTag):
            raise NodeOperationError(self.name, "The operation 'create-tag' is not implemented")
        raise NodeOperationError(self.name, f"Cannot dispatch {type(request).__name__}")

    def execute(self, context: ExecutionContext) -> list[Any]:
        """Run the selected operation once per input item.

        Returns
        -------
        list
            One decoded response per item, in item order. Empty when there are no
            items or the operation is not recognised.

        Raises
        ------
        PlaySignageApiError
            On the first failed call; later items are not processed.
        NodeOperationError
            If the selected operation is not implemented, or per-item
            parameters do not cover every item.
        """
        if not context.items:
            return []
        if not isinstance(context.parameters, Mapping) and len(context.parameters) < len(context.items):
            raise NodeOperationError(
                self.name,
                f"Got parameters for {len(context.parameters)} of {len(context.items)} items",
            )
        operation = context.get_node_parameter("operation", 0)
        if operation not in OPERATIONS:
            self._logger.debug("Ignoring unknown operation %r", operation)
            return []

        results: list[Any] = []
        for item_index in range(len(context.items)):
            request = self.build_request(context, operation, item_index)
            results.append(self.dispatch(request))
        return results


__all__ = [
    "ActivateTag",
    "CreateTag",
    "DEFAULT_OPERATION",
    "DESCRIPTION",
    "DeactivateTag",
    "ExecutionContext",
    "ListTags",
    "OPERATIONS",
    "Operation",
    "OperationRequest",
    "Ping",
    "PlaySignageNode",
    "RemoveTag",
    "property_default",
    "visible_properties",
]
