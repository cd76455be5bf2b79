"""View models for the dashboard template."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from dashboard.state import DashboardState, ResourceState
from shared.resources import ALL_KINDS, ResourceKind


@dataclass
class ItemView:
    key: str
    body: str


@dataclass
class PanelView:
    kind: str
    title: str
    loading_message: Optional[str]
    error_message: Optional[str]
    empty_message: Optional[str]
    items: List[ItemView]


def item_key(item: Dict[str, Any], index: int) -> str:
    """`_id` when the document has one, otherwise its position in the list."""
    if isinstance(item, dict) and item.get("_id") not in (None, ""):
        return str(item["_id"])
    return str(index)


def panel_for(kind: ResourceKind, resource: ResourceState) -> PanelView:
    # An empty collection and a prior logout render the same message
    empty = not resource.loading and not resource.error and not resource.items
    return PanelView(
        kind=kind.value,
        title=kind.label,
        loading_message=f"Loading {kind.value}..." if resource.loading else None,
        error_message=f"Error: {resource.error}" if resource.error else None,
        empty_message=f"No {kind.value} found or logged out." if empty else None,
        items=[
            ItemView(key=item_key(item, index), body=json.dumps(item, indent=2, default=str))
            for index, item in enumerate(resource.items)
        ],
    )


def build_panels(state: DashboardState) -> List[PanelView]:
    return [panel_for(kind, state.resource(kind)) for kind in ALL_KINDS]
