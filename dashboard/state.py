"""
Dashboard state and its transitions.

The state is an immutable value: a mock session, one record per resource
kind, and the generation counter of the current login. Every transition is
a plain function (state, event) -> state; a transition that does not apply
returns the input unchanged.

Each resource moves through Idle -> Loading -> Loaded | Failed. A login
enters Loading for all four kinds at once; a logout puts all four back to
Idle with no items, whatever is still in flight.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from shared.resources import ALL_KINDS, ResourceKind


class FetchStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Session:
    """Local mock login; never sent to the backend"""
    authenticated: bool = False
    identity: str = ""


@dataclass(frozen=True)
class ResourceState:
    items: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    status: FetchStatus = FetchStatus.IDLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": list(self.items),
            "loading": self.loading,
            "error": self.error,
            "status": self.status.value,
        }


def _idle_resources() -> Dict[ResourceKind, ResourceState]:
    return {kind: ResourceState() for kind in ALL_KINDS}


@dataclass(frozen=True)
class DashboardState:
    session: Session = field(default_factory=Session)
    resources: Dict[ResourceKind, ResourceState] = field(default_factory=_idle_resources)
    generation: int = 0

    @property
    def logged_in(self) -> bool:
        return self.session.authenticated

    @property
    def any_loading(self) -> bool:
        return any(resource.loading for resource in self.resources.values())

    def resource(self, kind: ResourceKind) -> ResourceState:
        return self.resources[kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session": {
                "authenticated": self.session.authenticated,
                "identity": self.session.identity,
            },
            "generation": self.generation,
            "resources": {kind.value: self.resources[kind].to_dict() for kind in ALL_KINDS},
        }


def is_current(state: DashboardState, generation: int) -> bool:
    """True if a result issued under `generation` may still be committed."""
    return state.session.authenticated and generation == state.generation


def _with_resource(state: DashboardState, kind: ResourceKind, resource: ResourceState) -> DashboardState:
    resources = dict(state.resources)
    resources[kind] = resource
    return replace(state, resources=resources)


def submit_login(state: DashboardState, identity: Optional[str]) -> DashboardState:
    """LoggedOut -> LoggedIn with every resource Loading; empty identity is ignored."""
    if state.session.authenticated:
        return state

    identity = (identity or "").strip()
    if not identity:
        return state

    resources = {
        kind: replace(resource, loading=True, error=None, status=FetchStatus.LOADING)
        for kind, resource in state.resources.items()
    }
    return DashboardState(
        session=Session(authenticated=True, identity=identity),
        resources=resources,
        generation=state.generation + 1,
    )


def logout(state: DashboardState) -> DashboardState:
    if not state.session.authenticated:
        return state
    return DashboardState(generation=state.generation)


def fetch_succeeded(
    state: DashboardState,
    kind: ResourceKind,
    items: List[Dict[str, Any]],
    generation: int,
) -> DashboardState:
    if not is_current(state, generation):
        return state
    return _with_resource(
        state,
        kind,
        ResourceState(items=list(items), loading=False, error=None, status=FetchStatus.LOADED),
    )


def fetch_failed(
    state: DashboardState,
    kind: ResourceKind,
    message: str,
    generation: int,
) -> DashboardState:
    """Loading -> Failed; the previous items stay in place."""
    if not is_current(state, generation):
        return state
    previous = state.resources[kind]
    return _with_resource(
        state,
        kind,
        replace(previous, loading=False, error=message, status=FetchStatus.FAILED),
    )
