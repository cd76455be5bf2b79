import json

from dashboard import state as transitions
from dashboard.state import DashboardState, FetchStatus, ResourceState
from dashboard.views import build_panels, item_key, panel_for
from shared.resources import ResourceKind


def test_loading_panel():
    panel = panel_for(ResourceKind.USERS, ResourceState(loading=True, status=FetchStatus.LOADING))

    assert panel.title == "Users"
    assert panel.loading_message == "Loading users..."
    assert panel.error_message is None
    assert panel.empty_message is None


def test_failed_panel_shows_error_only():
    panel = panel_for(ResourceKind.JOBS, ResourceState(error="Failed to load data from /jobs", status=FetchStatus.FAILED))

    assert panel.error_message == "Error: Failed to load data from /jobs"
    assert panel.empty_message is None


def test_empty_and_idle_render_the_same_message():
    loaded_empty = panel_for(ResourceKind.CUSTOMERS, ResourceState(status=FetchStatus.LOADED))
    idle = panel_for(ResourceKind.CUSTOMERS, ResourceState())

    assert loaded_empty.empty_message == idle.empty_message == "No customers found or logged out."


def test_items_keyed_by_id_or_position():
    items = [{"_id": "abc", "name": "Bob"}, {"name": "no id"}]
    panel = panel_for(ResourceKind.USERS, ResourceState(items=items, status=FetchStatus.LOADED))

    assert [item.key for item in panel.items] == ["abc", "1"]
    assert json.loads(panel.items[0].body) == items[0]
    assert item_key({"_id": ""}, 4) == "4"


def test_build_panels_follows_kind_order():
    state = transitions.submit_login(DashboardState(), "alice")
    assert [panel.kind for panel in build_panels(state)] == ["users", "customers", "jobs", "pipelines"]
