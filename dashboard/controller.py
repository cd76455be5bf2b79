"""
Dashboard controller.

Owns the dashboard state and drives it from login/logout events and fetch
completions. All mutations happen on the event loop the controller runs on;
the blocking HTTP call for each resource runs in a worker thread.

On login one task per resource kind is started without awaiting the others,
so a slow or failing kind never holds back the rest. Tasks are not cancelled
on logout. Each one carries the generation it was started under and its
result is dropped if that generation is no longer current.
"""

import asyncio
import logging
from typing import Set

from dashboard import state as transitions
from dashboard.client import DataServiceClient, FetchError
from dashboard.state import DashboardState
from shared.resources import ALL_KINDS, ResourceKind

logger = logging.getLogger(__name__)


class DashboardController:
    def __init__(self, client: DataServiceClient, initial_state: DashboardState = None):
        self._client = client
        self._state = initial_state or DashboardState()
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def submit_login(self, identity: str) -> bool:
        """
        Mock login. A successful login needs a running event loop.
        Returns False (and leaves the state untouched) when the identity is
        blank or a session is already active.
        """
        if self._state.logged_in:
            logger.debug("Login ignored: already logged in as '%s'", self._state.session.identity)
            return False

        new_state = transitions.submit_login(self._state, identity)
        if new_state is self._state:
            logger.info("Login failed: Please enter a username.")
            return False

        loop = asyncio.get_running_loop()
        self._state = new_state
        logger.info("User '%s' logged in (mock).", new_state.session.identity)
        self._dispatch_fetches(loop, new_state.generation)
        return True

    def logout(self) -> None:
        if not self._state.logged_in:
            return
        self._state = transitions.logout(self._state)
        logger.info("User logged out (mock). %d fetch(es) still in flight", self.in_flight)

    async def wait_idle(self) -> None:
        """
        Wait until every fetch started so far has committed or been discarded.
        Cancelling the waiter leaves the fetches running.
        """
        while self._tasks:
            await asyncio.shield(asyncio.gather(*list(self._tasks)))

    def close(self) -> None:
        self._client.close()

    def _dispatch_fetches(self, loop: asyncio.AbstractEventLoop, generation: int) -> None:
        for kind in ALL_KINDS:
            task = loop.create_task(self._fetch(kind, generation), name=f"fetch-{kind.value}-{generation}")
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _fetch(self, kind: ResourceKind, generation: int) -> None:
        logger.debug("Fetching %s (generation %d)", kind.endpoint, generation)
        try:
            items = await asyncio.to_thread(self._client.list_resource, kind)
        except FetchError as exc:
            logger.error("Error fetching data from %s: %s", kind.endpoint, exc.reason)
            self._commit_failure(kind, exc.reason, generation)
            return
        except Exception as exc:
            logger.exception("Unexpected error fetching data from %s", kind.endpoint)
            self._commit_failure(kind, str(exc) or exc.__class__.__name__, generation)
            return

        if not transitions.is_current(self._state, generation):
            logger.info("Discarding stale %s result from generation %d", kind.value, generation)
            return
        self._state = transitions.fetch_succeeded(self._state, kind, items, generation)
        logger.debug("Loaded %d %s", len(items), kind.value)

    def _commit_failure(self, kind: ResourceKind, reason: str, generation: int) -> None:
        if not transitions.is_current(self._state, generation):
            logger.info("Discarding stale %s failure from generation %d", kind.value, generation)
            return
        message = (
            f"Failed to load data from {kind.endpoint}: {reason}. "
            f"Ensure your backend is running and accessible at {self._client.base_address}."
        )
        self._state = transitions.fetch_failed(self._state, kind, message, generation)
