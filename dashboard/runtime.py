"""
Background event loop for the dashboard controller.

Flask request handlers run on their own threads; the controller must only
ever be touched from one. The runner owns a private asyncio loop on a daemon
thread and marshals every controller call onto it.
"""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Callable, Optional

from dashboard.controller import DashboardController
from dashboard.state import DashboardState

logger = logging.getLogger(__name__)


class ControllerRunner:
    def __init__(self, controller: DashboardController, call_timeout: float = 10.0):
        self.controller = controller
        self.call_timeout = call_timeout

        self._running = False
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            return
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="dashboard-controller", daemon=True)
        self._thread.start()
        self._running = True
        logger.info("Dashboard controller loop started")

    def stop(self, timeout: float = 5.0):
        if not self._running:
            return
        self._running = False

        drain = asyncio.run_coroutine_threadsafe(self.controller.wait_idle(), self._loop)
        try:
            drain.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            logger.warning("Fetches still in flight after %.1fs; stopping anyway", timeout)
            # Only the waiter is cancelled; wait_idle shields the fetch tasks
            drain.cancel()

        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=timeout)
        self._loop.close()
        self.controller.close()
        logger.info("Dashboard controller loop stopped")

    def _run_loop(self):
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def call(self, fn: Callable[..., Any], *args) -> Any:
        """Run `fn(*args)` on the controller loop and return its result."""
        if not self._running:
            raise RuntimeError("Controller runner is not started")

        async def _invoke():
            return fn(*args)

        future = asyncio.run_coroutine_threadsafe(_invoke(), self._loop)
        return future.result(timeout=self.call_timeout)

    def submit_login(self, identity: str) -> bool:
        return self.call(self.controller.submit_login, identity)

    def logout(self) -> None:
        self.call(self.controller.logout)

    def snapshot(self) -> DashboardState:
        return self.call(lambda: self.controller.state)
