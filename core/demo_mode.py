"""
Demo Mode State Management

Decides whether the application should run against synthetic data
instead of a live espresso machine, and persists that choice.

The state is driven by two navigation query parameters:
- demo=true: enter demo mode and remember it
- exitDemo=true: leave demo mode and forget it

Both the durable flag and the navigation context are ports, so the
same controller runs against SQLite in the API, st.query_params in
the dashboard, and in-memory fakes in tests.

Example:
    controller = DemoModeController(
        store=InMemoryDemoStateStore(),
        context=UrlNavigationContext("/stats?demo=true"),
    )
    controller.initialize_from_context()
    controller.is_active()        # True
    controller.context.location   # "/stats"
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Protocol, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

logger = logging.getLogger(__name__)


ENTER_PARAM = "demo"
EXIT_PARAM = "exitDemo"
TRUTHY_SENTINEL = "true"

DEFAULT_STATE_KEY = "brewos-demo-mode"


class DemoStateUnavailableError(Exception):
    """Raised by an adapter when the durable store or context cannot be reached."""


# =========================================
# Ports
# =========================================

class DemoStateStore(Protocol):
    """Durable boolean flag (absent = False)."""

    def get(self) -> bool: ...

    def set(self) -> None: ...

    def clear(self) -> None: ...


class NavigationContext(Protocol):
    """Query parameters of the current location."""

    def params(self) -> Mapping[str, str]: ...

    def remove_params(self, names: Iterable[str]) -> None:
        """Rewrite the visible location without adding a history entry."""
        ...


# =========================================
# In-memory / URL adapters
# =========================================

class InMemoryDemoStateStore:
    """Process-local flag store."""

    def __init__(self, active: bool = False):
        self._active = active
        self.writes = 0

    def get(self) -> bool:
        return self._active

    def set(self) -> None:
        self._active = True
        self.writes += 1

    def clear(self) -> None:
        self._active = False
        self.writes += 1


class UrlNavigationContext:
    """
    Navigation context backed by a plain URL string.

    remove_params() replaces the current location in place, which is
    the equivalent of history.replaceState: nothing is appended to
    the history list.
    """

    def __init__(self, url: str):
        self._url = url
        self.history = [self.location]

    def params(self) -> Mapping[str, str]:
        # First occurrence wins, matching URLSearchParams.get()
        result = {}
        for key, value in parse_qsl(urlsplit(self._url).query, keep_blank_values=True):
            result.setdefault(key, value)
        return result

    def remove_params(self, names: Iterable[str]) -> None:
        names = set(names)
        parts = urlsplit(self._url)
        kept = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key not in names
        ]
        self._url = parts.path + (f"?{urlencode(kept)}" if kept else "")
        self.history[-1] = self.location

    @property
    def location(self) -> str:
        parts = urlsplit(self._url)
        return parts.path + (f"?{parts.query}" if parts.query else "")


# =========================================
# Pure decision
# =========================================

@dataclass(frozen=True)
class DemoDecision:
    """
    Outcome of evaluating the navigation context against the stored flag.

    Attributes:
        active: Effective demo state to report
        store_flag: True to set, False to clear, None to leave untouched
        strip_params: Query parameters to remove from the location
    """
    active: bool
    store_flag: Optional[bool] = None
    strip_params: Tuple[str, ...] = ()


def _is_truthy(params: Mapping[str, str], name: str) -> bool:
    return params.get(name) == TRUTHY_SENTINEL


def decide_demo_state(params: Mapping[str, str], stored: bool) -> DemoDecision:
    """
    Decide the demo state for a set of query parameters.

    Exit always wins, and it also strips the enter parameter so that a
    stale demo=true cannot bring demo mode back on the next query.
    """
    if _is_truthy(params, EXIT_PARAM):
        strip = tuple(name for name in (EXIT_PARAM, ENTER_PARAM) if name in params)
        return DemoDecision(active=False, store_flag=False, strip_params=strip)

    if _is_truthy(params, ENTER_PARAM):
        return DemoDecision(active=True, store_flag=True, strip_params=(ENTER_PARAM,))

    return DemoDecision(active=stored)


# =========================================
# Controller
# =========================================

class DemoModeController:
    """
    Resolves and persists demo mode.

    Any DemoStateUnavailableError from the adapters is logged and the
    controller falls back to reporting demo mode as inactive.
    """

    def __init__(self, store: DemoStateStore, context: Optional[NavigationContext] = None):
        self.store = store
        self.context = context

    def initialize_from_context(self) -> None:
        """Apply the navigation context once, before anything reads the state."""
        if self.context is None:
            return
        try:
            params = self.context.params()
            if not (_is_truthy(params, EXIT_PARAM) or _is_truthy(params, ENTER_PARAM)):
                return
            decision = decide_demo_state(params, stored=False)
            self._apply(decision)
        except DemoStateUnavailableError as e:
            logger.warning(f"Demo state unavailable during initialization: {e}")
            return

        if decision.active:
            logger.info("Demo mode enabled from URL parameter")
        else:
            logger.info("Demo mode disabled from URL parameter")

    def is_active(self) -> bool:
        """Return the effective demo state, consuming context parameters."""
        try:
            params = self.context.params() if self.context is not None else {}
            if _is_truthy(params, EXIT_PARAM) or _is_truthy(params, ENTER_PARAM):
                decision = decide_demo_state(params, stored=False)
            else:
                decision = decide_demo_state(params, stored=self.store.get())
            self._apply(decision)
        except DemoStateUnavailableError as e:
            logger.warning(f"Demo state unavailable, assuming inactive: {e}")
            return False
        return decision.active

    def activate(self) -> bool:
        """
        Unconditionally enable demo mode.

        Returns:
            True if the flag was written, False if the store is unavailable
        """
        try:
            self.store.set()
        except DemoStateUnavailableError as e:
            logger.warning(f"Failed to activate demo mode: {e}")
            return False
        logger.info("Demo mode activated")
        return True

    def deactivate(self) -> bool:
        """
        Unconditionally disable demo mode.

        Returns:
            True if the flag was cleared, False if the store is unavailable
        """
        try:
            self.store.clear()
        except DemoStateUnavailableError as e:
            logger.warning(f"Failed to deactivate demo mode: {e}")
            return False
        logger.info("Demo mode deactivated")
        return True

    def _apply(self, decision: DemoDecision) -> None:
        if decision.store_flag is True:
            self.store.set()
        elif decision.store_flag is False:
            self.store.clear()

        if decision.strip_params and self.context is not None:
            self.context.remove_params(decision.strip_params)
