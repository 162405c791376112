"""
Viewport change subscriptions.

Register listeners that re-run layout calculations whenever the dimension
source reports a new viewport. Each subscription owns exactly one listener
on the source, acquired on subscribe and released on unsubscribe or when
the owner is closed. No UI framework dependencies.
"""
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Hashable, List, Optional

from ..data_models import Viewport

logger = logging.getLogger(__name__)

# Type alias for viewport change callbacks
ChangeCallback = Callable[[], None]


class DimensionSource(ABC):
    """
    Abstract provider of the current viewport.

    Implementations must update their state before firing callbacks, so a
    listener always reads the new viewport.
    """

    @abstractmethod
    def get_current(self) -> Viewport:
        """Return the current viewport."""

    @abstractmethod
    def on_change(self, callback: ChangeCallback) -> Hashable:
        """Register a callback fired after each viewport change."""

    @abstractmethod
    def release(self, token: Hashable) -> None:
        """Remove a callback. Unknown tokens are ignored."""


class CallbackDimensionSource(DimensionSource):
    """
    Dimension source that keeps the last viewport and its own listener table.

    Subclasses call _publish() with each new reading; unchanged readings
    are dropped.
    """

    def __init__(self, width: float, height: float) -> None:
        self._viewport = Viewport(width, height)
        self._listeners: Dict[int, ChangeCallback] = {}
        self._tokens = itertools.count(1)

    def get_current(self) -> Viewport:
        return self._viewport

    def on_change(self, callback: ChangeCallback) -> int:
        token = next(self._tokens)
        self._listeners[token] = callback
        return token

    def release(self, token: Hashable) -> None:
        self._listeners.pop(token, None)

    def _publish(self, viewport: Viewport) -> bool:
        """
        Store a new viewport reading and notify listeners.

        Args:
            viewport: Latest reading

        Returns:
            True if the viewport changed and listeners were notified
        """
        if viewport == self._viewport:
            return False

        self._viewport = viewport
        logger.debug("Viewport changed to %sx%s", viewport.width, viewport.height)
        for token, callback in list(self._listeners.items()):
            # A listener may release another one mid-delivery
            if token in self._listeners:
                callback()
        return True

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


class ManualDimensionSource(CallbackDimensionSource):
    """In-memory dimension source driven by explicit set_viewport() calls."""

    def set_viewport(self, width: float, height: float) -> bool:
        """
        Change the viewport and notify listeners.

        Args:
            width: New width in logical pixels
            height: New height in logical pixels

        Returns:
            True if the viewport changed and listeners were notified
        """
        return self._publish(Viewport(width, height))


class SubscriptionHandle:
    """
    Caller-owned token for one viewport subscription.

    Release it explicitly, or use it as a context manager.
    """

    def __init__(self, owner: "ViewportSubscriptions", callback: ChangeCallback) -> None:
        self._owner = owner
        self.callback = callback
        self.source_token: Optional[Hashable] = None
        self.active = True

    def release(self) -> None:
        self._owner.unsubscribe(self)

    def __enter__(self) -> "SubscriptionHandle":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"SubscriptionHandle({state}, token={self.source_token!r})"


class ViewportSubscriptions:
    """
    Manages viewport change listeners with explicit lifetimes.

    Callbacks run on the thread that delivers source notifications. A
    callback that raises is logged and does not affect other subscribers.
    """

    def __init__(self, source: DimensionSource) -> None:
        """
        Initialize subscription registry.

        Args:
            source: Dimension source to listen to
        """
        self._source = source
        self._handles: List[SubscriptionHandle] = []
        self._closed = False

    def subscribe(self, on_change: ChangeCallback) -> SubscriptionHandle:
        """
        Register a callback for viewport changes.

        Args:
            on_change: Function to call after each viewport change

        Returns:
            Handle used to release the subscription

        Raises:
            RuntimeError: If the registry has been closed
        """
        if self._closed:
            raise RuntimeError("Cannot subscribe after the subscriptions were closed")

        handle = SubscriptionHandle(self, on_change)
        handle.source_token = self._source.on_change(lambda: self._deliver(handle))
        self._handles.append(handle)
        logger.debug("Viewport subscription added (%d active)", len(self._handles))
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """
        Release a subscription.

        Releasing a handle twice, or a handle from another registry, is a no-op.

        Args:
            handle: Handle returned by subscribe()
        """
        if not handle.active or handle not in self._handles:
            return

        handle.active = False
        self._handles.remove(handle)
        self._source.release(handle.source_token)
        logger.debug("Viewport subscription released (%d active)", len(self._handles))

    def close(self) -> None:
        """Release every outstanding subscription."""
        for handle in list(self._handles):
            self.unsubscribe(handle)
        self._closed = True

    def _deliver(self, handle: SubscriptionHandle) -> None:
        if not handle.active:
            return
        try:
            handle.callback()
        except Exception as exc:
            logger.error("Viewport listener error: %s", exc)

    @property
    def active_count(self) -> int:
        return len(self._handles)

    @property
    def closed(self) -> bool:
        return self._closed
