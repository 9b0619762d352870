"""
Observable value cells.

A small single-threaded reactive primitive: a cell holding a current value that
notifies its observers synchronously whenever a new value is set. Observers are
registered against a LifetimeScope and dropped when that scope closes.
"""

import logging
from collections import deque
from typing import Any, Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")


class _Unset:
    """Sentinel type for a cell that has never been written."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class LifetimeScope:
    """
    Lifetime of a view (or any other owner of subscriptions).

    Closing the scope disposes every subscription registered against it.
    Can be used as a context manager.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self.closed = False
        self._on_close: List[Callable[[], None]] = []

    def on_close(self, callback: Callable[[], None]) -> None:
        """Register a callback run once when the scope closes."""
        if self.closed:
            callback()
            return
        self._on_close.append(callback)

    def remove_on_close(self, callback: Callable[[], None]) -> None:
        """Unregister a callback that no longer needs to run on close."""
        if callback in self._on_close:
            self._on_close.remove(callback)

    def close(self) -> None:
        """End the scope. Idempotent."""
        if self.closed:
            return
        self.closed = True
        callbacks, self._on_close = self._on_close, []
        for callback in callbacks:
            callback()
        logger.debug(f"Closed scope '{self.name}' ({len(callbacks)} subscriptions released)")

    def __enter__(self) -> "LifetimeScope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Subscription:
    """Handle for one registered observer."""

    def __init__(self, observable: "Observable", observer: Callable[[Any], None]):
        self._observable = observable
        self.observer: Optional[Callable[[Any], None]] = observer
        self._scope: Optional[LifetimeScope] = None

    @property
    def active(self) -> bool:
        return self.observer is not None

    def dispose(self) -> None:
        """Remove the registration and release the observer. Idempotent."""
        if self._observable is None:
            return
        self._observable._remove(self)
        self._observable = None
        self.observer = None
        if self._scope is not None:
            self._scope.remove_on_close(self.dispose)
            self._scope = None


class Observable(Generic[T]):
    """
    Reactive cell.

    set() notifies observers only when the new value is a different object
    from the stored one (identity, not equality), or on the first write.
    Callers that want a refresh for equal content must pass a fresh object.
    """

    def __init__(self, value: Any = UNSET, name: str = ""):
        self.name = name
        self._value = value
        self._subscriptions: List[Subscription] = []
        self._pending: deque = deque()
        self._dispatching = False

    def current(self) -> Any:
        """Return the current value, or UNSET if never written."""
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value is not UNSET

    def set(self, value: T) -> None:
        """
        Store value and notify observers synchronously.

        A set() issued by an observer during dispatch updates the value
        immediately; its notification runs once the current dispatch is done.
        """
        previous = self._value
        self._value = value
        if previous is not UNSET and value is previous:
            return

        self._pending.append(value)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                self._dispatch(self._pending.popleft())
        finally:
            self._dispatching = False
            self._pending.clear()

    def subscribe(self, scope: LifetimeScope, observer: Callable[[T], None]) -> Subscription:
        """
        Register observer for the lifetime of scope.

        The current value, if any, is delivered immediately.
        Subscribing with a closed scope registers nothing.
        """
        subscription = Subscription(self, observer)
        if scope.closed:
            logger.debug(f"Ignoring subscription to '{self.name}' from closed scope '{scope.name}'")
            subscription.dispose()
            return subscription

        self._subscriptions.append(subscription)
        subscription._scope = scope
        scope.on_close(subscription.dispose)

        if self.has_value:
            observer(self._value)
        return subscription

    def as_readonly(self) -> "ReadOnlyObservable[T]":
        """Expose this cell without its set() method."""
        return ReadOnlyObservable(self)

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def _dispatch(self, value: T) -> None:
        # Snapshot: observers added or removed during dispatch don't affect it
        for subscription in list(self._subscriptions):
            observer = subscription.observer
            if observer is None:
                continue
            observer(value)

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)


class ReadOnlyObservable(Generic[T]):
    """Read-only view over an Observable."""

    def __init__(self, source: Observable):
        self._source = source

    @property
    def name(self) -> str:
        return self._source.name

    def current(self) -> Any:
        return self._source.current()

    @property
    def has_value(self) -> bool:
        return self._source.has_value

    def subscribe(self, scope: LifetimeScope, observer: Callable[[T], None]) -> Subscription:
        return self._source.subscribe(scope, observer)

    def as_readonly(self) -> "ReadOnlyObservable[T]":
        return self


def derive(
    source,
    transform: Callable[[S], T],
    scope: LifetimeScope,
    name: str = ""
) -> Observable:
    """
    Build an observable whose value is transform(source value).

    Recomputed synchronously on every emission of source, for as long as
    scope is open.
    """
    derived: Observable = Observable(name=name)
    source.subscribe(scope, lambda value: derived.set(transform(value)))
    return derived
