"""Observable state owner shared by all stores.

A ``Store`` holds one immutable snapshot.  Every mutation is a
transition ``snapshot -> snapshot`` that is applied atomically:

1. compute the next snapshot from the current one;
2. skip everything if it equals the current one;
3. validate it (``_check``), raising ``InvariantViolation`` if broken;
4. swap it in and run the ``_on_change`` hook (persistence);
5. notify subscribers, even if the hook raised.

Subscribers may mutate the store from inside a callback.  Such
mutations are queued and applied once the current notification round
has finished, so every subscriber sees each snapshot in order.
"""

from __future__ import annotations

import logging
import operator
from collections import deque
from typing import Any, Callable, Generic, TypeVar

from xpdispatch.contracts.common import StateModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=StateModel)
M = TypeVar("M", bound=StateModel)

Listener = Callable[[Any, Any], None]
Selector = Callable[[Any], Any]
Equality = Callable[[Any, Any], bool]
Transition = Callable[[S], S]


def replace(model: M, **changes: Any) -> M:
    """Validated copy of *model* with *changes* applied."""
    return model.model_validate({**dict(model), **changes})


class _Subscription:
    def __init__(
        self,
        listener: Listener,
        selector: Selector | None,
        equality: Equality,
        current: Any,
    ):
        self.listener = listener
        self.selector = selector
        self.equality = equality
        self.active = True
        self._last = selector(current) if selector else current

    def deliver(self, state: Any) -> None:
        selected = self.selector(state) if self.selector else state
        if self.equality(self._last, selected):
            return
        previous, self._last = self._last, selected
        self.call(selected, previous)

    def fire(self) -> None:
        self.call(self._last, self._last)

    def call(self, new: Any, old: Any) -> None:
        try:
            self.listener(new, old)
        except Exception:
            name = getattr(self.listener, "__name__", repr(self.listener))
            logger.exception("Store listener %s failed", name)


class Store(Generic[S]):
    """Owns a state snapshot and publishes each new one to subscribers."""

    name = "store"

    def __init__(self, initial: S):
        self._check(initial)
        self._state = initial
        self._subscriptions: list[_Subscription] = []
        self._pending: deque[Transition] = deque()
        self._notifying = False

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_state(self) -> S:
        """Current snapshot.  Safe to keep: snapshots are immutable."""
        return self._state

    def subscribe(
        self,
        listener: Listener,
        selector: Selector | None = None,
        equality: Equality = operator.eq,
        fire_immediately: bool = False,
    ) -> Callable[[], None]:
        """Call ``listener(new, old)`` whenever the (selected) state changes.

        Without *selector* the listener receives whole snapshots.  With
        one, it receives ``selector(snapshot)`` and is only called when
        *equality* says the slice changed.  Returns an unsubscribe
        function.
        """
        sub = _Subscription(listener, selector, equality, self._state)
        self._subscriptions.append(sub)
        if fire_immediately:
            sub.fire()

        def unsubscribe() -> None:
            sub.active = False
            if sub in self._subscriptions:
                self._subscriptions.remove(sub)

        return unsubscribe

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _set(self, **changes: Any) -> None:
        """Apply a field-level update to the snapshot."""
        self._apply(lambda state: replace(state, **changes))

    def _apply(self, transition: Transition) -> None:
        if self._notifying:
            self._pending.append(transition)
            return
        self._run(transition)
        while self._pending:
            self._run(self._pending.popleft())

    def _run(self, transition: Transition) -> None:
        previous = self._state
        current = transition(previous)
        if current == previous:
            return
        self._check(current)
        self._state = current
        try:
            self._on_change(previous, current)
        finally:
            self._notify(current)

    def _notify(self, state: S) -> None:
        self._notifying = True
        try:
            for sub in list(self._subscriptions):
                if sub.active:
                    sub.deliver(state)
        finally:
            self._notifying = False

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _check(self, state: S) -> None:
        """Raise ``InvariantViolation`` if *state* must not be published."""

    def _on_change(self, previous: S, current: S) -> None:
        """Called after a new snapshot is installed, before notification."""
