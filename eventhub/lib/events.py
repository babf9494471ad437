"""Publish/subscribe event registry for decoupling components.

Usage:
    events = EventRegistry()

    events.on("song_added", lambda payload: print(payload["title"]))
    events.once("first_run", show_welcome)
    handle = events.on("volume_changed", update_display)

    events.fire("song_added", {"title": "Africa"})
    handle.cancel()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Union

from eventhub.config import RegistryConfig
from eventhub.lib.exceptions import InvalidArgument

logger = logging.getLogger(__name__)

EventName = str
Callback = Callable[..., Any]
NameOrNames = Union[EventName, Iterable[EventName]]

_NAME_SEQUENCES = (list, tuple, set, frozenset)

# Default for fire(), so that an explicit None payload is delivered as-is
_NO_PAYLOAD = object()


@dataclass(frozen=True, eq=False)
class PlainSubscription:
    """A callback registered with ``on``."""

    callback: Callback
    context: Any

    def matches(self, callback: Callback) -> bool:
        return self.callback == callback


@dataclass(frozen=True, eq=False)
class OnceSubscription:
    """A self-removing adapter registered with ``once``.

    ``callback`` is the adapter that is actually invoked, ``original`` is the
    user's callback so that ``off`` can be called with either one.
    """

    callback: Callback
    context: Any
    original: Callback

    def matches(self, callback: Callback) -> bool:
        return self.callback == callback or self.original == callback


Subscription = Union[PlainSubscription, OnceSubscription]


@dataclass(frozen=True)
class SubscriptionHandle:
    """Cancels one registration without knowing its name, callback or context."""

    registry: "EventRegistry"
    name: EventName
    callback: Callback
    # Contexts may be unhashable, so they stay out of __eq__ and __hash__
    context: Any = field(compare=False)

    def cancel(self) -> None:
        """Remove the subscription. Safe to call more than once."""
        self.registry.off(self.name, self.callback, self.context)

    # Name used by callers ported from the JavaScript API
    off = cancel


def detach_events(handles: Iterable[SubscriptionHandle] | None = None) -> None:
    """Cancel every handle in ``handles``, in order. ``None`` or empty is a no-op."""
    if not handles:
        return

    for handle in handles:
        handle.cancel()


class EventRegistry:
    """Shared registry mapping event names to ordered subscriber lists.

    Subscribers are invoked synchronously, in registration order, on the
    thread that calls ``fire``. Exceptions raised by a subscriber propagate to
    the caller of ``fire`` unless ``isolate_failures`` is enabled in the
    registry config.

    A subscriber registered without a context is called as ``callback(payload)``.
    With an explicit context it is called as ``callback(context, payload)``.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or RegistryConfig()
        self._subscriptions: dict[EventName, list[Subscription]] = {}
        self._lock = threading.RLock()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._subscriptions

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def __repr__(self) -> str:
        return f"<EventRegistry events={len(self)}>"

    def on(
        self, name: NameOrNames, callback: Callback, context: Any = None
    ) -> SubscriptionHandle | bool:
        """Subscribe ``callback`` to one event name or to each of a sequence of names.

        Returns a SubscriptionHandle for a single name, or True when a sequence
        of names was given.
        """
        names = self._validate(name, callback)
        context = self if context is None else context

        if names is not None:
            for event_name in names:
                self.on(event_name, callback, context)
            return True

        self._append(name, PlainSubscription(callback, context))
        return SubscriptionHandle(self, name, callback, context)

    def once(
        self, name: NameOrNames, callback: Callback, context: Any = None
    ) -> SubscriptionHandle | bool:
        """Subscribe ``callback`` to run on the next fire only, then unsubscribe.

        Each name in a sequence gets its own one-shot subscription.
        """
        names = self._validate(name, callback)
        context = self if context is None else context

        if names is not None:
            for event_name in names:
                self.once(event_name, callback, context)
            return True

        fired = False

        def once_callback(*args: Any, **kwargs: Any) -> Any:
            nonlocal fired
            # An outer fire or another thread may still hold this adapter in its snapshot
            with self._lock:
                if fired:
                    return None
                fired = True
                self.off(name, once_callback, context)
            return callback(*args, **kwargs)

        self._append(name, OnceSubscription(once_callback, context, callback))
        return SubscriptionHandle(self, name, once_callback, context)

    def fire(self, name: EventName, payload: Any = _NO_PAYLOAD) -> None:
        """Call every subscriber of ``name`` with ``payload`` (an empty dict when omitted).

        Subscribers see the list as it was when firing started, so removing or
        adding subscriptions from within a callback takes effect on the next fire.
        """
        if payload is _NO_PAYLOAD:
            payload = {}

        with self._lock:
            subscriptions = tuple(self._subscriptions.get(name, ()))

        logger.debug(f"Firing << {name} >> to {len(subscriptions)} subscriber(s)")
        for subscription in subscriptions:
            try:
                self._deliver(subscription, payload)
            except Exception:
                if not self.config.isolate_failures:
                    raise
                logger.exception(f"Subscriber {subscription.callback!r} of << {name} >> failed")

    def off(self, name: EventName, callback: Callback, context: Any = None) -> None:
        """Remove every subscription of ``name`` matching ``callback``.

        A one-shot subscription matches both its adapter and the original
        callback. When ``context`` is given only subscriptions with an equal
        context are removed. Unknown names are ignored.
        """
        with self._lock:
            subscriptions = self._subscriptions.get(name)
            if subscriptions is None:
                return

            for idx in range(len(subscriptions) - 1, -1, -1):
                subscription = subscriptions[idx]
                if not subscription.matches(callback):
                    continue
                if (
                    context is not None
                    and subscription.context is not context
                    and subscription.context != context
                ):
                    continue
                del subscriptions[idx]
                logger.debug(f"Unsubscribed {callback!r} from << {name} >>")

            if not subscriptions:
                del self._subscriptions[name]

    def remove_all_subscriptions(self) -> EventRegistry:
        with self._lock:
            self._subscriptions = {}
        logger.debug("Removed all subscriptions")
        return self

    def get_all_subscriptions(self) -> Mapping[EventName, tuple[Subscription, ...]]:
        """Return a read-only snapshot of the subscriptions, keyed by event name."""
        with self._lock:
            return MappingProxyType(
                {name: tuple(subs) for name, subs in self._subscriptions.items()}
            )

    def has_subscribers(self, name: EventName) -> bool:
        return name in self

    def detach_events(self, handles: Iterable[SubscriptionHandle] | None = None) -> None:
        detach_events(handles)

    def _append(self, name: EventName, subscription: Subscription) -> None:
        with self._lock:
            self._subscriptions.setdefault(name, []).append(subscription)
        logger.debug(f"Subscribed {subscription.callback!r} to << {name} >>")

    def _deliver(self, subscription: Subscription, payload: Any) -> None:
        if subscription.context is self:
            subscription.callback(payload)
        else:
            subscription.callback(subscription.context, payload)

    @staticmethod
    def _validate(name: NameOrNames, callback: Callback) -> tuple[EventName, ...] | None:
        """Check arguments, returning the flattened names when a sequence was given."""
        if not callable(callback):
            raise InvalidArgument(f"Callback must be callable, got {type(callback).__name__}")

        if isinstance(name, str):
            return None

        return _flatten_names(name)


def _flatten_names(names: Any) -> tuple[EventName, ...]:
    """Flatten nested sequences of event names, keeping their order."""
    if not isinstance(names, _NAME_SEQUENCES):
        raise InvalidArgument(
            f"Event name must be a string or a sequence of strings, got {type(names).__name__}"
        )

    flat: list[EventName] = []
    for event_name in names:
        if isinstance(event_name, str):
            flat.append(event_name)
        elif isinstance(event_name, _NAME_SEQUENCES):
            flat.extend(_flatten_names(event_name))
        else:
            raise InvalidArgument(f"Event name must be a string, got {type(event_name).__name__}")
    return tuple(flat)
