from __future__ import annotations

import logging

from threading import RLock
from typing import Any, Callable, Generic, Optional, TypeVar

from ._config import ListenerErrorPolicy, StoreConfig
from ._reducer import Reducer, get_reducer_generic_args


__all__ = (
    "InvalidStateError",
    "Listener",
    "ListenerErrorHandler",
    "StateFactory",
    "Store",
    "StoreError",
    "Unsubscribe",

    "create_store",
)


logger = logging.getLogger(__name__)


A = TypeVar("A")
S = TypeVar("S")


class StoreError(Exception):
    pass


class InvalidStateError(StoreError):
    pass


Listener = Callable[[], None]
ListenerErrorHandler = Callable[[Listener, Exception], None]
StateFactory = Callable[[], S]
Unsubscribe = Callable[[], None]


class Store(Generic[S, A]):
    state_type: Optional[Any]
    action_type: Optional[Any]
    config: StoreConfig

    def dispatch(self, action: A) -> None:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    @property
    def listener_count(self) -> int:
        raise NotImplementedError


class _Subscription:
    __slots__ = ("listener",)

    def __init__(self, listener: Listener) -> None:
        self.listener = listener


def _action_name(action: Any) -> str:
    tag = getattr(action, "type", None)

    if isinstance(tag, str):
        return tag

    return type(action).__qualname__


class _DefaultStore(Store[S, A]):
    _reducer: Reducer
    _state: S

    _subscriptions: list[_Subscription]
    _on_listener_error: Optional[ListenerErrorHandler]

    _lock: RLock
    _is_reducing: bool

    def __init__(
        self,
        state_type: Optional[Any],
        action_type: Optional[Any],
        reducer: Reducer,
        initial_state: S,
        config: StoreConfig,
        on_listener_error: Optional[ListenerErrorHandler]
    ) -> None:
        self.state_type = state_type
        self.action_type = action_type
        self.config = config

        self._reducer = reducer
        self._state = initial_state

        self._subscriptions = []
        self._on_listener_error = on_listener_error

        self._lock = RLock()
        self._is_reducing = False

    def _ensure_not_reducing(self, operation: str) -> None:
        if self._is_reducing:
            raise InvalidStateError(
                f"Cannot {operation} while the reducer is running"
            )

    def _report_listener_error(
        self,
        listener: Listener,
        error: Exception
    ) -> None:
        logger.exception(
            "Listener %r failed on store %s",
            listener,
            self.config.name
        )

        if self._on_listener_error is None:
            return

        try:
            self._on_listener_error(listener, error)
        except Exception:
            logger.warning(
                "on_listener_error callback failed on store %s",
                self.config.name,
                exc_info=True
            )

    def _notify(self, subscriptions: list[_Subscription]) -> None:
        isolate = self.config.listener_errors is ListenerErrorPolicy.ISOLATE

        for subscription in subscriptions:
            if not isolate:
                subscription.listener()
                continue

            try:
                subscription.listener()
            except Exception as error:
                self._report_listener_error(subscription.listener, error)

    def dispatch(self, action: A) -> None:
        with self._lock:
            self._ensure_not_reducing("dispatch")

            logger.debug(
                "Dispatching %s on store %s",
                _action_name(action),
                self.config.name
            )

            self._is_reducing = True

            try:
                state = self._reducer(self._state, action)
            finally:
                self._is_reducing = False

            self._state = state

            self._notify(list(self._subscriptions))

    def get_state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        with self._lock:
            self._ensure_not_reducing("subscribe")

            subscription = _Subscription(listener)
            self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            with self._lock:
                self._ensure_not_reducing("unsubscribe")

                if subscription in self._subscriptions:
                    self._subscriptions.remove(subscription)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)


_MISSING: Any = object()


def _initial_state(
    state_type: Optional[Any],
    initial_state: Any,
    initial_state_factory: Optional[StateFactory]
) -> Any:
    if initial_state is not _MISSING:
        return initial_state

    if initial_state_factory is not None:
        return initial_state_factory()

    message = (
        "Initial state required: pass initial_state, initial_state_factory "
        "or annotate the reducer's state parameter with a constructible type"
    )

    if not isinstance(state_type, type):
        raise TypeError(message)

    try:
        return state_type()
    except Exception as error:
        raise TypeError(message) from error


def create_store(
    reducer: Reducer,
    initial_state: Any = _MISSING,
    *,
    initial_state_factory: Optional[StateFactory] = None,
    config: Optional[StoreConfig] = None,
    on_listener_error: Optional[ListenerErrorHandler] = None
) -> Store[S, A]:
    state_type, action_type = get_reducer_generic_args(reducer)

    return _DefaultStore(
        state_type,
        action_type,
        reducer,
        _initial_state(state_type, initial_state, initial_state_factory),
        config or StoreConfig(),
        on_listener_error
    )
