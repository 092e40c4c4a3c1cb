from ._config import ListenerErrorPolicy, StoreConfig
from ._reducer import ActionReducer, Reducer, get_reducer_generic_args
from ._store import (
    InvalidStateError,
    Listener,
    ListenerErrorHandler,
    StateFactory,
    Store,
    StoreError,
    Unsubscribe,
    create_store
)


__all__ = (
    "ActionReducer",
    "InvalidStateError",
    "Listener",
    "ListenerErrorHandler",
    "ListenerErrorPolicy",
    "Reducer",
    "StateFactory",
    "Store",
    "StoreConfig",
    "StoreError",
    "Unsubscribe",

    "create_store",
    "get_reducer_generic_args",
)
