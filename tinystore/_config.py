from enum import Enum

from pydantic import BaseModel, ConfigDict


__all__ = (
    "ListenerErrorPolicy",
    "StoreConfig",
)


class ListenerErrorPolicy(str, Enum):
    RAISE = "raise"
    ISOLATE = "isolate"


class StoreConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "store"
    listener_errors: ListenerErrorPolicy = ListenerErrorPolicy.RAISE
