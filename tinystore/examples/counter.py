from __future__ import annotations

import logging

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .. import Store, create_store


__all__ = (
    "CounterAction",
    "Decrement",
    "Increment",
    "IncrementBy",

    "counter_reducer",
    "main",
    "parse_action",
)


logger = logging.getLogger(__name__)


class Increment(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["INCREMENT"] = "INCREMENT"


class Decrement(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["DECREMENT"] = "DECREMENT"


class IncrementBy(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["INCREMENT_BY"] = "INCREMENT_BY"
    increment_by: int


CounterAction = Annotated[
    Union[Increment, Decrement, IncrementBy],
    Field(discriminator="type")
]

_action_adapter: TypeAdapter[CounterAction] = TypeAdapter(CounterAction)


def parse_action(data: Mapping[str, Any]) -> CounterAction:
    return _action_adapter.validate_python(data)


def counter_reducer(state: int, action: CounterAction) -> int:
    logger.debug("Action just came in: %r", action)

    if isinstance(action, Increment):
        return state + 1

    if isinstance(action, Decrement):
        return state - 1

    if isinstance(action, IncrementBy):
        return state + action.increment_by

    return state


def main() -> Store[int, CounterAction]:
    logging.basicConfig(level=logging.DEBUG)

    store: Store[int, CounterAction] = create_store(counter_reducer)

    store.subscribe(
        lambda: logger.info("State just changed: %s", store.get_state())
    )

    store.dispatch(Increment())
    store.dispatch(IncrementBy(increment_by=3))
    store.dispatch(Decrement())

    return store


if __name__ == "__main__":
    main()
