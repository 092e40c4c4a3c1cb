from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from .. import ActionReducer


__all__ = (
    "BioState",
    "IncrementNum",
    "UpdateBio",

    "bio_reducer",
)


class BioState(BaseModel):
    model_config = ConfigDict(frozen=True)

    num: int = 0
    name: str = ""
    age: Optional[int] = None


class UpdateBio(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["UPDATE_BIO"] = "UPDATE_BIO"
    name: str
    age: int


class IncrementNum(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["INCREMENT_NUM"] = "INCREMENT_NUM"
    incrementer: int


bio_reducer: ActionReducer[BioState, BaseModel] = ActionReducer()


@bio_reducer.on(UpdateBio)
def _update_bio(state: BioState, action: UpdateBio) -> BioState:
    return state.model_copy(update={"name": action.name, "age": action.age})


@bio_reducer.on(IncrementNum)
def _increment_num(state: BioState, action: IncrementNum) -> BioState:
    return state.model_copy(update={"num": state.num + action.incrementer})
