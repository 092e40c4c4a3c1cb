from __future__ import annotations

from typing import Optional

import pytest

from tinystore import ActionReducer, create_store, get_reducer_generic_args
from tinystore.examples.bio import BioState, IncrementNum, UpdateBio, bio_reducer


class Ping:
    pass


class SubPing(Ping):
    pass


def _typed(state: int, action: str) -> int:
    return state


class _CallableReducer:
    def __call__(self, state: float, action: bytes) -> float:
        return state


class TestActionReducer:

    def test_registered_handler_applied(self):
        reducer: ActionReducer[int, Ping] = ActionReducer()

        @reducer.on(Ping)
        def _ping(state: int, action: Ping) -> int:
            return state + 1

        assert reducer(0, Ping()) == 1
        assert reducer.apply(1, Ping()) == 2

    def test_unregistered_action_returns_same_state(self):
        reducer: ActionReducer[list, Ping] = ActionReducer()
        state: list = []

        assert reducer(state, Ping()) is state

    def test_lookup_uses_exact_class(self):
        reducer: ActionReducer[int, Ping] = ActionReducer()
        reducer.on(Ping)(lambda state, action: state + 1)

        assert reducer(0, SubPing()) == 0

    def test_duplicate_registration_rejected(self):
        reducer: ActionReducer[int, Ping] = ActionReducer()
        reducer.on(Ping)(lambda state, action: state)

        with pytest.raises(ValueError):
            reducer.on(Ping)(lambda state, action: state)

    def test_bio_scenario(self, bio_store):
        bio_store.dispatch(UpdateBio(name="Zak", age=17))
        bio_store.dispatch(IncrementNum(incrementer=5))

        assert bio_store.get_state() == BioState(num=5, name="Zak", age=17)

    def test_bio_reducer_does_not_mutate(self):
        initial = BioState()

        updated = bio_reducer(initial, UpdateBio(name="Zak", age=17))

        assert initial == BioState()
        assert updated is not initial

    def test_action_reducer_requires_initial_state(self):
        with pytest.raises(TypeError):
            create_store(ActionReducer())


class TestGenericArgs:

    def test_function_annotations(self):
        assert get_reducer_generic_args(_typed) == (int, str)

    def test_callable_instance_annotations(self):
        assert get_reducer_generic_args(_CallableReducer()) == (float, bytes)

    def test_unannotated(self):
        assert get_reducer_generic_args(lambda s, a: s) == (None, None)

    def test_type_vars_resolve_to_none(self):
        assert get_reducer_generic_args(ActionReducer()) == (None, None)

    def test_optional_state(self):
        def reducer(state: Optional[int], action: str) -> Optional[int]:
            return state

        state_type, action_type = get_reducer_generic_args(reducer)

        assert state_type == Optional[int]
        assert action_type is str

    def test_unresolvable_name_keeps_other_parameter(self):
        def reducer(state, action):
            return state

        reducer.__annotations__ = {"state": "Missing", "action": "str"}

        assert get_reducer_generic_args(reducer) == (None, str)

    def test_invalid_annotation_syntax_keeps_other_parameter(self):
        def reducer(state, action):
            return state

        reducer.__annotations__ = {"state": "int", "action": "not valid ("}

        assert get_reducer_generic_args(reducer) == (int, None)

    def test_var_positional_has_no_types(self):
        def reducer(*args: int) -> int:
            return args[0]

        assert get_reducer_generic_args(reducer) == (None, None)

    def test_too_few_parameters(self):
        with pytest.raises(TypeError):
            get_reducer_generic_args(lambda state: state)
