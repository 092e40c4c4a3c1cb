import inspect

from inspect import signature
from types import SimpleNamespace
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    TypeVar,
    get_type_hints
)


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "ActionReducer",
    "Reducer",

    "get_reducer_generic_args",
)


Reducer = Callable[[S, A], S]
Handler = Callable[[S, Any], S]


class ActionReducer(Generic[S, A]):
    _handlers: dict[type, Handler]

    def __init__(self) -> None:
        self._handlers = {}

    def on(self, action_type: type) -> Callable[[Handler], Handler]:
        def register(handler: Handler) -> Handler:
            if action_type in self._handlers:
                raise ValueError(
                    f"Handler for {action_type.__qualname__} already registered"
                )

            self._handlers[action_type] = handler

            return handler

        return register

    def apply(self, state: S, action: A) -> S:
        handler = self._handlers.get(type(action))

        if handler is None:
            return state

        return handler(state, action)

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)


def _resolve(annotation: Any) -> Optional[Any]:
    if annotation is None or isinstance(annotation, TypeVar):
        return None

    return annotation


def _parameter_hint(target: Any, name: str) -> Optional[Any]:
    annotation = getattr(target, "__annotations__", {}).get(name)

    if not isinstance(annotation, str):
        return _resolve(annotation)

    scope = SimpleNamespace(
        __annotations__={name: annotation},
        __globals__=getattr(target, "__globals__", {})
    )

    try:
        hints = get_type_hints(scope)
    except (NameError, SyntaxError, TypeError):
        return None

    return _resolve(hints.get(name))


def get_reducer_generic_args(
    reducer: Reducer
) -> tuple[Optional[Any], Optional[Any]]:
    try:
        parameters = list(signature(reducer).parameters.values())
    except ValueError:
        return None, None

    if any(p.kind is p.VAR_POSITIONAL for p in parameters):
        return None, None

    positional = [
        p for p in parameters
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]

    if len(positional) < 2:
        raise TypeError("Reducer must accept (state, action)")

    if inspect.isfunction(reducer) or inspect.ismethod(reducer):
        target = reducer
    else:
        target = type(reducer).__call__

    state_param, action_param = positional[:2]

    try:
        hints = get_type_hints(target)
    except (NameError, SyntaxError, TypeError):
        pass
    else:
        return (
            _resolve(hints.get(state_param.name)),
            _resolve(hints.get(action_param.name))
        )

    return (
        _parameter_hint(target, state_param.name),
        _parameter_hint(target, action_param.name)
    )
