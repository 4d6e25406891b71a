"""
State-based method dispatch ("control paths") via decorators.

A *path builder* lets several implementations of one method coexist, each
registered under a state value. Calling the method on an instance looks up
the instance's state attribute and runs the implementation registered for
it.

Core idea
---------
- A base method is declared on a class; its name and docstring become the
  public ones.
- Implementations are registered with
  ``builder(Class, Class.method, state)(impl)``, keyed by
  ``(ClassName, MethodName, StateVal)``.
- The first registration replaces ``Class.method`` with a dispatcher that
  reads ``getattr(self, state_attr)`` and calls ``impl(self, *args, **kwargs)``.

Notes
-----
- Registries are closure-local to each builder; different builders never
  share entries.
- Registration happens at import time of the modules defining the
  implementations. The registry is not meant to be mutated afterwards.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

_MISSING = object()


def create_path_builder(
    state_attr: str = "_state",
) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Type[Exception], Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a path builder dispatching on ``getattr(self, state_attr)``.

    Parameters
    ----------
    state_attr : str
        Name of the instance attribute (or property) holding the dispatch
        state. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.

    Examples
    --------
    >>> manager = create_path_builder("mode")
    >>> class C:
    ...     def __init__(self, mode): self.mode = mode
    ...     def run(self, x): ...
    >>> @manager(C, C.run, "fast")
    ... def run_fast(self, x): return x
    >>> C("fast").run(3)
    3
    """

    MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Type[Exception], Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator registering an implementation of ``method`` for
        ``state``.

        Parameters
        ----------
        cls : Type
            Class receiving the dispatcher under ``method.__name__``.
        method : Callable
            Base method; its metadata is copied onto the dispatcher.
        state : Hashable
            State value selecting the decorated implementation.
        trap_exception : optional
            What to do when no implementation matches the current state:

            - ``None``: raise ``NotImplementedError``
            - a callable: call ``trap_exception(method, state)``, which is
              expected to raise; if it returns, ``NotImplementedError`` is
              raised

        Raises
        ------
        TypeError
            If ``state`` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        smk = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur = getattr(self, state_attr, _MISSING)
                if cur is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(type(self), repr(state_attr))
                    )
                if sm := methods_map.get(MethodKey(cls.__name__, method.__name__, cur)):
                    return sm(self, *args, **kwargs)
                if trap_exception is not None:
                    trap_exception(method, cur)
                raise NotImplementedError(
                    "Missing control path (state={}) for {}".format(repr(cur), repr(method))
                )

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
