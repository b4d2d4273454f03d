"""
Per-backend method dispatch.

`create_path_builder(state_attr)` returns a registration decorator. Each
registration binds one implementation of a base method to one value of
``self.<state_attr>``; the first registration replaces the base method on
the class with a dispatcher that looks the value up on every call.

numru keys its kernels on ``backend``:

    @array_control_path_manager(AMR, AMR._reduce_kernel, Backend("numpy"))
    def array_reduce_numpy(self, plan, op): ...

Each builder owns its registry. Registering the same method through two
builders leaves only the second builder's dispatcher installed.
"""

from typing import Any, Callable, Dict, Hashable, Optional, Type
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])
"""Registry key: owning class name, base method name, selecting state."""

TrapFactory = Callable[[Callable[..., Any], Any], BaseException]


def create_path_builder(
    state_attr: str,
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Return a registration decorator keyed on ``self.<state_attr>``.

    Parameters
    ----------
    state_attr : str
        Attribute read from the receiver on every call.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None)``, which returns
        a decorator registering its argument as the implementation of
        `method` for `state`.

    Raises
    ------
    ValueError
        If `state_attr` is empty.
    """
    if not isinstance(state_attr, str) or not state_attr:
        raise ValueError("state_attr must be a non-empty string")

    methods_map: Dict[MethodKey, Callable] = {}

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build the decorator registering one implementation of `method`.

        Parameters
        ----------
        cls : Type
            Class that receives the dispatcher.
        method : Callable
            Base method; its name and docstring are kept on the dispatcher.
        state : Hashable
            Value of the state attribute that selects the implementation.
        trap_exception : Optional[TrapFactory]
            Called as ``trap_exception(method, current_state)`` when nothing
            is registered for the current state; the returned exception is
            raised. Defaults to raising `NotImplementedError`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        smk = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                current = getattr(self, state_attr)
                key = MethodKey(cls.__name__, method.__name__, current)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path ({}={}) for {}".format(
                            state_attr, repr(current), method.__name__
                        )
                    )
                raise trap_exception(method, current)

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
