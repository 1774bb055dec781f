"""
Control paths: per-state method implementations selected at call time.

A tensor operator such as ``add`` behaves differently for BOOLEAN, integral
and floating tensors. Instead of branching inside one body, each behaviour is
written as its own function and registered as a *control path* of the base
method, keyed by the value of a state attribute on the receiver (for tensors,
``self.kind``).

Registering the first control path replaces the base method on its class with
a dispatcher. On every call the dispatcher reads the state attribute, looks up
``(class name, method name, state)`` and calls the matching implementation
with ``self`` and the original arguments.

Notes
-----
- The base method only documents the operation; its body never runs once a
  control path exists.
- Each `create_path_builder` call owns a private registry, so two builders
  never see each other's paths.
- Registration returns the implementation unchanged, so stacking decorators
  registers one function for several states.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

MissingPathHandler = Callable[[Callable[..., Any], Any], BaseException]
"""Builds the exception raised when the receiver's state has no control path."""

ControlPathKey = namedtuple("ControlPathKey", ["owner", "method", "state"])
"""Registry key: owning class name, base method name and state value."""


def create_path_builder(state_attribute: str) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[MissingPathHandler],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a registrar of control paths dispatched on `state_attribute`.

    Parameters
    ----------
    state_attribute : str
        Attribute (or property) of the receiver whose value selects the
        implementation.

    Returns
    -------
    Callable
        ``register(cls, method, state, on_missing=None)`` returning a
        decorator. Decorating ``impl`` registers it as the implementation of
        ``cls.method`` for `state` and installs the dispatcher on `cls`.

    Examples
    --------
    >>> register = create_path_builder("kind")
    >>> class Vector:
    ...     def __init__(self, kind):
    ...         self.kind = kind
    ...     def norm(self):
    ...         "Length of the vector."
    >>> @register(Vector, Vector.norm, "int")
    ... def norm_int(self):
    ...     return 1
    >>> Vector("int").norm()
    1
    """
    registry: Dict[ControlPathKey, Callable] = {}

    def register(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        on_missing: Optional[MissingPathHandler] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Prepare the registration of one control path.

        Parameters
        ----------
        cls : Type
            Class owning the base method; the dispatcher is installed on it.
        method : Callable[P, R]
            Base method. Its name and docstring are carried by the dispatcher.
            Passing an already installed dispatcher refers to the same base
            method.
        state : Hashable
            Value of the state attribute selecting this implementation.
        on_missing : Optional[MissingPathHandler]
            Builds the exception raised for a state without implementation.
            When None, `NotImplementedError` is raised. The handler of the
            latest registration on a method is the one in effect.

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

        base = getattr(method, "__control_path_base__", method)
        name = base.__name__
        owner = cls.__name__

        def decorator(implementation: Callable[P, R]) -> Callable[P, R]:
            registry[ControlPathKey(owner, name, state)] = implementation

            @wraps(base)
            def dispatcher(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                try:
                    current = getattr(self, state_attribute)
                except AttributeError:
                    raise NotImplementedError(
                        f"{type(self)} is missing attribute {state_attribute!r}"
                    ) from None

                target = registry.get(ControlPathKey(owner, name, current))
                if target is not None:
                    return target(self, *args, **kwargs)
                if on_missing is not None:
                    raise on_missing(base, current)
                raise NotImplementedError(
                    f"Missing control path ({state_attribute}={current!r}) for {base!r}"
                )

            dispatcher.__control_path_base__ = base
            setattr(cls, name, dispatcher)
            return implementation

        return decorator

    return register
