"""
Tensor control-path manager for element-kind dispatch.

This module defines a shared control-path manager used to register and resolve
kind-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method
dispatch is performed based on the runtime value of ``self.kind`` on
Tensor objects (BOOLEAN, INTEGRAL or FLOATING).

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @tensor_control_path_manager(
        TensorMixin, TensorMixin.op, ElementKind.INTEGRAL, type_not_supported
    )
    @tensor_control_path_manager(
        TensorMixin, TensorMixin.op, ElementKind.FLOATING, type_not_supported
    )
    def op_numeric(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered kind matches ``self.kind``; any other kind raises the error built
by `type_not_supported`.

Notes
-----
- All control paths registered via this manager share a single internal
  registry, ensuring consistent dispatch behavior across the Tensor subsystem.
"""

from typing import Any, Callable

from ...domain._errors import InvalidTypeError
from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.kind`
tensor_control_path_manager = create_path_builder("kind")


def type_not_supported(method: Callable[..., Any], kind: Any) -> InvalidTypeError:
    """
    Build the error raised when no control path exists for an element kind.

    Parameters
    ----------
    method : Callable
        The base method that was called.
    kind : Any
        The element kind of the receiving tensor.

    Returns
    -------
    InvalidTypeError
        Error whose message names the operation and the unsupported kind.
    """
    name = getattr(kind, "name", repr(kind))
    return InvalidTypeError(f"{method.__name__}: {name} type not supported")
