"""Run-now facade over both failable shapes.

``run()`` saves call sites that already hold a failable from picking the
right conversion method: it converts and invokes in one step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar, overload

from failbridge._validation import _require
from failbridge.failable import Failable

if TYPE_CHECKING:
    from failbridge.failable import FailableAction, FailableComputation
    from failbridge.types import FailureHandler

__all__ = ["run"]

T = TypeVar("T")


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Final = _Unset()


@overload
def run(failable: FailableAction) -> None: ...


@overload
def run(failable: FailableAction, handler: FailureHandler[object]) -> None: ...


@overload
def run(failable: FailableComputation[T]) -> T: ...


@overload
def run(failable: FailableComputation[T], handler: FailureHandler[T]) -> T: ...


def run(failable: Failable[Any], handler: Any = _UNSET) -> Any:
    """Run a failable now, relocating its failure.

    Without a handler a failure surfaces as
    :class:`~failbridge.errors.UncheckedFailure`. With a handler the failure
    goes to the handler instead: actions then return ``None`` and
    computations return the handler's fallback.

    Args:
        failable: The action or computation to run.
        handler: Optional failure handler. Passing ``None`` is an error.

    Returns:
        The computed value, the handler's fallback, or ``None`` for actions.

    Raises:
        ArgumentError: If ``failable`` is not a failable or ``handler`` is ``None``.
        UncheckedFailure: If the failable fails and no handler was given.

    Example:
        data = run(read_config, lambda failure: b"{}")
    """
    _require(
        condition=isinstance(failable, Failable),
        message=f"expected a FailableAction or FailableComputation, got {type(failable).__name__}",
        field_name="failable",
        hint="Wrap plain callables with FailableAction.from_callable() first.",
    )
    if handler is _UNSET:
        return failable.as_unchecked()()
    return failable.as_handled(handler)()
