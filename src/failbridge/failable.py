"""Failable operations and their conversions to plain callables.

A failable is a zero-argument operation whose only expected way to fail is
raising :class:`~failbridge.errors.Failure`. Two shapes exist:

- :class:`FailableAction` produces no result.
- :class:`FailableComputation` produces a value of type ``T``.

Both share the generic base :class:`Failable`. Conversions go two ways:

- ``as_unchecked()`` / ``as_handled()`` turn a failable into a plain
  callable for call sites that cannot declare failure.
- ``from_callable()`` turns a plain callable back into a failable, unwrapping
  :class:`~failbridge.errors.UncheckedFailure` into the original failure.

``failing()`` and ``failing_with()`` build failables for deterministic fault
injection.

Example:
    ```python
    from failbridge import FailableAction, Failure

    class Flush(FailableAction):
        def attempt(self) -> None:
            raise Failure("disk full")

    flush = Flush().as_unchecked()  # plain callable, raises UncheckedFailure
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
import functools
import logging
from typing import Any, Generic, TypeVar

from failbridge._validation import _require_callable
from failbridge.config import Config
from failbridge.errors import ArgumentError, Failure, UncheckedFailure
from failbridge.types import FailureFactory, FailureHandler, FailureTransformer

__all__ = ["Failable", "FailableAction", "FailableComputation"]

log = logging.getLogger(__name__)

T = TypeVar("T")


# --- Shared bodies -----------------------------------------------------------


def _call_unwrapped(native: Callable[[], T]) -> T:
    try:
        return native()
    except UncheckedFailure as wrapped:
        log.debug("Unwrapping %s back into %r", type(wrapped).__name__, wrapped.cause)
        failure = wrapped.cause
    # Raised outside the except block so the failure keeps its own chain.
    raise failure


def _raise_produced(factory: FailureFactory) -> None:
    failure = factory()
    if failure is None:
        return
    if not isinstance(failure, Failure):
        raise ArgumentError(
            f"factory: must produce a Failure or None, got {type(failure).__name__}",
            hint="Wrap other exceptions in a Failure subclass inside the factory.",
        )
    raise failure


def _resolve_config(config: Config | None) -> Config:
    return Config.from_env() if config is None else config


# --- Base --------------------------------------------------------------------


class Failable(ABC, Generic[T]):
    """A zero-argument operation that may fail with :class:`Failure`.

    Implementations hold no mutable state; concurrent use is as safe as the
    collaborators they call.
    """

    @abstractmethod
    def attempt(self) -> T:
        """Run the operation.

        Raises:
            Failure: When the operation fails in an expected way.
        """

    def as_unchecked(
        self, transformer: FailureTransformer = UncheckedFailure
    ) -> Callable[[], T]:
        """Return a plain callable that raises ``transformer(failure)`` on failure.

        The raised error is chained ``from`` the original failure. With the
        default transformer the error is an :class:`UncheckedFailure`, which
        ``from_callable`` recognizes and unwraps.

        Args:
            transformer: Builds the propagating error from the failure.

        Raises:
            ArgumentError: If ``transformer`` is ``None`` or not callable.
        """
        _require_callable(transformer, "transformer")
        attempt = self.attempt

        def run_unchecked() -> T:
            try:
                return attempt()
            except Failure as failure:
                log.debug("Relocating %r as an unchecked error", failure)
                raise transformer(failure) from failure

        return run_unchecked

    @abstractmethod
    def as_handled(
        self, handler: Callable[[Failure], Any], *, config: Config | None = None
    ) -> Callable[[], T]:
        """Return a plain callable that passes any failure to ``handler``."""

    def _handled(
        self, handler: Callable[[Failure], Any], config: Config | None
    ) -> Callable[[], Any]:
        _require_callable(handler, "handler")
        level = _resolve_config(config).swallowed_log_level
        attempt = self.attempt

        def run_handled() -> Any:
            try:
                return attempt()
            except Failure as failure:
                log.log(level, "Handing %r to %r", failure, handler)
                return handler(failure)

        return run_handled


# --- Actions -----------------------------------------------------------------


class FailableAction(Failable[None]):
    """A failable operation that produces no result."""

    def as_handled(
        self,
        handler: FailureHandler[object],
        *,
        config: Config | None = None,
    ) -> Callable[[], None]:
        """Return a plain callable that passes any failure to ``handler``.

        The callable returns normally after the handler runs; the handler's
        return value is discarded. Anything the handler raises propagates.

        Args:
            handler: Consumes the failure.
            config: Logging settings; resolved from the environment when omitted.

        Raises:
            ArgumentError: If ``handler`` is ``None`` or not callable.
            ConfigurationError: If the environment holds an invalid setting.
        """
        handled = self._handled(handler, config)

        def run_handled() -> None:
            handled()

        return run_handled

    @classmethod
    def from_callable(cls, native: Callable[[], object]) -> FailableAction:
        """Adapt a plain callable, unwrapping :class:`UncheckedFailure`.

        Any other exception, including a ``Failure`` raised directly,
        propagates unchanged. The callable's return value is ignored.

        Raises:
            ArgumentError: If ``native`` is ``None`` or not callable.
        """
        _require_callable(native, "native")
        return _BodyAction(functools.partial(_call_unwrapped, native))

    @classmethod
    def failing_with(cls, factory: FailureFactory) -> FailableAction:
        """Return an action raising whatever ``factory`` produces on each attempt.

        A factory result of ``None`` means no failure this time, and the
        attempt succeeds silently.

        Raises:
            ArgumentError: If ``factory`` is ``None`` or not callable. Raised at
                attempt time if the factory produces anything but a
                ``Failure`` or ``None``.
        """
        _require_callable(factory, "factory")
        return _BodyAction(functools.partial(_raise_produced, factory))

    @classmethod
    def failing(cls, message: str | None = None) -> FailableAction:
        """Return an action that always fails with ``Failure(message)``."""
        return cls.failing_with(functools.partial(Failure, message))


@dataclass(frozen=True)
class _BodyAction(FailableAction):
    body: Callable[[], object]

    def attempt(self) -> None:
        self.body()


# --- Computations ------------------------------------------------------------


class FailableComputation(Failable[T]):
    """A failable operation that produces a value of type ``T``."""

    def as_handled(
        self,
        handler: FailureHandler[T],
        *,
        config: Config | None = None,
    ) -> Callable[[], T]:
        """Return a plain callable that falls back to ``handler(failure)``.

        Args:
            handler: Consumes the failure and produces the fallback result.
            config: Logging settings; resolved from the environment when omitted.

        Raises:
            ArgumentError: If ``handler`` is ``None`` or not callable.
            ConfigurationError: If the environment holds an invalid setting.
        """
        return self._handled(handler, config)

    @classmethod
    def from_callable(cls, native: Callable[[], T]) -> FailableComputation[T]:
        """Adapt a plain callable, unwrapping :class:`UncheckedFailure`.

        Raises:
            ArgumentError: If ``native`` is ``None`` or not callable.
        """
        _require_callable(native, "native")
        return _BodyComputation(functools.partial(_call_unwrapped, native))

    @classmethod
    def failing_with(cls, factory: FailureFactory) -> FailableComputation[Any]:
        """Return a computation raising whatever ``factory`` produces.

        When the factory yields ``None`` the attempt succeeds with ``None``.

        Raises:
            ArgumentError: If ``factory`` is ``None`` or not callable. Raised at
                attempt time if the factory produces anything but a
                ``Failure`` or ``None``.
        """
        _require_callable(factory, "factory")
        return _BodyComputation(functools.partial(_raise_produced, factory))

    @classmethod
    def failing(cls, message: str | None = None) -> FailableComputation[Any]:
        """Return a computation that always fails with ``Failure(message)``."""
        return cls.failing_with(functools.partial(Failure, message))


@dataclass(frozen=True)
class _BodyComputation(FailableComputation[T]):
    body: Callable[[], T]

    def attempt(self) -> T:
        return self.body()
