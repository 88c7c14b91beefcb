"""Exception hierarchy for failbridge.

Two families live here:

- ``Failure`` and ``UncheckedFailure`` are the values the bridge moves
  around. ``Failure`` is the expected, declared failure of user code;
  ``UncheckedFailure`` is the one propagating wrapper the bridge knows how
  to unwrap again.
- ``FailbridgeError`` and its subclasses report misuse of the library
  itself and are never relocated by it.
"""

from __future__ import annotations

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "FailbridgeError",
    "Failure",
    "UncheckedFailure",
]


class FailbridgeError(Exception):
    """Base exception for all failbridge errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ArgumentError(FailbridgeError, TypeError):
    """A required collaborator was missing or of the wrong kind."""


class ConfigurationError(FailbridgeError):
    """Configuration validation or resolution failed."""


class Failure(Exception):
    """An expected failure declared by a failable operation.

    Carries an optional message and an optional originating ``Failure``.
    Both are read-only once constructed. Subclass it to model specific
    failure kinds.

    Example:
        raise Failure("disk full", cause=Failure("quota exceeded"))
    """

    def __init__(self, message: str | None = None, *, cause: Failure | None = None) -> None:
        if cause is not None and not isinstance(cause, Failure):
            raise ArgumentError(
                f"cause must be a Failure or None, got {type(cause).__name__}",
                hint="Wrap foreign exceptions in a Failure subclass first.",
            )
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self._message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str | None:
        """The human-readable message, or ``None`` when absent."""
        return self._message

    @property
    def cause(self) -> Failure | None:
        """The originating failure, or ``None`` when absent."""
        return self._cause

    def __repr__(self) -> str:
        if self._cause is None:
            return f"{type(self).__name__}({self._message!r})"
        return f"{type(self).__name__}({self._message!r}, cause={self._cause!r})"


class UncheckedFailure(RuntimeError):
    """Propagating wrapper around a ``Failure``.

    This is the only propagating error shape that
    ``FailableAction.from_callable`` and ``FailableComputation.from_callable``
    unwrap back into the original failure.
    """

    def __init__(self, failure: Failure) -> None:
        if not isinstance(failure, Failure):
            raise ArgumentError(
                f"UncheckedFailure wraps a Failure, got {type(failure).__name__}",
            )
        name = type(failure).__name__
        super().__init__(f"{name}: {failure.message}" if failure.message else name)
        self._failure = failure
        self.__cause__ = failure

    @property
    def cause(self) -> Failure:
        """The wrapped failure."""
        return self._failure

    def __reduce__(self) -> tuple[type[UncheckedFailure], tuple[Failure]]:
        return (type(self), (self._failure,))
