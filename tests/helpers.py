"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: failure builders, a recording
handler, and a wrapper subclass for transformer tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hypothesis import strategies as st

from failbridge.errors import Failure, UncheckedFailure

#: Messages including the absent and empty cases.
messages = st.one_of(st.none(), st.text(max_size=40))


def failure(message: str | None) -> Failure:
    return Failure(message)


def unchecked_failure(message: str | None) -> UncheckedFailure:
    return UncheckedFailure(failure(message))


def raise_failure(message: str | None) -> Any:
    """Plain callable body that fails the unchecked way."""
    raise unchecked_failure(message)


class ExpectedUncheckedFailure(UncheckedFailure):
    """Wrapper subclass built by a custom transformer."""


@dataclass
class Recorder:
    """Handler that records every failure it receives."""

    seen: list[Failure] = field(default_factory=list)
    fallback: Any = None

    def __call__(self, failure: Failure) -> Any:
        self.seen.append(failure)
        return self.fallback

    @property
    def last(self) -> Failure | None:
        return self.seen[-1] if self.seen else None


@dataclass
class CountingFactory:
    """Failure factory that counts calls and yields a scripted result."""

    result: Failure | None = None
    calls: int = 0

    def __call__(self) -> Failure | None:
        self.calls += 1
        return self.result
