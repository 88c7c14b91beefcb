"""Public callable aliases used across the bridge.

Example:
    ```python
    from failbridge import FailableComputation, Failure, types

    def fallback(failure: Failure) -> bytes:
        return b""

    handler: types.FailureHandler[bytes] = fallback
    read = FailableComputation.failing("disk full").as_handled(handler)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from failbridge.errors import Failure

T = TypeVar("T")

#: Consumes a failure and produces the replacement result (``None`` for actions).
FailureHandler = Callable[[Failure], T]

#: Consumes a failure and produces the propagating error to raise instead.
FailureTransformer = Callable[[Failure], BaseException]

#: Produces a failure to raise, or ``None`` for "no failure this time".
FailureFactory = Callable[[], Failure | None]

__all__ = ["FailureFactory", "FailureHandler", "FailureTransformer"]
