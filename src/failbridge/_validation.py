"""Internal validation helpers shared by the failable constructors.

Checks run eagerly, before any collaborator is invoked, so a conversion
never starts with a missing piece.
"""

from __future__ import annotations

import typing

from failbridge.errors import ArgumentError


def _require(
    *,
    condition: bool,
    message: str,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise ArgumentError(f"{field_name}: {message}", hint=hint)
        raise ArgumentError(message, hint=hint)


def _require_callable(func: typing.Any, field_name: str) -> None:
    """Reject a missing or non-callable collaborator."""
    _require(
        condition=func is not None,
        message="must not be None",
        field_name=field_name,
    )
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
    )
