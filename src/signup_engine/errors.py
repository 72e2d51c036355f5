# signup_engine/errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class SignupEngineError(Exception):
    """Base class for every fatal error raised by the signup engine."""


class ParseError(SignupEngineError, ValueError):
    """A date token could not be turned into a valid calendar date."""

    def __init__(
        self, message: str, token: str | None = None, position: Optional[int] = None
    ) -> None:
        self.token = token
        self.position = position
        if position is not None:
            message = f"row {position}: {message}"
        super().__init__(message)


class ConfigurationError(SignupEngineError, ValueError):
    """Capacity (or another Config field) is missing or out of range."""


@dataclass(frozen=True)
class DuplicateIdentity:
    """
    Two or more input rows share the same email. `positions` are 1-based rows.

    Not fatal; surfaced by the pre-check and carried on the result so the
    report can list it.
    """

    email: str
    positions: tuple[int, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        rows = ", ".join(str(p) for p in self.positions)
        return f"{self.email} (rows {rows})"
