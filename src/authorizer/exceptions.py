"""Custom exceptions for the authorizer package."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AuthorizerError(Exception):
    """Base exception for all authorizer errors."""


class InvalidArgumentError(AuthorizerError, TypeError):
    """Raised when a registration call receives a malformed argument."""


class VoterNotFoundError(AuthorizerError, LookupError):
    """Raised when one or more voter names are not registered.

    Every missing name is reported, not just the first one.
    """

    def __init__(self, names: Iterable[Any]) -> None:
        self.names = list(names)
        super().__init__(f"Voter does not exist: {','.join(map(str, self.names))}")


class InvalidVerdictError(AuthorizerError, ValueError):
    """Raised when a voter returns something that is not a verdict."""

    def __init__(self, voter_name: str, value: Any) -> None:
        self.voter_name = voter_name
        self.value = value
        who = f"Voter '{voter_name}'" if voter_name else "Voter"
        super().__init__(f"{who} returned an invalid verdict: {value!r}")
