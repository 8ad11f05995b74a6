"""Poll — a subject/action/object pattern bound to voters and a strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from authorizer.verdict import Strategy

# A pattern equal to WILDCARD matches any concrete value.
WILDCARD = None


def _normalize_strategy(value: Any) -> Any:
    if isinstance(value, str) and not isinstance(value, Strategy):
        return value.lower()
    return value


class AuthorizerOptions(BaseModel):
    """Options accepted by :class:`~authorizer.Authorizer`.

    Attributes:
        default_strategy: Strategy given to polls registered without one.

    Unknown keys are kept so host applications can stash their own settings.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    default_strategy: Strategy = Strategy.AFFIRMATIVE

    @field_validator("default_strategy", mode="before")
    @classmethod
    def lower_strategy(cls, value: Any) -> Any:
        return _normalize_strategy(value)


class PollOptions(BaseModel):
    """Per-poll options.

    Attributes:
        strategy: How the poll's verdicts are combined.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    strategy: Strategy = Strategy.AFFIRMATIVE

    @field_validator("strategy", mode="before")
    @classmethod
    def lower_strategy(cls, value: Any) -> Any:
        return _normalize_strategy(value)


@dataclass(frozen=True)
class Poll:
    """An immutable poll registration.

    Attributes:
        subject:     Subject pattern, or ``WILDCARD``.
        action:      Action pattern, or ``WILDCARD``.
        obj:         Object pattern, or ``WILDCARD``.
        voter_names: Names of the voters consulted, in registration order.
        options:     Normalized :class:`PollOptions`.
    """

    subject: Any
    action: Any
    obj: Any
    voter_names: tuple[str, ...]
    options: PollOptions

    @property
    def strategy(self) -> Strategy:
        return self.options.strategy

    def matches(self, subject: Any, action: Any, obj: Any) -> bool:
        """``True`` when every pattern is a wildcard or equals its value."""
        return (
            _pattern_matches(self.subject, subject)
            and _pattern_matches(self.action, action)
            and _pattern_matches(self.obj, obj)
        )

    def export(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "action": self.action,
            "object": self.obj,
            "voters": list(self.voter_names),
            "options": self.options.model_dump(mode="json"),
        }


def _pattern_matches(pattern: Any, value: Any) -> bool:
    return pattern is WILDCARD or pattern == value
