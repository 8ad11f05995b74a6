"""Verdict and Strategy — the vocabulary shared by voters and polls."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from authorizer.exceptions import InvalidVerdictError


class Verdict(StrEnum):
    """The three-valued outcome of a single voter invocation."""

    ALLOW = "allow"
    DENY = "deny"
    ABSTAIN = "abstain"

    @classmethod
    def coerce(cls, value: Any, voter_name: str = "") -> Verdict:
        """Turn a voter's raw return value into a :class:`Verdict`.

        * ``Verdict`` members and their string values pass through.
        * ``True`` → ALLOW, ``False`` → DENY, ``None`` → ABSTAIN.

        Anything else raises :class:`InvalidVerdictError`.
        """
        if isinstance(value, Verdict):
            return value
        if value is None:
            return cls.ABSTAIN
        if isinstance(value, bool):
            return cls.ALLOW if value else cls.DENY
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidVerdictError(voter_name, value)


class Strategy(StrEnum):
    """How the verdicts of a poll are combined into one boolean."""

    AFFIRMATIVE = "affirmative"
    CONSENSUS = "consensus"
    UNANIMOUS = "unanimous"


ALLOW = Verdict.ALLOW
DENY = Verdict.DENY
ABSTAIN = Verdict.ABSTAIN

AFFIRMATIVE = Strategy.AFFIRMATIVE
CONSENSUS = Strategy.CONSENSUS
UNANIMOUS = Strategy.UNANIMOUS
