"""Voter abstractions."""

from authorizer.voters.base import Voter
from authorizer.voters.callable import CallableVoter, Evaluator

__all__ = [
    "CallableVoter",
    "Evaluator",
    "Voter",
]
