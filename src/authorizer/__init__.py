"""authorizer — a voting authorization decision engine.

Voters are named predicates returning ALLOW, DENY or ABSTAIN.  Polls bind a
subject/action/object pattern to voters and a strategy.  A request is
allowed when any matching poll allows it; no matching poll means deny.
"""

from authorizer.context import default_context_parser
from authorizer.engine import Authorizer
from authorizer.exceptions import (
    AuthorizerError,
    InvalidArgumentError,
    InvalidVerdictError,
    VoterNotFoundError,
)
from authorizer.poll import WILDCARD, AuthorizerOptions, Poll, PollOptions
from authorizer.result import Decision, PollOutcome
from authorizer.verdict import (
    ABSTAIN,
    AFFIRMATIVE,
    ALLOW,
    CONSENSUS,
    DENY,
    UNANIMOUS,
    Strategy,
    Verdict,
)
from authorizer.voters import CallableVoter, Voter

__all__ = [
    "ABSTAIN",
    "AFFIRMATIVE",
    "ALLOW",
    "CONSENSUS",
    "DENY",
    "UNANIMOUS",
    "WILDCARD",
    "Authorizer",
    "AuthorizerError",
    "AuthorizerOptions",
    "CallableVoter",
    "Decision",
    "InvalidArgumentError",
    "InvalidVerdictError",
    "Poll",
    "PollOptions",
    "PollOutcome",
    "Strategy",
    "Verdict",
    "Voter",
    "VoterNotFoundError",
    "default_context_parser",
]
