"""Tests for Decision and PollOutcome."""

from authorizer import ALLOW, DENY, Decision, Poll, PollOptions, PollOutcome


def _poll():
    return Poll(
        subject=None,
        action="edit",
        obj=None,
        voter_names=("isAdmin", "isOwner"),
        options=PollOptions(),
    )


def test_decision_defaults():
    d = Decision(allowed=False)
    assert d.context is None
    assert d.outcomes == ()
    assert not d.matched
    assert not d


def test_decision_truthiness():
    outcome = PollOutcome(poll=_poll(), verdicts=(DENY, ALLOW), allowed=True)
    d = Decision(allowed=True, context="alice", outcomes=(outcome,))
    assert d
    assert d.matched


def test_outcome_export():
    outcome = PollOutcome(poll=_poll(), verdicts=(DENY, ALLOW), allowed=True)
    data = outcome.export()
    assert data["allowed"] is True
    assert data["verdicts"] == [
        {"voter": "isAdmin", "verdict": "deny"},
        {"voter": "isOwner", "verdict": "allow"},
    ]
    assert data["poll"]["action"] == "edit"


def test_immutable():
    d = Decision(allowed=True)
    try:
        d.allowed = False  # type: ignore[misc]
        raise AssertionError("Should have raised")
    except AttributeError:
        pass
