"""Tests for CallableVoter."""

import pytest

from authorizer import ABSTAIN, ALLOW, DENY, CallableVoter, InvalidVerdictError


async def test_sync_evaluator():
    voter = CallableVoter(name="adult", evaluator=lambda ctx: ALLOW if ctx["age"] >= 18 else DENY)
    assert await voter.vote({"age": 21}) is ALLOW
    assert await voter.vote({"age": 15}) is DENY


async def test_async_evaluator():
    async def check(ctx):
        return ctx.get("flag")

    voter = CallableVoter(name="flag", evaluator=check)
    assert await voter.vote({"flag": True}) is ALLOW
    assert await voter.vote({"flag": False}) is DENY
    assert await voter.vote({}) is ABSTAIN


async def test_voter_is_callable():
    voter = CallableVoter(name="yes", evaluator=lambda ctx: ALLOW)
    assert await voter("anything") is ALLOW


async def test_invalid_return_names_voter():
    voter = CallableVoter(name="broken", evaluator=lambda ctx: object())
    with pytest.raises(InvalidVerdictError, match="broken"):
        await voter.vote(None)


async def test_exception_propagates():
    def boom(ctx):
        raise KeyError("missing")

    voter = CallableVoter(name="boom", evaluator=boom)
    with pytest.raises(KeyError):
        await voter.vote({})


def test_export():
    def is_admin(ctx):
        return ALLOW

    data = CallableVoter(name="isAdmin", evaluator=is_admin).export()
    assert data["name"] == "isAdmin"
    assert data["type"] == "CallableVoter"
    assert data["evaluator"].endswith("is_admin")
