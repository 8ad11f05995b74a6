"""Tests for PollRegistry — registration and matching."""

import pytest

from authorizer import (
    ALLOW,
    InvalidArgumentError,
    PollOptions,
    Strategy,
    VoterNotFoundError,
)
from authorizer.polls import PollRegistry


@pytest.fixture
def polls(voters):
    voters.register("isProjectOwner", lambda ctx: ALLOW)
    voters.register("isAdmin", lambda ctx: ALLOW)
    return PollRegistry(voters)


# ── registration ─────────────────────────────────────────────


def test_starts_empty(voters):
    assert len(PollRegistry(voters)) == 0


def test_register_defaults_to_affirmative(polls):
    poll = polls.register("user", "edit", "project", ["isProjectOwner"], {})
    assert len(polls) == 1
    assert poll.strategy is Strategy.AFFIRMATIVE
    assert poll.voter_names == ("isProjectOwner",)


def test_register_without_options(polls):
    poll = polls.register("user", "edit", "project", ["isProjectOwner"])
    assert poll.strategy is Strategy.AFFIRMATIVE


def test_register_with_strategy(polls):
    poll = polls.register(None, None, None, ["isAdmin"], {"strategy": "consensus"})
    assert poll.strategy is Strategy.CONSENSUS


def test_strategy_is_case_insensitive(polls):
    poll = polls.register(None, None, None, ["isAdmin"], {"strategy": "UNANIMOUS"})
    assert poll.strategy is Strategy.UNANIMOUS


def test_register_with_options_model(polls):
    poll = polls.register(None, None, None, ["isAdmin"], PollOptions(strategy=Strategy.UNANIMOUS))
    assert poll.strategy is Strategy.UNANIMOUS


def test_extra_options_are_kept(polls):
    poll = polls.register(None, None, None, ["isAdmin"], {"label": "admins"})
    assert poll.options.model_extra == {"label": "admins"}


def test_custom_default_strategy(voters):
    voters.register("isAdmin", lambda ctx: ALLOW)
    polls = PollRegistry(voters, default_strategy=Strategy.UNANIMOUS)

    assert polls.register(None, None, None, ["isAdmin"]).strategy is Strategy.UNANIMOUS
    assert polls.register(None, None, None, ["isAdmin"], PollOptions()).strategy is (
        Strategy.UNANIMOUS
    )
    explicit = polls.register(None, None, None, ["isAdmin"], {"strategy": "consensus"})
    assert explicit.strategy is Strategy.CONSENSUS


def test_unknown_strategy_rejected_at_registration(polls):
    with pytest.raises(InvalidArgumentError, match="Unknown strategy: 'majority'"):
        polls.register(None, None, None, ["isAdmin"], {"strategy": "majority"})
    assert len(polls) == 0


def test_options_must_be_mapping(polls):
    with pytest.raises(InvalidArgumentError, match="Options must be a mapping"):
        polls.register(None, None, None, ["isAdmin"], "consensus")


def test_voters_required(polls):
    with pytest.raises(InvalidArgumentError, match="Voters are required"):
        polls.register("user", "edit", "project", None, {})


def test_voters_must_be_array(polls):
    with pytest.raises(InvalidArgumentError, match="Voters must be an array"):
        polls.register("user", "edit", "project", True, {})


def test_voters_string_is_not_array(polls):
    with pytest.raises(InvalidArgumentError, match="Voters must be an array"):
        polls.register("user", "edit", "project", "isAdmin", {})


def test_voters_must_not_be_empty(polls):
    with pytest.raises(InvalidArgumentError, match="Voters must not be empty"):
        polls.register("user", "edit", "project", [], {})


def test_unknown_voters_all_reported(polls):
    with pytest.raises(VoterNotFoundError, match="Voter does not exist: bad,anotherbad"):
        polls.register("user", "edit", "project", ["bad", "anotherbad"], {})
    assert len(polls) == 0


def test_duplicates_coexist(polls):
    polls.register("user", "edit", "project", ["isAdmin"])
    polls.register("user", "edit", "project", ["isAdmin"])
    assert len(polls) == 2
    assert len(polls.find("user", "edit", "project")) == 2


# ── matching ─────────────────────────────────────────────────


def test_find_nothing_registered(voters):
    assert PollRegistry(voters).find("user", "edit", "project") == []


def test_wildcard_matches_everything(polls):
    poll = polls.register(None, None, None, ["isAdmin"])
    assert polls.find("user", "edit", "project") == [poll]
    assert polls.find(None, None, None) == [poll]
    assert polls.find(1, ("tuple",), {"a": 1}) == [poll]


def test_exact_match(polls):
    poll = polls.register("user", "edit", "project", ["isProjectOwner"])
    assert polls.find("user", "edit", "project") == [poll]


@pytest.mark.parametrize(
    "triple",
    [
        ("admin", "edit", "project"),
        ("user", "delete", "project"),
        ("user", "edit", "invoice"),
    ],
)
def test_every_dimension_must_match(polls, triple):
    polls.register("user", "edit", "project", ["isProjectOwner"])
    assert polls.find(*triple) == []


def test_partial_wildcard(polls):
    poll = polls.register(None, "read", None, ["isAdmin"])
    assert polls.find("anyone", "read", "anything") == [poll]
    assert polls.find("anyone", "write", "anything") == []


def test_find_preserves_registration_order(polls):
    specific = polls.register("user", "edit", "project", ["isProjectOwner"])
    broad = polls.register(None, None, None, ["isAdmin"])
    assert polls.find("user", "edit", "project") == [specific, broad]
    assert list(polls) == [specific, broad]


def test_match_uses_value_equality(polls):
    poll = polls.register(None, None, 1, ["isAdmin"])
    assert polls.find("u", "a", 1.0) == [poll]


def test_non_string_voter_names_reported_as_missing(polls):
    with pytest.raises(VoterNotFoundError, match="Voter does not exist: 1,bad") as exc_info:
        polls.register(None, None, None, [1, "bad", "isAdmin"])
    assert exc_info.value.names == [1, "bad"]
    assert len(polls) == 0


def test_unhashable_voter_name_reported_as_missing(polls):
    with pytest.raises(VoterNotFoundError) as exc_info:
        polls.register(None, None, None, [["a"]])
    assert exc_info.value.names == [["a"]]
