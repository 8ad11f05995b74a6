"""Shared test fixtures."""

import pytest

from authorizer import ALLOW, DENY, Authorizer
from authorizer.registry import VoterRegistry


@pytest.fixture
def voters():
    return VoterRegistry()


@pytest.fixture
def authorizer():
    return Authorizer()


@pytest.fixture
def project_authorizer(authorizer):
    """Owners may edit projects; admins may do anything."""
    authorizer.register_voter("isAdmin", lambda user: ALLOW if user["role"] == "admin" else DENY)
    authorizer.register_voter(
        "isProjectOwner",
        lambda user: ALLOW if user.get("owns") == "project" else DENY,
    )
    authorizer.register_poll(None, None, None, ["isAdmin"])
    authorizer.register_poll("user", "edit", "project", ["isProjectOwner"])
    authorizer.register_context_parser(lambda subject, action, obj, user: user)
    return authorizer


@pytest.fixture
def alice():
    return {"name": "alice", "role": "admin"}


@pytest.fixture
def bob():
    return {"name": "bob", "role": "member", "owns": "project"}


@pytest.fixture
def eve():
    return {"name": "eve", "role": "guest"}
