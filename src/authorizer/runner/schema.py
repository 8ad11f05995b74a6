# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models describe an authorizer configuration (options and
polls), a single decision request, and the JSON report written back.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PollConfigSchema(BaseModel):
    """Single poll configuration.

    Attributes:
        subject: Subject pattern (``null`` = wildcard)
        action:  Action pattern (``null`` = wildcard)
        obj:     Object pattern (``null`` = wildcard), serialized as ``object``
        voters:  Names of the voters consulted by this poll
        options: Poll options, e.g. ``{"strategy": "consensus"}``
    """

    model_config = ConfigDict(populate_by_name=True)

    subject: Any = None
    action: Any = None
    obj: Any = Field(default=None, alias="object")
    voters: list[str] | None = None
    options: dict[str, Any] = Field(default_factory=dict)


class AuthorizerConfigSchema(BaseModel):
    """Complete authorizer configuration.

    Attributes:
        options: Authorizer options, e.g. ``{"default_strategy": "unanimous"}``
        polls:   Polls in registration order
    """

    options: dict[str, Any] = Field(default_factory=dict)
    polls: list[PollConfigSchema] = Field(default_factory=list)


class DecisionRequestSchema(BaseModel):
    """A single decision request.

    Attributes:
        subject: Concrete subject
        action:  Concrete action
        obj:     Concrete object, serialized as ``object``
        extra:   Extra positional arguments forwarded to the context parser
    """

    model_config = ConfigDict(populate_by_name=True)

    subject: Any = None
    action: Any = None
    obj: Any = Field(default=None, alias="object")
    extra: list[Any] = Field(default_factory=list)


class RunnerInput(BaseModel):
    """Complete runner input, read from stdin.

    Attributes:
        voters_path: Absolute path to the Python file defining ``voters``
        work_dir:    Working directory for the voters module
        config:      Authorizer configuration
        request:     The request to decide
    """

    voters_path: str
    work_dir: str = ""
    config: AuthorizerConfigSchema = Field(default_factory=AuthorizerConfigSchema)
    request: DecisionRequestSchema = Field(default_factory=DecisionRequestSchema)


class VoteSchema(BaseModel):
    """One voter's verdict within a poll."""

    voter: str
    verdict: str


class PollOutcomeSchema(BaseModel):
    """How one matched poll voted.

    Attributes:
        poll:     The poll as configured
        verdicts: Per-voter verdicts, in the poll's voter order
        allowed:  Poll-level result
    """

    poll: dict[str, Any]
    verdicts: list[VoteSchema]
    allowed: bool


class RunnerOutput(BaseModel):
    """Complete runner output, written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success:    Whether the decision completed (allowed or denied)
        allowed:    The decision (``False`` on failure)
        outcomes:   Per-poll details
        error:      Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    allowed: bool = False
    outcomes: list[PollOutcomeSchema] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
