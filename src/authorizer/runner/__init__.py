# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for deciding requests from JSON configuration.

Usage:
    python -m authorizer.runner < input.json > output.json

Exports:
    Executor: Builds an authorizer and decides one request
    AuthorizerFactory: Creates authorizers from configuration
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .factory import AuthorizerFactory, AuthorizerFactoryError
from .handler import VotersLoadError, VotersModule, load_voters
from .schema import (
    AuthorizerConfigSchema,
    DecisionRequestSchema,
    PollConfigSchema,
    PollOutcomeSchema,
    RunnerInput,
    RunnerOutput,
    VoteSchema,
)

__all__ = [
    "AuthorizerConfigSchema",
    "AuthorizerFactory",
    "AuthorizerFactoryError",
    "DecisionRequestSchema",
    "Executor",
    "PollConfigSchema",
    "PollOutcomeSchema",
    "RunnerInput",
    "RunnerOutput",
    "VoteSchema",
    "VotersLoadError",
    "VotersModule",
    "load_voters",
]
