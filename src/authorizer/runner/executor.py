# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for deciding a single request from configuration.

Orchestrates the full flow:
1. Load host voters (or use injected ones)
2. Build the Authorizer from configuration
3. Evaluate the request
4. Return a structured result
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from authorizer.result import Decision

from .factory import AuthorizerFactory
from .handler import VotersModule, load_voters
from .schema import PollOutcomeSchema, RunnerInput, RunnerOutput, VoteSchema

logger = logging.getLogger(__name__)


class Executor:
    """Decides a request described by a :class:`RunnerInput`.

    Every failure, including voter failures, is reported through
    ``RunnerOutput.error`` so the caller always receives valid JSON; a
    denial is a successful run with ``allowed=False``.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with in-process voters:
        executor = Executor(voters={"is_admin": lambda ctx: True})
    """

    def __init__(self, voters: Mapping[str, Any] | None = None) -> None:
        """Initialize executor with optional injected voters.

        Args:
            voters: Voters to use instead of loading ``voters_path``.
        """
        self._injected_voters = voters

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Build the authorizer and decide the request.

        Args:
            input_data: Complete runner input

        Returns:
            RunnerOutput with the decision or error details
        """
        try:
            decision = await self._execute_internal(input_data)
        except Exception as e:
            logger.warning("Decision failed: %s: %s", type(e).__name__, e)
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
        return self._decision_output(decision)

    async def _execute_internal(self, input_data: RunnerInput) -> Decision:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        if self._injected_voters is not None:
            loaded = VotersModule(voters=self._injected_voters)
        else:
            loaded = load_voters(input_data.voters_path, input_data.work_dir)

        authorizer = AuthorizerFactory().build(
            input_data.config,
            loaded.voters,
            loaded.context_parser,
        )

        request = input_data.request
        return await authorizer.evaluate(
            request.subject,
            request.action,
            request.obj,
            *request.extra,
        )

    def _decision_output(self, decision: Decision) -> RunnerOutput:
        """Convert a Decision to RunnerOutput."""
        outcomes = []
        for outcome in decision.outcomes:
            exported = outcome.export()
            outcomes.append(
                PollOutcomeSchema(
                    poll=exported["poll"],
                    verdicts=[VoteSchema(**v) for v in exported["verdicts"]],
                    allowed=outcome.allowed,
                )
            )
        return RunnerOutput(success=True, allowed=decision.allowed, outcomes=outcomes)
