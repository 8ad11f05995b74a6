"""Authorizer — the central decision engine."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from authorizer.context import ContextParser, default_context_parser
from authorizer.exceptions import InvalidArgumentError, VoterNotFoundError
from authorizer.poll import AuthorizerOptions, Poll, PollOptions
from authorizer.polls import PollRegistry
from authorizer.registry import VoterRegistry
from authorizer.result import Decision, PollOutcome
from authorizer.strategies import aggregate
from authorizer.verdict import Verdict
from authorizer.voters import Voter

logger = logging.getLogger(__name__)


class Authorizer:
    """Decides whether a subject may perform an action on an object.

    Voters are registered by name, polls bind a subject/action/object
    pattern to a list of voter names and a strategy.  ``decide`` runs every
    matching poll and allows the request if **any** poll allows it.  When no
    poll matches the request is denied.

    Registration is expected to finish before the first ``decide`` call;
    the registries are not mutated afterwards and need no locking.

    Parameters:
        options: :class:`AuthorizerOptions` or a mapping of its fields.
                 Unknown keys are preserved on ``authorizer.options``.
    """

    def __init__(self, options: AuthorizerOptions | Mapping[str, Any] | None = None) -> None:
        self._options = self._normalize_options(options)
        self._voters = VoterRegistry()
        self._polls = PollRegistry(self._voters, self._options.default_strategy)
        self._context_parser: ContextParser = default_context_parser

    @staticmethod
    def _normalize_options(
        options: AuthorizerOptions | Mapping[str, Any] | None,
    ) -> AuthorizerOptions:
        if options is None:
            return AuthorizerOptions()
        if isinstance(options, AuthorizerOptions):
            return options
        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"Options must be a mapping, got {type(options).__name__}"
            )
        try:
            return AuthorizerOptions.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid authorizer options: {e}") from e

    # ── registration ─────────────────────────────────────────

    def register_voter(self, name: str, evaluator: Any) -> Voter:
        """Register *evaluator* (sync/async callable or :class:`Voter`) as *name*."""
        return self._voters.register(name, evaluator)

    def register_poll(
        self,
        subject: Any,
        action: Any,
        obj: Any,
        voter_names: Sequence[str] | None,
        options: PollOptions | Mapping[str, Any] | None = None,
    ) -> Poll:
        """Bind a subject/action/object pattern to voters.  ``None`` is a wildcard."""
        return self._polls.register(subject, action, obj, voter_names, options)

    def register_context_parser(self, parser: ContextParser) -> None:
        """Replace the function that derives the voter context from ``decide`` args."""
        if not callable(parser):
            raise InvalidArgumentError(
                f"Parser must be a function, got {type(parser).__name__}"
            )
        self._context_parser = parser

    # ── lookup ───────────────────────────────────────────────

    def find_polls(self, subject: Any, action: Any, obj: Any) -> list[Poll]:
        """Return every poll matching the triple, in registration order."""
        return self._polls.find(subject, action, obj)

    def find_voters(self, names: Sequence[str]) -> list[Voter] | None:
        """Return the voters for *names*, or ``None`` if any is not registered."""
        try:
            return self._voters.resolve(names)
        except VoterNotFoundError:
            return None

    # ── evaluation ───────────────────────────────────────────

    async def decide(
        self,
        subject: Any = None,
        action: Any = None,
        obj: Any = None,
        *extra: Any,
        **kwargs: Any,
    ) -> bool:
        """Return ``True`` if access is granted.

        Any exception raised by a voter (or by the context parser) propagates
        unchanged; a denial is always reported as ``False``.
        """
        decision = await self.evaluate(subject, action, obj, *extra, **kwargs)
        return decision.allowed

    async def evaluate(
        self,
        subject: Any = None,
        action: Any = None,
        obj: Any = None,
        *extra: Any,
        **kwargs: Any,
    ) -> Decision:
        """Like :meth:`decide` but return the full :class:`Decision` report."""
        context = await self._derive_context(subject, action, obj, *extra, **kwargs)

        polls = self.find_polls(subject, action, obj)
        if not polls:
            logger.debug(
                "No poll matched subject=%r action=%r object=%r; denying",
                subject,
                action,
                obj,
            )
            return Decision(allowed=False, context=context)

        ballots = [
            (name, voter)
            for poll in polls
            for name, voter in zip(
                poll.voter_names, self._voters.resolve(poll.voter_names), strict=True
            )
        ]
        verdicts = await self._collect(ballots, context)

        outcomes: list[PollOutcome] = []
        offset = 0
        for poll in polls:
            poll_verdicts = tuple(verdicts[offset : offset + len(poll.voter_names)])
            offset += len(poll.voter_names)
            allowed = aggregate(poll.strategy, poll_verdicts)
            logger.debug(
                "Poll subject=%r action=%r object=%r strategy=%s verdicts=%s -> %s",
                poll.subject,
                poll.action,
                poll.obj,
                poll.strategy,
                ",".join(v.value for v in poll_verdicts),
                allowed,
            )
            outcomes.append(PollOutcome(poll=poll, verdicts=poll_verdicts, allowed=allowed))

        return Decision(
            allowed=any(o.allowed for o in outcomes),
            context=context,
            outcomes=tuple(outcomes),
        )

    async def _derive_context(self, *args: Any, **kwargs: Any) -> Any:
        context = self._context_parser(*args, **kwargs)
        if inspect.isawaitable(context):
            context = await context
        return context

    async def _collect(self, ballots: list[tuple[str, Voter]], context: Any) -> list[Verdict]:
        """Run every voter concurrently and return their verdicts in order.

        The first failure is re-raised as-is after the remaining voters are
        cancelled.
        """
        tasks = [
            asyncio.create_task(self._cast(name, voter, context), name=f"voter:{name}")
            for name, voter in ballots
        ]
        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        failed = next(
            (t for t in tasks if t in done and not t.cancelled() and t.exception() is not None),
            None,
        )
        if failed is not None:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            raise failed.exception()  # type: ignore[misc]

        return [task.result() for task in tasks]

    @staticmethod
    async def _cast(name: str, voter: Voter, context: Any) -> Verdict:
        try:
            verdict = await voter.vote(context)
        except Exception as e:
            logger.warning("Voter %r failed: %s", name, e)
            raise
        return Verdict.coerce(verdict, name)

    # ── introspection ────────────────────────────────────────

    @property
    def options(self) -> AuthorizerOptions:
        return self._options

    @property
    def voters(self) -> VoterRegistry:
        return self._voters

    @property
    def polls(self) -> PollRegistry:
        return self._polls

    @property
    def context_parser(self) -> ContextParser:
        return self._context_parser

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of voters and polls.

        Poll patterns are exported as given; they are JSON-serializable as
        long as the registered patterns are.
        """
        polls = [p.export() for p in self._polls]
        return {
            "options": self._options.model_dump(mode="json"),
            "voters": [{**voter.export(), "name": name} for name, voter in self._voters.items()],
            "polls": polls,
            "poll_count": len(polls),
        }
