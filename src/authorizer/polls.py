"""PollRegistry — stores polls and matches them against concrete requests."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from authorizer.exceptions import InvalidArgumentError
from authorizer.poll import Poll, PollOptions
from authorizer.registry import VoterRegistry
from authorizer.verdict import Strategy

logger = logging.getLogger(__name__)


class PollRegistry:
    """Ordered collection of polls.

    Polls are kept in **registration order**; identical patterns are never
    merged, so two registrations for the same triple are both consulted.

    Parameters:
        voters:           Registry used to validate voter names.
        default_strategy: Strategy for polls registered without one.
    """

    def __init__(
        self,
        voters: VoterRegistry,
        default_strategy: Strategy = Strategy.AFFIRMATIVE,
    ) -> None:
        self._voters = voters
        self._default_strategy = default_strategy
        self._polls: list[Poll] = []

    # ── registration ─────────────────────────────────────────

    def register(
        self,
        subject: Any,
        action: Any,
        obj: Any,
        voter_names: Sequence[str] | None,
        options: PollOptions | Mapping[str, Any] | None = None,
    ) -> Poll:
        """Validate and append a new poll.

        Raises:
            InvalidArgumentError: If *voter_names* is missing, not a list of
                names or empty, or if *options* names an unknown strategy.
            VoterNotFoundError: If any voter name is not registered.
        """
        names = self._validate_voter_names(voter_names)
        self._voters.resolve(names)

        poll = Poll(
            subject=subject,
            action=action,
            obj=obj,
            voter_names=names,
            options=self._normalize_options(options),
        )
        self._polls.append(poll)
        logger.debug(
            "Registered poll subject=%r action=%r object=%r voters=%s strategy=%s",
            subject,
            action,
            obj,
            ",".join(names),
            poll.strategy,
        )
        return poll

    @staticmethod
    def _validate_voter_names(voter_names: Any) -> tuple[str, ...]:
        if voter_names is None:
            raise InvalidArgumentError("Voters are required")
        # A bare string is a sequence of characters, not a list of names.
        if isinstance(voter_names, str | bytes) or not isinstance(voter_names, Sequence):
            raise InvalidArgumentError(
                f"Voters must be an array, got {type(voter_names).__name__}"
            )
        if not voter_names:
            raise InvalidArgumentError("Voters must not be empty")
        return tuple(voter_names)

    def _normalize_options(self, options: PollOptions | Mapping[str, Any] | None) -> PollOptions:
        if options is None:
            return PollOptions(strategy=self._default_strategy)

        if isinstance(options, PollOptions):
            if "strategy" in options.model_fields_set:
                return options
            return options.model_copy(update={"strategy": self._default_strategy})

        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"Options must be a mapping, got {type(options).__name__}"
            )

        data = dict(options)
        if data.get("strategy") is None:
            data["strategy"] = self._default_strategy
        try:
            return PollOptions.model_validate(data)
        except ValidationError as e:
            allowed = ", ".join(s.value for s in Strategy)
            raise InvalidArgumentError(
                f"Unknown strategy: {data['strategy']!r}. Available strategies: {allowed}"
            ) from e

    # ── matching ─────────────────────────────────────────────

    def find(self, subject: Any, action: Any, obj: Any) -> list[Poll]:
        """Return every poll matching the triple, in registration order.

        An empty list means no policy applies; it is not an error.
        """
        return [p for p in self._polls if p.matches(subject, action, obj)]

    # ── introspection ────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._polls)

    def __iter__(self) -> Iterator[Poll]:
        return iter(self._polls)
