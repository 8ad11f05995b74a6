"""VoterRegistry — name → voter mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from authorizer.exceptions import InvalidArgumentError, VoterNotFoundError
from authorizer.voters import CallableVoter, Evaluator, Voter

logger = logging.getLogger(__name__)


class VoterRegistry:
    """Holds every registered voter, keyed by name.

    Registering a name that already exists replaces the previous voter.
    Polls reference voters by name, so they pick up the replacement.
    """

    def __init__(self) -> None:
        self._voters: dict[str, Voter] = {}

    def register(self, name: str, evaluator: Evaluator | Voter) -> Voter:
        """Register *evaluator* under *name* and return the stored voter.

        *evaluator* may be a :class:`Voter` or any sync/async callable.

        Raises:
            InvalidArgumentError: If *name* is not a string or *evaluator*
                is not a function.
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Name must be a string, got {type(name).__name__}")
        if not callable(evaluator):
            raise InvalidArgumentError(
                f"Voter must be a function, got {type(evaluator).__name__}"
            )

        if isinstance(evaluator, Voter):
            voter = evaluator
        else:
            voter = CallableVoter(name=name, evaluator=evaluator)

        if name in self._voters:
            logger.debug("Replacing voter %r", name)
        else:
            logger.debug("Registered voter %r", name)
        self._voters[name] = voter
        return voter

    def resolve(self, names: Iterable[str]) -> list[Voter]:
        """Return the voters for *names*, in order.

        Raises:
            VoterNotFoundError: Listing **every** name that is not registered.
        """
        names = list(names)
        # Non-string names (including unhashable ones) can never be registered.
        missing = [n for n in names if not isinstance(n, str) or n not in self._voters]
        if missing:
            raise VoterNotFoundError(missing)
        return [self._voters[n] for n in names]

    def get(self, name: str) -> Voter | None:
        """Look up a single voter; ``None`` if not registered."""
        return self._voters.get(name)

    def items(self) -> list[tuple[str, Voter]]:
        """Return (name, voter) pairs in registration order."""
        return list(self._voters.items())

    def names(self) -> list[str]:
        """Return registered voter names in registration order."""
        return list(self._voters)

    def __contains__(self, name: object) -> bool:
        return name in self._voters

    def __len__(self) -> int:
        return len(self._voters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._voters)
