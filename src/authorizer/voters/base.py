"""Voter ABC — the single abstraction every evaluator is adapted to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from authorizer.verdict import Verdict


class Voter(ABC):
    """Base class for every voter.

    Subclasses **must** define a ``name`` property (or class attribute) and
    implement :meth:`vote`.  ``vote`` is always awaited by the engine and
    must return a :class:`Verdict`.

    Voters are also callable, so an instance can be handed straight to
    :meth:`Authorizer.register_voter`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this voter."""
        ...

    @abstractmethod
    async def vote(self, context: Any) -> Verdict:
        """Inspect *context* and return ALLOW, DENY or ABSTAIN."""
        ...

    async def __call__(self, context: Any) -> Verdict:
        return await self.vote(context)

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this voter."""
        return {"name": self.name, "type": type(self).__name__}
