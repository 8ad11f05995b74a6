"""Decision — the outcome of a single authorization request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from authorizer.poll import Poll
from authorizer.verdict import Verdict


@dataclass(frozen=True)
class PollOutcome:
    """How one matched poll voted.

    Attributes:
        poll:     The poll that was evaluated.
        verdicts: One verdict per voter, in the poll's voter order.
        allowed:  The poll-level result under the poll's strategy.
    """

    poll: Poll
    verdicts: tuple[Verdict, ...]
    allowed: bool

    def export(self) -> dict[str, Any]:
        return {
            "poll": self.poll.export(),
            "verdicts": [
                {"voter": name, "verdict": verdict.value}
                for name, verdict in zip(self.poll.voter_names, self.verdicts, strict=True)
            ],
            "allowed": self.allowed,
        }


@dataclass(frozen=True)
class Decision:
    """Immutable report returned by :meth:`Authorizer.evaluate`.

    Attributes:
        allowed:  ``True`` if at least one matched poll allowed.
        context:  The context every voter received.
        outcomes: One :class:`PollOutcome` per matched poll, in match order.
                  Empty when no poll matched (default deny).
    """

    allowed: bool
    context: Any = None
    outcomes: tuple[PollOutcome, ...] = field(default_factory=tuple)

    @property
    def matched(self) -> bool:
        """``False`` when no poll applied to the request."""
        return bool(self.outcomes)

    def __bool__(self) -> bool:
        return self.allowed
