"""Aggregation strategies — combine one poll's verdicts into a boolean."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from authorizer.verdict import Strategy, Verdict

Aggregator = Callable[[Sequence[Verdict]], bool]


def affirmative(verdicts: Sequence[Verdict]) -> bool:
    """Allow if **at least one** voter allows."""
    return Verdict.ALLOW in verdicts


def consensus(verdicts: Sequence[Verdict]) -> bool:
    """Allow if allows strictly outnumber denies.  Abstains are ignored; ties deny."""
    allows = sum(1 for v in verdicts if v is Verdict.ALLOW)
    denies = sum(1 for v in verdicts if v is Verdict.DENY)
    return allows > denies


def unanimous(verdicts: Sequence[Verdict]) -> bool:
    """Allow only if every non-abstaining voter allows and at least one voted."""
    cast = [v for v in verdicts if v is not Verdict.ABSTAIN]
    return bool(cast) and all(v is Verdict.ALLOW for v in cast)


STRATEGIES: dict[Strategy, Aggregator] = {
    Strategy.AFFIRMATIVE: affirmative,
    Strategy.CONSENSUS: consensus,
    Strategy.UNANIMOUS: unanimous,
}


def aggregate(strategy: Strategy, verdicts: Sequence[Verdict]) -> bool:
    """Apply *strategy* to *verdicts*."""
    return STRATEGIES[Strategy(strategy)](verdicts)
