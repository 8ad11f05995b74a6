"""CallableVoter — wrap any callable as a voter without subclassing."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from authorizer.verdict import Verdict
from authorizer.voters.base import Voter

# The evaluator can be sync or async.
# It receives the evaluation context and returns a Verdict (or bool / None).
Evaluator = Callable[[Any], Any]


class CallableVoter(Voter):
    """Wraps a plain callable as a voter.

    Parameters:
        name:      Unique voter name.
        evaluator: Callable ``(context) -> Verdict``.  May be sync or async.
                   ``True``/``False``/``None`` are accepted as ALLOW/DENY/ABSTAIN.
    """

    def __init__(self, *, name: str, evaluator: Evaluator) -> None:
        self._name = name
        self._evaluator = evaluator

    @property
    def name(self) -> str:
        return self._name

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    async def vote(self, context: Any) -> Verdict:
        result = self._evaluator(context)
        if inspect.isawaitable(result):
            result = await result
        return Verdict.coerce(result, self._name)

    def export(self) -> dict[str, Any]:
        data = super().export()
        data["evaluator"] = getattr(self._evaluator, "__qualname__", repr(self._evaluator))
        return data
