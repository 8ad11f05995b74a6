"""Context parsers — derive the value handed to voters from decide() arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

# A parser receives the raw ``decide`` arguments and returns the context.
# It may be sync or async.
ContextParser = Callable[..., Any]


def default_context_parser(
    subject: Any = None,
    action: Any = None,
    obj: Any = None,
    *extra: Any,
    **kwargs: Any,
) -> Any:
    """Return *subject* unchanged."""
    return subject
