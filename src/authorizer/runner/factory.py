# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Authorizer factory for building an authorizer from configuration.

Voters are code, so they are always supplied by the host as a mapping of
name to callable; only polls and options come from configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from authorizer.engine import Authorizer
from authorizer.exceptions import AuthorizerError

from .schema import AuthorizerConfigSchema


class AuthorizerFactoryError(Exception):
    """Raised when an authorizer cannot be built from configuration."""

    pass


class AuthorizerFactory:
    """Builds :class:`Authorizer` instances from configuration.

    Example:
        factory = AuthorizerFactory()
        config = AuthorizerConfigSchema.model_validate_json(raw)
        authorizer = factory.build(config, {"is_admin": is_admin})
    """

    def build(
        self,
        config: AuthorizerConfigSchema,
        voters: Mapping[str, Any],
        context_parser: Callable[..., Any] | None = None,
    ) -> Authorizer:
        """Create an authorizer, register *voters* then the configured polls.

        Args:
            config: Options and polls
            voters: Voter name -> evaluator
            context_parser: Optional context parser to install

        Returns:
            A fully registered authorizer

        Raises:
            AuthorizerFactoryError: If any registration fails
        """
        try:
            authorizer = Authorizer(config.options)
        except AuthorizerError as e:
            raise AuthorizerFactoryError(f"Invalid authorizer options: {e}") from e

        for name, evaluator in voters.items():
            try:
                authorizer.register_voter(name, evaluator)
            except AuthorizerError as e:
                raise AuthorizerFactoryError(f"Failed to register voter {name!r}: {e}") from e

        for index, poll in enumerate(config.polls):
            try:
                authorizer.register_poll(
                    poll.subject,
                    poll.action,
                    poll.obj,
                    poll.voters,
                    poll.options,
                )
            except AuthorizerError as e:
                raise AuthorizerFactoryError(f"Failed to register poll #{index}: {e}") from e

        if context_parser is not None:
            try:
                authorizer.register_context_parser(context_parser)
            except AuthorizerError as e:
                raise AuthorizerFactoryError(str(e)) from e

        return authorizer
