# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Dynamic loading of host-supplied voters.

Loads a Python module at runtime and extracts its ``voters`` mapping and
optional ``context_parser`` function.
"""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class VotersLoadError(Exception):
    """Raised when the voters module cannot be loaded."""

    pass


@dataclass(frozen=True)
class VotersModule:
    """What a voters module provides.

    Attributes:
        voters:         Voter name -> evaluator
        context_parser: Optional context parser, ``None`` to keep the default
    """

    voters: Mapping[str, Any]
    context_parser: Callable[..., Any] | None = None


def load_voters(voters_path: str, work_dir: str = "") -> VotersModule:
    """Load ``voters`` (and optionally ``context_parser``) from a Python file.

    Args:
        voters_path: Absolute path to the voters module
        work_dir: Working directory to add to sys.path for imports

    Returns:
        The loaded :class:`VotersModule`

    Raises:
        VotersLoadError: If the module cannot be loaded or is malformed

    Example:
        loaded = load_voters("/path/to/voters.py", "/path/to")
        loaded.voters["is_admin"]("alice")
    """
    path = Path(voters_path)

    if not path.exists():
        raise VotersLoadError(f"Voters file not found: {voters_path}")

    if not path.is_file():
        raise VotersLoadError(f"Voters path is not a file: {voters_path}")

    if path.suffix != ".py":
        raise VotersLoadError(f"Voters must be a .py file: {voters_path}")

    if work_dir and work_dir not in sys.path:
        sys.path.insert(0, work_dir)

    try:
        spec = importlib.util.spec_from_file_location("authorizer_voters", voters_path)
        if spec is None or spec.loader is None:
            raise VotersLoadError(f"Cannot create module spec: {voters_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules["authorizer_voters"] = module
        spec.loader.exec_module(module)

        voters = getattr(module, "voters", None)
        if not isinstance(voters, Mapping):
            raise VotersLoadError(
                f"Voters module must define a 'voters' mapping of name to callable: {voters_path}"
            )

        context_parser = getattr(module, "context_parser", None)
        if context_parser is not None and not callable(context_parser):
            raise VotersLoadError(f"'context_parser' must be callable: {voters_path}")

        return VotersModule(voters=voters, context_parser=context_parser)

    except VotersLoadError:
        raise
    except SyntaxError as e:
        raise VotersLoadError(f"Syntax error in voters module: {e}") from e
    except ImportError as e:
        raise VotersLoadError(f"Import error in voters module: {e}") from e
    except Exception as e:
        raise VotersLoadError(f"Failed to load voters module: {e}") from e
