# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the authorizer runner.

Usage:
    python -m authorizer.runner < input.json > output.json

The runner reads JSON input from stdin, decides the request and writes
JSON output to stdout.

Exit codes:
    0: Allowed
    1: Denied
    2: Failure (error details in JSON output)
"""

from __future__ import annotations

import asyncio
import sys

from .executor import Executor
from .schema import RunnerInput, RunnerOutput


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 allowed, 1 denied, 2 failure)
    """
    try:
        input_data = RunnerInput.model_validate_json(sys.stdin.read())

        output = asyncio.run(Executor().execute(input_data))

        print(output.model_dump_json())

        if not output.success:
            return 2
        return 0 if output.allowed else 1

    except Exception as e:
        # Ensure we always output valid JSON, even on unexpected errors
        error_output = RunnerOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 2


if __name__ == "__main__":
    sys.exit(main())
