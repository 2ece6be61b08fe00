"""Runtime settings read from the environment.

    RNL_DEBUG            dump tokens and AST and log at DEBUG level (1/true/yes/on)
    RNL_RECURSION_LIMIT  Python recursion limit applied before running a script


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass

DEFAULT_RECURSION_LIMIT = 10000

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Interpreter settings."""
    debug: bool = False
    recursion_limit: int = DEFAULT_RECURSION_LIMIT

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ValueError: If RNL_RECURSION_LIMIT is not a positive integer.
        """
        environ = os.environ if environ is None else environ
        debug = environ.get("RNL_DEBUG", "").strip().lower() in TRUTHY

        raw_limit = environ.get("RNL_RECURSION_LIMIT", "").strip()
        recursion_limit = DEFAULT_RECURSION_LIMIT
        if raw_limit:
            try:
                recursion_limit = int(raw_limit)
            except ValueError:
                raise ValueError(
                    f"RNL_RECURSION_LIMIT must be an integer, got '{raw_limit}'"
                ) from None
            if recursion_limit <= 0:
                raise ValueError(
                    f"RNL_RECURSION_LIMIT must be positive, got {recursion_limit}"
                )

        return cls(debug=debug, recursion_limit=recursion_limit)
