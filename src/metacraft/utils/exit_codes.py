"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — valid config, good contrast
  1   Violation — invalid field, contrast only OK for large text
  2   Error — low contrast, unparsable colour, usage error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
