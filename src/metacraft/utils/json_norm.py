"""Canonical JSON serialization — single dump path for CLI output and JSON-LD.

Guarantees:
  - ``stable_json_dumps``: sorted keys, trailing newline, enums → values,
    dataclasses → dicts, optional float rounding
  - ``script_safe_json_dumps``: insertion order kept, compact, and safe to
    place inside a ``<script>`` element (``<``, ``>``, ``&`` escaped)
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import IO, Any, Mapping

_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, str):
        return obj
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_builtin(asdict(obj))
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_to_builtin(v) for v in obj]
    return str(obj)


def _round_floats(obj: Any, *, ndigits: int) -> Any:
    if isinstance(obj, float):
        return round(obj, ndigits)
    if isinstance(obj, Mapping):
        return {k: _round_floats(v, ndigits=ndigits) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_round_floats(v, ndigits=ndigits) for v in obj]
    return obj


def stable_json_dumps(
    obj: Any,
    *,
    ndigits: int | None = None,
    indent: int | None = 2,
) -> str:
    """Sorted, pretty JSON with a trailing newline (CLI ``--json`` output)."""
    built = _to_builtin(obj)
    if ndigits is not None:
        built = _round_floats(built, ndigits=ndigits)
    return json.dumps(built, indent=indent, sort_keys=True, ensure_ascii=False) + "\n"


def stable_json_dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    fp.write(stable_json_dumps(obj, **kwargs))


def script_safe_json_dumps(obj: Any) -> str:
    """Compact JSON for an inline ``<script type="application/ld+json">``.

    Key order is preserved (``@context`` first). Characters that could close
    the script element or start an entity are emitted as unicode escapes.
    """
    s = json.dumps(_to_builtin(obj), ensure_ascii=False, separators=(",", ":"))
    for ch, esc in _SCRIPT_ESCAPES.items():
        s = s.replace(ch, esc)
    return s
