"""Load and validate JSON instances against the bundled schemas.

Usage::

    from metacraft.contracts.load import validate_instance

    validate_instance(build_jsonld(config), "jsonld.schema.json")
    validate_instance(response.json(), "preview_response.schema.json")
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/metacraft/data/schemas/`` relative to this file
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("metacraft") / SCHEMA_DIR / name) as p:
        if not p.exists():
            raise FileNotFoundError(f"schema not found: {name}")
        return p


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_schema_path(name).read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    jsonschema.validate(instance=instance, schema=load_schema(schema_name))


def is_valid(instance: Any, schema_name: str) -> bool:
    validator_cls = jsonschema.validators.validator_for(load_schema(schema_name))
    return validator_cls(load_schema(schema_name)).is_valid(instance)
